import dataclasses

import numpy as np
import pytest

from orrery.environment.bodies import SUN, PLANETS, default_bodies


def test_catalog_order_and_central_body():
    bodies = default_bodies()
    assert bodies[0] is SUN
    assert SUN.is_central
    assert [b.name for b in bodies[1:]] == [
        'Mercury', 'Venus', 'Earth', 'Mars', 'Jupiter', 'Saturn', 'Uranus', 'Neptune']
    assert not any(b.is_central for b in PLANETS)


def test_default_bodies_is_a_fresh_list():
    bodies = default_bodies()
    bodies.pop()
    assert len(default_bodies()) == 9


def test_periods_follow_third_law():
    periods = [b.period_years for b in PLANETS]
    assert periods == sorted(periods)
    earth = PLANETS[2]
    assert np.isclose(earth.period_years, 1.0, atol=1e-5)
    assert np.isclose(PLANETS[4].period_years, 11.87, atol=0.01)
    assert SUN.period_years == 0.0


def test_mean_anomaly_from_mean_longitude():
    mars = PLANETS[3].elements
    assert np.isclose(mars.ma, -4.55343205 + 23.94362959)
    assert mars.epoch == 2451545.0


def test_catalog_bodies_are_immutable():
    earth = default_bodies()[3]
    with pytest.raises(dataclasses.FrozenInstanceError):
        earth.radius = 50.0
    assert earth.radius == 1.0
