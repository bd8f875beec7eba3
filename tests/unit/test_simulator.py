from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from orrery.core.config import OrreryConfig, J2000_EPOCH, MAX_DATE, MIN_DATE, create_default_config
from orrery.core.simulator import Simulator
from orrery.dynamics.propagator import propagate
from orrery.environment.bodies import PLANETS


def test_positions_cover_every_planet_at_start():
    sim = Simulator()
    assert set(sim.positions) == {b.name for b in PLANETS}


def test_earth_at_j2000():
    sim = Simulator()
    earth = sim.positions['Earth'] / sim.config.spatial_scale
    assert np.allclose(earth, [-0.177, 0.967, 0.0], atol=0.01)


def test_step_moves_clock_and_bodies():
    sim = Simulator()
    before = {k: v.copy() for k, v in sim.positions.items()}
    state = sim.step()

    assert state.advanced
    assert state.julian_date == 2451546.0
    assert state.instant == J2000_EPOCH + timedelta(days=1)
    for name, pos in state.positions.items():
        assert not np.allclose(pos, before[name])
    earth = sim.body('Earth').elements
    assert np.allclose(state.positions['Earth'],
                       propagate(earth, 2451546.0, sim.config.spatial_scale))


def test_paused_step_keeps_positions():
    sim = Simulator(OrreryConfig(start_playing=False))
    before = dict(sim.positions)
    state = sim.step()
    assert not state.advanced
    for name in before:
        assert np.array_equal(state.positions[name], before[name])


def test_jump_refreshes_positions_while_paused():
    sim = Simulator(OrreryConfig(start_time=datetime(1950, 1, 1, tzinfo=timezone.utc),
                                 start_playing=False))
    sim.jump_to_epoch()
    mars = sim.body('Mars').elements
    assert np.allclose(sim.positions['Mars'], propagate(mars, 2451545.0, 10.0))


def test_jump_to_now():
    now = datetime(2024, 4, 8, 18, 0, tzinfo=timezone.utc)
    sim = Simulator(now=lambda: now)
    sim.jump_to_now()
    assert sim.clock.current_instant == now
    jd = sim.clock.julian_date
    venus = sim.body('Venus').elements
    assert np.allclose(sim.positions['Venus'], propagate(venus, jd, 10.0))


def test_run_wraps_and_reports():
    config = OrreryConfig(start_time=MAX_DATE - timedelta(days=2), verbose=True)
    sim = Simulator(config)
    states = sim.run(frames=3)
    assert [s.wrapped for s in states] == [False, False, True]
    assert states[-1].instant == MIN_DATE


def test_history_is_kept_only_when_enabled():
    sim = Simulator()
    sim.run(frames=3)
    assert sim.history == []

    sim = Simulator(OrreryConfig(save_history=True))
    sim.run(frames=3)
    assert len(sim.history) == 3
    assert sim.step_count == 3


def test_step_callbacks():
    sim = Simulator()
    seen = []
    sim.add_step_callback(lambda s, state: seen.append((s, state.julian_date)))
    sim.step()
    sim.step()
    assert seen == [(sim, 2451546.0), (sim, 2451547.0)]


def test_custom_body_list():
    from orrery.environment.bodies import SUN
    sim = Simulator(bodies=[SUN, PLANETS[2]])
    assert list(sim.positions) == ['Earth']


def test_body_info():
    sim = Simulator()
    assert sim.body_info('Sun') == "This is Sun!"
    info = sim.body_info('Earth')
    assert info.startswith("This is Earth!")
    assert "Semi-major axis = 1.00 AU" in info
    assert "Perihelion = 0.98 AU" in info
    assert "Eccentricity = 0.02" in info
    assert "Period = 1.00 yr" in info

    with pytest.raises(KeyError):
        sim.body_info('Vulcan')


def test_display():
    sim = Simulator()
    assert sim.get_display() == {
        'calendar_date': '2000-01-01',
        'julian_date': 'JD: 2451545.00',
        'speed': '1.00x',
        'play_pause_title': 'Pause',
        'reverse_title': 'Play backward',
    }
    sim.clock.toggle_play_pause()
    sim.clock.toggle_direction()
    sim.clock.set_rate(1)
    display = sim.get_display()
    assert display['play_pause_title'] == 'Play'
    assert display['reverse_title'] == 'Play forward'
    assert display['speed'] == '10.00x'


def test_default_config_factory():
    sim = Simulator(create_default_config())
    assert sim.config == OrreryConfig()
    assert sim.clock.current_instant == J2000_EPOCH
