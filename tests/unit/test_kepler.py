import numpy as np

from orrery.dynamics.elements import OrbitalElements
from orrery.dynamics.kepler import (
    mean_motion,
    mean_anomaly,
    normalize_degrees,
    solve_kepler,
    true_anomaly,
    radius,
)


def _elements(**overrides):
    values = dict(a=1.0, e=0.0167, i=0.0, om=-11.26, varpi=102.9, ma=100.46, epoch=2451545.0)
    values.update(overrides)
    return OrbitalElements(**values)


def test_mean_motion_gives_sidereal_year_at_one_au():
    n = mean_motion(1.0)
    assert np.isclose(n, 0.9856076686, atol=1e-9)
    assert np.isclose(360.0 / n, 365.2569, atol=1e-3)


def test_mean_motion_scales_with_kepler_third_law():
    assert np.isclose(mean_motion(4.0), mean_motion(1.0) / 8.0)


def test_normalize_degrees_is_non_negative():
    assert normalize_degrees(-10.0) == 350.0
    assert normalize_degrees(720.5) == 0.5
    assert normalize_degrees(360.0) == 0.0
    # np.mod(-1e-15, 360) rounds up to 360.0
    assert normalize_degrees(-1e-15) == 0.0


def test_mean_anomaly_at_epoch_is_m0():
    el = _elements()
    assert np.isclose(mean_anomaly(el, el.epoch), 100.46)


def test_mean_anomaly_stays_in_range_across_centuries():
    el = _elements()
    for days in (-36525.0 * 1.5, -1.0, 0.0, 1.0, 36525.0, 36525.0 * 2.0):
        M = mean_anomaly(el, el.epoch + days)
        assert 0.0 <= M < 360.0


def test_mean_anomaly_backwards_matches_forward_wrap():
    el = _elements(ma=0.0)
    quarter = 90.0 / mean_motion(el.a)
    assert np.isclose(mean_anomaly(el, el.epoch - quarter), 270.0)
    assert np.isclose(mean_anomaly(el, el.epoch + quarter), 90.0)


def test_solver_converges_over_eccentricity_and_anomaly_grid():
    for e in np.linspace(0.0, 0.99, 12):
        for M in np.linspace(0.0, 2.0 * np.pi, 73, endpoint=False):
            E = solve_kepler(M, e)
            assert abs(M - (E - e * np.sin(E))) < 1e-6, f"e={e}, M={M}"


def test_solver_is_identity_for_circular_orbit():
    for M in (0.0, 0.5, 3.0, 6.0):
        assert solve_kepler(M, 0.0) == M


def test_solver_returns_last_iterate_when_capped():
    E = solve_kepler(0.1, 0.95, max_iter=1)
    assert np.isfinite(E)

    E = solve_kepler(0.1, 0.95, max_iter=0)
    assert E == np.pi


def test_true_anomaly_and_radius_at_apsides():
    e = 0.3
    assert np.isclose(true_anomaly(0.0, e), 0.0)
    assert np.isclose(abs(true_anomaly(np.pi, e)), np.pi)
    assert np.isclose(radius(2.0, e, 0.0), 2.0 * (1 - e))
    assert np.isclose(radius(2.0, e, np.pi), 2.0 * (1 + e))
