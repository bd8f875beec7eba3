"""
Orbital Propagator
==================

Maps orbital elements and a target instant to a heliocentric ecliptic
position. Stateless: safe to call per body, per frame, from any thread.
"""

import numpy as np
from typing import Dict, Iterable

from .elements import OrbitalElements
from .kepler import mean_motion, mean_anomaly, solve_kepler, true_anomaly, radius


def perifocal_to_ecliptic(om: float, i: float, w: float) -> np.ndarray:
    """
    Rotation from the perifocal frame to the ecliptic frame.

    R = Rz(Omega) @ Rx(i) @ Rz(omega)

    Args:
        om: Longitude of ascending node (rad)
        i: Inclination (rad)
        w: Argument of periapsis (rad)

    Returns:
        3x3 rotation matrix
    """
    cO, sO = np.cos(om), np.sin(om)
    ci, si = np.cos(i), np.sin(i)
    cw, sw = np.cos(w), np.sin(w)

    Rz_O = np.array([[cO, -sO, 0.0], [sO, cO, 0.0], [0.0, 0.0, 1.0]])
    Rx_i = np.array([[1.0, 0.0, 0.0], [0.0, ci, -si], [0.0, si, ci]])
    Rz_w = np.array([[cw, -sw, 0.0], [sw, cw, 0.0], [0.0, 0.0, 1.0]])

    return Rz_O @ Rx_i @ Rz_w


def _rotation(elements: OrbitalElements) -> np.ndarray:
    return perifocal_to_ecliptic(np.radians(elements.om),
                                 np.radians(elements.i),
                                 np.radians(elements.arg_periapsis))


def propagate(elements: OrbitalElements,
              julian_date: float,
              spatial_scale: float) -> np.ndarray:
    """
    Position of a body at a target instant.

    Args:
        elements: Orbital elements of the body
        julian_date: Target instant (JD)
        spatial_scale: Scene units per AU

    Returns:
        Position [x, y, z] in the heliocentric ecliptic frame, scene units
    """
    if not np.isfinite(julian_date):
        raise ValueError(f"Julian date must be finite: {julian_date}")

    # Degrees end here
    M = np.radians(mean_anomaly(elements, julian_date))
    R = _rotation(elements)

    e = elements.e
    E = solve_kepler(M, e)
    nu = true_anomaly(E, e)
    r = radius(elements.a, e, E)

    r_perifocal = np.array([r * np.cos(nu), r * np.sin(nu), 0.0])

    return spatial_scale * (R @ r_perifocal)


def propagate_bodies(bodies: Iterable,
                     julian_date: float,
                     spatial_scale: float) -> Dict[str, np.ndarray]:
    """
    Positions of every non-central body at a target instant.

    Args:
        bodies: Objects with ``name`` and ``elements``; bodies without
            elements (the central star) are skipped
        julian_date: Target instant (JD)
        spatial_scale: Scene units per AU

    Returns:
        Mapping of body name to position
    """
    return {
        body.name: propagate(body.elements, julian_date, spatial_scale)
        for body in bodies
        if body.elements is not None
    }


def compute_period_years(elements: OrbitalElements) -> float:
    """Orbital period from Kepler's third law, P = a^1.5 (years)."""
    return elements.a**1.5


def compute_period_days(elements: OrbitalElements) -> float:
    """Time for the mean anomaly to advance 360 degrees (days)."""
    return 360.0 / mean_motion(elements.a)


def orbit_track(elements: OrbitalElements,
                spatial_scale: float,
                samples: int = 256) -> np.ndarray:
    """
    Sample the full orbital ellipse.

    Points are spaced evenly in eccentric anomaly.

    Args:
        elements: Orbital elements
        spatial_scale: Scene units per AU
        samples: Number of points

    Returns:
        (samples, 3) array of positions, first and last points coincide
    """
    if samples < 2:
        raise ValueError(f"Need at least 2 samples: {samples}")

    a, e = elements.a, elements.e
    E = np.linspace(0.0, 2.0 * np.pi, samples)

    x = a * (np.cos(E) - e)
    y = a * np.sqrt(1.0 - e**2) * np.sin(E)
    r_perifocal = np.stack([x, y, np.zeros_like(E)], axis=1)

    return spatial_scale * (r_perifocal @ _rotation(elements).T)
