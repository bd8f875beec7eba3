"""
Kepler Solver
=============

Mean motion, mean anomaly and eccentric anomaly for elliptical orbits.
"""

import logging
import numpy as np

from .elements import OrbitalElements

logger = logging.getLogger(__name__)

# Gaussian gravitational constant k = 0.01720209895 rad/day, in deg/day.
# A circular 1 AU orbit has a period of ~365.2569 days.
GAUSSIAN_K_DEG_PER_DAY = np.degrees(0.01720209895)

KEPLER_TOLERANCE = 1e-8  # rad
KEPLER_MAX_ITER = 30

# Above this eccentricity Newton-Raphson starting at M can jump across
# several revolutions; starting at pi converges for every M.
HIGH_ECCENTRICITY = 0.8


def mean_motion(a: float) -> float:
    """
    Mean motion for a heliocentric orbit.

    Args:
        a: Semi-major axis (AU)

    Returns:
        Mean motion (deg/day)
    """
    return GAUSSIAN_K_DEG_PER_DAY / a**1.5


def normalize_degrees(angle: float) -> float:
    """Reduce an angle to [0, 360) degrees, also for negative input."""
    reduced = float(np.mod(angle, 360.0))
    # Rounding of tiny negative angles can land exactly on 360
    if reduced >= 360.0:
        reduced = 0.0
    return reduced


def mean_anomaly(elements: OrbitalElements, julian_date: float) -> float:
    """
    Mean anomaly at a target instant.

    M(t) = M0 + n (t - epoch), normalized to [0, 360).

    Args:
        elements: Orbital elements
        julian_date: Target instant (JD)

    Returns:
        Mean anomaly (deg)
    """
    n = mean_motion(elements.a)
    return normalize_degrees(elements.ma + n * (julian_date - elements.epoch))


def solve_kepler(M: float, e: float,
                 tol: float = KEPLER_TOLERANCE,
                 max_iter: int = KEPLER_MAX_ITER) -> float:
    """
    Solve Kepler's equation M = E - e*sin(E) for eccentric anomaly E
    using Newton-Raphson iteration.

    If the iteration cap is reached the last iterate is returned.

    Args:
        M: Mean anomaly (rad)
        e: Eccentricity, 0 <= e < 1
        tol: Convergence threshold on the Newton step (rad)
        max_iter: Maximum number of iterations

    Returns:
        Eccentric anomaly (rad)
    """
    E = M if e < HIGH_ECCENTRICITY else np.pi
    delta = np.inf

    for _ in range(max_iter):
        delta = (E - e * np.sin(E) - M) / (1.0 - e * np.cos(E))
        E -= delta
        if abs(delta) < tol:
            return float(E)

    logger.debug("Kepler solver hit %d iterations (M=%.6f, e=%.6f, last step %.3e)",
                 max_iter, M, e, delta)
    return float(E)


def true_anomaly(E: float, e: float) -> float:
    """True anomaly (rad) from eccentric anomaly."""
    return 2.0 * np.arctan2(np.sqrt(1.0 + e) * np.sin(E / 2.0),
                            np.sqrt(1.0 - e) * np.cos(E / 2.0))


def radius(a: float, e: float, E: float) -> float:
    """Heliocentric distance r = a(1 - e cos E), in the units of a."""
    return a * (1.0 - e * np.cos(E))
