"""
Dynamics Module
===============

Keplerian orbital elements and two-body position propagation.
"""

from .elements import OrbitalElements, MalformedElements
from .kepler import solve_kepler, mean_motion, mean_anomaly
from .propagator import (
    propagate,
    propagate_bodies,
    compute_period_years,
    compute_period_days,
    orbit_track,
)

__all__ = [
    'OrbitalElements',
    'MalformedElements',
    'solve_kepler',
    'mean_motion',
    'mean_anomaly',
    'propagate',
    'propagate_bodies',
    'compute_period_years',
    'compute_period_days',
    'orbit_track',
]
