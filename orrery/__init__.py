"""
Orrery Propagation Core
=======================

Python core for a solar-system orrery: Keplerian propagation of body
positions and a simulated clock with play/pause, variable rate, reversal
and date-range wraparound.

Components:
- Orbital elements and validation
- Kepler solver (Newton-Raphson)
- Elements-to-position propagator (heliocentric ecliptic frame)
- Simulated clock with Julian Date conversion
- Tick driver tying the clock to the body catalog
"""

__version__ = "1.0.0"

from orrery.core.simulator import Simulator
from orrery.core.clock import SimulatedClock
from orrery.dynamics.elements import OrbitalElements, MalformedElements
from orrery.dynamics.propagator import propagate, compute_period_years

__all__ = [
    'Simulator',
    'SimulatedClock',
    'OrbitalElements',
    'MalformedElements',
    'propagate',
    'compute_period_years',
]
