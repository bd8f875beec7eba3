"""
Orrery Core Module
==================

Configuration, simulated time and the per-frame tick driver.
"""

from .config import OrreryConfig
from .clock import SimulatedClock, ClockReading
from .simulator import Simulator, SimulationState

__all__ = [
    'OrreryConfig',
    'SimulatedClock',
    'ClockReading',
    'Simulator',
    'SimulationState',
]
