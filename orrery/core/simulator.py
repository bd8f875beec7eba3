"""
Orrery Simulator
================

Per-frame tick driver: advances the simulated clock and recomputes the
position of every non-central body. The host copies the positions into
its own scene representation.
"""

import numpy as np
from datetime import datetime
from typing import Callable, Dict, List, Optional
from dataclasses import dataclass, field

from .config import OrreryConfig
from .clock import SimulatedClock
from .logging_utils import get_logger
from ..dynamics.propagator import propagate_bodies
from ..environment.bodies import CelestialBody, default_bodies


@dataclass
class SimulationState:
    """Orrery state after one tick."""
    instant: datetime
    julian_date: float
    positions: Dict[str, np.ndarray] = field(default_factory=dict)
    advanced: bool = False
    wrapped: bool = False


class Simulator:
    """
    Orrery tick driver.

    Owns the simulated clock and the body list. Positions are refreshed
    whenever the clock moves, either by a tick or by a jump.
    """

    def __init__(self,
                 config: OrreryConfig = None,
                 bodies: Optional[List[CelestialBody]] = None,
                 now: Optional[Callable[[], datetime]] = None):
        """
        Initialize simulator.

        Args:
            config: Orrery configuration
            bodies: Bodies to animate (default: Sun and planets)
            now: Real-world clock for jump_to_now()
        """
        self.config = config or OrreryConfig()
        self.logger = get_logger(__name__)

        self.clock = SimulatedClock(self.config, now=now)
        self.bodies = bodies if bodies is not None else default_bodies()
        self._by_name = {body.name: body for body in self.bodies}

        self.positions: Dict[str, np.ndarray] = {}
        self.update_positions()

        self.step_count = 0
        self.history: List[SimulationState] = []
        self.step_callbacks: List[Callable] = []

    def update_positions(self) -> Dict[str, np.ndarray]:
        """Recompute positions at the clock's current instant."""
        self.positions = propagate_bodies(
            self.bodies, self.clock.julian_date, self.config.spatial_scale
        )
        return self.positions

    def step(self, is_host_running: bool = True) -> SimulationState:
        """
        Advance by one animation frame.

        Args:
            is_host_running: False when the host skips this frame

        Returns:
            State after the tick
        """
        reading = self.clock.tick(is_host_running)

        if reading.advanced:
            self.update_positions()

        state = SimulationState(
            instant=reading.instant,
            julian_date=reading.julian_date,
            positions=dict(self.positions),
            advanced=reading.advanced,
            wrapped=reading.wrapped,
        )

        if self.config.save_history:
            self.history.append(state)

        for callback in self.step_callbacks:
            callback(self, state)

        self.step_count += 1
        return state

    def run(self, frames: int) -> List[SimulationState]:
        """
        Drive a number of frames without a host.

        Args:
            frames: Number of ticks

        Returns:
            State after every tick
        """
        states = [self.step() for _ in range(frames)]

        if self.config.verbose:
            wraps = sum(1 for s in states if s.wrapped)
            self.logger.info("Run complete: %d frames, now %s (%s), %d wraparound(s)",
                             frames, states[-1].instant.date() if states else "-",
                             self.clock.speed_display(), wraps)

        return states

    def jump_to_epoch(self):
        """Jump to J2000 and refresh positions."""
        self.clock.jump_to_epoch()
        self.update_positions()

    def jump_to_now(self):
        """Jump to the real-world instant and refresh positions."""
        self.clock.jump_to_now()
        self.update_positions()

    def add_step_callback(self, callback: Callable):
        """Add callback to be called each step with (simulator, state)."""
        self.step_callbacks.append(callback)

    def body(self, name: str) -> CelestialBody:
        """Look up a body by name."""
        return self._by_name[name]

    def body_info(self, name: str) -> str:
        """Info text of a body."""
        return self.body(name).info_text()

    def get_display(self) -> Dict[str, str]:
        """
        Strings for the host's time controls.

        Returns:
            Date, Julian Date, speed and button titles
        """
        display = self.clock.current_display_strings()
        display['speed'] = self.clock.speed_display()
        display['play_pause_title'] = "Pause" if self.clock.is_playing else "Play"
        display['reverse_title'] = ("Play backward" if self.clock.direction == 1
                                    else "Play forward")
        return display
