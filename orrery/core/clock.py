"""
Simulated Clock
===============

Owns the single simulated instant of the orrery and advances it once per
animation frame. Handles play/pause, logarithmic rate control, reversal,
wraparound at the supported date range and Julian Date conversion.
"""

import logging
import threading
import numpy as np
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from .config import OrreryConfig, J2000_EPOCH

logger = logging.getLogger(__name__)

MILLIS_PER_DAY = 86_400_000
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
UNIX_EPOCH_JD = 2440587.5


@dataclass(frozen=True)
class ClockReading:
    """Clock state returned by a tick."""
    instant: datetime
    julian_date: float
    advanced: bool = False
    wrapped: bool = False


class SimulatedClock:
    """
    Process-wide simulated time.

    The current instant is held as integer Unix milliseconds so that a
    forward tick followed by a backward tick at the same rate restores it
    exactly. Every mutation (tick and user actions) runs under one lock.
    """

    def __init__(self,
                 config: OrreryConfig = None,
                 now: Optional[Callable[[], datetime]] = None):
        """
        Initialize the clock.

        Args:
            config: Orrery configuration (start instant, bounds, rate)
            now: Source of the real-world instant for jump_to_now()
        """
        self.config = config or OrreryConfig()
        self._now = now or (lambda: datetime.now(timezone.utc))
        self._lock = threading.RLock()

        self.min_millis = self.datetime_to_millis(self.config.min_date)
        self.max_millis = self.datetime_to_millis(self.config.max_date)
        self.current_millis = self.datetime_to_millis(self.config.start_time)

        self.is_playing = self.config.start_playing
        self.direction = self.config.direction
        self.rate_exponent = 0.0
        self.time_scale = 1.0
        self.set_rate(self.config.rate_exponent)

    # --- conversions ---

    @staticmethod
    def datetime_to_millis(dt: datetime) -> int:
        """Convert datetime to integer Unix milliseconds (naive means UTC)."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - UNIX_EPOCH
        return (delta.days * MILLIS_PER_DAY
                + delta.seconds * 1000
                + delta.microseconds // 1000)

    @staticmethod
    def millis_to_datetime(millis: int) -> datetime:
        """Convert Unix milliseconds to an aware UTC datetime."""
        return UNIX_EPOCH + timedelta(milliseconds=millis)

    @staticmethod
    def millis_to_jd(millis: int) -> float:
        """
        Convert Unix milliseconds to Julian Date.

        JD = millis / 86400000 + 2440587.5
        """
        return millis / MILLIS_PER_DAY + UNIX_EPOCH_JD

    @classmethod
    def datetime_to_jd(cls, dt: datetime) -> float:
        """Convert datetime to Julian Date."""
        return cls.millis_to_jd(cls.datetime_to_millis(dt))

    # --- state ---

    @property
    def current_instant(self) -> datetime:
        """Current simulated instant (UTC)."""
        return self.millis_to_datetime(self.current_millis)

    @property
    def julian_date(self) -> float:
        """Julian Date of the current simulated instant."""
        return self.millis_to_jd(self.current_millis)

    @property
    def delta_millis(self) -> int:
        """Simulated milliseconds covered by one tick."""
        return int(round(self.time_scale * MILLIS_PER_DAY))

    def reading(self, advanced: bool = False, wrapped: bool = False) -> ClockReading:
        """Snapshot of the current instant."""
        with self._lock:
            return ClockReading(
                instant=self.current_instant,
                julian_date=self.julian_date,
                advanced=advanced,
                wrapped=wrapped,
            )

    # --- per-frame advance ---

    def tick(self, is_host_running: bool = True) -> ClockReading:
        """
        Advance one frame.

        While playing, moves the instant by time_scale simulated days in the
        current direction. Leaving the date range teleports the instant to
        the opposite bound.

        Args:
            is_host_running: False when the host skips this frame

        Returns:
            Reading with the new instant and its Julian Date
        """
        with self._lock:
            if not (self.is_playing and is_host_running):
                return self.reading()

            self.current_millis += self.direction * self.delta_millis

            wrapped = False
            if self.current_millis < self.min_millis:
                self.current_millis = self.max_millis
                wrapped = True
            elif self.current_millis > self.max_millis:
                self.current_millis = self.min_millis
                wrapped = True

            if wrapped:
                logger.debug("Simulated date wrapped to %s", self.current_instant.date())

            return self.reading(advanced=True, wrapped=wrapped)

    # --- user actions ---

    def jump_to(self, instant: datetime):
        """Set the simulated instant. Bounds are enforced by the next tick only."""
        with self._lock:
            self.current_millis = self.datetime_to_millis(instant)
            logger.debug("Jumped to %s", self.current_instant.isoformat())

    def jump_to_epoch(self):
        """Jump to the J2000 epoch (2000-01-01T12:00:00 UTC)."""
        self.jump_to(J2000_EPOCH)

    def jump_to_now(self):
        """Jump to the real-world current instant."""
        self.jump_to(self._now())

    def set_rate(self, exponent: float):
        """
        Set the playback rate from a linear control value.

        Args:
            exponent: time_scale becomes 10**exponent (-2 -> 0.01x, 2 -> 100x)
        """
        if not np.isfinite(exponent):
            raise ValueError(f"Rate exponent must be finite: {exponent}")
        try:
            time_scale = 10.0 ** float(exponent)
        except OverflowError as exc:
            raise ValueError(f"Rate exponent too large: {exponent}") from exc
        # The per-tick delta must convert to integer milliseconds
        if not np.isfinite(time_scale * MILLIS_PER_DAY):
            raise ValueError(f"Rate exponent too large: {exponent}")
        with self._lock:
            self.rate_exponent = float(exponent)
            self.time_scale = time_scale
            logger.debug("Time scale set to %s", self.speed_display())

    def reset_rate_to_one(self):
        """Reset playback to 1.00x."""
        with self._lock:
            self.rate_exponent = 0.0
            self.time_scale = 1.0

    def toggle_direction(self):
        """Reverse the direction of simulated time."""
        with self._lock:
            self.direction *= -1
            logger.debug("Direction set to %+d", self.direction)

    def toggle_play_pause(self) -> bool:
        """Flip between playing and paused. Returns the new playing state."""
        with self._lock:
            self.is_playing = not self.is_playing
            return self.is_playing

    # --- display ---

    def current_display_strings(self) -> Dict[str, str]:
        """Calendar date and Julian Date formatted for the UI."""
        with self._lock:
            return {
                'calendar_date': self.current_instant.date().isoformat(),
                'julian_date': f"JD: {self.julian_date:.2f}",
            }

    def speed_display(self) -> str:
        """Playback rate formatted for the UI, e.g. '1.00x'."""
        return f"{self.time_scale:.2f}x"

    def __repr__(self) -> str:
        state = "playing" if self.is_playing else "paused"
        return (f"SimulatedClock(utc={self.current_instant.isoformat()}, "
                f"jd={self.julian_date:.5f}, {state}, "
                f"{self.direction * self.time_scale:+.2f}x)")
