"""
Orrery Configuration
====================

Clock bounds, start conditions and scene scaling for the orrery core.
"""

import numpy as np
from dataclasses import dataclass, field
from datetime import datetime, timezone


# J2000 reference instant (JD 2451545.0)
J2000_EPOCH = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

# Supported simulated date range (calendar dates, UTC midnight)
MIN_DATE = datetime(1900, 1, 1, tzinfo=timezone.utc)
MAX_DATE = datetime(2100, 12, 31, tzinfo=timezone.utc)


@dataclass
class OrreryConfig:
    """Complete orrery configuration."""
    # Scene units per astronomical unit; shared with non-orbital scene geometry
    spatial_scale: float = 10.0

    # Simulated time
    start_time: datetime = field(default_factory=lambda: J2000_EPOCH)
    min_date: datetime = field(default_factory=lambda: MIN_DATE)
    max_date: datetime = field(default_factory=lambda: MAX_DATE)

    # Playback: time scale is 10**rate_exponent simulated days per frame
    rate_exponent: float = 0.0
    direction: int = 1
    start_playing: bool = True

    # Output options
    save_history: bool = False
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration."""
        assert np.isfinite(self.spatial_scale) and self.spatial_scale > 0, \
            "Spatial scale must be positive"
        assert self.min_date < self.max_date, "Date range is empty"
        assert np.isfinite(self.rate_exponent), "Rate exponent must be finite"
        assert self.direction in (1, -1), "Direction must be +1 or -1"


def create_default_config() -> OrreryConfig:
    """Create configuration matching the interactive orrery defaults."""
    return OrreryConfig()


def create_headless_config(rate_exponent: float = 0.0) -> OrreryConfig:
    """Create configuration for batch runs that keep every tick."""
    return OrreryConfig(
        rate_exponent=rate_exponent,
        save_history=True,
        verbose=True,
    )
