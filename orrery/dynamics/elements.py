"""
Orbital Elements
================

Classical Keplerian elements of a body on a bound heliocentric ellipse.
"""

import numpy as np
from dataclasses import dataclass, fields
from typing import Mapping


class MalformedElements(ValueError):
    """Raised when orbital elements cannot describe a bound ellipse."""


@dataclass(frozen=True)
class OrbitalElements:
    """
    Keplerian orbital elements at a reference epoch.

    Angles are stored in degrees, the way element catalogs publish them.

    Attributes:
        a: Semi-major axis (AU)
        e: Eccentricity (0 <= e < 1)
        i: Inclination to the ecliptic (deg)
        om: Longitude of the ascending node, Omega (deg)
        varpi: Longitude of periapsis (deg)
        ma: Mean anomaly at epoch, M0 (deg)
        epoch: Reference instant (Julian Date)
    """
    a: float
    e: float
    i: float
    om: float
    varpi: float
    ma: float
    epoch: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not np.isfinite(value):
                raise MalformedElements(f"Non-finite {f.name}: {value}")
        if self.a <= 0:
            raise MalformedElements(f"Semi-major axis must be positive: {self.a}")
        if not 0.0 <= self.e < 1.0:
            raise MalformedElements(f"Eccentricity outside [0, 1): {self.e}")

    @property
    def arg_periapsis(self) -> float:
        """Argument of periapsis, omega = varpi - Omega (deg)."""
        return self.varpi - self.om

    @property
    def perihelion(self) -> float:
        """Perihelion distance q = a(1 - e) (AU)."""
        return self.a * (1.0 - self.e)

    @property
    def aphelion(self) -> float:
        """Aphelion distance Q = a(1 + e) (AU)."""
        return self.a * (1.0 + self.e)

    @classmethod
    def from_mapping(cls, record: Mapping) -> 'OrbitalElements':
        """
        Create from a catalog record keyed by a, e, i, om, varpi, ma, epoch.

        Values may be numbers or numeric strings.
        """
        values = {}
        for f in fields(cls):
            if f.name not in record:
                raise MalformedElements(f"Missing orbital element: {f.name}")
            try:
                values[f.name] = float(record[f.name])
            except (TypeError, ValueError) as exc:
                raise MalformedElements(
                    f"Invalid {f.name}: {record[f.name]!r}") from exc
        return cls(**values)
