"""
Solar System Bodies
===================

Built-in catalog of the Sun and the eight planets.

Planet elements are the J2000 mean elements of the JPL table "Keplerian
Elements for Approximate Positions of the Major Planets" (1800 AD - 2050 AD).
The table lists mean longitude L; the catalog stores M0 = L - varpi.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..dynamics.elements import OrbitalElements
from ..dynamics.propagator import compute_period_years

J2000_JD = 2451545.0


@dataclass(frozen=True)
class CelestialBody:
    """A catalog body. The central star carries no elements."""
    name: str
    elements: Optional[OrbitalElements] = None
    category: str = 'planet'
    radius: float = 1.0  # scene units
    color: Tuple[int, int, int] = (200, 200, 255)
    period_years: float = field(init=False, default=0.0)

    def __post_init__(self):
        if self.elements is not None:
            object.__setattr__(self, 'period_years', compute_period_years(self.elements))

    @property
    def is_central(self) -> bool:
        """True for the body fixed at the frame origin."""
        return self.elements is None

    def info_text(self) -> str:
        """Short description for the host's info popup."""
        text = f"This is {self.name}!"
        if self.is_central:
            return text
        el = self.elements
        return (text +
                f"\n   Semi-major axis = {el.a:.2f} AU"
                f"\n   Perihelion = {el.perihelion:.2f} AU"
                f"\n   Eccentricity = {el.e:.2f}"
                f"\n   Period = {self.period_years:.2f} yr")


def _planet(name, a, e, i, L, varpi, om, radius, color) -> CelestialBody:
    elements = OrbitalElements(a=a, e=e, i=i, om=om, varpi=varpi,
                               ma=L - varpi, epoch=J2000_JD)
    return CelestialBody(name=name, elements=elements, radius=radius, color=color)


SUN = CelestialBody(name='Sun', category='star', radius=5.0, color=(255, 255, 0))

#                   a [AU]       e           i [deg]       L [deg]        varpi [deg]    Omega [deg]
PLANETS = [
    _planet('Mercury', 0.38709927, 0.20563593, 7.00497902, 252.25032350, 77.45779628, 48.33076593,
            0.38, (169, 169, 169)),
    _planet('Venus', 0.72333566, 0.00677672, 3.39467605, 181.97909950, 131.60246718, 76.67984255,
            0.95, (255, 198, 73)),
    _planet('Earth', 1.00000261, 0.01671123, -0.00001531, 100.46457166, 102.93768193, 0.0,
            1.0, (70, 130, 255)),
    _planet('Mars', 1.52371034, 0.09339410, 1.84969142, -4.55343205, -23.94362959, 49.55953891,
            0.53, (193, 68, 14)),
    _planet('Jupiter', 5.20288700, 0.04838624, 1.30439695, 34.39644051, 14.72847983, 100.47390909,
            3.0, (216, 202, 157)),
    _planet('Saturn', 9.53667594, 0.05386179, 2.48599187, 49.95424423, 92.59887831, 113.66242448,
            2.6, (227, 224, 192)),
    _planet('Uranus', 19.18916464, 0.04725744, 0.77263783, 313.23810451, 170.95427630, 74.01692503,
            1.8, (175, 238, 238)),
    _planet('Neptune', 30.06992276, 0.00859048, 1.77004347, -55.12002969, 44.96476227, 131.78422574,
            1.75, (63, 84, 186)),
]


def default_bodies() -> List[CelestialBody]:
    """Sun followed by the planets, as a fresh list."""
    return [SUN, *PLANETS]
