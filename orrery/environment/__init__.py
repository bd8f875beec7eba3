"""
Environment Module
==================

Built-in solar-system body catalog.
"""

from .bodies import CelestialBody, SUN, PLANETS, default_bodies

__all__ = [
    'CelestialBody',
    'SUN',
    'PLANETS',
    'default_bodies',
]
