# reference/lunar.py

from __future__ import annotations

import math

from ..core.types import EclipticPosition
from ..engines.astro.elp2000 import moon_latitude, moon_longitude
from . import astro_args as aa


def moon_ecliptic_longitude_rad(jd: float) -> float:
    """ELP2000 longitude carried to the equinox of date by general precession."""
    lon = aa.wrap_rad(moon_longitude(aa.T_centuries(jd)))
    return aa.wrap_rad(lon + aa.precession_in_longitude_rad(aa.T_millennia(jd)))


def moon_ecliptic_longitude(jd: float) -> float:
    """Apparent longitude in degrees, [0, 360)."""
    return aa.wrap_deg(math.degrees(moon_ecliptic_longitude_rad(jd)))


def moon_ecliptic_latitude(jd: float) -> float:
    """Latitude in degrees."""
    return math.degrees(moon_latitude(aa.T_centuries(jd)))


def moon_position(jd: float) -> EclipticPosition:
    T = aa.T_centuries(jd)
    return EclipticPosition(
        longitude=moon_ecliptic_longitude_rad(jd),
        latitude=moon_latitude(T),
    )
