# reference/solar.py

from __future__ import annotations

import math

from ..core.types import EclipticPosition
from ..engines.astro.nutation import nutation_in_longitude
from ..engines.astro.vsop87 import earth_latitude, earth_longitude
from . import astro_args as aa


def geometric_position(jd: float) -> EclipticPosition:
    """Geocentric geometric longitude/latitude: heliocentric Earth turned by 180 degrees."""
    tau = aa.T_millennia(jd)
    return EclipticPosition(
        longitude=aa.wrap_rad(earth_longitude(tau) + math.pi),
        latitude=-earth_latitude(tau),
    )


def aberration_in_longitude(T: float, lon: float, lat: float) -> float:
    """Annual aberration (radians) for a body at ecliptic (lon, lat)."""
    el = aa.aberration_elements(T)
    return -aa.ABERRATION_CONSTANT * (
        math.cos(el.L_rad - lon) - el.e * math.cos(el.P_rad - lon)
    ) / math.cos(lat)


def sun_position(jd: float) -> EclipticPosition:
    """
    Apparent geocentric Sun for uniform-time JD.
    The longitude is wrapped after aberration and again after nutation.
    """
    geo = geometric_position(jd)
    T = aa.T_centuries(jd)

    lon = aa.wrap_rad(geo.longitude + aberration_in_longitude(T, geo.longitude, geo.latitude))
    lon = aa.wrap_rad(lon + nutation_in_longitude(T))
    return EclipticPosition(longitude=lon, latitude=geo.latitude)


def sun_longitude(jd: float) -> float:
    """Apparent longitude in degrees, [0, 360)."""
    return aa.wrap_deg(math.degrees(sun_position(jd).longitude))
