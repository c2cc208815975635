from __future__ import annotations

import math
from dataclasses import dataclass
from math import fmod

from ..engines.astro.series import horner


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 2.0 * math.pi


def wrap_rad(x_rad: float) -> float:
    """Wrap radians to [0, 2π)."""
    y = fmod(x_rad, TAU)
    if y < 0:
        y += TAU
    return y


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


def arcsec_to_rad(arcsec: float) -> float:
    return math.radians(arcsec / 3600.0)


# ------------------------------------------------------------
# Time variables (uniform time)
# ------------------------------------------------------------

J2000 = 2451545.0


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / 36525.0


def T_millennia(jd: float) -> float:
    """Julian millennia from J2000.0."""
    return (jd - J2000) / 365250.0


# ------------------------------------------------------------
# Solar elements for annual aberration (radians, T in centuries)
# ------------------------------------------------------------

_SUN_MEAN_LONGITUDE_DEG = (280.4664567, 36000.76982779, 0.0003032028, 1.0 / 49931000.0, -1.0 / 153000000.0)
_PERIHELION_DEG = (102.93735, 1.71946, 0.00046)
_ECCENTRICITY = (0.016708634, -0.000042037, -0.0000001267)

ABERRATION_CONSTANT = arcsec_to_rad(20.49552)


@dataclass(frozen=True)
class AberrationElements:
    L_rad: float   # Sun mean longitude
    P_rad: float   # longitude of Earth's perihelion
    e: float       # orbital eccentricity


def aberration_elements(T: float) -> AberrationElements:
    return AberrationElements(
        L_rad=math.radians(horner(_SUN_MEAN_LONGITUDE_DEG, T)),
        P_rad=math.radians(horner(_PERIHELION_DEG, T)),
        e=horner(_ECCENTRICITY, T),
    )


# ------------------------------------------------------------
# General precession in longitude (arcsec, τ in millennia)
# ------------------------------------------------------------

_PRECESSION_ARCSEC = (0.0, 50287.92262, 111.24406, 0.07699, -0.23479, -0.00178, 0.00018, 0.00001)
_PRECESSION_LINEAR_ARCSEC = 2.9965


def precession_in_longitude_rad(tau: float) -> float:
    """Accumulated precession since J2000, with the secular frame term."""
    return arcsec_to_rad(horner(_PRECESSION_ARCSEC, tau) + _PRECESSION_LINEAR_ARCSEC * tau)


# ------------------------------------------------------------
# Mean obliquity & precession matrix (ephemeris validation)
# ------------------------------------------------------------

def mean_obliquity_deg(T: float) -> float:
    """Mean obliquity of the ecliptic (degrees), IAU 2006 polynomial."""
    eps_arcsec = horner((84381.406, -46.836769, -0.0001831, 0.00200340, -0.000000576, -0.0000000434), T)
    return eps_arcsec / 3600.0


Matrix3 = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]


def _matmul(A: Matrix3, B: Matrix3) -> Matrix3:
    return tuple(
        tuple(sum(A[i][k] * B[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )


def _R_x(a: float) -> Matrix3:
    c, s = math.cos(a), math.sin(a)
    return ((1, 0, 0), (0, c, s), (0, -s, c))


def _R_y(a: float) -> Matrix3:
    c, s = math.cos(a), math.sin(a)
    return ((c, 0, -s), (0, 1, 0), (s, 0, c))


def _R_z(a: float) -> Matrix3:
    c, s = math.cos(a), math.sin(a)
    return ((c, s, 0), (-s, c, 0), (0, 0, 1))


def matrix_eq_j2000_to_ecl_date(T: float) -> Matrix3:
    """Equatorial J2000 (ICRF) -> mean ecliptic of date, IAU 1976 precession angles."""
    zeta = arcsec_to_rad(2306.2181 * T + 0.30188 * (T**2) + 0.017998 * (T**3))
    z = arcsec_to_rad(2306.2181 * T + 1.09468 * (T**2) + 0.018203 * (T**3))
    theta = arcsec_to_rad(2004.3109 * T - 0.42665 * (T**2) - 0.041833 * (T**3))

    eq_precession = _matmul(_R_z(-z), _matmul(_R_y(theta), _R_z(-zeta)))
    return _matmul(_R_x(math.radians(mean_obliquity_deg(T))), eq_precession)


def apply_matrix(M: Matrix3, v: tuple[float, float, float]) -> tuple[float, float, float]:
    return (
        M[0][0]*v[0] + M[0][1]*v[1] + M[0][2]*v[2],
        M[1][0]*v[0] + M[1][1]*v[1] + M[1][2]*v[2],
        M[2][0]*v[0] + M[2][1]*v[1] + M[2][2]*v[2]
    )


def ecliptic_lon_lat_deg(v: tuple[float, float, float]) -> tuple[float, float]:
    x, y, z = v
    lon = wrap_deg(math.degrees(math.atan2(y, x)))
    lat = math.degrees(math.atan2(z, math.hypot(x, y)))
    return lon, lat
