"""Julian Day conversions and civil-time offsets.

All calendar arithmetic switches from the Julian to the Gregorian calendar at
1582-10-15 (JDN 2299161). Years have no zero: 1 BC is -1.
"""
from __future__ import annotations

import math

from .types import CivilDateTime

J2000 = 2451545.0
GREGORIAN_START_JDN = 2299161
_GREGORIAN_START = (1582, 10, 15)

# Civil-time offsets in days, added to UT
OFFSET_BEIJING = 8.0 / 24.0                 # UTC+8, from 1929
OFFSET_BEIJING_LMT = 27932.0 / 86400.0      # Beijing local mean time (116°23'E), before 1929
OFFSET_REFORM_YEAR = 1929

_MS_PER_DAY = 86_400_000


def _astronomical_year(year: int) -> int:
    if year == 0:
        raise ValueError("there is no year 0; use -1 for 1 BC")
    return year + 1 if year < 0 else year


def shift_year(year: int, delta: int) -> int:
    """`year` moved by `delta` years, stepping over the missing year 0."""
    astro = _astronomical_year(year) + delta
    return astro if astro > 0 else astro - 1


def julian_day(year: int, month: int, day: int,
               hour: int = 0, minute: int = 0, second: float = 0.0) -> float:
    """Julian Day of a civil instant (Meeus, ch. 7)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"day must be in 1..31, got {day}")
    if (1582, 10, 4) < (year, month, day) < _GREGORIAN_START:
        raise ValueError(f"{year}-{month:02d}-{day:02d} falls in the 1582 calendar reform gap")

    y = _astronomical_year(year)
    m = month
    if m <= 2:
        y -= 1
        m += 12

    if (year, month, day) >= _GREGORIAN_START:
        a = y // 100
        b = 2 - a + a // 4
    else:
        b = 0

    jd = math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5
    return jd + hour / 24.0 + minute / 1440.0 + second / 86400.0


def civil_from_julian_day(jd: float) -> CivilDateTime:
    """Inverse of julian_day, resolved to the millisecond."""
    z = math.floor(jd + 0.5)
    ms = round((jd + 0.5 - z) * _MS_PER_DAY)
    if ms >= _MS_PER_DAY:
        z += 1
        ms -= _MS_PER_DAY

    if z < GREGORIAN_START_JDN:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    if year < 1:
        year -= 1

    hour, ms = divmod(ms, 3_600_000)
    minute, ms = divmod(ms, 60_000)
    return CivilDateTime(year, month, day, hour, minute, ms / 1000.0)


def day_number(year: int, month: int, day: int) -> int:
    """Julian Day Number of a civil date: a strictly increasing day count."""
    return int(math.floor(julian_day(year, month, day) + 0.5))


def civil_day_number(c: CivilDateTime) -> int:
    return day_number(c.year, c.month, c.day)
