from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .attributes.registry import compute_attributes
from .core.time import civil_from_julian_day, day_number, julian_day, shift_year
from .core.types import (
    CivilDateTime,
    LunarDate,
    NewMoonEvent,
    SolarTermEvent,
    YearCalendar,
)
from .engines import events as _events
from .engines.astro.deltat import delta_t_days
from .engines.calendar import LunisolarCalendar
from .engines.specs import DEFAULT_PARAMS, CalendarParams
from .reference.lunar import moon_ecliptic_latitude, moon_ecliptic_longitude, moon_position
from .reference.solar import sun_longitude as _sun_longitude, sun_position

__all__ = [
    "julian_day",
    "civil_from_julian_day",
    "day_number",
    "delta_t",
    "civil_offset",
    "to_civil",
    "sun_longitude",
    "sun_position",
    "moon_longitude",
    "moon_latitude",
    "moon_position",
    "solar_term_jd",
    "new_moon_jd",
    "build_year_calendar",
    "solar_terms_for_year",
    "new_moons_for_year",
    "lunar_date",
]


# ============================================================
# Time
# ============================================================

def delta_t(jd: float) -> float:
    """ΔT in days at `jd`."""
    return delta_t_days(jd)


def civil_offset(year: int, params: CalendarParams = DEFAULT_PARAMS) -> float:
    """Chinese civil-time offset in days for `year`: Beijing mean time before 1929, UTC+8 after."""
    return params.offset_for(year)


def to_civil(jd: float, offset: float = 0.0) -> CivilDateTime:
    """Uniform-time JD as a civil instant; offset 0 gives UT."""
    return _events.to_civil(jd, offset)


# ============================================================
# Ephemerides (degrees, uniform-time JD)
# ============================================================

def sun_longitude(jd: float) -> float:
    return _sun_longitude(jd)


def moon_longitude(jd: float) -> float:
    return moon_ecliptic_longitude(jd)


def moon_latitude(jd: float) -> float:
    return moon_ecliptic_latitude(jd)


# ============================================================
# Events
# ============================================================

def solar_term_jd(year: int, index: int, params: CalendarParams = DEFAULT_PARAMS) -> float:
    return _events.solar_term_jd(year, index, solver=params.solver)


def new_moon_jd(approx_jd: float, direction: str = "forward",
                params: CalendarParams = DEFAULT_PARAMS) -> float:
    return _events.new_moon_jd(approx_jd, direction, solver=params.solver, bracket=params.bracket)


# ============================================================
# Calendar
# ============================================================

def build_year_calendar(year: int, params: CalendarParams = DEFAULT_PARAMS) -> YearCalendar:
    return LunisolarCalendar(params).build_year(year)


def solar_terms_for_year(year: int, offset: Optional[float] = None,
                         params: CalendarParams = DEFAULT_PARAMS) -> Tuple[SolarTermEvent, ...]:
    return LunisolarCalendar(params).solar_terms_for_year(year, offset)


def new_moons_for_year(year: int, offset: Optional[float] = None,
                       params: CalendarParams = DEFAULT_PARAMS) -> Tuple[NewMoonEvent, ...]:
    return LunisolarCalendar(params).new_moons_for_year(year, offset)


def lunar_date(
    year: int,
    month: int,
    day: int,
    *,
    attributes: Sequence[str] = (),
    params: CalendarParams = DEFAULT_PARAMS,
) -> LunarDate:
    """Lunar month and day of a civil date."""
    dn = day_number(year, month, day)
    cal = LunisolarCalendar(params)

    ycal = cal.build_year(year)
    if dn < ycal.months[0].day_number:
        # before the lunar new year: month 11 or 12 of the previous year
        ycal = cal.build_year(shift_year(year, -1))
    m = ycal.month_of(dn)

    return LunarDate(
        civil=(year, month, day),
        lunar_year=ycal.year,
        month=m.ordinal,
        is_leap_month=m.is_leap,
        day=m.day_of_month(dn),
        attributes=compute_attributes(dn, attributes) if attributes else None,
    )
