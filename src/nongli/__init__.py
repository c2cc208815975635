"""nongli public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    julian_day,
    civil_from_julian_day,
    day_number,
    delta_t,
    civil_offset,
    to_civil,
    sun_longitude,
    sun_position,
    moon_longitude,
    moon_latitude,
    moon_position,
    solar_term_jd,
    new_moon_jd,
    build_year_calendar,
    solar_terms_for_year,
    new_moons_for_year,
    lunar_date,
)
from .core.errors import BracketError, CalendarBuildError, ConvergenceError, NongliError
from .core.types import CivilDateTime, LunarDate, LunarMonth, YearCalendar

__version__ = "0.1.0"

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
    "CivilDateTime",
    "LunarDate",
    "LunarMonth",
    "YearCalendar",
    "NongliError",
    "ConvergenceError",
    "BracketError",
    "CalendarBuildError",
]
