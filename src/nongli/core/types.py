from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class CivilDateTime:
    """Civil calendar instant. Julian calendar before 1582-10-15, Gregorian after.

    Years count without a year zero: 1 BC is year -1.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    def date_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:06.3f}"
        )


@dataclass(frozen=True)
class EclipticPosition:
    """Geocentric apparent ecliptic coordinates (radians)."""
    longitude: float
    latitude: float

    @property
    def longitude_deg(self) -> float:
        return math.degrees(self.longitude)

    @property
    def latitude_deg(self) -> float:
        return math.degrees(self.latitude)


@dataclass(frozen=True)
class SolarTerm:
    index: int        # 0 = spring equinox, 15 degrees apart
    name: str
    name_zh: str

    @property
    def angle_deg(self) -> int:
        return 15 * self.index

    @property
    def is_major(self) -> bool:
        """Principal term (zhongqi): longitude a multiple of 30 degrees."""
        return self.index % 2 == 0


@dataclass(frozen=True)
class SolarTermEvent:
    term: SolarTerm
    year: int          # civil year the crossing belongs to
    jd: float          # uniform time
    civil: CivilDateTime
    day_number: int

    @property
    def is_major(self) -> bool:
        return self.term.is_major


@dataclass(frozen=True)
class NewMoonEvent:
    jd: float          # uniform time
    civil: CivilDateTime
    day_number: int


@dataclass(frozen=True)
class LunarMonth:
    ordinal: int       # 1..12
    is_leap: bool
    is_major: bool     # 30 days (long) vs 29 (short)
    start: NewMoonEvent
    end_day_number: int
    solar_terms: Tuple[SolarTermEvent, ...] = ()

    @property
    def start_civil(self) -> CivilDateTime:
        return self.start.civil

    @property
    def day_number(self) -> int:
        return self.start.day_number

    @property
    def length_days(self) -> int:
        return self.end_day_number - self.start.day_number

    def day_of_month(self, day_number: int) -> int:
        """1-based lunar day for a day number inside this month."""
        if not self.start.day_number <= day_number < self.end_day_number:
            raise ValueError(f"day {day_number} is outside month {self.ordinal}")
        return day_number - self.start.day_number + 1


@dataclass(frozen=True)
class YearCalendar:
    """Lunar months whose start falls in one civil year, plus boundary months."""
    year: int
    offset_days: float
    months: Tuple[LunarMonth, ...]
    leap_month: Optional[int]          # ordinal of the leap month shown, if any
    solar_terms: Tuple[SolarTermEvent, ...]
    new_moons: Tuple[NewMoonEvent, ...]

    def __iter__(self) -> Iterator[LunarMonth]:
        return iter(self.months)

    def __len__(self) -> int:
        return len(self.months)

    def month_of(self, day_number: int) -> LunarMonth:
        for m in self.months:
            if m.day_number <= day_number < m.end_day_number:
                return m
        raise ValueError(f"day {day_number} is outside the months of {self.year}")


@dataclass(frozen=True)
class LunarDate:
    civil: Tuple[int, int, int]
    lunar_year: int
    month: int
    is_leap_month: bool
    day: int
    attributes: Optional[Dict[str, Any]] = None
