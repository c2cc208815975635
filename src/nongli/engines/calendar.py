"""
nongli.engines.calendar
-----------------------
Assembles solar terms and new moons into lunar months for one civil year.

The month holding the winter solstice is month 11. Month boundaries and term
membership are decided on civil day numbers, never on raw Julian Dates, so a
new moon and a term on the same civil day always compare equal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..core.errors import CalendarBuildError, NongliError
from ..core.names import WINTER_SOLSTICE
from ..core.time import julian_day, shift_year
from ..core.types import LunarMonth, NewMoonEvent, SolarTermEvent, YearCalendar
from .events import new_moon_event, new_moon_jd, new_moon_nearby, solar_term_event
from .specs import DEFAULT_PARAMS, CalendarParams

logger = logging.getLogger(__name__)

# Term slots: 0-1 minor/major snow of y-1, 2 the y-1 winter solstice,
# 3-26 minor cold of y through the y solstice, 27-50 the same for y+1.
N_TERM_SLOTS = 51
N_NEW_MOONS = 27
PRIOR_SOLSTICE_SLOT = 2
SOLSTICE_SLOT = 26


def term_slot(slot: int) -> Tuple[int, int]:
    """(year delta, term index) held by a slot of the term table."""
    index = (slot + 16) % 24
    if slot <= PRIOR_SOLSTICE_SLOT:
        return -1, index
    return (0 if slot <= SOLSTICE_SLOT else 1), index


@dataclass(frozen=True)
class YearTables:
    year: int
    offset: float
    solar_terms: Tuple[SolarTermEvent, ...]   # N_TERM_SLOTS, see term_slot
    new_moons: Tuple[NewMoonEvent, ...]       # [0] opens the month holding the y-1 solstice


@dataclass(frozen=True)
class SolsticeSpan:
    opening: SolarTermEvent
    closing: SolarTermEvent
    first_month: int              # index into new_moons of the month holding `opening`
    n_months: int                 # 12 or 13
    leap_month: Optional[int]     # index into new_moons, set iff n_months == 13


def month_ordinal(j: int, leap: Optional[int]) -> int:
    """1..12 for month j, counting j=0 as month 11; the leap repeats its predecessor's number."""
    if leap is None or j < leap:
        return (j + 10) % 12 + 1
    return (j + 9) % 12 + 1


def display_window(leap: Optional[int]) -> range:
    """Month indices shown for the civil year: month 1 through month 12, leap included."""
    if leap is None:
        return range(2, 14)
    start = 3 if leap <= 2 else 2
    end = 14 if leap <= 14 else 13
    return range(start, end + 1)


class LunisolarCalendar:
    """Builds YearCalendar values; stateless apart from its parameters."""

    def __init__(self, params: CalendarParams = DEFAULT_PARAMS):
        self.params = params

    def info(self) -> Dict[str, object]:
        p = self.params
        return {
            "synodic_month": p.synodic_month,
            "solver": {"step": p.solver.step, "tol": p.solver.tol, "max_iter": p.solver.max_iter},
            "bracket_window_days": p.bracket.window_days,
            "offsets": {"legacy": p.offset_legacy, "modern": p.offset_modern,
                        "reform_year": p.offset_reform_year},
        }

    # ---------------------------------------------------------
    # Event tables
    # ---------------------------------------------------------

    def _chain_next(self, jd: float) -> float:
        return new_moon_nearby(jd + self.params.synodic_month, solver=self.params.solver)

    def _chain_prev(self, jd: float) -> float:
        return new_moon_nearby(jd - self.params.synodic_month, solver=self.params.solver)

    def month11_anchor(self, solstice: SolarTermEvent, offset: float) -> NewMoonEvent:
        """Last new moon on or before the civil day of `solstice`."""
        jd = new_moon_jd(solstice.jd, "backward",
                         solver=self.params.solver, bracket=self.params.bracket)
        nm = new_moon_event(jd, offset)
        for _ in range(3):
            if nm.day_number > solstice.day_number:
                jd = self._chain_prev(jd)
                nm = new_moon_event(jd, offset)
                continue
            nxt_jd = self._chain_next(jd)
            nxt = new_moon_event(nxt_jd, offset)
            if nxt.day_number <= solstice.day_number:
                # a new moon on the solstice day opens month 11
                jd, nm = nxt_jd, nxt
                continue
            return nm
        raise CalendarBuildError(
            f"could not place month 11 around solstice {solstice.civil.isoformat()}",
            year=shift_year(solstice.year, 1), stage="anchor",
        )

    def year_tables(self, year: int) -> YearTables:
        offset = self.params.offset_for(year)
        solver = self.params.solver

        terms: List[SolarTermEvent] = []
        for slot in range(N_TERM_SLOTS):
            dy, index = term_slot(slot)
            terms.append(solar_term_event(shift_year(year, dy), index, offset, solver=solver))

        anchor = self.month11_anchor(terms[PRIOR_SOLSTICE_SLOT], offset)
        moons = [anchor]
        jd = anchor.jd
        while len(moons) < N_NEW_MOONS:
            # chained from the previous new moon, never solved independently
            jd = self._chain_next(jd)
            moons.append(new_moon_event(jd, offset))

        return YearTables(year=year, offset=offset,
                          solar_terms=tuple(terms), new_moons=tuple(moons))

    # ---------------------------------------------------------
    # Leap month rule
    # ---------------------------------------------------------

    @staticmethod
    def scan_span(tables: YearTables, term_base: int, moon_base: int) -> SolsticeSpan:
        """
        One solstice-to-solstice span opening at term slot `term_base` inside month
        `moon_base`. With 13 months, the first month whose successor starts on or
        before the next major term holds no major term and is the leap month.
        """
        st, nm = tables.solar_terms, tables.new_moons
        closing = st[term_base + 24]
        n_months = 13 if nm[moon_base + 13].day_number <= closing.day_number else 12

        leap = None
        if n_months == 13:
            for i in range(13):
                if nm[moon_base + i + 1].day_number <= st[term_base + 2 * i].day_number:
                    leap = moon_base + i
                    break
            else:
                raise CalendarBuildError(
                    f"13 months between {st[term_base].civil.isoformat()} and "
                    f"{closing.civil.isoformat()} but none lacks a major term",
                    year=tables.year, stage="leap",
                )
        return SolsticeSpan(opening=st[term_base], closing=closing, first_month=moon_base,
                            n_months=n_months, leap_month=leap)

    def solstice_spans(self, tables: YearTables) -> Tuple[SolsticeSpan, SolsticeSpan]:
        first = self.scan_span(tables, PRIOR_SOLSTICE_SLOT, 0)
        second = self.scan_span(tables, SOLSTICE_SLOT, first.n_months)
        return first, second

    def find_leap(self, tables: YearTables) -> Optional[int]:
        first, second = self.solstice_spans(tables)
        leap = first.leap_month if first.leap_month is not None else second.leap_month
        logger.debug("%d: spans of %d and %d months, leap index %s",
                     tables.year, first.n_months, second.n_months, leap)
        return leap

    # ---------------------------------------------------------
    # Year assembly
    # ---------------------------------------------------------

    def build_year(self, year: int) -> YearCalendar:
        if year == 0:
            raise ValueError("there is no year 0; use -1 for 1 BC")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("building %d with %s", year, self.info())
        try:
            tables = self.year_tables(year)
        except CalendarBuildError:
            raise
        except (NongliError, ValueError) as exc:
            raise CalendarBuildError(f"event computation failed for {year}: {exc}",
                                     year=year, stage="events") from exc

        leap = self.find_leap(tables)
        st, nm = tables.solar_terms, tables.new_moons

        months = []
        for j in display_window(leap):
            start, nxt = nm[j], nm[j + 1]
            months.append(LunarMonth(
                ordinal=month_ordinal(j, leap),
                is_leap=(j == leap),
                is_major=(nxt.day_number - start.day_number == 30),
                start=start,
                end_day_number=nxt.day_number,
                solar_terms=tuple(t for t in st
                                  if start.day_number <= t.day_number < nxt.day_number),
            ))

        leap_ordinal = next((m.ordinal for m in months if m.is_leap), None)
        logger.info("built %d: %d months, leap month %s", year, len(months), leap_ordinal)
        return YearCalendar(
            year=year,
            offset_days=tables.offset,
            months=tuple(months),
            leap_month=leap_ordinal,
            solar_terms=st[PRIOR_SOLSTICE_SLOT + 1:SOLSTICE_SLOT + 1],
            new_moons=nm,
        )

    # ---------------------------------------------------------
    # Civil-year listings
    # ---------------------------------------------------------

    def solar_terms_for_year(self, year: int, offset: Optional[float] = None) -> Tuple[SolarTermEvent, ...]:
        """The 24 terms of `year`, minor cold (January) through winter solstice (December)."""
        off = self.params.offset_for(year) if offset is None else offset
        order = [(WINTER_SOLSTICE + 1 + k) % 24 for k in range(24)]
        return tuple(solar_term_event(year, i, off, solver=self.params.solver) for i in order)

    def new_moons_for_year(self, year: int, offset: Optional[float] = None) -> Tuple[NewMoonEvent, ...]:
        """First new moon after local midnight of 1 January, then the next 13 by chaining."""
        off = self.params.offset_for(year) if offset is None else offset
        jd = new_moon_jd(julian_day(year, 1, 1) - off, "forward",
                         solver=self.params.solver, bracket=self.params.bracket)
        out = [new_moon_event(jd, off)]
        for _ in range(13):
            jd = self._chain_next(jd)
            out.append(new_moon_event(jd, off))
        return tuple(out)


def build_year_calendar(year: int, params: CalendarParams = DEFAULT_PARAMS) -> YearCalendar:
    return LunisolarCalendar(params).build_year(year)
