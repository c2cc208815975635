"""Solar-term and new-moon instants.

Every solver here works on the uniform time axis. Civil instants are produced
at the boundary by `to_civil`, which adds the civil offset and removes ΔT.
"""
from __future__ import annotations

import logging

from ..core.errors import BracketError
from ..core.names import solar_term
from ..core.time import civil_day_number, civil_from_julian_day, julian_day
from ..core.types import CivilDateTime, NewMoonEvent, SolarTermEvent
from ..reference import astro_args as aa
from ..reference.lunar import moon_ecliptic_longitude
from ..reference.solar import sun_longitude
from ._solver import newton_root
from .astro.deltat import DEFAULT_DELTAT, DeltaTModel
from .specs import BracketParams, SolverParams

logger = logging.getLogger(__name__)

# Values above this are read as "just short of 360" by both target functions
WRAP_THRESHOLD_DEG = 345.0

_SOLVER = SolverParams()
_BRACKET = BracketParams()


# ----- Time-scale boundary -----

def to_civil(jd: float, offset: float, deltat: DeltaTModel = DEFAULT_DELTAT) -> CivilDateTime:
    """Uniform-time JD -> civil instant at `offset` days east of Greenwich."""
    local = jd + offset
    return civil_from_julian_day(local - deltat.delta_t_days(local))


# ----- Solar terms -----

def estimate_solar_term(year: int, index: int) -> float:
    """Mean calendar date of a term in `year`: the 20th/22nd for major terms, 4th/7th otherwise."""
    angle = 15 * index
    month = (angle + 105) // 30
    if month > 12:
        month -= 12
    if angle % 30 == 0:
        day = 20 if month < 8 else 22
    else:
        day = 4 if month < 8 else 7
    # counted from the 1st: October 1582 has no 5th..14th
    return julian_day(year, month, 1) + (day - 1)


def solar_term_jd(year: int, index: int, *, solver: SolverParams = _SOLVER) -> float:
    """Uniform-time JD at which the apparent Sun reaches 15*index degrees during `year`."""
    term = solar_term(index)
    target = float(term.angle_deg)

    def f(jd: float) -> float:
        lon = sun_longitude(jd)
        if target == 0.0 and lon > WRAP_THRESHOLD_DEG:
            lon -= 360.0
        return lon - target

    return newton_root(f, x0=estimate_solar_term(year, index), params=solver,
                       label=f"solar term {year}/{term.name}")


def solar_term_event(year: int, index: int, offset: float, *,
                     solver: SolverParams = _SOLVER) -> SolarTermEvent:
    jd = solar_term_jd(year, index, solver=solver)
    civil = to_civil(jd, offset)
    return SolarTermEvent(term=solar_term(index), year=year, jd=jd, civil=civil,
                          day_number=civil_day_number(civil))


# ----- New moons -----

def elongation(jd: float) -> float:
    """Moon minus Sun apparent longitude, degrees in [0, 360)."""
    return aa.wrap_deg(moon_ecliptic_longitude(jd) - sun_longitude(jd))


def estimate_new_moon_forward(jd: float, *, bracket: BracketParams = _BRACKET) -> float:
    """Whole-day step forward to the last day before the elongation wraps through 0."""
    d0 = elongation(jd)
    for _ in range(1, bracket.window_days):
        jd += 1.0
        d1 = elongation(jd)
        if d1 < d0:
            return jd - 1.0
        d0 = d1
    raise BracketError(f"no new moon within {bracket.window_days} days after JD {jd:.5f}",
                       jd=jd, direction="forward")


def estimate_new_moon_backward(jd: float, *, bracket: BracketParams = _BRACKET) -> float:
    """
    Seed for the new moon on or before `jd`.

    Far from the wrap, jump back by elongation / (mean daily elongation) and walk
    by whole days to the wrap; close to it, walk back day by day.
    """
    rate = bracket.daily_elongation_deg
    d0 = elongation(jd)

    if d0 > rate:
        jd -= d0 / rate
        d1 = elongation(jd)
        if d1 > d0:
            # overshot into the previous lunation
            for _ in range(bracket.window_days):
                jd += 1.0
                if elongation(jd) <= d0:
                    logger.debug("backward bracket: overshoot corrected at JD %.5f", jd - 1.0)
                    return jd - 1.0
            raise BracketError("elongation did not wrap after overshoot", jd=jd, direction="backward")
        if d1 < d0:
            for _ in range(bracket.window_days):
                jd -= 1.0
                if elongation(jd) >= d1:
                    return jd
            raise BracketError("elongation did not wrap walking back", jd=jd, direction="backward")
        return jd

    for _ in range(1, bracket.window_days):
        jd -= 1.0
        d1 = elongation(jd)
        if d1 > d0:
            return jd
        d0 = d1
    raise BracketError(f"no new moon within {bracket.window_days} days before JD {jd:.5f}",
                       jd=jd, direction="backward")


def new_moon_nearby(jd: float, *, solver: SolverParams = _SOLVER) -> float:
    """Newton refinement of a new moon from a seed at most a few days away."""

    def f(x: float) -> float:
        e = elongation(x)
        return e - 360.0 if e > WRAP_THRESHOLD_DEG else e

    return newton_root(f, x0=jd, params=solver, label=f"new moon near JD {jd:.2f}")


def new_moon_jd(approx_jd: float, direction: str = "forward", *,
                solver: SolverParams = _SOLVER, bracket: BracketParams = _BRACKET) -> float:
    """
    New moon relative to `approx_jd`: the first one after it ("forward"), the
    last one on or before it ("backward"), or Newton directly from it ("nearby").
    """
    if direction == "forward":
        seed = estimate_new_moon_forward(approx_jd, bracket=bracket)
    elif direction == "backward":
        seed = estimate_new_moon_backward(approx_jd, bracket=bracket)
    elif direction == "nearby":
        seed = approx_jd
    else:
        raise ValueError("direction must be one of: forward, backward, nearby")
    return new_moon_nearby(seed, solver=solver)


def new_moon_event(jd: float, offset: float) -> NewMoonEvent:
    civil = to_civil(jd, offset)
    return NewMoonEvent(jd=jd, civil=civil, day_number=civil_day_number(civil))
