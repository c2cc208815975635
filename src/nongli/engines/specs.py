from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..core.time import OFFSET_BEIJING, OFFSET_BEIJING_LMT, OFFSET_REFORM_YEAR


# ============================================================
# SOLVER
# ============================================================

@dataclass(frozen=True)
class SolverParams:
    """Newton iteration with a symmetric finite-difference derivative (days)."""
    step: float = 5e-6
    tol: float = 1e-8
    max_iter: int = 50


@dataclass(frozen=True)
class BracketParams:
    """Coarse day-by-day search for the elongation wrap ahead of Newton."""
    window_days: int = 30
    synodic_month: float = 29.53

    @property
    def daily_elongation_deg(self) -> float:
        return 360.0 / self.synodic_month


# ============================================================
# CALENDAR
# ============================================================

@dataclass(frozen=True)
class CalendarParams:
    solver: SolverParams = field(default_factory=SolverParams)
    bracket: BracketParams = field(default_factory=BracketParams)
    synodic_month: float = 29.53

    # Civil offsets (days east of Greenwich) and the year the standard zone took over
    offset_modern: float = OFFSET_BEIJING
    offset_legacy: float = OFFSET_BEIJING_LMT
    offset_reform_year: int = OFFSET_REFORM_YEAR

    def offset_for(self, year: int) -> float:
        return self.offset_modern if year >= self.offset_reform_year else self.offset_legacy

    def tweak(self, **kwargs) -> "CalendarParams":
        return replace(self, **kwargs)


DEFAULT_PARAMS = CalendarParams()
