"""
nongli.engines.astro.deltat
---------------------------
ΔT (uniform time minus civil time) from a table of cubic segments.

Input is a Julian Date. The fractional year
    y = (jd - 2451545) / 365.2425 + 2000
selects the segment [y_i, y_{i+1}), and the normalised position
    t1 = 10 * (y - y_i) / (y_{i+1} - y_i)
feeds the cubic a0 + a1*t1 + a2*t1^2 + a3*t1^3 (seconds).

*** EXTRAPOLATION POLICY ***
Outside the table the nearest segment is extended: before -4000 the first
cubic runs with t1 < 0, from 6000 on the last cubic runs with t1 >= 10, and a
WARNING is logged once per side. The 2150-6000 segment is tabulated but not
validated against observations; `info()` reports it as `validated_until`.
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Protocol, Tuple

logger = logging.getLogger(__name__)

JD_J2000 = 2451545.0
DAYS_PER_YEAR = 365.2425
SECONDS_PER_DAY = 86400.0


class DeltaTModel(Protocol):
    """ΔT in seconds or days for a Julian Date."""

    def delta_t_seconds(self, jd: float) -> float: ...

    def delta_t_days(self, jd: float) -> float: ...

    def info(self) -> Dict[str, object]: ...


def fractional_year(jd: float) -> float:
    return (jd - JD_J2000) / DAYS_PER_YEAR + 2000.0


@lru_cache(maxsize=None)
def _warn_extrapolation(name: str, side: str) -> None:
    logger.warning("ΔT model %s extrapolated %s its table", name, side)


@dataclass(frozen=True)
class CubicSegmentDeltaT:
    """
    Piecewise cubic ΔT. `boundaries` holds one more year than `coeffs`:
    the last boundary closes the final segment and carries no polynomial.
    """
    name: str
    boundaries: Tuple[float, ...]
    coeffs: Tuple[Tuple[float, float, float, float], ...]

    def __post_init__(self) -> None:
        if len(self.boundaries) != len(self.coeffs) + 1:
            raise ValueError("boundaries must have exactly one more entry than coeffs")
        if any(b1 <= b0 for b0, b1 in zip(self.boundaries, self.boundaries[1:])):
            raise ValueError("boundaries must be strictly increasing")

    @property
    def n_segments(self) -> int:
        return len(self.coeffs)

    def segment_index(self, y: float) -> int:
        i = bisect.bisect_right(self.boundaries, y) - 1
        return min(max(i, 0), self.n_segments - 1)

    def segment_seconds(self, i: int, t1: float) -> float:
        a0, a1, a2, a3 = self.coeffs[i]
        return a0 + (a1 + (a2 + a3 * t1) * t1) * t1

    def seconds_at_year(self, y: float) -> float:
        if y < self.boundaries[0]:
            _warn_extrapolation(self.name, "before")
        elif y >= self.boundaries[-1]:
            _warn_extrapolation(self.name, "after")
        i = self.segment_index(y)
        y0, y1 = self.boundaries[i], self.boundaries[i + 1]
        t1 = (y - y0) / (y1 - y0) * 10.0
        return self.segment_seconds(i, t1)

    def delta_t_seconds(self, jd: float) -> float:
        return self.seconds_at_year(fractional_year(jd))

    def delta_t_days(self, jd: float) -> float:
        return self.delta_t_seconds(jd) / SECONDS_PER_DAY

    def info(self) -> Dict[str, object]:
        return {
            "type": "cubic_segments",
            "name": self.name,
            "segments": self.n_segments,
            "range": (self.boundaries[0], self.boundaries[-1]),
            "validated_until": self.boundaries[-2],
        }


# Columns: year, a0, a1, a2, a3 (seconds). The closing row has no coefficients.
_TABLE = (
    (-4000, 108371.7, -13036.80, 392.000, 0.0000),
    (-500, 17201.0, -627.82, 16.170, -0.3413),
    (-150, 12200.6, -346.41, 5.403, -0.1593),
    (150, 9113.8, -328.13, -1.647, 0.0377),
    (500, 5707.5, -391.41, 0.915, 0.3145),
    (900, 2203.4, -283.45, 13.034, -0.1778),
    (1300, 490.1, -57.35, 2.085, -0.0072),
    (1600, 120.0, -9.81, -1.532, 0.1403),
    (1700, 10.2, -0.91, 0.510, -0.0370),
    (1800, 13.4, -0.72, 0.202, -0.0193),
    (1830, 7.8, -1.81, 0.416, -0.0247),
    (1860, 8.3, -0.13, -0.406, 0.0292),
    (1880, -5.4, 0.32, -0.183, 0.0173),
    (1900, -2.3, 2.06, 0.169, -0.0135),
    (1920, 21.2, 1.69, -0.304, 0.0167),
    (1940, 24.2, 1.22, -0.064, 0.0031),
    (1960, 33.2, 0.51, 0.231, -0.0109),
    (1980, 51.0, 1.29, -0.026, 0.0032),
    (2000, 64.7, -1.66, 5.224, -0.2905),
    (2150, 279.4, 732.95, 429.579, 0.0158),
)
_CLOSING_YEAR = 6000

DEFAULT_DELTAT = CubicSegmentDeltaT(
    name="cubic_segments_-4000_6000",
    boundaries=tuple(float(r[0]) for r in _TABLE) + (float(_CLOSING_YEAR),),
    coeffs=tuple(tuple(r[1:]) for r in _TABLE),
)


def delta_t_days(jd: float) -> float:
    return DEFAULT_DELTAT.delta_t_days(jd)


def delta_t_seconds(jd: float) -> float:
    return DEFAULT_DELTAT.delta_t_seconds(jd)
