"""Truncated periodic series in the VSOP87 and ELP2000 layouts.

Coefficient tables are float64 arrays with the write flag cleared; they are
built once at import and shared read-only by every caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np


def frozen_table(rows: Iterable[Sequence[float]], ncols: int) -> np.ndarray:
    arr = np.array(list(rows), dtype=np.float64).reshape(-1, ncols)
    arr.setflags(write=False)
    return arr


def horner(coeffs: Sequence[float], t: float) -> float:
    """c0 + c1*t + c2*t^2 + ..."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * t + c
    return acc


@dataclass(frozen=True, eq=False)
class CosineSeries:
    """Σ a·cos(b + c·t), rows (a, b, c)."""
    name: str
    table: np.ndarray

    def __call__(self, t: float) -> float:
        a, b, c = self.table[:, 0], self.table[:, 1], self.table[:, 2]
        return float(np.dot(a, np.cos(b + c * t)))

    def __len__(self) -> int:
        return self.table.shape[0]


@dataclass(frozen=True, eq=False)
class PolySineSeries:
    """Σ f·sin(a0 + a1·t + a2·t² + a3·t³ + a4·t⁴), rows (f, a0, a1, a2, a3, a4)."""
    name: str
    table: np.ndarray

    def __call__(self, t: float) -> float:
        tab = self.table
        arg = tab[:, 5]
        for k in (4, 3, 2, 1):
            arg = arg * t + tab[:, k]
        return float(np.dot(tab[:, 0], np.sin(arg)))

    def __len__(self) -> int:
        return self.table.shape[0]


Series = Union[CosineSeries, PolySineSeries]


@dataclass(frozen=True, eq=False)
class TieredSeries:
    """S0(t) + t·S1(t) + t²·S2(t) + ..., scaled; precision tiers combined by Horner."""
    name: str
    tiers: Tuple[Series, ...]
    scale: float = 1.0

    def __call__(self, t: float) -> float:
        acc = 0.0
        for s in reversed(self.tiers):
            acc = acc * t + s(t)
        return acc * self.scale

    def n_terms(self) -> int:
        return sum(len(s) for s in self.tiers)
