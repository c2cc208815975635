"""Nutation in longitude, IAU 1980 leading terms.

Rows (a0, a1, a2, a3, a4, s0, s1, c0, c1): argument a0 + a1·T + ... + a4·T⁴
in radians, longitude amplitude (s0 + s1·T/10), obliquity amplitude
(c0 + c1·T/10), both in units of 0.0001 arcsec. T in Julian centuries.
"""
from __future__ import annotations

import math

import numpy as np

from .series import frozen_table

_NUTATION = (
    (2.1824391966, -33.757045954, 0.0000362262, 3.7340E-08, -2.8793E-10, -171996, -1742, 92025, 89),
    (3.5069406862, 1256.663930738, 0.0000105845, 6.9813E-10, -2.2815E-10, -13187, -16, 5736, -31),
    (1.3375032491, 16799.418221925, -0.0000511866, 6.4626E-08, -5.3543E-10, -2274, -2, 977, -5),
    (4.3648783932, -67.514091907, 0.0000724525, 7.4681E-08, -5.7586E-10, 2062, 2, -895, 5),
    (0.0431251803, -628.301955171, 0.0000026820, 6.5935E-10, 5.5705E-11, -1426, 34, 54, -1),
    (2.3555557435, 8328.691425719, 0.0001545547, 2.5033E-07, -1.1863E-09, 712, 1, -7, 0),
    (3.4638155059, 1884.965885909, 0.0000079025, 3.8785E-11, -2.8386E-10, -517, 12, 224, -6),
    (5.4382493597, 16833.175267879, -0.0000874129, 2.7285E-08, -2.4750E-10, -386, -4, 200, 0),
    (3.6930589926, 25128.109647645, 0.0001033681, 3.1496E-07, -1.7218E-09, -301, 0, 129, -1),
    (3.5500658664, 628.361975567, 0.0000132664, 1.3575E-09, -1.7245E-10, 217, -5, -95, 3),
)

NUTATION = frozen_table(_NUTATION, 9)


def _arguments(T: float) -> np.ndarray:
    arg = NUTATION[:, 4]
    for k in (3, 2, 1, 0):
        arg = arg * T + NUTATION[:, k]
    return arg


def nutation_in_longitude(T: float) -> float:
    """Δψ in radians."""
    amp = NUTATION[:, 5] + NUTATION[:, 6] * T / 10.0
    total = float(np.dot(amp, np.sin(_arguments(T))))
    return math.radians(total / 36_000_000.0)
