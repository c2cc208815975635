# tests/test_solver.py

import math

import pytest

from nongli.core.errors import ConvergenceError, NongliError
from nongli.engines._solver import newton_root
from nongli.engines.specs import SolverParams


def test_newton_square_root():
    x = newton_root(lambda x: x * x - 2.0, x0=1.0)
    assert x == pytest.approx(math.sqrt(2.0), abs=1e-10)


def test_flat_function_raises():
    with pytest.raises(ConvergenceError) as info:
        newton_root(lambda x: 1.0, x0=0.0)
    assert info.value.iterations == 1
    assert isinstance(info.value, NongliError)


def test_iteration_cap():
    # Newton on the cube root moves away from the root: x -> -2x
    def cbrt(x):
        return math.copysign(abs(x) ** (1.0 / 3.0), x)

    with pytest.raises(ConvergenceError) as info:
        newton_root(cbrt, x0=1.0, params=SolverParams(max_iter=20))
    assert info.value.iterations == 20
    assert abs(info.value.x) > 1e5
