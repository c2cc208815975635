from __future__ import annotations

import logging
import math
from typing import Callable

from ..core.errors import ConvergenceError
from .specs import SolverParams

logger = logging.getLogger(__name__)


def newton_root(
    f: Callable[[float], float],
    *,
    x0: float,
    params: SolverParams = SolverParams(),
    label: str = "root",
) -> float:
    """
    Newton's method for f(x)=0 with derivative (f(x+h) - f(x-h)) / 2h.

    Stops when a step is no larger than params.tol; raises ConvergenceError after
    params.max_iter steps or on a zero / non-finite derivative.
    """
    x = x0
    for i in range(1, params.max_iter + 1):
        fx = f(x)
        hi, lo = x + params.step, x - params.step
        d = (f(hi) - f(lo)) / (hi - lo)
        if d == 0.0 or not math.isfinite(d) or not math.isfinite(fx):
            raise ConvergenceError(
                f"{label}: degenerate derivative {d!r} at x={x!r}", x=x, iterations=i
            )
        dx = fx / d
        x -= dx
        if abs(dx) <= params.tol:
            logger.debug("%s: converged in %d iterations to %.9f", label, i, x)
            return x
    raise ConvergenceError(
        f"{label}: no convergence after {params.max_iter} iterations (x={x!r})",
        x=x,
        iterations=params.max_iter,
    )
