from __future__ import annotations

from typing import Optional


class NongliError(Exception):
    """Base error."""


class ConvergenceError(NongliError):
    """Raised when Newton iteration does not settle within its iteration cap."""

    def __init__(self, message: str, *, x: float, iterations: int):
        super().__init__(message)
        self.x = x
        self.iterations = iterations


class BracketError(NongliError):
    """Raised when the coarse new-moon scan does not find the elongation wrap."""

    def __init__(self, message: str, *, jd: float, direction: str):
        super().__init__(message)
        self.jd = jd
        self.direction = direction


class CalendarBuildError(NongliError):
    """Raised when a lunisolar year cannot be assembled."""

    def __init__(self, message: str, *, year: int, stage: Optional[str] = None):
        super().__init__(message)
        self.year = year
        self.stage = stage
