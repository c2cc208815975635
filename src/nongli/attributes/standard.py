from __future__ import annotations
from typing import Any, Dict

from ..core.names import EARTHLY_BRANCHES, HEAVENLY_STEMS
from .registry import register_attribute

# JDN 0 is day 49 (癸丑) of the sexagenary cycle
_SEXAGENARY_JDN_SHIFT = 49


def sexagenary_index(day_number: int) -> int:
    return (day_number + _SEXAGENARY_JDN_SHIFT) % 60


def sexagenary_label(day_number: int) -> str:
    n = sexagenary_index(day_number)
    return HEAVENLY_STEMS[n % 10] + EARTHLY_BRANCHES[n % 12]


def sexagenary_day(day_number: int) -> Dict[str, Any]:
    n = sexagenary_index(day_number)
    return {
        "sexagenary_index": n,
        "stem": n % 10,
        "branch": n % 12,
        "sexagenary_label": sexagenary_label(day_number),
    }


def weekday(day_number: int) -> Dict[str, Any]:
    # 0=Mon..6=Sun
    return {"weekday": day_number % 7}


register_attribute("sexagenary_day", sexagenary_day)
register_attribute("weekday", weekday)
