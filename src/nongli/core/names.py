from __future__ import annotations

from typing import Tuple

from .types import SolarTerm

_TERM_NAMES = (
    ("Spring Equinox", "春分"),
    ("Clear and Bright", "清明"),
    ("Grain Rain", "穀雨"),
    ("Start of Summer", "立夏"),
    ("Grain Full", "小滿"),
    ("Grain in Ear", "芒種"),
    ("Summer Solstice", "夏至"),
    ("Minor Heat", "小暑"),
    ("Major Heat", "大暑"),
    ("Start of Autumn", "立秋"),
    ("End of Heat", "處暑"),
    ("White Dew", "白露"),
    ("Autumn Equinox", "秋分"),
    ("Cold Dew", "寒露"),
    ("Frost Descent", "霜降"),
    ("Start of Winter", "立冬"),
    ("Minor Snow", "小雪"),
    ("Major Snow", "大雪"),
    ("Winter Solstice", "冬至"),
    ("Minor Cold", "小寒"),
    ("Major Cold", "大寒"),
    ("Start of Spring", "立春"),
    ("Rain Water", "雨水"),
    ("Awakening of Insects", "驚蟄"),
)

SOLAR_TERMS: Tuple[SolarTerm, ...] = tuple(
    SolarTerm(index=i, name=en, name_zh=zh) for i, (en, zh) in enumerate(_TERM_NAMES)
)

SPRING_EQUINOX = 0
SUMMER_SOLSTICE = 6
AUTUMN_EQUINOX = 12
WINTER_SOLSTICE = 18

MONTH_NAMES_ZH = ("正月", "二月", "三月", "四月", "五月", "六月",
                  "七月", "八月", "九月", "十月", "冬月", "臘月")

HEAVENLY_STEMS = "甲乙丙丁戊己庚辛壬癸"
EARTHLY_BRANCHES = "子丑寅卯辰巳午未申酉戌亥"


def solar_term(index: int) -> SolarTerm:
    if not 0 <= index < 24:
        raise ValueError(f"solar term index must be in 0..23, got {index}")
    return SOLAR_TERMS[index]


def month_name_zh(ordinal: int, is_leap: bool = False) -> str:
    name = MONTH_NAMES_ZH[ordinal - 1]
    return ("閏" + name) if is_leap else name
