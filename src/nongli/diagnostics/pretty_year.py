from __future__ import annotations

import argparse
from typing import Iterable, List, Optional

import nongli
from nongli.attributes.standard import sexagenary_label
from nongli.core.names import month_name_zh
from nongli.core.types import LunarMonth, NewMoonEvent, SolarTermEvent, YearCalendar


def month_line(m: LunarMonth) -> str:
    tag = "閏" if m.is_leap else "　"
    size = "大" if m.is_major else "小"
    c = m.start_civil
    head = (f"{tag}{month_name_zh(m.ordinal)}{size} "
            f"{sexagenary_label(m.day_number)} {c.month:02d}-{c.day:02d}")
    terms = " ".join(f"{t.term.name_zh}{m.day_of_month(t.day_number):02d}" for t in m.solar_terms)
    return f"{head}  {terms}".rstrip()


def format_year(cal: YearCalendar) -> str:
    lines = [f"{cal.year}"]
    lines.extend(month_line(m) for m in cal)
    return "\n".join(lines)


def format_terms(events: Iterable[SolarTermEvent]) -> str:
    return "\n".join(f"{e.term.name_zh} : {e.civil.isoformat()}" for e in events)


def format_new_moons(events: Iterable[NewMoonEvent]) -> str:
    events = list(events)
    lines: List[str] = []
    for a, b in zip(events, events[1:] + [None]):
        size = "" if b is None else (" 大" if b.day_number - a.day_number == 30 else " 小")
        lines.append(f"{a.civil.isoformat()}{size}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the lunar months of one or more civil years.")
    p.add_argument("years", type=int, nargs="+")
    args = p.parse_args(argv)

    for y in args.years:
        print(format_year(nongli.build_year_calendar(y)))
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
