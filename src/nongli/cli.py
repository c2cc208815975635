from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    neg = s.startswith("-")
    y, m, d = map(int, s.lstrip("-").split("-"))
    return (-y if neg else y), m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _offset_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("--utc", action="store_true", help="report UT instead of Chinese civil time")


def cmd_date(argv: list[str]) -> int:
    import nongli

    p = argparse.ArgumentParser(prog="nongli date", description="Civil date -> lunar month and day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    print(nongli.lunar_date(y, m, d, attributes=tuple(args.attr)))
    return 0


def cmd_year(argv: list[str]) -> int:
    import nongli
    from nongli.diagnostics.pretty_year import format_year

    p = argparse.ArgumentParser(prog="nongli year", description="Lunar months of a civil year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    print(format_year(nongli.build_year_calendar(args.year)))
    return 0


def cmd_terms(argv: list[str]) -> int:
    import nongli
    from nongli.diagnostics.pretty_year import format_terms

    p = argparse.ArgumentParser(prog="nongli terms", description="The 24 solar terms of a civil year")
    p.add_argument("year", type=int)
    _offset_arg(p)
    args = p.parse_args(argv)

    offset = 0.0 if args.utc else None
    print(format_terms(nongli.solar_terms_for_year(args.year, offset)))
    return 0


def cmd_new_moons(argv: list[str]) -> int:
    import nongli
    from nongli.diagnostics.pretty_year import format_new_moons

    p = argparse.ArgumentParser(prog="nongli new-moons", description="New moons from 1 January of a civil year")
    p.add_argument("year", type=int)
    _offset_arg(p)
    args = p.parse_args(argv)

    offset = 0.0 if args.utc else None
    print(format_new_moons(nongli.new_moons_for_year(args.year, offset)))
    return 0


def cmd_sun(argv: list[str]) -> int:
    from nongli.reference import solar

    p = argparse.ArgumentParser(prog="nongli sun", description="Apparent geocentric solar position")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date, uniform time (default: J2000.0)")
    args = p.parse_args(argv)

    geo = solar.geometric_position(args.jd)
    app = solar.sun_position(args.jd)
    print(f"JD = {args.jd:.6f}")
    print(f"  Geometric Longitude = {geo.longitude_deg:.8f}")
    print(f"  Apparent Longitude  = {app.longitude_deg:.8f}")
    print(f"  Latitude            = {app.latitude_deg * 3600.0:.4f} arcsec")
    return 0


def cmd_moon(argv: list[str]) -> int:
    from nongli.engines.events import elongation
    from nongli.reference import lunar

    p = argparse.ArgumentParser(prog="nongli moon", description="Apparent geocentric lunar position")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date, uniform time (default: J2000.0)")
    args = p.parse_args(argv)

    pos = lunar.moon_position(args.jd)
    print(f"JD = {args.jd:.6f}")
    print(f"  Longitude  = {pos.longitude_deg:.8f}")
    print(f"  Latitude   = {pos.latitude_deg:.8f}")
    print(f"  Elongation = {elongation(args.jd):.8f}")
    return 0


def cmd_deltat(argv: list[str]) -> int:
    from nongli.engines.astro.deltat import DEFAULT_DELTAT, fractional_year

    p = argparse.ArgumentParser(prog="nongli deltat", description="Delta T from the cubic-segment table")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date")
    args = p.parse_args(argv)

    y = fractional_year(args.jd)
    print(f"JD = {args.jd:.6f}  (year {y:.4f}, segment from {DEFAULT_DELTAT.boundaries[DEFAULT_DELTAT.segment_index(y)]:.0f})")
    print(f"  Delta T = {DEFAULT_DELTAT.delta_t_seconds(args.jd):.3f} s")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `nongli YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_date(argv)

    p = argparse.ArgumentParser(prog="nongli", description="Chinese lunisolar calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging threshold")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("date", help="Civil date -> lunar month and day")
    sub.add_parser("year", help="Lunar months of a civil year")
    sub.add_parser("terms", help="The 24 solar terms of a civil year")
    sub.add_parser("new-moons", help="New moons of a civil year")

    # astronomy tools
    sub.add_parser("sun", help="Apparent solar longitude at a JD")
    sub.add_parser("moon", help="Apparent lunar longitude/latitude at a JD")
    sub.add_parser("deltat", help="Delta T at a JD")

    # diagnostics (non-ephem)
    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument(
        "tool",
        choices=["pretty-year", "leap-months", "plot-deltat"],
        help="Which diagnostic to run",
    )

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "date": cmd_date,
        "year": cmd_year,
        "terms": cmd_terms,
        "new-moons": cmd_new_moons,
        "sun": cmd_sun,
        "moon": cmd_moon,
        "deltat": cmd_deltat,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "diag":
        tool_map = {
            "pretty-year": "nongli.diagnostics.pretty_year",
            "leap-months": "nongli.diagnostics.leap_months",
            "plot-deltat": "nongli.diagnostics.plot_deltat",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-ref": "nongli.diagnostics.ephem.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
