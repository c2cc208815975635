#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import nongli


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "nongli[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nongli[diagnostics]"') from e


def leap_points(start_year: int, end_year: int) -> List[Tuple[int, int]]:
    """(year, leap ordinal) for every year in range that shows a leap month."""
    out = []
    for y in range(start_year, end_year + 1):
        if y == 0:
            continue
        leap = nongli.build_year_calendar(y).leap_month
        if leap is not None:
            out.append((y, leap))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-month barcode diagram (square cell grid).")
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2040)
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Chinese lunisolar leap months")
    p.add_argument("--year-step", type=int, default=5, help="label every k years (default: 5).")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    pts = leap_points(start_year, end_year)

    fig, ax = plt.subplots(figsize=(16, 3.6))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges, y_edges, Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        zorder=0,
    )

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.tick_params(axis="both", which="both", length=0)

    xt = list(range(start_year, end_year + 1, max(1, args.year_step)))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Gregorian year")
    ax.set_yticks(list(range(1, 13)))
    ax.set_ylabel("Leap month")

    if pts:
        xs = np.array([p[0] for p in pts], dtype=int)
        ms = np.array([p[1] for p in pts], dtype=int)
        ax.scatter(xs, ms, s=30, marker="o", c="0.15", linewidths=0.0, zorder=5)

    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}  ({len(pts)} leap years)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
