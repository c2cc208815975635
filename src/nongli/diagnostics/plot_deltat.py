#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from nongli.engines.astro.deltat import DEFAULT_DELTAT


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


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the cubic-segment Delta T table.")
    p.add_argument("--y0", type=int, default=1600, help="start year")
    p.add_argument("--y1", type=int, default=2100, help="end year")
    p.add_argument("--step", type=float, default=0.25, help="sampling step in years")
    p.add_argument("--out", default="deltat.png", help="output image filename")
    p.add_argument("--show-boundaries", action="store_true", help="mark segment boundaries")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    ys = np.arange(float(args.y0), float(args.y1) + 1e-12, float(args.step), dtype=float)
    secs = np.array([DEFAULT_DELTAT.seconds_at_year(float(y)) for y in ys], dtype=float)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(ys, secs, linewidth=2, label=DEFAULT_DELTAT.name)

    if args.show_boundaries:
        for b in DEFAULT_DELTAT.boundaries:
            if args.y0 <= b <= args.y1:
                ax.axvline(b, color="0.7", linewidth=0.8, linestyle=":")

    validated = DEFAULT_DELTAT.boundaries[-2]
    if args.y1 > validated:
        ax.axvspan(max(validated, args.y0), args.y1, color="0.92", zorder=0, label="unvalidated")

    ax.set_xlabel("Year")
    ax.set_ylabel("Delta T (s)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
