#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from nongli.engines.events import new_moon_jd
from nongli.ephemeris.de422 import JD_MAX, JD_MIN, DE422Ephemeris, new_moon_near
from nongli.reference import astro_args as aa
from nongli.reference.lunar import moon_ecliptic_latitude, moon_ecliptic_longitude
from nongli.reference.solar import sun_longitude


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
    p = argparse.ArgumentParser(description="Validate the VSOP87/ELP2000 series models against DE422.")
    p.add_argument("--year-start", type=int, default=-1000)
    p.add_argument("--year-end", type=int, default=3000)
    p.add_argument("--step-days", type=int, default=50)
    p.add_argument("--new-moons", type=int, default=0,
                   help="also time this many new moons spread over the range")
    p.add_argument("--out-png", default="reference_validation.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    print("Loading DE422 Ephemeris...")
    eph = DE422Ephemeris.load()

    jd_start = max(aa.J2000 + (args.year_start - 2000) * 365.25, JD_MIN + 1.0)
    jd_end = min(aa.J2000 + (args.year_end - 2000) * 365.25, JD_MAX - 1.0)
    if jd_start > jd_end:
        raise ValueError(f"Requested range is outside valid ephemeris range [{JD_MIN}, {JD_MAX}]")

    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - aa.J2000) / 365.25
    print(f"Validating {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f}...")

    err_sun_lon, err_moon_lon, err_moon_lat = [], [], []
    for jd in jds:
        jd = float(jd)
        de_sun, de_moon, de_lat = eph.positions_deg(jd)
        err_sun_lon.append(aa.wrap180(sun_longitude(jd) - de_sun) * 3600.0)
        err_moon_lon.append(aa.wrap180(moon_ecliptic_longitude(jd) - de_moon) * 3600.0)
        err_moon_lat.append((moon_ecliptic_latitude(jd) - de_lat) * 3600.0)

    n_panels = 4 if args.new_moons > 0 else 3
    fig, axs = plt.subplots(n_panels, 1, figsize=(12, 3.3 * n_panels), sharex=True)

    panels = [
        (err_sun_lon, "Solar apparent longitude (series - DE422)", "orange"),
        (err_moon_lon, "Lunar apparent longitude (series - DE422)", "blue"),
        (err_moon_lat, "Lunar latitude (series - DE422)", "green"),
    ]
    for ax, (err, title, color) in zip(axs, panels):
        ax.scatter(years, err, s=1, alpha=0.5, color=color)
        ax.set_title(title)
        ax.set_ylabel("Error (arcsec)")
        ax.grid(True, alpha=0.3)

    if args.new_moons > 0:
        seeds = np.linspace(jd_start + 40.0, jd_end - 40.0, args.new_moons)
        nm_years, nm_err = [], []
        for s in seeds:
            ours = new_moon_jd(float(s), "forward")
            ref = new_moon_near(eph, ours)
            nm_years.append(2000 + (ours - aa.J2000) / 365.25)
            nm_err.append((ours - ref) * 86400.0)
        axs[3].scatter(nm_years, nm_err, s=4, color="purple")
        axs[3].set_title("New moon instant (series - DE422)")
        axs[3].set_ylabel("Error (s)")
        axs[3].grid(True, alpha=0.3)
        print(f"New moons: max |error| = {max(abs(e) for e in nm_err):.1f} s")

    axs[-1].set_xlabel("Year")
    plt.suptitle(f"Series model validation against DE422 ({years[0]:.0f} to {years[-1]:.0f})", fontsize=14)
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=200)
    print(f"Validation complete. Plot saved to {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
