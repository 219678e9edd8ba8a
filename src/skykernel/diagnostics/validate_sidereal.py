#!/usr/bin/env python3
"""
Compare local_sidereal_time against skyfield over a range of years.

skyfield's lst_hours_at() is apparent sidereal time, so the residual
includes the equation of the equinoxes (|EqEq| < ~1.2 s). A wrong
longitude sign shows up as an error of 2*lon/15 hours instead.
UT1 = UTC is assumed for the input JDs.
"""
from __future__ import annotations

import argparse
import warnings
from typing import List, Optional

from skykernel.core.errors import SiderealAccuracyWarning
from skykernel.reference.constants import J2000
from skykernel.reference.sidereal import VALID_CENTURIES, local_sidereal_time
from skykernel.reference.time_scales import to_julian_century


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "skykernel[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "skykernel[diagnostics]"') from e


def _need_skyfield():
    try:
        from skyfield.api import load, wgs84
        return load, wgs84
    except ImportError as e:
        raise RuntimeError('Need skyfield. Install: pip install "skykernel[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate mean sidereal time against skyfield.")
    p.add_argument("--year-start", type=int, default=1800)
    p.add_argument("--year-end", type=int, default=2200)
    p.add_argument("--step-days", type=float, default=7.3)
    p.add_argument("--lon", type=float, default=107.0, help="Observer longitude in degrees (positive East)")
    p.add_argument("--out-png", default=None, help="Write a residual plot here")
    args = p.parse_args(argv)

    np = _need_numpy()
    load, wgs84 = _need_skyfield()

    jd_start = J2000 + (args.year_start - 2000) * 365.25
    jd_end = J2000 + (args.year_end - 2000) * 365.25
    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - J2000) / 365.25

    ts = load.timescale(builtin=True)
    observer = wgs84.latlon(0.0, args.lon)
    ref_hours = observer.lst_hours_at(ts.ut1_jd(jds))

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", SiderealAccuracyWarning)
        ours = np.array([local_sidereal_time(float(jd), args.lon) for jd in jds])

    resid_s = ((ours - ref_hours + 12.0) % 24.0 - 12.0) * 3600.0
    outside = sum(1 for jd in jds if abs(to_julian_century(float(jd))) > VALID_CENTURIES)

    print(f"Validated {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f} at lon={args.lon:g}E")
    print(f"  points outside |T| <= {VALID_CENTURIES:g}: {outside}")
    print(f"  residual mean = {resid_s.mean():+.4f} s")
    print(f"  residual rms  = {np.sqrt((resid_s ** 2).mean()):.4f} s")
    print(f"  residual max  = {np.abs(resid_s).max():.4f} s")

    if args.out_png:
        plt = _need_matplotlib()
        plt.figure(figsize=(12, 5))
        plt.scatter(years, resid_s, s=1, alpha=0.5)
        plt.title("Local mean sidereal time - skyfield LAST")
        plt.xlabel("Year")
        plt.ylabel("Residual (s)")
        plt.grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Saved {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
