#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Tuple

from selene.diagnostics.lunation_lengths import _need_matplotlib, _need_numpy
from selene.ephemeris import load_new_moons
from selene.reference import lunar
from selene.reference.constants import DEFAULT_CONSTANTS, SeleneConstants


def match_residuals(
    reference_jds: Sequence[float],
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> List[Tuple[int, float]]:
    """
    For each reference new moon, the nearest Meeus index k and the residual
    new_moon_jde(k) - reference, in hours.
    """
    out = []
    for jd in reference_jds:
        k = round((jd - constants.jde_ref) / constants.mean_synodic_month)
        out.append((k, (lunar.new_moon_jde(k, constants) - jd) * 24.0))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the truncated new-moon series against a JPL ephemeris.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--bsp", default="de440s.bsp", help="JPL kernel (skyfield loader name or path)")
    p.add_argument("--out-png", default="new_moon_validation.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    jd_start = 2451545.0 + (args.year_start - 2000) * 365.25
    jd_end = 2451545.0 + (args.year_end - 2000) * 365.25

    print("Loading ephemeris new moons...")
    ref = load_new_moons(jd_start, jd_end, bsp=args.bsp)
    res = match_residuals(ref)
    k = np.array([r[0] for r in res])
    hours = np.array([r[1] for r in res])
    years = 2000 + (np.array(ref) - 2451545.0) / 365.25

    print(f"{len(ref)} new moons, {args.year_start}..{args.year_end}")
    print(f"  residual mean = {hours.mean():+.3f} h, max |residual| = {np.abs(hours).max():.3f} h")
    print(f"  k range = {k.min()}..{k.max()}")

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.scatter(years, hours, s=2, color="tab:blue")
    ax.set_title("Truncated Meeus new moon minus ephemeris")
    ax.set_xlabel("Year")
    ax.set_ylabel("Residual (hours)")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(args.out_png, dpi=150)
    print(f"Validation complete. Plot saved to {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
