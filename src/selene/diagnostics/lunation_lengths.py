#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional

from selene.core.errors import DiagnosticsUnavailableError
from selene.reference.constants import DEFAULT_CONSTANTS, SeleneConstants
from selene.reference import astro_args as aa
from selene.reference.lunar import NEW_MOON_TERMS


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise DiagnosticsUnavailableError('Need numpy. Install: pip install "selene-calendar[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise DiagnosticsUnavailableError('Need matplotlib. Install: pip install "selene-calendar[diagnostics]"') from e


def new_moon_jde_array(k, constants: SeleneConstants = DEFAULT_CONSTANTS):
    """Vectorised selene.reference.lunar.new_moon_jde over an integer array k."""
    np = _need_numpy()
    k = np.asarray(k, dtype=float)

    jde = aa.lunation_polynomial(aa.mean_phase_coeffs(constants.jde_ref, constants.mean_synodic_month), k)
    M = np.radians(np.mod(aa.lunation_polynomial(aa.M_COEFFS, k), 360.0))
    Mp = np.radians(np.mod(aa.lunation_polynomial(aa.MP_COEFFS, k), 360.0))
    F = np.radians(np.mod(aa.lunation_polynomial(aa.F_COEFFS, k), 360.0))

    for m, mp, f, amp in NEW_MOON_TERMS:
        jde = jde + amp * np.sin(m * M + mp * Mp + f * F)
    return jde


@dataclass(frozen=True)
class LengthStats:
    k_start: int
    k_end: int
    n29: int
    n30: int
    min_length: float
    max_length: float
    mean_length: float


def lunation_lengths(k_start: int, k_end: int, constants: SeleneConstants = DEFAULT_CONSTANTS):
    """(k, length) arrays for lunations k_start..k_end-1."""
    np = _need_numpy()
    k = np.arange(k_start, k_end + 1)
    jde = new_moon_jde_array(k, constants)
    return k[:-1], np.diff(jde)


def length_stats(k_start: int, k_end: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> LengthStats:
    np = _need_numpy()
    _, lengths = lunation_lengths(k_start, k_end, constants)
    short = lengths < constants.mean_synodic_month
    return LengthStats(
        k_start=k_start,
        k_end=k_end,
        n29=int(np.count_nonzero(short)),
        n30=int(np.count_nonzero(~short)),
        min_length=float(lengths.min()),
        max_length=float(lengths.max()),
        mean_length=float(lengths.mean()),
    )


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Lunation lengths and 29/30-day classification.")
    p.add_argument("--k-start", type=int, default=-1236, help="first Meeus lunation index")
    p.add_argument("--k-end", type=int, default=1236, help="last Meeus lunation index (exclusive)")
    p.add_argument("--out", default="lunation_lengths.png")
    args = p.parse_args(argv)

    plt = _need_matplotlib()
    c = DEFAULT_CONSTANTS

    k, lengths = lunation_lengths(args.k_start, args.k_end, c)
    st = length_stats(args.k_start, args.k_end, c)

    print(f"Lunations k={st.k_start}..{st.k_end - 1}")
    print(f"  29-day: {st.n29}")
    print(f"  30-day: {st.n30}")
    print(f"  length min/mean/max = {st.min_length:.5f} / {st.mean_length:.5f} / {st.max_length:.5f} days")

    short = lengths < c.mean_synodic_month
    fig, ax = plt.subplots(figsize=(12, 5))
    ax.scatter(k[short], lengths[short], s=2, color="tab:blue", label="29 days")
    ax.scatter(k[~short], lengths[~short], s=2, color="tab:orange", label="30 days")
    ax.axhline(c.mean_synodic_month, color="0.3", lw=0.8, ls="--", label="mean synodic month")
    ax.set_xlabel("Meeus lunation index k")
    ax.set_ylabel("Lunation length (days)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", markerscale=4)
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Plot saved to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
