# reference/lunar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa
from .constants import DEFAULT_CONSTANTS, SeleneConstants


# (m, m', f, amplitude in days)
# Leading periodic terms of the Meeus new-moon correction (Astronomical
# Algorithms, ch. 49), truncated to the 11 largest.
NEW_MOON_TERMS = (
    (0, 1, 0, -0.40720),
    (1, 0, 0, 0.17241),
    (0, 2, 0, 0.01608),
    (0, 0, 2, 0.01039),
    (-1, 1, 0, 0.00739),
    (1, 1, 0, -0.00514),
    (2, 0, 0, 0.00208),
    (0, 1, -2, -0.00111),
    (0, 1, 2, -0.00057),
    (1, 2, 0, 0.00056),
    (0, 3, 0, -0.00042),
)


@dataclass(frozen=True)
class Lunation:
    """A single lunation k, from its new moon to the next."""
    k: int
    new_moon_jd: float
    length: float
    days: int  # 29 or 30


# ------------------------------------------------------------
# Precise new moon
# ------------------------------------------------------------

def mean_new_moon_jde(k: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    """Mean phase: jde_ref + S*k + 0.0001337 T^2 - 0.000000150 T^3 + 0.00000000073 T^4."""
    coeffs = aa.mean_phase_coeffs(constants.jde_ref, constants.mean_synodic_month)
    return aa.lunation_polynomial(coeffs, k)


def new_moon_correction(k: int) -> float:
    """Sum of the periodic terms (days) for lunation k."""
    args = aa.new_moon_args(k)
    M, Mp, F = args.M_rad, args.Mp_rad, args.F_rad
    s = 0.0
    for m, mp, f, amp in NEW_MOON_TERMS:
        s += amp * math.sin(m * M + mp * Mp + f * F)
    return s


def new_moon_jde(k: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    """
    Julian Date of the k-th new moon (k=0: 2000 January 6).

    Sub-hour accuracy within a few centuries of the reference; accuracy
    degrades slowly further out since only the leading terms are kept.
    """
    return mean_new_moon_jde(k, constants) + new_moon_correction(k)


def lunation_length(k: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    """Days from new moon k to new moon k+1."""
    return new_moon_jde(k + 1, constants) - new_moon_jde(k, constants)


def days_in_lunation(k: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """29 for lunations shorter than the mean synodic month, otherwise 30."""
    return 29 if lunation_length(k, constants) < constants.mean_synodic_month else 30


def lunation(k: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> Lunation:
    jd = new_moon_jde(k, constants)
    length = new_moon_jde(k + 1, constants) - jd
    return Lunation(
        k=k,
        new_moon_jd=jd,
        length=length,
        days=29 if length < constants.mean_synodic_month else 30,
    )


# ------------------------------------------------------------
# Mean phases (linear in the lunation index, anchored at jd_0)
# ------------------------------------------------------------

def mean_new_moon_jd(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return constants.jd_0 + L * constants.mean_synodic_month


def first_quarter_jd(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return mean_new_moon_jd(L, constants) + constants.mean_synodic_month / 4


def full_moon_jd(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return mean_new_moon_jd(L, constants) + constants.mean_synodic_month / 2


def third_quarter_jd(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return mean_new_moon_jd(L, constants) + 3 * constants.mean_synodic_month / 4


def deipnon_jd(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    """The last day of the lunation, one day before the mean new moon."""
    return mean_new_moon_jd(L, constants) - 1


# ------------------------------------------------------------
# Eclipse cycles
# ------------------------------------------------------------

def eclipse_jd(k: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    """k Saros cycles after the reference eclipse."""
    return constants.jd_eclipse_0 + k * constants.saros_cycle


def exeligmos_jd(k: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    """k exeligmos (triple Saros) cycles after the reference eclipse."""
    return constants.jd_eclipse_0 + k * 3 * constants.saros_cycle
