"""
selene.engines.conversion
-------------------------
Stateless conversion between Selene fields (year, month, day) and the
continuous time value (milliseconds since the Unix epoch).

Lunations are addressed by the global index L = (year - BASE_YEAR)*13 + month,
shifted into the predictor's Meeus frame by k = L + k_offset. New-moon
boundaries are quantised to the millisecond, so a day label is always the
whole number of days elapsed since that boundary.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from ..core.time import jd_to_millis, millis_to_jd
from ..core.types import SeleneDate
from ..reference import lunar
from ..reference.constants import DEFAULT_CONSTANTS, MS_PER_DAY, SeleneConstants

log = logging.getLogger(__name__)


def lunation_index(year: int, month: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    return (year - constants.base_year) * constants.months_per_year + month


def split_lunation_index(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> Tuple[int, int]:
    """L -> (year, month) with month in 0..12, also for negative L."""
    years, month = divmod(L, constants.months_per_year)
    return years + constants.base_year, month


def new_moon_millis(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """Start of lunation L (its precise new moon) in milliseconds."""
    return jd_to_millis(lunar.new_moon_jde(L + constants.k_offset, constants), constants)


def days_in_lunation_L(L: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    return lunar.days_in_lunation(L + constants.k_offset, constants)


def actual_maximum_day(year: int, month: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """29 or 30: the number of days of the lunation labelled (year, month)."""
    return days_in_lunation_L(lunation_index(year, month, constants), constants)


# ---------------------------------------------------------
# Forward: fields -> time
# ---------------------------------------------------------

def fields_to_millis(
    year: int,
    month: int,
    day: int,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> int:
    """
    Milliseconds of the start of `day` (1-based) in lunation (year, month).

    Fields are taken leniently: a day beyond the lunation's length simply
    lands in the following lunation.
    """
    L = lunation_index(year, month, constants)
    return new_moon_millis(L, constants) + (day - 1) * MS_PER_DAY


def date_to_millis(d: SeleneDate, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    return fields_to_millis(d.year, d.month, d.day, constants)


# ---------------------------------------------------------
# Inverse: time -> fields
# ---------------------------------------------------------

def estimate_lunation_index(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """Mean-motion estimate of L for a JD; may be off by one near a boundary."""
    k_approx = (jd - constants.jde_ref) / constants.mean_synodic_month
    return math.floor(k_approx - constants.k0)


def millis_to_lunation(ms: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> Tuple[int, int]:
    """
    Milliseconds -> (L, day).

    The mean-motion estimate is first moved onto the lunation whose precise
    new moon precedes `ms` (one step either way in practice). A 29-day
    lunation is shorter than the mean month but longer than 29 days; the
    remainder after its last day is counted as day 1 of the next lunation.
    """
    L = estimate_lunation_index(millis_to_jd(ms, constants), constants)
    start = new_moon_millis(L, constants)
    while ms < start:
        log.debug("lunation estimate %d overshot", L)
        L -= 1
        start = new_moon_millis(L, constants)
    while ms >= new_moon_millis(L + 1, constants):
        log.debug("lunation estimate %d undershot", L)
        L += 1
        start = new_moon_millis(L, constants)

    day = (ms - start) // MS_PER_DAY + 1
    max_day = days_in_lunation_L(L, constants)
    if day > max_day:
        day -= max_day
        L += 1
    return L, day


def millis_to_fields(ms: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> SeleneDate:
    L, day = millis_to_lunation(ms, constants)
    year, month = split_lunation_index(L, constants)
    return SeleneDate(year=year, month=month, day=day)
