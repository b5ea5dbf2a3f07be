"""
selene.attributes.naming
------------------------
Read-only labels: lunation names (a 13-cycle restarting at the first new moon
after each December solstice) and the 8-day planetary week.

Lunation numbers here are in the mean frame of
:func:`selene.reference.lunar.mean_new_moon_jd` (lunation 0 at ``jd_0``).
"""

from __future__ import annotations

import math

from ..reference import solar
from ..reference.constants import DEFAULT_CONSTANTS, SeleneConstants
from .tables import LUNATION_INFO, PLANET_WEEK_DAYS


def first_lunation_after_solstice(year: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """
    First mean lunation whose new moon falls on or after the December solstice
    of civil `year`. Closed form; new moons are close enough to uniform.
    """
    winter_solstice = solar.december_solstice_jd(year, constants)
    return math.ceil((winter_solstice - constants.jd_0) / constants.mean_synodic_month)


def lunation_name_index(year: int, lunation: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    return (lunation - first_lunation_after_solstice(year, constants)) % len(LUNATION_INFO)


def lunation_name(year: int, lunation: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> str:
    return LUNATION_INFO[lunation_name_index(year, lunation, constants)][0]


def lunation_description(year: int, lunation: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> str:
    return LUNATION_INFO[lunation_name_index(year, lunation, constants)][1]


def mean_lunation_at(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """Mean lunation containing `jd`."""
    return math.floor((jd - constants.jd_0) / constants.mean_synodic_month)


def naming_year_for_jd(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """Civil year of the last December solstice before `jd`."""
    since = (jd - constants.jd_december_solstice) / constants.tropical_year
    return constants.constants_year + math.floor(since)


def lunation_name_at(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> str:
    """Name of the lunation containing `jd`."""
    return lunation_name(naming_year_for_jd(jd, constants), mean_lunation_at(jd, constants), constants)


def weekday_index(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    days_since_epoch = math.floor(jd - constants.week_epoch)
    return days_since_epoch % len(PLANET_WEEK_DAYS)


def weekday_name(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> str:
    return PLANET_WEEK_DAYS[weekday_index(jd, constants)]
