# reference/solar.py

from __future__ import annotations

import math
from typing import Union

from ..core.types import SolarEvent
from .constants import DEFAULT_CONSTANTS, SeleneConstants


def _reference_jd(kind: SolarEvent, constants: SeleneConstants) -> float:
    return {
        SolarEvent.MARCH_EQUINOX: constants.jd_march_equinox,
        SolarEvent.JUNE_SOLSTICE: constants.jd_june_solstice,
        SolarEvent.SEPTEMBER_EQUINOX: constants.jd_september_equinox,
        SolarEvent.DECEMBER_SOLSTICE: constants.jd_december_solstice,
    }[kind]


def solar_event_jd(
    kind: Union[SolarEvent, str],
    year: int,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> float:
    """
    Equinox/solstice of the given civil year, extrapolated linearly from the
    calibration year by whole tropical years. No periodic terms.
    """
    kind = SolarEvent(kind)
    return _reference_jd(kind, constants) + (year - constants.constants_year) * constants.tropical_year


def march_equinox_jd(year: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return solar_event_jd(SolarEvent.MARCH_EQUINOX, year, constants)


def june_solstice_jd(year: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return solar_event_jd(SolarEvent.JUNE_SOLSTICE, year, constants)


def september_equinox_jd(year: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return solar_event_jd(SolarEvent.SEPTEMBER_EQUINOX, year, constants)


def december_solstice_jd(year: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    return solar_event_jd(SolarEvent.DECEMBER_SOLSTICE, year, constants)


def year_from_solstice(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """Selene year counted in tropical years from the first solstice (year 1)."""
    years_passed = (jd - constants.jd_first_solstice) / constants.tropical_year
    return math.floor(years_passed) + 1
