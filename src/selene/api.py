from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from .attributes import naming
from .attributes.registry import compute_attributes
from .core import time as ct
from .core.types import DayInfo, SeleneDate
from .engines import conversion as cv
from .engines.calendar import SeleneCalendar
from .reference import solar
from .reference.constants import DEFAULT_CONSTANTS, SeleneConstants


def make_calendar(
    tz: ct.TzLike = None,
    locale: Optional[str] = None,
    *,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
    time_in_millis: Optional[int] = None,
) -> SeleneCalendar:
    return SeleneCalendar(tz, locale, constants=constants, time_in_millis=time_in_millis)

def julian_date(
    ms: int,
    *,
    tz: ct.TzLike = None,
    apply_timezone: bool = False,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> float:
    return ct.julian_date(ms, tz=tz, apply_timezone=apply_timezone, constants=constants)

def from_millis(ms: int, *, constants: SeleneConstants = DEFAULT_CONSTANTS) -> SeleneDate:
    return cv.millis_to_fields(ms, constants)

def to_millis(d: SeleneDate, *, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    return cv.date_to_millis(d, constants)

def day_info(
    ms: int,
    *,
    attributes: Sequence[str] = (),
    tz: ct.TzLike = None,
    apply_timezone: bool = False,
    debug: bool = False,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> DayInfo:
    jd = ct.julian_date(ms, tz=tz, apply_timezone=apply_timezone, constants=constants)
    L, day = cv.millis_to_lunation(ms, constants)
    year, month = cv.split_lunation_index(L, constants)
    dbg = None
    if debug:
        dbg = {
            "lunation_index": L,
            "k": L + constants.k_offset,
            "new_moon_ms": cv.new_moon_millis(L, constants),
            "days_in_lunation": cv.days_in_lunation_L(L, constants),
        }
    info = DayInfo(
        millis=ms,
        jd=jd,
        selene=SeleneDate(year=year, month=month, day=day),
        weekday=naming.weekday_name(jd, constants),
        lunation_name=naming.lunation_name_at(jd, constants),
        debug=dbg,
        constants=constants,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def format_instant(
    ms: int,
    *,
    tz: ct.TzLike = None,
    apply_timezone: bool = False,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> str:
    """
    Human-readable Selene date for `ms`: year, lunation number and name, day,
    8-day weekday and the Julian Date. Pure: no SeleneCalendar state is used.
    """
    info = day_info(ms, tz=tz, apply_timezone=apply_timezone, constants=constants)
    d = info.selene
    return (
        f"Selene Date: Year {d.year}, Lunation {d.month} {info.lunation_name}, "
        f"Day {d.day}, Weekday {info.weekday}, JD {info.jd:.6f}"
    )

def current_year_from_solstice(
    ms: Optional[int] = None,
    *,
    tz: ct.TzLike = None,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> int:
    """Selene solar year of `ms` (default: now), on the local wall clock."""
    if ms is None:
        ms = ct.now_millis()
    jd = ct.julian_date(ms, tz=tz, apply_timezone=True, constants=constants)
    return solar.year_from_solstice(jd, constants)
