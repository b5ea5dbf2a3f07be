"""
selene.engines.calendar
-----------------------
The stateful engine. Holds one instant in two representations, the Selene
fields (year, month, day) and the time value in milliseconds, and keeps at
most one of them authoritative. The other is derived on demand through
:mod:`selene.engines.conversion`.

Instances are not safe for concurrent mutation.
"""

from __future__ import annotations

import locale as _locale
import logging
import sys
from dataclasses import replace
from typing import Any, Dict, Optional, Union

from ..attributes import naming
from ..core import time as ct
from ..core.errors import InvalidFieldError
from ..core.types import Field, Representation, SeleneDate
from ..reference import lunar, solar
from ..reference.constants import DEFAULT_CONSTANTS, SeleneConstants
from . import conversion as cv

log = logging.getLogger(__name__)

FieldLike = Union[Field, str]

_MINIMUM = {Field.YEAR: -sys.maxsize - 1, Field.MONTH: 0, Field.DATE: 1}
_MAXIMUM = {Field.YEAR: sys.maxsize, Field.MONTH: 12, Field.DATE: 30}


class SeleneCalendar:
    """
    Selene calendar over a continuous millisecond time value.

    Implements :class:`selene.core.engine.HostCalendar`.
    """

    def __init__(
        self,
        tz: ct.TzLike = None,
        locale: Optional[str] = None,
        *,
        constants: SeleneConstants = DEFAULT_CONSTANTS,
        time_in_millis: Optional[int] = None,
    ):
        self.tz = ct.resolve_tz(tz)
        self.locale = locale if locale is not None else _default_locale()
        self.constants = constants

        self._time = ct.now_millis() if time_in_millis is None else int(time_in_millis)
        self._fields = SeleneDate(year=constants.base_year, month=0, day=1)
        # Fields are derived lazily on first read
        self._authoritative: Optional[Representation] = Representation.TIME

    # ---------------------------------------------------------
    # Representations
    # ---------------------------------------------------------

    @property
    def authoritative(self) -> Optional[Representation]:
        """Representation the other one must be derived from; None when in sync."""
        return self._authoritative

    @property
    def time_in_millis(self) -> int:
        if self._authoritative is Representation.FIELDS:
            self.compute_time()
        return self._time

    @time_in_millis.setter
    def time_in_millis(self, ms: int) -> None:
        self._time = int(ms)
        self._authoritative = Representation.TIME

    def compute_time(self) -> None:
        """
        Time value from the fields. Fields are taken leniently (month 13,
        day 40, ...) and then replaced by the normalised fields of the
        resulting time.
        """
        f = self._fields
        self._time = cv.fields_to_millis(f.year, f.month, f.day, self.constants)
        self._fields = cv.millis_to_fields(self._time, self.constants)
        self._authoritative = None
        if self._fields != f:
            log.debug("fields %s normalised to %s", f, self._fields)
        log.debug("fields %s -> time %d", f, self._time)

    def compute_fields(self) -> None:
        self._fields = cv.millis_to_fields(self._time, self.constants)
        self._authoritative = None
        log.debug("time %d -> fields %s", self._time, self._fields)

    def complete(self) -> None:
        if self._authoritative is Representation.TIME:
            self.compute_fields()

    def clear(self) -> None:
        """Reset the fields to day 1 of the first lunation of BASE_YEAR."""
        self._fields = SeleneDate(year=self.constants.base_year, month=0, day=1)
        self._authoritative = Representation.FIELDS

    def copy(self) -> "SeleneCalendar":
        other = SeleneCalendar(self.tz, self.locale, constants=self.constants, time_in_millis=self._time)
        other._fields = self._fields
        other._authoritative = self._authoritative
        return other

    # ---------------------------------------------------------
    # Field access
    # ---------------------------------------------------------

    def get(self, field: FieldLike) -> int:
        f = Field.coerce(field, op="get")
        self.complete()
        return self._get_raw(f)

    def set(self, field: FieldLike, value: int) -> None:
        f = Field.coerce(field, op="set")
        self.complete()
        self._set_raw(f, value)

    def set_date(self, year: int, month: int, day: int) -> None:
        self._fields = SeleneDate(year=int(year), month=int(month), day=int(day))
        self._authoritative = Representation.FIELDS

    def to_date(self) -> SeleneDate:
        self.complete()
        return self._fields

    @property
    def lunation_index(self) -> int:
        """Global lunation index L of the current fields."""
        self.complete()
        return cv.lunation_index(self._fields.year, self._fields.month, self.constants)

    def _get_raw(self, f: Field) -> int:
        if f is Field.YEAR:
            return self._fields.year
        if f is Field.MONTH:
            return self._fields.month
        return self._fields.day

    def _set_raw(self, f: Field, value: int) -> None:
        key = {Field.YEAR: "year", Field.MONTH: "month", Field.DATE: "day"}[f]
        self._fields = replace(self._fields, **{key: int(value)})
        self._authoritative = Representation.FIELDS

    # ---------------------------------------------------------
    # Field arithmetic
    # ---------------------------------------------------------

    def add(self, field: FieldLike, amount: int) -> None:
        """Add `amount` to a field, carrying into the larger fields."""
        f = Field.coerce(field, op="add")
        self.complete()
        if f is Field.YEAR:
            self._set_raw(Field.YEAR, self._fields.year + amount)
            self._pin_date()
        elif f is Field.MONTH:
            self._add_months(amount)
            self._pin_date()
        else:
            self._add_days(amount)
        self.compute_time()

    def _add_months(self, amount: int) -> None:
        years, month = divmod(self._fields.month + amount, self.constants.months_per_year)
        if years:
            self._set_raw(Field.YEAR, self._fields.year + years)
        self._set_raw(Field.MONTH, month)

    def _pin_date(self) -> None:
        # Day 30 moved into a 29-day lunation becomes day 29
        max_date = self._actual_maximum_date()
        if self._fields.day > max_date:
            self._set_raw(Field.DATE, max_date)

    def _add_days(self, amount: int) -> None:
        # One lunation per iteration
        self._set_raw(Field.DATE, self._fields.day + amount)
        while self._fields.day > self._actual_maximum_date():
            self._set_raw(Field.DATE, self._fields.day - self._actual_maximum_date())
            self._add_months(1)
            log.debug("date overflow carried into %s", self._fields)
        while self._fields.day < _MINIMUM[Field.DATE]:
            self._add_months(-1)
            self._set_raw(Field.DATE, self._fields.day + self._actual_maximum_date())
            log.debug("date underflow borrowed from %s", self._fields)

    def roll(self, field: FieldLike, up: bool) -> None:
        """Step a field by one, wrapping within its range without touching larger fields."""
        f = Field.coerce(field, op="roll")
        self.complete()
        if f is Field.YEAR:
            self._set_raw(Field.YEAR, self._fields.year + (1 if up else -1))
            self._pin_date()
        elif f is Field.MONTH:
            n = self.constants.months_per_year
            self._set_raw(Field.MONTH, (self._fields.month + (1 if up else -1)) % n)
            self._pin_date()
        else:
            max_date = self._actual_maximum_date()
            date = self._fields.day
            if up:
                date = date % max_date + 1
            else:
                date = (date - 2) % max_date + 1
            self._set_raw(Field.DATE, date)
        self.compute_time()

    # ---------------------------------------------------------
    # Bounds
    # ---------------------------------------------------------

    def get_minimum(self, field: FieldLike) -> int:
        return _MINIMUM[Field.coerce(field, op="get_minimum")]

    def get_maximum(self, field: FieldLike) -> int:
        return _MAXIMUM[Field.coerce(field, op="get_maximum")]

    def get_greatest_minimum(self, field: FieldLike) -> int:
        return self.get_minimum(field)

    def get_least_maximum(self, field: FieldLike) -> int:
        return self.get_maximum(field)

    def get_actual_minimum(self, field: FieldLike) -> int:
        return self.get_minimum(field)

    def get_actual_maximum(self, field: FieldLike) -> int:
        """Like get_maximum, but DATE is 29 or 30 for the current lunation."""
        f = Field.coerce(field, op="get_actual_maximum")
        if f is Field.DATE:
            self.complete()
            return self._actual_maximum_date()
        return _MAXIMUM[f]

    def _actual_maximum_date(self) -> int:
        return cv.actual_maximum_day(self._fields.year, self._fields.month, self.constants)

    # ---------------------------------------------------------
    # Astronomical queries (never mutate the engine)
    # ---------------------------------------------------------

    def julian_date(self, ms: int, apply_timezone: bool = False) -> float:
        return ct.julian_date(ms, tz=self.tz, apply_timezone=apply_timezone, constants=self.constants)

    def current_julian_date(self, apply_timezone: bool = True) -> float:
        return self.julian_date(ct.now_millis(), apply_timezone)

    def days_in_lunation(self, k: int) -> int:
        return lunar.days_in_lunation(k, self.constants)

    def december_solstice_jd(self, year: int) -> float:
        return solar.december_solstice_jd(year, self.constants)

    def first_lunation_after_solstice(self, year: int) -> int:
        return naming.first_lunation_after_solstice(year, self.constants)

    def lunation_name(self, year: int, lunation: int) -> str:
        return naming.lunation_name(year, lunation, self.constants)

    def lunation_description(self, year: int, lunation: int) -> str:
        return naming.lunation_description(year, lunation, self.constants)

    def weekday(self, ms: int, apply_timezone: bool = False) -> str:
        return naming.weekday_name(self.julian_date(ms, apply_timezone), self.constants)

    def current_year_from_solstice(self) -> int:
        return solar.year_from_solstice(self.current_julian_date(), self.constants)

    # ---------------------------------------------------------
    # Misc
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "tz": str(self.tz),
            "locale": self.locale,
            "authoritative": None if self._authoritative is None else self._authoritative.value,
            "k_offset": self.constants.k_offset,
        }

    def __repr__(self) -> str:
        f = self.to_date()
        return f"SeleneCalendar(year={f.year}, month={f.month}, day={f.day}, time={self.time_in_millis})"


def _default_locale() -> Optional[str]:
    return _locale.getlocale(_locale.LC_TIME)[0]
