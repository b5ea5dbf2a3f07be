from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..reference.constants import DEFAULT_CONSTANTS, SeleneConstants
from .errors import InvalidFieldError


class Field(Enum):
    """The three logical Selene calendar fields."""
    YEAR = "year"
    MONTH = "month"
    DATE = "date"

    @classmethod
    def coerce(cls, field: Union["Field", str], *, op: str = "access") -> "Field":
        if isinstance(field, cls):
            return field
        if isinstance(field, str):
            key = field.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
        raise InvalidFieldError(f"Field not supported for {op}: {field!r}")


class Representation(Enum):
    """Which of the two cached representations of an instant is authoritative."""
    FIELDS = "fields"
    TIME = "time"


class SolarEvent(Enum):
    MARCH_EQUINOX = "march_equinox"
    JUNE_SOLSTICE = "june_solstice"
    SEPTEMBER_EQUINOX = "september_equinox"
    DECEMBER_SOLSTICE = "december_solstice"


@dataclass(frozen=True)
class SeleneDate:
    year: int
    month: int  # 0..12
    day: int    # 1..29 or 1..30


@dataclass(frozen=True)
class DayInfo:
    millis: int
    jd: float
    selene: SeleneDate
    weekday: str
    lunation_name: str
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
    # Calibration the instant was labelled with; attributes compute under it
    constants: SeleneConstants = field(default=DEFAULT_CONSTANTS, repr=False, compare=False)
