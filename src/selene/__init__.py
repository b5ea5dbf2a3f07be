"""selene public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard day attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    make_calendar,
    julian_date,
    from_millis,
    to_millis,
    day_info,
    format_instant,
    current_year_from_solstice,
)
from .attributes.naming import (
    first_lunation_after_solstice,
    lunation_name,
    lunation_description,
    weekday_name,
)
from .attributes.registry import register_attribute, unregister_attribute, list_attributes
from .core.errors import SeleneError, InvalidFieldError
from .core.types import DayInfo, Field, SeleneDate, SolarEvent
from .engines.calendar import SeleneCalendar
from .reference.constants import DEFAULT_CONSTANTS, SeleneConstants
from .reference.lunar import new_moon_jde, lunation_length, days_in_lunation
from .reference.solar import solar_event_jd

__all__ = [
    "make_calendar",
    "julian_date",
    "from_millis",
    "to_millis",
    "day_info",
    "format_instant",
    "current_year_from_solstice",
    "first_lunation_after_solstice",
    "lunation_name",
    "lunation_description",
    "weekday_name",
    "register_attribute",
    "unregister_attribute",
    "list_attributes",
    "SeleneError",
    "InvalidFieldError",
    "DayInfo",
    "Field",
    "SeleneDate",
    "SolarEvent",
    "SeleneCalendar",
    "DEFAULT_CONSTANTS",
    "SeleneConstants",
    "new_moon_jde",
    "lunation_length",
    "days_in_lunation",
    "solar_event_jd",
]
