from __future__ import annotations
from typing import Protocol, Union

from .types import Field


class HostCalendar(Protocol):
    """
    Generic field-storage calendar that a concrete calendar system plugs into.

    The host owns the field slots and the dirty-flag convention; an
    implementation supplies the conversion between fields and time.
    """
    @property
    def time_in_millis(self) -> int: ...

    def compute_time(self) -> None:
        """Recompute the time value from the fields."""
        ...

    def compute_fields(self) -> None:
        """Recompute the fields from the time value."""
        ...

    def complete(self) -> None:
        """Bring stale fields up to date."""
        ...

    def get(self, field: Union[Field, str]) -> int: ...
    def set(self, field: Union[Field, str], value: int) -> None: ...
    def add(self, field: Union[Field, str], amount: int) -> None: ...
    def roll(self, field: Union[Field, str], up: bool) -> None: ...
