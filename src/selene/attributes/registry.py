"""
selene.attributes.registry
--------------------------
Named per-day attributes. Each provider maps a :class:`DayInfo` to a dict of
extra keys, computed under ``info.constants``; ``day_info(attributes=...)``
merges the requested providers in the order given.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_PROVIDERS: Dict[str, AttrFunc] = {}


def register_attribute(name: str, fn: AttrFunc, *, replace: bool = False) -> None:
    """Register a provider; an existing name is only overwritten with replace=True."""
    if not callable(fn):
        raise TypeError(f"Attribute provider for '{name}' is not callable")
    if name in _PROVIDERS and not replace:
        raise ValueError(f"Attribute '{name}' is already registered")
    _PROVIDERS[name] = fn


def unregister_attribute(name: str) -> None:
    if name not in _PROVIDERS:
        raise KeyError(f"Unknown attribute '{name}'")
    del _PROVIDERS[name]


def list_attributes() -> List[str]:
    return sorted(_PROVIDERS)


def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    missing = [n for n in names if n not in _PROVIDERS]
    if missing:
        raise KeyError(f"Unknown attribute(s) {missing}. Available: {list_attributes()}")
    merged: Dict[str, Any] = {}
    for name in names:
        merged.update(_PROVIDERS[name](info))
    return merged
