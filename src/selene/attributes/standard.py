from __future__ import annotations
from typing import Any, Dict

from ..reference import lunar, solar
from .naming import lunation_description, mean_lunation_at, naming_year_for_jd, weekday_index
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    return {"weekday_index": weekday_index(info.jd, info.constants)}

def lunation_name(info) -> Dict[str, Any]:
    c = info.constants
    year = naming_year_for_jd(info.jd, c)
    n = mean_lunation_at(info.jd, c)
    return {
        "mean_lunation": n,
        "lunation_description": lunation_description(year, n, c),
    }

def solstice_year(info) -> Dict[str, Any]:
    c = info.constants
    return {
        "solstice_year": solar.year_from_solstice(info.jd, c),
        "naming_year": naming_year_for_jd(info.jd, c),
    }

def moon_phase(info) -> Dict[str, Any]:
    c = info.constants
    n = mean_lunation_at(info.jd, c)
    age = info.jd - lunar.mean_new_moon_jd(n, c)
    return {"moon_age_days": age, "full_moon_jd": lunar.full_moon_jd(n, c)}

register_attribute("weekday", weekday)
register_attribute("lunation_name", lunation_name)
register_attribute("solstice_year", solstice_year)
register_attribute("moon_phase", moon_phase)
