# tests/test_solar.py

import pytest

from selene.core.types import SolarEvent
from selene.reference import solar
from selene.reference.constants import DEFAULT_CONSTANTS


def test_winter_solstice_2024():
    assert solar.december_solstice_jd(2024) == pytest.approx(2460665.888889, abs=0.01)

def test_calibration_year_returns_reference_instants():
    c = DEFAULT_CONSTANTS
    assert solar.march_equinox_jd(2024) == c.jd_march_equinox
    assert solar.june_solstice_jd(2024) == c.jd_june_solstice
    assert solar.september_equinox_jd(2024) == c.jd_september_equinox
    assert solar.december_solstice_jd(2024) == c.jd_december_solstice

def test_linear_extrapolation_by_tropical_year():
    for kind in SolarEvent:
        a = solar.solar_event_jd(kind, 1990)
        b = solar.solar_event_jd(kind, 2030)
        assert b - a == pytest.approx(40 * 365.2422)

def test_solar_event_accepts_value_string():
    assert solar.solar_event_jd("june_solstice", 2025) == solar.june_solstice_jd(2025)

def test_unknown_solar_event_rejected():
    with pytest.raises(ValueError):
        solar.solar_event_jd("autumn", 2025)

def test_events_ordered_within_year():
    y = 2031
    assert (
        solar.march_equinox_jd(y)
        < solar.june_solstice_jd(y)
        < solar.september_equinox_jd(y)
        < solar.december_solstice_jd(y)
    )

def test_year_from_solstice():
    c = DEFAULT_CONSTANTS
    assert solar.year_from_solstice(c.jd_first_solstice) == 1
    assert solar.year_from_solstice(c.jd_first_solstice - 1.0) == 0
    # 2024 June 1, 0h UT: Gregorian year + 3760 before the December solstice
    assert solar.year_from_solstice(2460462.5) == 5784
    # 2025 January 1 is past the 2024 December solstice
    assert solar.year_from_solstice(2460676.5) == 5785
