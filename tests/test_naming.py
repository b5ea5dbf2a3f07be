# tests/test_naming.py

import pytest
from datetime import timezone

from selene.attributes import naming
from selene.attributes.tables import LUNATION_INFO, PLANET_WEEK_DAYS
from selene.engines.calendar import SeleneCalendar
from selene.reference import lunar, solar
from selene.reference.constants import DEFAULT_CONSTANTS

C = DEFAULT_CONSTANTS
WEEK_EPOCH_MS = int((C.week_epoch - 2440587.5) * 86_400_000)


def test_tables():
    assert len(LUNATION_INFO) == 13
    assert len(PLANET_WEEK_DAYS) == 8
    assert LUNATION_INFO[0][0] == "Wolf Moon"
    assert PLANET_WEEK_DAYS[0] == "Mercva"
    assert PLANET_WEEK_DAYS[7] == "Neptuva"

def test_week_epoch_is_floor_of_start_of_time():
    assert C.week_epoch == 347998.0

def test_first_lunation_after_solstice_2024():
    n = naming.first_lunation_after_solstice(2024)
    assert n == 4
    solstice = solar.december_solstice_jd(2024)
    assert lunar.mean_new_moon_jd(n) >= solstice
    assert lunar.mean_new_moon_jd(n - 1) < solstice

def test_first_lunation_closed_form_matches_search():
    for year in range(1990, 2060):
        solstice = solar.december_solstice_jd(year)
        n = naming.first_lunation_after_solstice(year)
        assert lunar.mean_new_moon_jd(n - 1) < solstice <= lunar.mean_new_moon_jd(n)

def test_lunation_names_for_2024():
    first = naming.first_lunation_after_solstice(2024)
    names = [naming.lunation_name(2024, n) for n in range(first, first + 13)]
    assert names == [name for name, _ in LUNATION_INFO]
    assert naming.lunation_description(2024, first) == LUNATION_INFO[0][1]

def test_lunation_name_periodic_in_13():
    for n in range(-40, 40):
        assert naming.lunation_name(2030, n) == naming.lunation_name(2030, n + 13)
        assert naming.lunation_description(2030, n) == naming.lunation_description(2030, n - 13)

def test_lunation_name_before_first_is_last_of_cycle():
    first = naming.first_lunation_after_solstice(2024)
    assert naming.lunation_name(2024, first - 1) == "Hecate’s Moon"

def test_naming_year_for_jd():
    solstice = solar.december_solstice_jd(2024)
    assert naming.naming_year_for_jd(solstice + 0.1) == 2024
    assert naming.naming_year_for_jd(solstice - 0.1) == 2023

def test_lunation_name_at_january_2025():
    # 2025 January 5: first lunation after the 2024 winter solstice
    assert naming.lunation_name_at(2460680.5) == "Wolf Moon"

def test_weekday_at_epoch():
    assert naming.weekday_name(C.week_epoch) == "Mercva"
    assert naming.weekday_name(C.week_epoch + 0.999) == "Mercva"

def test_weekday_before_epoch():
    assert naming.weekday_name(C.week_epoch - 1.0) == "Neptuva"
    assert naming.weekday_name(C.week_epoch - 0.5) == "Neptuva"

def test_weekday_period_8():
    for i in range(-20, 20):
        jd = 2460000.25 + i
        assert naming.weekday_name(jd) == naming.weekday_name(jd + 8)
        assert naming.weekday_index(jd + 1) == (naming.weekday_index(jd) + 1) % 8

def test_planet_week_cycle_with_millis():
    cal = SeleneCalendar(timezone.utc, time_in_millis=0)
    ms = WEEK_EPOCH_MS
    for i in range(16):
        assert cal.weekday(ms, apply_timezone=True) == PLANET_WEEK_DAYS[i % 8]
        ms += 86_400_000

def test_planet_week_negative_time():
    cal = SeleneCalendar(timezone.utc, time_in_millis=0)
    assert cal.weekday(WEEK_EPOCH_MS - 86_400_000) == "Neptuva"

def test_calendar_delegates_naming():
    cal = SeleneCalendar(timezone.utc, time_in_millis=0)
    assert cal.first_lunation_after_solstice(2024) == 4
    assert cal.lunation_name(2024, 4) == "Wolf Moon"
    assert cal.lunation_description(2024, 5) == LUNATION_INFO[1][1]
