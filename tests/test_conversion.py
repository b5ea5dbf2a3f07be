# tests/test_conversion.py

import random

import pytest

from selene.core import time as ct
from selene.core.types import SeleneDate
from selene.engines import conversion as cv
from selene.reference import lunar
from selene.reference.constants import DEFAULT_CONSTANTS, MS_PER_DAY

C = DEFAULT_CONSTANTS


def test_k_offset_calibration():
    assert C.k0 == pytest.approx(-71232.97, abs=0.01)
    assert C.k_offset == -71233

def test_lunation_index_bijection():
    for L in range(-40, 40):
        year, month = cv.split_lunation_index(L)
        assert 0 <= month <= 12
        assert cv.lunation_index(year, month) == L
    assert cv.split_lunation_index(0) == (1, 0)
    assert cv.split_lunation_index(-1) == (0, 12)
    assert cv.split_lunation_index(13) == (2, 0)

def test_start_of_time_is_lunation_0_day_1():
    ms = ct.jd_to_millis(C.jd_start_of_time)
    L, day = cv.millis_to_lunation(ms)
    assert (L, day) == (0, 1)
    assert cv.millis_to_fields(ms) == SeleneDate(year=1, month=0, day=1)

def test_one_full_lunation_after_start_is_next_month_day_1():
    days = cv.days_in_lunation_L(0)
    ms = cv.new_moon_millis(0) + days * MS_PER_DAY
    assert cv.millis_to_fields(ms) == SeleneDate(year=1, month=1, day=1)

def test_29_days_into_a_29_day_lunation_starts_the_next():
    # lunation L=6 of year 1 is short
    assert cv.days_in_lunation_L(6) == 29
    ms = cv.new_moon_millis(6) + 29 * MS_PER_DAY
    assert cv.millis_to_fields(ms) == SeleneDate(year=1, month=7, day=1)
    ms = cv.new_moon_millis(6) + 28 * MS_PER_DAY
    assert cv.millis_to_fields(ms) == SeleneDate(year=1, month=6, day=29)

def test_every_lunation_rolls_over_after_its_last_day():
    for L in range(-30, 30):
        days = cv.days_in_lunation_L(L)
        last = cv.new_moon_millis(L) + (days - 1) * MS_PER_DAY
        assert cv.millis_to_lunation(last) == (L, days)
        assert cv.millis_to_lunation(last + MS_PER_DAY) == (L + 1, 1)

def test_instant_before_new_moon_belongs_to_previous_lunation():
    for L in range(75000, 75030):
        ms = cv.new_moon_millis(L) - 1
        prev_days = cv.days_in_lunation_L(L - 1)
        expected = (L - 1, 30) if prev_days == 30 else (L, 1)
        assert cv.millis_to_lunation(ms) == expected

def test_fields_to_millis_is_new_moon_plus_days():
    L = cv.lunation_index(5780, 3)
    nm = lunar.new_moon_jde(L + C.k_offset)
    ms = cv.fields_to_millis(5780, 3, 1)
    assert ct.millis_to_jd(ms) == pytest.approx(nm, abs=1e-8)
    assert cv.fields_to_millis(5780, 3, 11) - ms == 10 * MS_PER_DAY

def test_round_trip_random_dates():
    random.seed(42)
    for _ in range(2000):
        year = random.randint(-200, 7000)
        month = random.randint(0, 12)
        day = random.randint(1, cv.actual_maximum_day(year, month))
        d = SeleneDate(year, month, day)
        assert cv.millis_to_fields(cv.date_to_millis(d)) == d

def test_round_trip_every_day_of_a_year():
    for month in range(13):
        for day in range(1, cv.actual_maximum_day(5780, month) + 1):
            d = SeleneDate(5780, month, day)
            assert cv.millis_to_fields(cv.date_to_millis(d)) == d

def test_time_to_fields_to_time_is_stable():
    random.seed(7)
    for _ in range(500):
        ms = random.randint(-10**13, 10**13)
        d = cv.millis_to_fields(ms)
        start = cv.date_to_millis(d)
        assert abs(ms - start) < 2 * MS_PER_DAY
        assert cv.millis_to_fields(start) == d

def test_lenient_day_overflow_lands_in_next_lunation():
    days = cv.actual_maximum_day(5780, 0)
    ms = cv.fields_to_millis(5780, 0, days + 1)
    assert cv.millis_to_fields(ms) == SeleneDate(5780, 1, 1)
