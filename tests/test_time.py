# tests/test_time.py

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from chronastro.core import time as ct
from chronastro.core.errors import InvalidArgumentError, OutOfRangeError


def test_leap_years():
    assert ct.is_leap_year(2000)
    assert ct.is_leap_year(2024)
    assert not ct.is_leap_year(1900)
    assert not ct.is_leap_year(2023)
    assert ct.is_leap_year(0)
    assert ct.days_in_month(2024, 2) == 29
    assert ct.days_in_month(2023, 2) == 28
    assert ct.days_in_year(1900) == 365


def test_days_in_month_rejects_bad_month():
    with pytest.raises(InvalidArgumentError):
        ct.days_in_month(2000, 13)
    with pytest.raises(ValueError):
        ct.days_in_month(2000, 0)


def test_day_of_year():
    assert ct.day_of_year(2023, 1, 1) == 1
    assert ct.day_of_year(2024, 12, 31) == 366
    assert ct.day_of_year(2023, 3, 1) == 60


def test_jdn_known_values():
    assert ct.ymd_to_jdn(2000, 1, 1) == 2451545
    assert ct.ymd_to_jdn(1970, 1, 1) == 2440588
    assert ct.jdn_to_ymd(2451545) == (2000, 1, 1)


def test_jdn_roundtrip():
    random.seed(42)
    for _ in range(5000):
        jdn = random.randint(1000000, 5373484)
        assert ct.ymd_to_jdn(*ct.jdn_to_ymd(jdn)) == jdn


def test_year_bounds():
    assert ct.year_start_jd(2000) == 2451544.5
    assert ct.year_end_jd(2000) - ct.year_start_jd(2000) == 366.0
    assert ct.date_to_jd(date(2000, 1, 1)) == 2451544.5


def test_datetime_jd_roundtrip():
    random.seed(7)
    for _ in range(500):
        jd = random.uniform(2400000.5, 2500000.5)
        dt = ct.jd_to_datetime_utc(jd)
        assert dt.tzinfo is not None
        assert ct.datetime_utc_to_jd(dt) == pytest.approx(jd, abs=1e-8)


def test_datetime_to_jd_converts_offsets():
    a = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
    b = datetime(2000, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ct.datetime_utc_to_jd(a) == 2451545.0
    assert ct.datetime_utc_to_jd(b) == 2451545.0


def test_naive_datetime_rejected():
    with pytest.raises(InvalidArgumentError):
        ct.datetime_utc_to_jd(datetime(2000, 1, 1))


def test_jd_outside_datetime_range():
    with pytest.raises(OutOfRangeError):
        ct.jd_to_datetime_utc(1000000.0)
