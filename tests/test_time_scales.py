# tests/test_time_scales.py

import math
from datetime import date, datetime, timezone

import pytest

from chronastro.core.errors import InvalidArgumentError, OutOfRangeError
from chronastro.core.time import datetime_utc_to_jd
from chronastro.core.types import LeapSecondEvent
from chronastro.reference import astro_args as aa
from chronastro.reference import deltat as dt
from chronastro.reference import time_scales as ts


def test_ut1_to_tt_adds_delta_t():
    jd = 2451545.0
    tt = ts.ut1_to_tt(jd)
    assert (tt - jd) * 86400.0 == pytest.approx(dt.delta_t_for_jd(jd), abs=1e-6)


def test_injected_delta_t():
    const = lambda jd: 60.0
    assert ts.ut1_to_tt(2451545.0, const) == pytest.approx(2451545.0 + 60.0 / 86400.0, abs=1e-12)
    assert ts.tt_to_ut1(2451545.0, const) == pytest.approx(2451545.0 - 60.0 / 86400.0, abs=1e-12)


@pytest.mark.parametrize("jd", [2415200.5, 2443189.5, 2451545.0, 2467634.5, 2488069.5])
def test_ut1_tt_round_trip(jd):
    assert ts.tt_to_ut1(ts.ut1_to_tt(jd)) == pytest.approx(jd, abs=1e-9)
    assert ts.ut1_to_tt(ts.tt_to_ut1(jd)) == pytest.approx(jd, abs=1e-9)


def test_round_trip_with_meeus_model():
    fn = ts.make_delta_t_fn("meeus")
    assert fn(2443189.5) == dt.delta_t_for_jd(2443189.5, "meeus")
    assert ts.tt_to_ut1(ts.ut1_to_tt(2443189.5, fn), fn) == pytest.approx(2443189.5, abs=1e-9)


def test_tt_tai_offset():
    assert (ts.tai_to_tt(2451545.0) - 2451545.0) * 86400.0 == pytest.approx(32.184, abs=1e-6)
    assert ts.tt_to_tai(ts.tai_to_tt(2451545.0)) == pytest.approx(2451545.0, abs=1e-12)


def test_j2000_utc():
    # 2000-01-01 11:58:55.816 UTC + 32 s leap + 32.184 s = 12:00:00 TT
    jd_utc = datetime_utc_to_jd(ts.J2000_UTC)
    assert jd_utc + (32.0 + ts.TT_MINUS_TAI) / 86400.0 == pytest.approx(aa.J2000_TT, abs=1e-8)


def test_tai_minus_utc_values():
    assert ts.tai_minus_utc(date(1972, 1, 1)) == 10
    assert ts.tai_minus_utc(date(1990, 1, 1)) == 25
    assert ts.tai_minus_utc(date(2000, 1, 1)) == 32
    assert ts.tai_minus_utc(date(2017, 1, 1)) == 37


def test_leap_second_takes_effect_next_day():
    before = datetime(2016, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
    after = datetime(2017, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    assert ts.tai_minus_utc(before) == 36
    assert ts.tai_minus_utc(after) == 37


def test_tai_minus_utc_before_1972():
    with pytest.raises(OutOfRangeError):
        ts.tai_minus_utc(date(1971, 12, 31))


def test_custom_leap_second_list():
    events = [LeapSecondEvent(date(1980, 6, 30), 1), LeapSecondEvent(date(1990, 6, 30), -1)]
    assert ts.total_leap_seconds(date(1985, 1, 1), events) == 1
    assert ts.total_leap_seconds(date(1995, 1, 1), events) == 0
    assert ts.tai_minus_utc(date(1985, 1, 1), events) == 11


def test_total_leap_seconds_bundled():
    assert ts.total_leap_seconds(date(2020, 1, 1)) == 27


@pytest.mark.parametrize("d, expected", [
    (date(1990, 1, 1), 32.184 + 25 - 56.8946),
    (date(2000, 1, 1), 32.184 + 32 - 63.86),
])
def test_dut1_nasa(d, expected):
    dut1 = ts.ut1_minus_utc(d)
    assert dut1 == pytest.approx(expected, abs=1e-3)
    assert abs(dut1) < 0.9


def test_dut1_uses_injected_delta_t():
    dut1 = ts.ut1_minus_utc(date(2000, 1, 1), delta_t_fn=lambda jd: 64.184)
    assert dut1 == pytest.approx(32.184 + 32 - 64.184)

    meeus = ts.ut1_minus_utc(date(2000, 1, 1), delta_t_fn=ts.make_delta_t_fn("meeus"))
    assert meeus == pytest.approx(32.184 + 32 - 65.0)


def test_dut1_requires_aware_datetime():
    with pytest.raises(InvalidArgumentError):
        ts.ut1_minus_utc(datetime(2000, 1, 1))


def test_earth_rotation_angle_2017():
    expected = math.radians(aa.dms_to_deg(100, 37, 12.4365))
    assert ts.earth_rotation_angle(2457754.5) == pytest.approx(expected, abs=aa.arcsec_to_rad(0.001))


def test_earth_rotation_angle_at_j2000():
    assert ts.earth_rotation_angle(aa.J2000_TT) == pytest.approx(aa.TAU * 0.7790572732640, abs=1e-12)


def test_earth_rotation_angle_range():
    for k in range(200):
        era = ts.earth_rotation_angle(2451545.0 + k * 13.37)
        assert 0.0 <= era < aa.TAU


def test_mars_sol_date():
    assert ts.mars_sol_date(2405522.0) == 0.0
    assert ts.mars_sol_date(2405522.0 + 1.02749) == pytest.approx(1.0)
