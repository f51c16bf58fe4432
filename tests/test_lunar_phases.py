# tests/test_lunar_phases.py

from datetime import date, datetime, timezone

import pytest

from chronastro.core.errors import InvalidArgumentError, OutOfRangeError
from chronastro.core.time import datetime_utc_to_jd, date_to_jd
from chronastro.core.types import LunarPhaseKind
from chronastro.reference import lunar

ONE_MINUTE = 60.0 / 86400.0


def _jd(*args):
    return datetime_utc_to_jd(datetime(*args, tzinfo=timezone.utc))


def test_phase_jde_new_moon_meeus_49a():
    """Meeus example 49.a: new moon k = -283, JDE 2443192.65118 (1977 Feb 18, 3h37m40s TD)"""
    T = (2443192.65118 - 2451545.0) / 36525.0
    assert lunar.phase_jde(-283.0, T) == pytest.approx(2443192.65118, abs=2e-5)


def test_phase_jde_last_quarter_meeus_49b():
    """Meeus example 49.b: last quarter k = 544.75, JDE 2467636.49186 (2044 Jan 21, 23h48m17s TD)"""
    T = (2467636.49186 - 2451545.0) / 36525.0
    assert lunar.phase_jde(544.75, T) == pytest.approx(2467636.49186, abs=2e-5)


def test_nearest_phase_1977():
    # 4k = -1132.49 rounds to the new moon k = -283
    ph = lunar.lunar_phase_near(_jd(1977, 2, 15))
    assert ph.kind is LunarPhaseKind.NEW_MOON
    assert ph.lunation == -283.0
    assert ph.jd == pytest.approx(_jd(1977, 2, 18, 3, 36), abs=ONE_MINUTE)


def test_nearest_phase_2044():
    ph = lunar.lunar_phase_near(_jd(2044, 1, 20))
    assert ph.kind is LunarPhaseKind.THIRD_QUARTER
    assert ph.lunation == 544.75
    assert ph.jd == pytest.approx(_jd(2044, 1, 21, 23, 46), abs=ONE_MINUTE)


def test_nearest_phase_follows_mean_quarter():
    # halfway between the mean third quarter k = -0.25 and the mean new moon k = 0
    mid = lunar.LUNATION_0_JD - lunar.DAYS_PER_LUNATION / 8.0
    before = lunar.lunar_phase_near(mid - 0.01)
    after = lunar.lunar_phase_near(mid + 0.01)
    assert (before.kind, before.lunation) == (LunarPhaseKind.THIRD_QUARTER, -0.25)
    assert (after.kind, after.lunation) == (LunarPhaseKind.NEW_MOON, 0.0)


def test_nearest_phase_of_kind():
    ph = lunar.lunar_phase_near(_jd(1977, 2, 15), kind=LunarPhaseKind.FULL_MOON)
    assert ph.kind is LunarPhaseKind.FULL_MOON
    assert ph.lunation == -283.5
    assert (ph.datetime.year, ph.datetime.month) == (1977, 2)

    assert lunar.lunar_phase_near(_jd(1977, 2, 15), kind=0).lunation == -283.0


def test_nearest_phase_rejects_bad_kind():
    with pytest.raises(InvalidArgumentError):
        lunar.lunar_phase_near(_jd(1977, 2, 15), kind=4)


def test_phase_datetime_property():
    ph = lunar.lunar_phase_near(_jd(2044, 1, 20))
    dt = ph.datetime
    assert dt.tzinfo is not None
    assert (dt.year, dt.month, dt.day, dt.hour) == (2044, 1, 21, 23)


def test_lunation_zero():
    ph = lunar.lunar_phase_for_lunation(0.0)
    assert ph.kind is LunarPhaseKind.NEW_MOON
    assert ph.jd == pytest.approx(lunar.LUNATION_0_JD, abs=ONE_MINUTE)


def test_phases_in_year_2023():
    phases = lunar.lunar_phases_in_year(2023)
    start, end = date_to_jd(date(2023, 1, 1)), date_to_jd(date(2024, 1, 1))

    assert 48 <= len(phases) <= 50
    assert all(start <= p.jd <= end for p in phases)
    assert [p.jd for p in phases] == sorted(p.jd for p in phases)
    for a, b in zip(phases, phases[1:]):
        assert b.kind == (a.kind + 1) % 4
        assert b.lunation == a.lunation + 0.25

    # the first quarter of 2022-12-30 is excluded
    first = phases[0]
    assert first.kind is LunarPhaseKind.FULL_MOON
    assert first.jd == pytest.approx(_jd(2023, 1, 6, 23, 8), abs=5.0 / 1440.0)


def test_phases_in_year_of_kind():
    full = lunar.lunar_phases_in_year(2023, kind=LunarPhaseKind.FULL_MOON)
    everything = lunar.lunar_phases_in_year(2023)
    assert full == [p for p in everything if p.kind is LunarPhaseKind.FULL_MOON]
    assert 12 <= len(full) <= 13
    assert full[0].jd == pytest.approx(_jd(2023, 1, 6, 23, 8), abs=5.0 / 1440.0)


def test_phases_in_period_bounds_are_inclusive():
    target = lunar.lunar_phase_near(_jd(2023, 6, 1))
    phases = lunar.lunar_phases_in_period(target.jd, target.jd)
    assert phases == [target]


def test_phases_in_period_rejects_reversed_range():
    with pytest.raises(InvalidArgumentError):
        lunar.lunar_phases_in_period(2460000.0, 2459000.0)


@pytest.mark.parametrize("year", [0, 10000])
def test_phases_in_year_range(year):
    with pytest.raises(OutOfRangeError):
        lunar.lunar_phases_in_year(year)


def test_injected_delta_t_shifts_instant():
    jd = _jd(2000, 1, 6)
    a = lunar.lunar_phase_near(jd, delta_t_fn=lambda _: 0.0)
    b = lunar.lunar_phase_near(jd, delta_t_fn=lambda _: 60.0)
    assert a.lunation == b.lunation
    assert a.jd - b.jd == pytest.approx(60.0 / 86400.0, abs=1e-6)
