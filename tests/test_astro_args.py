# tests/test_astro_args.py

import math

import pytest

from chronastro.reference import astro_args as aa


def test_polynomial_horner():
    # 1 + 2x + 3x^2 at x = 2
    assert aa.polynomial((1.0, 2.0, 3.0), 2.0) == pytest.approx(17.0)
    assert aa.polynomial((), 5.0) == 0.0


@pytest.mark.parametrize("x, expected", [
    (0.0, 0.0),
    (math.pi, math.pi),
    (-math.pi, math.pi),
    (2.0 * math.pi + 0.5, 0.5),
    (-2.0 * math.pi - 0.5, -0.5),
])
def test_normalize_radians_half_open(x, expected):
    assert aa.normalize_radians(x) == pytest.approx(expected, abs=1e-12)


def test_normalize_radians_range():
    for k in range(-50, 51):
        y = aa.normalize_radians(k * 0.73)
        assert -math.pi < y <= math.pi


def test_normalize_degrees():
    assert aa.normalize_degrees(-30.0) == pytest.approx(330.0)
    assert aa.normalize_degrees(720.5) == pytest.approx(0.5)
    assert aa.normalize_degrees(360.0) == 0.0


def test_dms_roundtrip():
    x = aa.dms_to_deg(199, 54, 21.818)
    d, m, s = aa.deg_to_dms(x)
    assert (d, m) == (199, 54)
    assert s == pytest.approx(21.818, abs=1e-6)


def test_dms_sign_on_first_nonzero_part():
    assert aa.dms_to_deg(0, -30, 0) == pytest.approx(-0.5)
    assert aa.deg_to_dms(-0.5) == (0, -30, pytest.approx(0.0, abs=1e-9))
    assert aa.deg_to_dms(-77.0655)[0] == -77


def test_time_arguments_at_j2000():
    assert aa.T_centuries(aa.J2000_TT) == 0.0
    assert aa.T_millennia(aa.J2000_TT + aa.DAYS_PER_JULIAN_MILLENNIUM) == pytest.approx(1.0)
    assert aa.julian_years_since_j2000(aa.J2000_TT - 365.25) == pytest.approx(-1.0)
    assert aa.julian_days_since_j2000(aa.J2000_TT + 0.5) == 0.5


def test_t_millennia_meeus_example():
    """Meeus 32.a: JDE 2448976.5 -> tau = -0.007032169747"""
    assert aa.T_millennia(2448976.5) == pytest.approx(-0.007032169747, abs=1e-12)
