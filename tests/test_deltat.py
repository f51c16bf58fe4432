# tests/test_deltat.py

from datetime import datetime, timezone

import pytest

from chronastro.core.errors import DataNotFoundError, InvalidArgumentError
from chronastro.core.types import DeltaTModel, DeltaTSample
from chronastro.reference import deltat as dt
from chronastro.reference.astro_args import polynomial


def test_decimal_year_conventions():
    assert dt.decimal_year(2000) == 2000.0
    assert dt.decimal_year(2000, 6) == pytest.approx(2000.0 + 5.5 / 12.0)
    assert dt.decimal_year(2001, 1, 1) == pytest.approx(2001.0 + 0.5 / 365.0)
    assert dt.decimal_year(2000, 12, 31) == pytest.approx(2000.0 + 365.5 / 366.0)


@pytest.mark.parametrize("args", [(2000, 0, 5), (2000, 13, 0), (2000, -1, 0), (2023, 2, 29), (2000, 4, 31)])
def test_decimal_year_rejects_bad_components(args):
    with pytest.raises(InvalidArgumentError):
        dt.decimal_year(*args)


def test_decimal_year_from_datetime():
    assert dt.decimal_year_from_datetime(datetime(2000, 1, 1, tzinfo=timezone.utc)) == 2000.0
    mid = dt.decimal_year_from_datetime(datetime(2001, 7, 2, 12, tzinfo=timezone.utc))
    assert mid == pytest.approx(2001.5, abs=1e-6)
    # naive is taken as UTC
    assert dt.decimal_year_from_datetime(datetime(2000, 1, 1)) == 2000.0


def test_nasa_at_2000():
    assert dt.delta_t_nasa(2000.0) == pytest.approx(63.86, abs=1e-9)


def test_nasa_applies_lunar_correction_outside_1955_2005():
    # the 1900..1920 polynomial takes over in 1901, one year after its origin
    expected = -2.79 + 1.494119 - 0.0598939 + 0.0061966 - 0.000197
    assert dt.delta_t_nasa(1901.0) == pytest.approx(expected - 0.000012932 * 46.0 ** 2, abs=1e-9)


def test_nasa_branch_follows_calendar_year():
    # 1600.5 is still in year 1600, the last year of the 500..1600 fit
    u = (1600.5 - 1000.0) / 100.0
    fit = polynomial((1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073), u)
    assert dt.delta_t_nasa(1600.5) == pytest.approx(fit - 0.000012932 * (1600.5 - 1955.0) ** 2, abs=1e-9)
    assert dt.delta_t_nasa(1900.0) == pytest.approx(-2.7015996 - 0.000012932 * 55.0 ** 2, abs=1e-6)


def test_nasa_year_minus_500_is_constant():
    for y in (-500.0, -499.5):
        assert dt.delta_t_nasa(y) == pytest.approx(17203.7 - 0.000012932 * (y - 1955.0) ** 2)


def test_nasa_is_continuous_enough_across_branches():
    for edge in (501.0, 1601.0, 1701.0, 1801.0, 1861.0, 1901.0, 1921.0, 1942.0, 1962.0, 1987.0, 2006.0, 2051.0, 2151.0):
        assert dt.delta_t_nasa(edge - 1e-6) == pytest.approx(dt.delta_t_nasa(edge), abs=2.0)


def test_nasa_ancient_era_is_large_and_positive():
    assert dt.delta_t_nasa(-1000.0) > 20000.0
    assert dt.delta_t_nasa(0.0) == pytest.approx(10583.6 - 0.000012932 * 1955.0 ** 2, abs=1e-6)


@pytest.mark.parametrize("y, expected", [
    (1977.0, 47.5),   # midway between 1976 (46.5) and 1978 (48.5)
    (1998.5, 63.5),   # upper bracket 2000 from the quadratic fit (65.0)
    (2000.0, 65.0),
    (800.0, 2563.4),
])
def test_meeus_values(y, expected):
    assert dt.delta_t_meeus(y) == pytest.approx(expected, abs=1e-6)


def test_meeus_tabulated_year_is_exact():
    assert dt.delta_t_meeus(1620.0) == pytest.approx(121.0)


def test_meeus_injected_samples():
    samples = {1976: 40.0, 1978: 50.0}
    assert dt.delta_t_meeus(1977.0, samples) == pytest.approx(45.0)

    as_list = [DeltaTSample(1976, 40.0), DeltaTSample(1978, 50.0)]
    assert dt.delta_t(1977.5, "meeus", samples=as_list) == pytest.approx(47.5)


def test_meeus_missing_sample():
    with pytest.raises(DataNotFoundError):
        dt.delta_t_meeus(1801.0, {1976: 40.0})


def test_model_selection():
    assert dt.delta_t(1977.0, DeltaTModel.MEEUS) == dt.delta_t_meeus(1977.0)
    assert dt.delta_t(1977.0, "MEEUS") == dt.delta_t_meeus(1977.0)
    assert dt.delta_t(1977.0) == dt.delta_t_nasa(1977.0)


def test_unknown_model():
    with pytest.raises(InvalidArgumentError):
        dt.delta_t(2000.0, "iers")


def test_models_agree_in_modern_era():
    for y in (1900.0, 1950.0, 1977.0, 1990.0):
        assert dt.delta_t_nasa(y) == pytest.approx(dt.delta_t_meeus(y), abs=2.0)


def test_delta_t_for_jd():
    assert dt.delta_t_for_jd(2451544.5) == pytest.approx(dt.delta_t_nasa(2000.0))
