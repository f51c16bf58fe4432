from __future__ import annotations

"""
chronastro.reference.deltat

ΔT (= TT − UT1) estimators, in seconds, as functions of the decimal year.

Two independently selectable models
-----------------------------------
- NASA: the Espenak–Meeus piecewise polynomials published for the Five Millennium
  Canon of Solar Eclipses (−1999..+3000), plus the lunar-ephemeris correction
  c = −0.000012932 (y − 1955)² outside 1955..2005.
- Meeus: Astronomical Algorithms (2nd ed.) ch. 10. Table 10.A (every second year
  1620..1998) with linear interpolation, and the quadratic fits of eq. 10.1/10.2
  outside the table.

The Meeus table is injectable (any Mapping[int, float] or DeltaTSample sequence);
the default is the bundled copy in chronastro.data.deltat_table.
"""

from datetime import datetime, timezone
import math
from typing import Iterable, Mapping, Optional, Union

from ..core.errors import DataNotFoundError, InvalidArgumentError
from ..core.time import days_in_month, days_in_year, day_of_year, year_start_jd, year_end_jd, datetime_utc_to_jd, jdn_to_ymd
from ..core.types import DeltaTModel, DeltaTSample
from ..data.deltat_table import MEEUS_TABLE_10A
from .astro_args import polynomial


Samples = Union[Mapping[int, float], Iterable[DeltaTSample]]


# ---------------------------------------------------------------------------
# Decimal year
# ---------------------------------------------------------------------------

def decimal_year(year: int, month: int = 0, day: int = 0) -> float:
    """
    Year with a fractional part giving the position inside the year.

    - month == 0: start of the year (day must also be 0)
    - day == 0:   middle of the month, (month - 0.5)/12, the NASA convention
    - otherwise:  noon of the given day, (doy - 0.5)/days_in_year
    """
    if not 0 <= month <= 12:
        raise InvalidArgumentError(f"month must be in 0..12: {month}")

    if month == 0:
        if day != 0:
            raise InvalidArgumentError("if the month is 0 the day must also be 0")
        return float(year)

    if day == 0:
        return year + (month - 0.5) / 12.0

    dim = days_in_month(year, month)
    if not 1 <= day <= dim:
        raise InvalidArgumentError(f"day must be in 0..{dim} for {year}-{month:02d}: {day}")
    return year + (day_of_year(year, month, day) - 0.5) / days_in_year(year)


def decimal_year_from_jd(jd: float) -> float:
    """Calendar year of jd plus the elapsed fraction of that year."""
    year = jdn_to_ymd(int(math.floor(jd + 0.5)))[0]
    start = year_start_jd(year)
    return year + (jd - start) / (year_end_jd(year) - start)


def decimal_year_from_datetime(dt: datetime) -> float:
    """Seconds elapsed in the year over seconds in the year. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return decimal_year_from_jd(datetime_utc_to_jd(dt))


# ---------------------------------------------------------------------------
# Espenak–Meeus (NASA) piecewise polynomial
# ---------------------------------------------------------------------------

def _lunar_ephemeris_correction(y: float) -> float:
    year = math.floor(y)
    if year < 1955 or year > 2005:
        return -0.000012932 * (y - 1955.0) ** 2
    return 0.0


def delta_t_nasa(y: float) -> float:
    """
    Espenak–Meeus piecewise polynomial ΔT(y) in seconds.

    y is the decimal year (often y = year + (month-0.5)/12).
    The branch polynomials match those published by NASA for the Five Millennium Canon.
    A branch is chosen by the calendar year floor(y); each upper bound is inclusive,
    so 1600.5 still takes the 500..1600 fit. Year -500 itself is a tabulated constant.
    The lunar-ephemeris correction is always applied outside 1955..2005.
    """
    year = math.floor(y)

    if year < -500:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u
    elif year == -500:
        dt = 17203.7
    elif year <= 500:
        dt = polynomial((
            10583.6,
            -1014.41,
            33.78311,
            -5.952053,
            -0.1798452,
            0.022174192,
            0.0090316521,
        ), y / 100.0)
    elif year <= 1600:
        dt = polynomial((
            1574.2,
            -556.01,
            71.23472,
            0.319781,
            -0.8503463,
            -0.005050998,
            0.0083572073,
        ), (y - 1000.0) / 100.0)
    elif year <= 1700:
        dt = polynomial((120.0, -0.9808, -0.01532, 1.0 / 7129.0), y - 1600.0)
    elif year <= 1800:
        dt = polynomial((8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0), y - 1700.0)
    elif year <= 1860:
        dt = polynomial((
            13.72,
            -0.332447,
            0.0068612,
            0.0041116,
            -0.00037436,
            0.0000121272,
            -0.0000001699,
            0.000000000875,
        ), y - 1800.0)
    elif year <= 1900:
        dt = polynomial((7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1.0 / 233174.0), y - 1860.0)
    elif year <= 1920:
        dt = polynomial((-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197), y - 1900.0)
    elif year <= 1941:
        dt = polynomial((21.20, 0.84493, -0.0761, 0.0020936), y - 1920.0)
    elif year <= 1961:
        dt = polynomial((29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0), y - 1950.0)
    elif year <= 1986:
        dt = polynomial((45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0), y - 1975.0)
    elif year <= 2005:
        dt = polynomial((
            63.86,
            0.3345,
            -0.060374,
            0.0017275,
            0.000651814,
            0.00002373599,
        ), y - 2000.0)
    elif year <= 2050:
        dt = polynomial((62.92, 0.32217, 0.005589), y - 2000.0)
    elif year <= 2150:
        # joins the 2005..2050 branch to the long-term parabola
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)
    else:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u

    return float(dt + _lunar_ephemeris_correction(y))


# ---------------------------------------------------------------------------
# Meeus (AA2 ch. 10): Table 10.A + quadratic fits
# ---------------------------------------------------------------------------

def _as_mapping(samples: Optional[Samples]) -> Mapping[int, float]:
    if samples is None:
        return MEEUS_TABLE_10A
    if isinstance(samples, Mapping):
        return samples
    return {s.year: s.delta_t for s in samples}


def delta_t_meeus(y: float, samples: Optional[Samples] = None) -> float:
    """
    ΔT(y) in seconds after Meeus, Astronomical Algorithms ch. 10.

    Between 1620 and 2000 the tabulated even-year values are interpolated linearly.
    When the upper bracket is 2000 the quadratic fit supplies it (the table ends at 1998).
    """
    table = _as_mapping(samples)
    year = math.floor(y)
    t = (y - 2000.0) / 100.0

    if year < 948:
        return polynomial((2177.0, 497.0, 44.1), t)

    if year < 1620 or year >= 2000:
        dt = polynomial((102.0, 102.0, 25.3), t)
        if 2000.0 <= y <= 2100.0:
            dt += 0.37 * (y - 2100.0)
        return dt

    y1 = int(math.floor(y / 2.0) * 2)
    y2 = y1 + 2
    try:
        dt1 = table[y1]
        dt2 = delta_t_meeus(float(y2), table) if y2 == 2000 else table[y2]
    except KeyError as e:
        raise DataNotFoundError(f"ΔT sample for year {e.args[0]} not found") from e
    return dt1 + (dt2 - dt1) * (y - y1) / (y2 - y1)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def delta_t(y: float, model: Union[DeltaTModel, str] = DeltaTModel.NASA, *, samples: Optional[Samples] = None) -> float:
    """
    ΔT(y) in seconds, where y is a decimal year.

    model:
      - "nasa":  Espenak–Meeus polynomials (default)
      - "meeus": Table 10.A interpolation; samples overrides the bundled table
    """
    try:
        m = DeltaTModel(model.lower() if isinstance(model, str) else model)
    except ValueError as e:
        raise InvalidArgumentError(f"unknown ΔT model: {model!r} (expected 'nasa' or 'meeus')") from e

    if m is DeltaTModel.MEEUS:
        return delta_t_meeus(y, samples)
    return delta_t_nasa(y)


def delta_t_for_jd(jd: float, model: Union[DeltaTModel, str] = DeltaTModel.NASA, *, samples: Optional[Samples] = None) -> float:
    """Convenience wrapper: ΔT at a Julian Date, via its decimal year."""
    return delta_t(decimal_year_from_jd(jd), model, samples=samples)
