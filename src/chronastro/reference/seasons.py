# reference/seasons.py

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Union

from ..core.errors import ConvergenceError, InvalidArgumentError, OutOfRangeError
from ..core.types import SeasonalMarker, SeasonalMarkerKind
from . import astro_args as aa
from . import time_scales as ts

logger = logging.getLogger(__name__)

# apparent solar longitude provider: JD(TT) -> radians
SolarLongitudeFn = Callable[[float], float]

MIN_YEAR = -1000
MAX_YEAR = 3000
MAX_ITERATIONS = 100
TOLERANCE_RAD = 1e-9
DAYS_PER_RADIAN = 58.0  # ~ 365.2422 / (2*pi)


# Meeus Table 27.A (years -1000..1000, Y = year/1000)
# and Table 27.B (years 1000..3000, Y = (year-2000)/1000); coefficients of Y^0..Y^4.
MEAN_JDE0_BEFORE_1000 = (
    (1721139.29189, 365242.13740, 0.06134, 0.00111, -0.00071),
    (1721233.25401, 365241.72562, -0.05323, 0.00907, 0.00025),
    (1721325.70455, 365242.49558, -0.11677, -0.00297, 0.00074),
    (1721414.39987, 365242.88257, -0.00769, -0.00933, -0.00006),
)
MEAN_JDE0_AFTER_1000 = (
    (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
)

# Meeus Table 27.C: (A, B deg, C deg per Julian century)
PERIODIC_TERMS = (
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
)


def _kind(kind: Union[SeasonalMarkerKind, int]) -> SeasonalMarkerKind:
    try:
        return SeasonalMarkerKind(kind)
    except ValueError as e:
        raise InvalidArgumentError(f"seasonal marker kind must be 0..3: {kind!r}") from e


def seasonal_marker_mean(year: int, kind: Union[SeasonalMarkerKind, int]) -> float:
    """
    Mean instant JDE0 (TT) of an equinox or solstice, Meeus ch. 27.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfRangeError(f"year must be in {MIN_YEAR}..{MAX_YEAR}: {year}")
    k = _kind(kind)

    if year <= 1000:
        return aa.polynomial(MEAN_JDE0_BEFORE_1000[k], year / 1000.0)
    return aa.polynomial(MEAN_JDE0_AFTER_1000[k], (year - 2000) / 1000.0)


def seasonal_marker_approx(
    year: int,
    kind: Union[SeasonalMarkerKind, int],
    delta_t_fn: Optional[ts.DeltaTFn] = None,
) -> SeasonalMarker:
    """
    Equinox/solstice from the mean instant plus the 24 periodic terms of Table 27.C.
    Good to about a minute over -1000..3000.
    """
    k = _kind(kind)
    jde0 = seasonal_marker_mean(year, k)
    T = aa.T_centuries(jde0)
    W = math.radians(35999.373 * T - 2.47)
    d_lambda = 1.0 + 0.0334 * math.cos(W) + 0.0007 * math.cos(2.0 * W)
    S = sum(a * math.cos(math.radians(b + c * T)) for a, b, c in PERIODIC_TERMS)

    jd_tt = jde0 + 0.00001 * S / d_lambda
    return SeasonalMarker(kind=k, jd=ts.tt_to_ut1(jd_tt, delta_t_fn), jd_tt=jd_tt)


def seasonal_marker(
    year: int,
    kind: Union[SeasonalMarkerKind, int],
    solar_longitude_fn: SolarLongitudeFn,
    delta_t_fn: Optional[ts.DeltaTFn] = None,
) -> SeasonalMarker:
    """
    Equinox/solstice by iterating on the apparent solar longitude (Meeus p. 180).

    Starting from JDE0, jd += 58 sin(target - lambda_sun) until the residual is below
    1e-9 rad. The factor 58 days/rad is close to the inverse of the Sun's mean motion,
    so each step removes most of the residual.
    """
    k = _kind(kind)
    jd = seasonal_marker_mean(year, k)
    target = k * math.pi / 2.0

    for i in range(MAX_ITERATIONS):
        diff = aa.normalize_radians(target - solar_longitude_fn(jd))
        if abs(diff) < TOLERANCE_RAD:
            logger.debug("%s %d converged after %d iterations: JDE=%.6f", k.name, year, i, jd)
            return SeasonalMarker(kind=k, jd=ts.tt_to_ut1(jd, delta_t_fn), jd_tt=jd)
        jd += DAYS_PER_RADIAN * math.sin(diff)

    raise ConvergenceError(
        f"{k.name} {year}: no convergence after {MAX_ITERATIONS} iterations (residual {diff:.3e} rad)"
    )


def seasonal_markers_in_year(
    year: int,
    solar_longitude_fn: Optional[SolarLongitudeFn] = None,
    delta_t_fn: Optional[ts.DeltaTFn] = None,
) -> List[SeasonalMarker]:
    """All four markers of a year; the approximate method is used when no solar longitude is given."""
    if solar_longitude_fn is None:
        return [seasonal_marker_approx(year, k, delta_t_fn) for k in SeasonalMarkerKind]
    return [seasonal_marker(year, k, solar_longitude_fn, delta_t_fn) for k in SeasonalMarkerKind]
