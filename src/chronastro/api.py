from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple, Union

from .core.errors import InvalidArgumentError
from .core.time import date_to_jd, datetime_utc_to_jd
from .core.types import (
    DeltaTModel,
    EclipticPosition,
    GeoPoint,
    HeliocentricPosition,
    LeapSecondEvent,
    LunarPhase,
    LunarPhaseKind,
    SeasonalMarker,
    SeasonalMarkerKind,
    SeriesCoefficientSet,
)
from .data.leap_seconds import LEAP_SECONDS
from .data import providers
from .reference import deltat as _deltat
from .reference import geodesy as _geodesy
from .reference import lunar as _lunar
from .reference import seasons as _seasons
from .reference import solar as _solar
from .reference import time_scales as _ts
from .reference import vsop87 as _vsop87

When = Union[datetime, date, float]


def _to_jd(when: When) -> float:
    """datetime (aware), date (00:00 UTC) or JD(UTC) -> JD(UTC)."""
    if isinstance(when, datetime):
        return datetime_utc_to_jd(when)
    if isinstance(when, date):
        return date_to_jd(when)
    if isinstance(when, (int, float)):
        return float(when)
    raise InvalidArgumentError(f"expected datetime, date or Julian Date: {when!r}")


def _earth(earth: Optional[SeriesCoefficientSet]) -> SeriesCoefficientSet:
    return earth if earth is not None else providers.get_coefficients("earth")


# ---------------------------------------------------------------------------
# Time scales
# ---------------------------------------------------------------------------

def delta_t(decimal_year: float, model: Union[DeltaTModel, str] = DeltaTModel.NASA) -> float:
    return _deltat.delta_t(decimal_year, model)


def ut1_to_tt(jd_ut1: float, delta_t_fn: Optional[_ts.DeltaTFn] = None) -> float:
    return _ts.ut1_to_tt(jd_ut1, delta_t_fn)


def tt_to_ut1(jd_tt: float, delta_t_fn: Optional[_ts.DeltaTFn] = None) -> float:
    return _ts.tt_to_ut1(jd_tt, delta_t_fn)


def earth_rotation_angle(jd_ut1: float) -> float:
    return _ts.earth_rotation_angle(jd_ut1)


def tai_minus_utc(when: Union[date, datetime], leap_seconds: Sequence[LeapSecondEvent] = LEAP_SECONDS) -> int:
    return _ts.tai_minus_utc(when, leap_seconds)


def ut1_minus_utc(
    when: Union[date, datetime],
    leap_seconds: Sequence[LeapSecondEvent] = LEAP_SECONDS,
    delta_t_fn: Optional[_ts.DeltaTFn] = None,
) -> float:
    return _ts.ut1_minus_utc(when, leap_seconds, delta_t_fn)


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------

def get_coefficients(body: str) -> SeriesCoefficientSet:
    return providers.get_coefficients(body)


def list_bodies() -> Tuple[str, ...]:
    return providers.list_bodies()


def body_position(coefficients: Union[SeriesCoefficientSet, str], jd_tt: float) -> HeliocentricPosition:
    """Heliocentric L, B (radians) and R (AU); a body name is resolved through the providers."""
    if isinstance(coefficients, str):
        coefficients = providers.get_coefficients(coefficients)
    return _vsop87.body_position(coefficients, jd_tt)


def solar_position(
    jd_tt: float,
    earth: Optional[SeriesCoefficientSet] = None,
    nutation_fn: Optional[_solar.NutationFn] = None,
) -> EclipticPosition:
    return _solar.solar_position(_earth(earth), jd_tt, nutation_fn)


def apparent_solar_longitude(
    jd_tt: float,
    earth: Optional[SeriesCoefficientSet] = None,
    nutation_fn: Optional[_solar.NutationFn] = None,
) -> float:
    return _solar.apparent_solar_longitude(_earth(earth), jd_tt, nutation_fn)


# ---------------------------------------------------------------------------
# Lunar phases
# ---------------------------------------------------------------------------

def lunar_phase_near(
    when: When,
    delta_t_fn: Optional[_ts.DeltaTFn] = None,
    kind: Optional[LunarPhaseKind] = None,
) -> LunarPhase:
    return _lunar.lunar_phase_near(_to_jd(when), delta_t_fn, kind)


def lunar_phases_in_period(
    start: When,
    end: When,
    delta_t_fn: Optional[_ts.DeltaTFn] = None,
    kind: Optional[LunarPhaseKind] = None,
) -> List[LunarPhase]:
    return _lunar.lunar_phases_in_period(_to_jd(start), _to_jd(end), delta_t_fn, kind)


def lunar_phases_in_year(
    year: int,
    delta_t_fn: Optional[_ts.DeltaTFn] = None,
    kind: Optional[LunarPhaseKind] = None,
) -> List[LunarPhase]:
    return _lunar.lunar_phases_in_year(year, delta_t_fn, kind)


# ---------------------------------------------------------------------------
# Equinoxes and solstices
# ---------------------------------------------------------------------------

def _default_solar_longitude(jd_tt: float) -> float:
    return _solar.apparent_solar_longitude(providers.get_coefficients("earth"), jd_tt)


def seasonal_marker_approx(
    year: int,
    kind: Union[SeasonalMarkerKind, int],
    delta_t_fn: Optional[_ts.DeltaTFn] = None,
) -> SeasonalMarker:
    return _seasons.seasonal_marker_approx(year, kind, delta_t_fn)


def seasonal_marker(
    year: int,
    kind: Union[SeasonalMarkerKind, int],
    solar_longitude_fn: Optional[_seasons.SolarLongitudeFn] = None,
    delta_t_fn: Optional[_ts.DeltaTFn] = None,
) -> SeasonalMarker:
    """Iterative equinox/solstice; the Sun comes from the bundled Earth series by default."""
    return _seasons.seasonal_marker(year, kind, solar_longitude_fn or _default_solar_longitude, delta_t_fn)


def seasonal_markers_in_year(
    year: int,
    solar_longitude_fn: Optional[_seasons.SolarLongitudeFn] = None,
    delta_t_fn: Optional[_ts.DeltaTFn] = None,
    *,
    approx: bool = False,
) -> List[SeasonalMarker]:
    if approx:
        return _seasons.seasonal_markers_in_year(year, None, delta_t_fn)
    return _seasons.seasonal_markers_in_year(year, solar_longitude_fn or _default_solar_longitude, delta_t_fn)


# ---------------------------------------------------------------------------
# Geodesy
# ---------------------------------------------------------------------------

def geodesic_distance(
    p1: GeoPoint,
    p2: GeoPoint,
    equatorial_radius: float = _geodesy.EARTH_EQUATORIAL_RADIUS_KM,
    polar_radius: float = _geodesy.EARTH_POLAR_RADIUS_KM,
) -> float:
    return _geodesy.geodesic_distance(p1, p2, equatorial_radius, polar_radius)
