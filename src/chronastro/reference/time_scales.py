from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
import math
from typing import Callable, Optional, Sequence, Union

from ..core.errors import InvalidArgumentError, OutOfRangeError
from ..core.time import datetime_utc_to_jd
from ..core.types import DeltaTModel, LeapSecondEvent
from ..data.leap_seconds import LEAP_SECONDS, LEAP_SECONDS_EPOCH, TAI_MINUS_UTC_AT_EPOCH
from . import astro_args as aa
from .deltat import delta_t_for_jd

# ΔT provider: JD -> seconds
DeltaTFn = Callable[[float], float]

TT_MINUS_TAI = 32.184  # seconds, exact by definition
SECONDS_PER_DAY = 86400.0

# UTC instant of J2000.0 (2000-01-01 12:00:00 TT)
J2000_UTC = datetime(2000, 1, 1, 11, 58, 55, 816000, tzinfo=timezone.utc)


def make_delta_t_fn(model: Union[DeltaTModel, str] = DeltaTModel.NASA) -> DeltaTFn:
    """Return a JD -> ΔT(seconds) callable for one of the built-in ΔT models."""
    def fn(jd: float) -> float:
        return delta_t_for_jd(jd, model)
    return fn


_default_delta_t = make_delta_t_fn(DeltaTModel.NASA)


# ============================================================
# UT1 <-> TT (via ΔT)
# ============================================================

def ut1_to_tt(jd_ut1: float, delta_t_fn: Optional[DeltaTFn] = None) -> float:
    """
    JD(UT1) -> JD(TT):  TT = UT1 + ΔT(UT1)
    """
    fn = delta_t_fn or _default_delta_t
    return jd_ut1 + fn(jd_ut1) / SECONDS_PER_DAY


def tt_to_ut1(jd_tt: float, delta_t_fn: Optional[DeltaTFn] = None) -> float:
    """
    JD(TT) -> JD(UT1):  UT1 = TT - ΔT(TT)

    ΔT is evaluated at the TT argument rather than solving UT1 = TT - ΔT(UT1).
    ΔT changes by well under a millisecond across the ~1 minute gap, so the two
    conversions are inverse to within 1e-9 days.
    """
    fn = delta_t_fn or _default_delta_t
    return jd_tt - fn(jd_tt) / SECONDS_PER_DAY


# ============================================================
# TT <-> TAI
# ============================================================

def tt_to_tai(jd_tt: float) -> float:
    return jd_tt - TT_MINUS_TAI / SECONDS_PER_DAY


def tai_to_tt(jd_tai: float) -> float:
    return jd_tai + TT_MINUS_TAI / SECONDS_PER_DAY


# ============================================================
# Leap seconds: TAI - UTC and DUT1
# ============================================================

def total_leap_seconds(when: Union[date, datetime], leap_seconds: Sequence[LeapSecondEvent] = LEAP_SECONDS) -> int:
    """
    Sum of leap-second values in effect at `when`.

    - date:     every event dated on or before that date counts (end of the day).
    - datetime: an event counts from 00:00 UTC of the following day, since the
                inserted second itself (23:59:60) cannot be represented.
    """
    if isinstance(when, datetime):
        if when.tzinfo is None:
            raise InvalidArgumentError("datetime must be timezone-aware (UTC)")
        when = when.astimezone(timezone.utc)
        total = 0
        for ev in leap_seconds:
            inserted = datetime(ev.date.year, ev.date.month, ev.date.day, tzinfo=timezone.utc) + timedelta(days=1)
            if inserted <= when:
                total += ev.value
        return total

    return sum(ev.value for ev in leap_seconds if ev.date <= when)


def tai_minus_utc(when: Union[date, datetime], leap_seconds: Sequence[LeapSecondEvent] = LEAP_SECONDS) -> int:
    """
    TAI - UTC in whole seconds: 10 s at 1972-01-01 plus the leap seconds since.

    Raises OutOfRangeError before 1972, where UTC used fractional rate offsets.
    """
    d = when.date() if isinstance(when, datetime) else when
    if isinstance(when, datetime) and when.tzinfo is not None:
        d = when.astimezone(timezone.utc).date()
    if d < LEAP_SECONDS_EPOCH:
        raise OutOfRangeError(f"TAI-UTC is only defined in integer seconds from {LEAP_SECONDS_EPOCH}: {when}")
    return TAI_MINUS_UTC_AT_EPOCH + total_leap_seconds(when, leap_seconds)


def ut1_minus_utc(
    when: Union[date, datetime],
    leap_seconds: Sequence[LeapSecondEvent] = LEAP_SECONDS,
    delta_t_fn: Optional[DeltaTFn] = None,
) -> float:
    """
    DUT1 = UT1 - UTC = (TT - TAI) - ΔT + (TAI - UTC), in seconds.

    ΔT comes from delta_t_fn at the UTC Julian Date of when (a date means 00:00 UTC).

    DUT1 is kept inside [-0.9, 0.9] s by the IERS, so this is a consistency check on
    the ΔT model rather than a measurement.
    """
    if isinstance(when, datetime):
        if when.tzinfo is None:
            raise InvalidArgumentError("datetime must be timezone-aware (UTC)")
        jd = datetime_utc_to_jd(when)
    else:
        jd = datetime_utc_to_jd(datetime(when.year, when.month, when.day, tzinfo=timezone.utc))
    fn = delta_t_fn or _default_delta_t
    return TT_MINUS_TAI - fn(jd) + tai_minus_utc(when, leap_seconds)


# ============================================================
# Earth rotation and other time counts
# ============================================================

def earth_rotation_angle(jd_ut1: float) -> float:
    """
    Earth Rotation Angle (IERS 2003) in radians, wrapped to [0, 2*pi).

      ERA = 2*pi * (0.7790572732640 + 1.00273781191135448 * (JD(UT1) - 2451545.0))
    """
    t = aa.julian_days_since_j2000(jd_ut1)
    turns = 0.7790572732640 + 1.00273781191135448 * t
    return aa.TAU * (turns - math.floor(turns))


def mars_sol_date(jd_tt: float) -> float:
    """Mars Sol Date (Allison & McEwen 2000): sols since 1873-12-29 12:00 TT."""
    return (jd_tt - 2405522.0) / 1.02749
