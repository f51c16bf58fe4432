from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
import math
from typing import Tuple

from .errors import InvalidArgumentError, OutOfRangeError


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule (works for year <= 0 as well)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be in 1..12: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(year: int, month: int, day: int) -> int:
    return ymd_to_jdn(year, month, day) - ymd_to_jdn(year, 1, 1) + 1


def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian (proleptic, astronomical year numbering) -> JDN. Fliegel-Van Flandern."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def year_start_jd(year: int) -> float:
    """JD at 00:00 on 1 January of year."""
    return ymd_to_jdn(year, 1, 1) - 0.5


def year_end_jd(year: int) -> float:
    """JD at 00:00 on 1 January of year + 1."""
    return year_start_jd(year + 1)


# ============================================================
# date / datetime(UTC) <-> JD
# ============================================================

def date_to_jd(d: date) -> float:
    """JD at 00:00 of a civil date."""
    return ymd_to_jdn(d.year, d.month, d.day) - 0.5


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD. Requires a timezone-aware datetime.
    """
    if dt.tzinfo is None:
        raise InvalidArgumentError("datetime must be timezone-aware (UTC)")
    u = dt.astimezone(timezone.utc)
    secs = u.hour * 3600 + u.minute * 60 + u.second + u.microsecond / 1e6
    return ymd_to_jdn(u.year, u.month, u.day) - 0.5 + secs / 86400.0


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD -> timezone-aware datetime in UTC, rounded to the microsecond.
    """
    jdn = int(math.floor(jd + 0.5))
    y, m, d = jdn_to_ymd(jdn)
    if not 1 <= y <= 9999:
        raise OutOfRangeError(f"JD {jd} falls outside datetime's range (year {y})")
    us = int(round((jd + 0.5 - jdn) * 86400e6))
    return datetime(y, m, d, tzinfo=timezone.utc) + timedelta(microseconds=us)
