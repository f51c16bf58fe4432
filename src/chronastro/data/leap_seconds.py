"""
IERS leap-second schedule (Bulletin C), 1972 through the 2016-12-31 insertion.

Each event is the UTC date whose last minute carried the extra second (23:59:60).
TAI-UTC was 10 s from 1972-01-01 until the first event.
"""

from __future__ import annotations

from datetime import date

from ..core.types import LeapSecondEvent

LEAP_SECONDS_EPOCH = date(1972, 1, 1)
TAI_MINUS_UTC_AT_EPOCH = 10

LEAP_SECONDS = (
    LeapSecondEvent(date(1972, 6, 30), 1),
    LeapSecondEvent(date(1972, 12, 31), 1),
    LeapSecondEvent(date(1973, 12, 31), 1),
    LeapSecondEvent(date(1974, 12, 31), 1),
    LeapSecondEvent(date(1975, 12, 31), 1),
    LeapSecondEvent(date(1976, 12, 31), 1),
    LeapSecondEvent(date(1977, 12, 31), 1),
    LeapSecondEvent(date(1978, 12, 31), 1),
    LeapSecondEvent(date(1979, 12, 31), 1),
    LeapSecondEvent(date(1981, 6, 30), 1),
    LeapSecondEvent(date(1982, 6, 30), 1),
    LeapSecondEvent(date(1983, 6, 30), 1),
    LeapSecondEvent(date(1985, 6, 30), 1),
    LeapSecondEvent(date(1987, 12, 31), 1),
    LeapSecondEvent(date(1989, 12, 31), 1),
    LeapSecondEvent(date(1990, 12, 31), 1),
    LeapSecondEvent(date(1992, 6, 30), 1),
    LeapSecondEvent(date(1993, 6, 30), 1),
    LeapSecondEvent(date(1994, 6, 30), 1),
    LeapSecondEvent(date(1995, 12, 31), 1),
    LeapSecondEvent(date(1997, 6, 30), 1),
    LeapSecondEvent(date(1998, 12, 31), 1),
    LeapSecondEvent(date(2005, 12, 31), 1),
    LeapSecondEvent(date(2008, 12, 31), 1),
    LeapSecondEvent(date(2012, 6, 30), 1),
    LeapSecondEvent(date(2015, 6, 30), 1),
    LeapSecondEvent(date(2016, 12, 31), 1),
)
