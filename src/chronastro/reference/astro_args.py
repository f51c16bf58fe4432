from __future__ import annotations

import math
from typing import Sequence, Tuple


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 2.0 * math.pi


def polynomial(coeffs: Sequence[float], x: float) -> float:
    """Horner evaluation for Σ coeffs[k] x^k (coeffs[0] is the constant term)."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc


def normalize_radians(x: float) -> float:
    """Wrap radians to (-pi, pi]."""
    y = math.fmod(x, TAU)
    if y <= -math.pi:
        y += TAU
    elif y > math.pi:
        y -= TAU
    return y


def normalize_radians_positive(x: float) -> float:
    """Wrap radians to [0, 2*pi)."""
    y = math.fmod(x, TAU)
    if y < 0:
        y += TAU
    return y


def normalize_degrees(x: float) -> float:
    """Wrap degrees to [0, 360)."""
    y = math.fmod(x, 360.0)
    if y < 0:
        y += 360.0
    return y


def dms_to_deg(d: float, m: float = 0.0, s: float = 0.0) -> float:
    """Degrees/minutes/seconds -> decimal degrees. The sign is taken from the first nonzero part."""
    sign = -1.0 if (d < 0 or (d == 0 and (m < 0 or (m == 0 and s < 0)))) else 1.0
    return sign * (abs(d) + abs(m) / 60.0 + abs(s) / 3600.0)


def deg_to_dms(x: float) -> Tuple[int, int, float]:
    """Decimal degrees -> (d, m, s); the sign is carried on the first nonzero component."""
    sign = -1 if x < 0 else 1
    a = abs(x)
    d = int(a)
    m = int((a - d) * 60.0)
    s = (a - d - m / 60.0) * 3600.0
    if d:
        return sign * d, m, s
    if m:
        return 0, sign * m, s
    return 0, 0, sign * s


def arcsec_to_rad(arcsec: float) -> float:
    return math.radians(arcsec / 3600.0)


# ------------------------------------------------------------
# Time variables (days since J2000.0)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0

DAYS_PER_JULIAN_YEAR = 365.25
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0


def julian_days_since_j2000(jd: float) -> float:
    return jd - J2000_TT


def julian_years_since_j2000(jd: float) -> float:
    return (jd - J2000_TT) / DAYS_PER_JULIAN_YEAR


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / DAYS_PER_JULIAN_CENTURY


def T_millennia(jd_tt: float) -> float:
    """Julian millennia from J2000.0 in TT (the VSOP87 time variable)."""
    return (jd_tt - J2000_TT) / DAYS_PER_JULIAN_MILLENNIUM
