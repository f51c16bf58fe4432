from __future__ import annotations

"""
IAU 1980 theory of nutation, truncated to the 63 terms of Meeus Table 22.A
(terms below 0.0003" dropped). Accurate to about 0.5" in longitude.
"""

import math
from typing import Tuple

from . import astro_args as aa


# (D, M, M', F, Omega, psi_K, psi_T, eps_K, eps_T)
# psi_K, eps_K in 0.0001"; psi_T, eps_T in 0.00001" per Julian century.
NUTATION_TERMS = (
    ( 0,  0,  0,  0,  1, -171996, -1742, 92025,  89),
    (-2,  0,  0,  2,  2,  -13187,   -16,  5736, -31),
    ( 0,  0,  0,  2,  2,   -2274,    -2,   977,  -5),
    ( 0,  0,  0,  0,  2,    2062,     2,  -895,   5),
    ( 0,  1,  0,  0,  0,    1426,   -34,    54,  -1),
    ( 0,  0,  1,  0,  0,     712,     1,    -7,   0),
    (-2,  1,  0,  2,  2,    -517,    12,   224,  -6),
    ( 0,  0,  0,  2,  1,    -386,    -4,   200,   0),
    ( 0,  0,  1,  2,  2,    -301,     0,   129,  -1),
    (-2, -1,  0,  2,  2,     217,    -5,   -95,   3),
    (-2,  0,  1,  0,  0,    -158,     0,     0,   0),
    (-2,  0,  0,  2,  1,     129,     1,   -70,   0),
    ( 0,  0, -1,  2,  2,     123,     0,   -53,   0),
    ( 2,  0,  0,  0,  0,      63,     0,     0,   0),
    ( 0,  0,  1,  0,  1,      63,     1,   -33,   0),
    ( 2,  0, -1,  2,  2,     -59,     0,    26,   0),
    ( 0,  0, -1,  0,  1,     -58,    -1,    32,   0),
    ( 0,  0,  1,  2,  1,     -51,     0,    27,   0),
    (-2,  0,  2,  0,  0,      48,     0,     0,   0),
    ( 0,  0, -2,  2,  1,      46,     0,   -24,   0),
    ( 2,  0,  0,  2,  2,     -38,     0,    16,   0),
    ( 0,  0,  2,  2,  2,     -31,     0,    13,   0),
    ( 0,  0,  2,  0,  0,      29,     0,     0,   0),
    (-2,  0,  1,  2,  2,      29,     0,   -12,   0),
    ( 0,  0,  0,  2,  0,      26,     0,     0,   0),
    (-2,  0,  0,  2,  0,     -22,     0,     0,   0),
    ( 0,  0, -1,  2,  1,      21,     0,   -10,   0),
    ( 0,  2,  0,  0,  0,      17,    -1,     0,   0),
    ( 2,  0, -1,  0,  1,      16,     0,    -8,   0),
    (-2,  2,  0,  2,  2,     -16,     1,     7,   0),
    ( 0,  1,  0,  0,  1,     -15,     0,     9,   0),
    (-2,  0,  1,  0,  1,     -13,     0,     7,   0),
    ( 0, -1,  0,  0,  1,     -12,     0,     6,   0),
    ( 0,  0,  2, -2,  0,      11,     0,     0,   0),
    ( 2,  0, -1,  2,  1,     -10,     0,     5,   0),
    ( 2,  0,  1,  2,  2,      -8,     0,     3,   0),
    ( 0,  1,  0,  2,  2,       7,     0,    -3,   0),
    (-2,  1,  1,  0,  0,      -7,     0,     0,   0),
    ( 0, -1,  0,  2,  2,      -7,     0,     3,   0),
    ( 2,  0,  0,  2,  1,      -7,     0,     3,   0),
    ( 2,  0,  1,  0,  0,       6,     0,     0,   0),
    (-2,  0,  2,  2,  2,       6,     0,    -3,   0),
    (-2,  0,  1,  2,  1,       6,     0,    -3,   0),
    ( 2,  0, -2,  0,  1,      -6,     0,     3,   0),
    ( 2,  0,  0,  0,  1,      -6,     0,     3,   0),
    ( 0, -1,  1,  0,  0,       5,     0,     0,   0),
    (-2, -1,  0,  2,  1,      -5,     0,     3,   0),
    (-2,  0,  0,  0,  1,      -5,     0,     3,   0),
    ( 0,  0,  2,  2,  1,      -5,     0,     3,   0),
    (-2,  0,  2,  0,  1,       4,     0,     0,   0),
    (-2,  1,  0,  2,  1,       4,     0,     0,   0),
    ( 0,  0,  1, -2,  0,       4,     0,     0,   0),
    (-1,  0,  1,  0,  0,      -4,     0,     0,   0),
    (-2,  1,  0,  0,  0,      -4,     0,     0,   0),
    ( 1,  0,  0,  0,  0,      -4,     0,     0,   0),
    ( 0,  0,  1,  2,  0,       3,     0,     0,   0),
    ( 0,  0, -2,  2,  2,      -3,     0,     0,   0),
    (-1, -1,  1,  0,  0,      -3,     0,     0,   0),
    ( 0,  1,  1,  0,  0,      -3,     0,     0,   0),
    ( 0, -1,  1,  2,  2,      -3,     0,     0,   0),
    ( 2, -1, -1,  2,  2,      -3,     0,     0,   0),
    ( 0,  0,  3,  2,  2,      -3,     0,     0,   0),
    ( 2, -1,  0,  2,  2,      -3,     0,     0,   0),
)

# Fundamental arguments (degrees, coefficients of T^0..T^3), Meeus eq. 22.1
_D = (297.85036, 445267.111480, -0.0019142, 1.0 / 189474.0)
_M = (357.52772, 35999.050340, -0.0001603, -1.0 / 300000.0)
_MP = (134.96298, 477198.867398, 0.0086972, 1.0 / 56250.0)
_F = (93.27191, 483202.017538, -0.0036825, 1.0 / 327270.0)
_OMEGA = (125.04452, -1934.136261, 0.0020708, 1.0 / 450000.0)


def _arguments(T: float) -> Tuple[float, float, float, float, float]:
    return tuple(
        math.radians(aa.normalize_degrees(aa.polynomial(c, T)))
        for c in (_D, _M, _MP, _F, _OMEGA)
    )


def nutation(jd_tt: float) -> Tuple[float, float]:
    """
    Nutation in longitude and in obliquity, (dpsi, deps) in radians.
    """
    T = aa.T_centuries(jd_tt)
    D, M, Mp, F, Om = _arguments(T)
    dpsi = 0.0
    deps = 0.0
    for d, m, mp, f, om, psi_k, psi_t, eps_k, eps_t in NUTATION_TERMS:
        arg = d * D + m * M + mp * Mp + f * F + om * Om
        dpsi += (psi_k * 1e-4 + psi_t * 1e-5 * T) * math.sin(arg)
        deps += (eps_k * 1e-4 + eps_t * 1e-5 * T) * math.cos(arg)
    return aa.arcsec_to_rad(dpsi), aa.arcsec_to_rad(deps)


def nutation_in_longitude(jd_tt: float) -> float:
    """Δψ in radians. This is the default nutation function for the solar position."""
    return nutation(jd_tt)[0]


def nutation_in_obliquity(jd_tt: float) -> float:
    """Δε in radians."""
    return nutation(jd_tt)[1]


def mean_obliquity(jd_tt: float) -> float:
    """
    Mean obliquity of the ecliptic (Meeus eq. 22.2), radians.
    Good to 1" over 2000 years around J2000.
    """
    T = aa.T_centuries(jd_tt)
    arcsec = aa.polynomial((84381.448, -46.8150, -0.00059, 0.001813), T)
    return aa.arcsec_to_rad(arcsec)
