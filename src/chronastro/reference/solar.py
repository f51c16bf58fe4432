# reference/solar.py

from __future__ import annotations

import math
from typing import Callable, Optional, Tuple

from ..core.types import EclipticPosition, SeriesCoefficientSet
from . import astro_args as aa
from .nutation import nutation_in_longitude
from .vsop87 import body_position

# nutation provider: JD(TT) -> Δψ (radians)
NutationFn = Callable[[float], float]


# Daily variation of the Sun's longitude (arcsec), Meeus ch. 25.
# (amplitude ", phase deg, rate deg per Julian millennium), one block per power of tau.
ABERRATION_TERMS_0 = (
    (118.568, 87.5287, 359993.7286),
    (2.476, 85.0561, 719987.4571),
    (1.376, 27.8502, 4452671.1152),
    (0.119, 73.1375, 450368.8564),
    (0.114, 337.2264, 329644.6718),
    (0.086, 222.5400, 659289.3436),
    (0.078, 162.8136, 9224659.7915),
    (0.054, 82.5823, 1079981.1857),
    (0.052, 171.5189, 225184.4282),
    (0.034, 30.3214, 4092677.3866),
    (0.033, 119.8105, 337181.4711),
    (0.023, 247.5418, 299295.6151),
    (0.023, 325.1526, 315559.5560),
    (0.021, 155.1241, 675553.2846),
)
ABERRATION_TERMS_1 = (
    (7.311, 333.4515, 359993.7286),
    (0.305, 330.9814, 719987.4571),
    (0.010, 328.5170, 1079981.1857),
)
ABERRATION_TERMS_2 = (
    (0.309, 241.4518, 359993.7286),
    (0.021, 205.0482, 719987.4571),
    (0.004, 297.8610, 4452671.1152),
    (0.010, 154.7066, 359993.7286),
)

ABERRATION_CONSTANT = 0.005775518  # light time for 1 AU, in days


def _sin_sum(terms, tau: float) -> float:
    return sum(a * math.sin(math.radians(b + c * tau)) for a, b, c in terms)


def daily_variation_arcsec(tau: float) -> float:
    """Δλ, the Sun's daily motion in longitude (arcsec/day), tau in Julian millennia (TT)."""
    return (
        3548.193
        + _sin_sum(ABERRATION_TERMS_0, tau)
        + _sin_sum(ABERRATION_TERMS_1, tau) * tau
        + _sin_sum(ABERRATION_TERMS_2, tau) * tau * tau
    )


def aberration(tau: float, R_au: float) -> float:
    """Annual aberration in longitude (radians): -0.005775518 * R * Δλ."""
    return -ABERRATION_CONSTANT * R_au * aa.arcsec_to_rad(daily_variation_arcsec(tau))


def fk5_correction(lng: float, lat: float, T: float) -> Tuple[float, float]:
    """
    Reduce VSOP87 (dynamical) ecliptic coordinates to the FK5 system, Meeus eq. 32.3.
    T in Julian centuries (TT). Angles in radians.
    """
    lam_p = lng - math.radians(1.397) * T - math.radians(0.00031) * T * T
    d_lng = -aa.arcsec_to_rad(0.09033)
    d_lat = aa.arcsec_to_rad(0.03916) * (math.cos(lam_p) - math.sin(lam_p))
    return lng + d_lng, lat + d_lat


def solar_position(
    earth: SeriesCoefficientSet,
    jd_tt: float,
    nutation_fn: Optional[NutationFn] = None,
) -> EclipticPosition:
    """
    Apparent geocentric ecliptic longitude/latitude of the Sun at JD(TT).

    Steps: Earth heliocentric position (VSOP87) -> reverse to geocentric Sun ->
    FK5 -> + nutation in longitude -> + aberration. Longitude is wrapped to (-pi, pi].
    """
    nut = nutation_fn or nutation_in_longitude
    pos = body_position(earth, jd_tt)

    lng = aa.normalize_radians(pos.L + math.pi)
    lat = -pos.B

    T = aa.T_centuries(jd_tt)
    lng, lat = fk5_correction(lng, lat, T)

    lng += nut(jd_tt)
    lng += aberration(T / 10.0, pos.R)

    return EclipticPosition(longitude=aa.normalize_radians(lng), latitude=lat, distance=pos.R)


def apparent_solar_longitude(
    earth: SeriesCoefficientSet,
    jd_tt: float,
    nutation_fn: Optional[NutationFn] = None,
) -> float:
    """Apparent solar longitude (radians, (-pi, pi])."""
    return solar_position(earth, jd_tt, nutation_fn).longitude
