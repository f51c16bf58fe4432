from __future__ import annotations

import math

from ..core.types import GeoPoint

EARTH_EQUATORIAL_RADIUS_KM = 6378.14
EARTH_FLATTENING = 1.0 / 298.257
EARTH_POLAR_RADIUS_KM = EARTH_EQUATORIAL_RADIUS_KM * (1.0 - EARTH_FLATTENING)


def geodesic_distance(
    p1: GeoPoint,
    p2: GeoPoint,
    equatorial_radius: float = EARTH_EQUATORIAL_RADIUS_KM,
    polar_radius: float = EARTH_POLAR_RADIUS_KM,
) -> float:
    """
    Shortest distance over the surface of an oblate spheroid (Andoyer's method,
    Meeus ch. 11). The result is in the unit of the radii; altitude is ignored.

    Accuracy is about the square of the flattening (~50 m on the Earth).
    Coincident points (S = 0) and antipodal points (C = 0) divide by zero.
    """
    f = (equatorial_radius - polar_radius) / equatorial_radius

    F = math.radians((p1.latitude + p2.latitude) / 2.0)
    G = math.radians((p1.latitude - p2.latitude) / 2.0)
    lam = math.radians((p1.longitude - p2.longitude) / 2.0)

    sin2F, cos2F = math.sin(F) ** 2, math.cos(F) ** 2
    sin2G, cos2G = math.sin(G) ** 2, math.cos(G) ** 2
    sin2L, cos2L = math.sin(lam) ** 2, math.cos(lam) ** 2

    S = sin2G * cos2L + cos2F * sin2L
    C = cos2G * cos2L + sin2F * sin2L

    omega = math.atan(math.sqrt(S / C))
    R = math.sqrt(S * C) / omega
    D = 2.0 * omega * equatorial_radius
    H1 = (3.0 * R - 1.0) / (2.0 * C)
    H2 = (3.0 * R + 1.0) / (2.0 * S)

    return D * (1.0 + f * H1 * sin2F * cos2G - f * H2 * cos2F * sin2G)
