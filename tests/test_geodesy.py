# tests/test_geodesy.py

import pytest

from chronastro.core.types import GeoPoint
from chronastro.reference import astro_args as aa
from chronastro.reference import geodesy

# Meeus example 11.c
PARIS = GeoPoint(latitude=aa.dms_to_deg(48, 50, 11), longitude=aa.dms_to_deg(2, 20, 14))
WASHINGTON = GeoPoint(latitude=aa.dms_to_deg(38, 55, 17), longitude=-aa.dms_to_deg(77, 3, 56))


def test_paris_washington():
    """Meeus example 11.c: 6181.63 km"""
    assert geodesy.geodesic_distance(PARIS, WASHINGTON) == pytest.approx(6181.63, abs=0.01)


def test_symmetric():
    a = geodesy.geodesic_distance(PARIS, WASHINGTON)
    b = geodesy.geodesic_distance(WASHINGTON, PARIS)
    assert a == pytest.approx(b, abs=1e-9)


def test_sphere_equator_arc():
    # on a sphere a quarter of the equator is pi/2 * r
    d = geodesy.geodesic_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 90.0), equatorial_radius=1.0, polar_radius=1.0)
    assert d == pytest.approx(1.5707963267948966, abs=1e-12)


def test_units_follow_radii():
    km = geodesy.geodesic_distance(PARIS, WASHINGTON)
    m = geodesy.geodesic_distance(
        PARIS,
        WASHINGTON,
        equatorial_radius=geodesy.EARTH_EQUATORIAL_RADIUS_KM * 1000.0,
        polar_radius=geodesy.EARTH_POLAR_RADIUS_KM * 1000.0,
    )
    assert m == pytest.approx(km * 1000.0, rel=1e-12)
