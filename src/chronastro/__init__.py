"""chronastro public API.

Time scales (ΔT, UT1/TT/TAI/UTC), VSOP87 positions, the apparent Sun,
lunar phases, equinoxes/solstices and Andoyer geodesic distance.
"""

from .api import (
    delta_t,
    ut1_to_tt,
    tt_to_ut1,
    earth_rotation_angle,
    tai_minus_utc,
    ut1_minus_utc,
    get_coefficients,
    list_bodies,
    body_position,
    solar_position,
    apparent_solar_longitude,
    lunar_phase_near,
    lunar_phases_in_period,
    lunar_phases_in_year,
    seasonal_marker_approx,
    seasonal_marker,
    seasonal_markers_in_year,
    geodesic_distance,
)
from .core.errors import (
    ChronastroError,
    ConvergenceError,
    DataNotFoundError,
    InvalidArgumentError,
    OutOfRangeError,
)
from .core.types import (
    DeltaTModel,
    EclipticPosition,
    GeoPoint,
    HeliocentricPosition,
    LunarPhase,
    LunarPhaseKind,
    SeasonalMarker,
    SeasonalMarkerKind,
    SeriesCoefficientSet,
)

__version__ = "0.1.0"

__all__ = [
    "delta_t",
    "ut1_to_tt",
    "tt_to_ut1",
    "earth_rotation_angle",
    "tai_minus_utc",
    "ut1_minus_utc",
    "get_coefficients",
    "list_bodies",
    "body_position",
    "solar_position",
    "apparent_solar_longitude",
    "lunar_phase_near",
    "lunar_phases_in_period",
    "lunar_phases_in_year",
    "seasonal_marker_approx",
    "seasonal_marker",
    "seasonal_markers_in_year",
    "geodesic_distance",
    "ChronastroError",
    "ConvergenceError",
    "DataNotFoundError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DeltaTModel",
    "EclipticPosition",
    "GeoPoint",
    "HeliocentricPosition",
    "LunarPhase",
    "LunarPhaseKind",
    "SeasonalMarker",
    "SeasonalMarkerKind",
    "SeriesCoefficientSet",
]
