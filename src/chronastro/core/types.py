from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum, IntEnum
from typing import Iterable, Mapping, Tuple

from .errors import InvalidArgumentError

VARIABLES = ("L", "B", "R")
MAX_EXPONENT = 5


class DeltaTModel(str, Enum):
    NASA = "nasa"
    MEEUS = "meeus"


class LunarPhaseKind(IntEnum):
    NEW_MOON = 0
    FIRST_QUARTER = 1
    FULL_MOON = 2
    THIRD_QUARTER = 3


class SeasonalMarkerKind(IntEnum):
    NORTHWARD_EQUINOX = 0
    NORTHERN_SOLSTICE = 1
    SOUTHWARD_EQUINOX = 2
    SOUTHERN_SOLSTICE = 3


@dataclass(frozen=True)
class PeriodicTerm:
    amplitude: float
    phase: float      # radians
    frequency: float  # radians per Julian millennium


@dataclass(frozen=True)
class SeriesCoefficientSet:
    """
    Periodic-series coefficients for one body, keyed by (variable, exponent).

    A missing key stands for an empty series (coefficient 0).
    """
    body: str
    terms: Mapping[Tuple[str, int], Tuple[PeriodicTerm, ...]] = field(default_factory=dict)

    def series(self, variable: str, exponent: int) -> Tuple[PeriodicTerm, ...]:
        return tuple(self.terms.get((variable, exponent), ()))

    def is_empty(self) -> bool:
        return not any(self.terms.values())

    def __len__(self) -> int:
        return sum(len(v) for v in self.terms.values())

    @classmethod
    def from_rows(
        cls,
        body: str,
        rows: Iterable[Tuple[str, int, float, float, float]],
        *,
        scale: float = 1.0,
    ) -> "SeriesCoefficientSet":
        """Build from (variable, exponent, A, B, C) rows; A is multiplied by scale."""
        acc: dict[Tuple[str, int], list[PeriodicTerm]] = {}
        for var, exp, a, b, c in rows:
            if var not in VARIABLES or not (0 <= int(exp) <= MAX_EXPONENT):
                raise InvalidArgumentError(f"bad series key ({var!r}, {exp!r}) for {body}")
            acc.setdefault((var, int(exp)), []).append(PeriodicTerm(a * scale, b, c))
        return cls(body=body, terms={k: tuple(v) for k, v in acc.items()})


@dataclass(frozen=True)
class DeltaTSample:
    year: int
    delta_t: float  # seconds


@dataclass(frozen=True)
class LeapSecondEvent:
    date: date
    value: int = 1  # -1, 0 or +1


@dataclass(frozen=True)
class HeliocentricPosition:
    """Heliocentric ecliptic coordinates: L, B in radians (-pi, pi], R in AU."""
    L: float
    B: float
    R: float


@dataclass(frozen=True)
class EclipticPosition:
    """Geocentric apparent ecliptic coordinates of the Sun (radians, AU)."""
    longitude: float
    latitude: float
    distance: float


@dataclass(frozen=True)
class GeoPoint:
    latitude: float   # degrees, north positive
    longitude: float  # degrees, east positive


@dataclass(frozen=True)
class LunarPhase:
    kind: LunarPhaseKind
    jd: float              # universal time
    lunation: float = 0.0  # Meeus lunation number k (quarter steps)

    @property
    def datetime(self) -> datetime:
        from .time import jd_to_datetime_utc
        return jd_to_datetime_utc(self.jd)


@dataclass(frozen=True)
class SeasonalMarker:
    kind: SeasonalMarkerKind
    jd: float     # universal time
    jd_tt: float  # terrestrial time

    @property
    def datetime(self) -> datetime:
        from .time import jd_to_datetime_utc
        return jd_to_datetime_utc(self.jd)
