# reference/vsop87.py

from __future__ import annotations

import math
from typing import Iterable

from ..core.errors import DataNotFoundError
from ..core.types import HeliocentricPosition, MAX_EXPONENT, PeriodicTerm, SeriesCoefficientSet
from . import astro_args as aa


def sum_series(terms: Iterable[PeriodicTerm], tau: float) -> float:
    """Σ A cos(B + C tau) over one (variable, exponent) block."""
    return math.fsum(t.amplitude * math.cos(t.phase + t.frequency * tau) for t in terms)


def evaluate_variable(coefficients: SeriesCoefficientSet, variable: str, tau: float) -> float:
    """
    VSOP87 variable as a polynomial in tau whose coefficients are periodic sums:

      X(tau) = Σ_e (Σ_terms A cos(B + C tau)) * tau^e ,  e = 0..5
    """
    blocks = [sum_series(coefficients.series(variable, e), tau) for e in range(MAX_EXPONENT + 1)]
    return aa.polynomial(blocks, tau)


def body_position(coefficients: SeriesCoefficientSet, jd_tt: float) -> HeliocentricPosition:
    """
    Heliocentric ecliptic position of a body at JD(TT).

    L and B are wrapped to (-pi, pi]; R is in AU.
    """
    if coefficients is None or coefficients.is_empty():
        name = getattr(coefficients, "body", "?")
        raise DataNotFoundError(f"no VSOP87 coefficients for body {name!r}")

    tau = aa.T_millennia(jd_tt)
    L = evaluate_variable(coefficients, "L", tau)
    B = evaluate_variable(coefficients, "B", tau)
    R = evaluate_variable(coefficients, "R", tau)
    return HeliocentricPosition(L=aa.normalize_radians(L), B=aa.normalize_radians(B), R=R)
