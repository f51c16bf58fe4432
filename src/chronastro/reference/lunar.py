# reference/lunar.py

from __future__ import annotations

import logging
import math
from typing import List, Optional

from ..core.errors import ConvergenceError, InvalidArgumentError, OutOfRangeError
from ..core.time import year_end_jd, year_start_jd
from ..core.types import LunarPhase, LunarPhaseKind
from . import astro_args as aa
from . import time_scales as ts

logger = logging.getLogger(__name__)


# Meeus lunation 0 starts at the new moon of 2000-01-06 18:14 UTC.
LUNATION_0_JD = 2451549.5 + (18 * 60 + 14) / 1440.0
DAYS_PER_LUNATION = 29.530588861


# Periodic corrections of Meeus ch. 49.
# (coefficient in days, power of E, M, M', F, Omega)
NEW_MOON_TERMS = (
    (-0.40720, 0, 0, 1, 0, 0),
    (0.17241, 1, 1, 0, 0, 0),
    (0.01608, 0, 0, 2, 0, 0),
    (0.01039, 0, 0, 0, 2, 0),
    (0.00739, 1, -1, 1, 0, 0),
    (-0.00514, 1, 1, 1, 0, 0),
    (0.00208, 2, 2, 0, 0, 0),
)

FULL_MOON_TERMS = (
    (-0.40614, 0, 0, 1, 0, 0),
    (0.17302, 1, 1, 0, 0, 0),
    (0.01614, 0, 0, 2, 0, 0),
    (0.01043, 0, 0, 0, 2, 0),
    (0.00734, 1, -1, 1, 0, 0),
    (-0.00515, 1, 1, 1, 0, 0),
    (0.00209, 2, 2, 0, 0, 0),
)

# common to new and full moon
SYZYGY_TERMS = (
    (-0.00111, 0, 0, 1, -2, 0),
    (-0.00057, 0, 0, 1, 2, 0),
    (0.00056, 1, 1, 2, 0, 0),
    (-0.00042, 0, 0, 3, 0, 0),
    (0.00042, 1, 1, 0, 2, 0),
    (0.00038, 1, 1, 0, -2, 0),
    (-0.00024, 1, -1, 2, 0, 0),
    (-0.00017, 0, 0, 0, 0, 1),
    (-0.00007, 0, 2, 1, 0, 0),
    (0.00004, 0, 0, 2, -2, 0),
    (0.00004, 0, 3, 0, 0, 0),
    (0.00003, 0, 1, 1, -2, 0),
    (0.00003, 0, 0, 2, 2, 0),
    (-0.00003, 0, 1, 1, 2, 0),
    (0.00003, 0, -1, 1, 2, 0),
    (-0.00002, 0, -1, 1, -2, 0),
    (-0.00002, 0, 1, 3, 0, 0),
    (0.00002, 0, 0, 4, 0, 0),
)

QUARTER_TERMS = (
    (-0.62801, 0, 0, 1, 0, 0),
    (0.17172, 1, 1, 0, 0, 0),
    (-0.01183, 1, 1, 1, 0, 0),
    (0.00862, 0, 0, 2, 0, 0),
    (0.00804, 0, 0, 0, 2, 0),
    (0.00454, 1, -1, 1, 0, 0),
    (0.00204, 2, 2, 0, 0, 0),
    (-0.00180, 0, 0, 1, -2, 0),
    (-0.00070, 0, 0, 1, 2, 0),
    (-0.00040, 0, 0, 3, 0, 0),
    (-0.00034, 1, -1, 2, 0, 0),
    (0.00032, 1, 1, 0, 2, 0),
    (0.00032, 1, 1, 0, -2, 0),
    (-0.00028, 2, 2, 1, 0, 0),
    (0.00027, 1, 1, 2, 0, 0),
    (-0.00017, 0, 0, 0, 0, 1),
    (-0.00005, 0, -1, 1, -2, 0),
    (0.00004, 0, 0, 2, 2, 0),
    (-0.00004, 0, 1, 1, 2, 0),
    (0.00004, 0, -2, 1, 0, 0),
    (0.00003, 0, 1, 1, -2, 0),
    (0.00003, 0, 3, 0, 0, 0),
    (0.00002, 0, 0, 2, -2, 0),
    (0.00002, 0, -1, 1, 2, 0),
    (-0.00002, 0, 1, 3, 0, 0),
)

# Planetary arguments A2..A14: (degrees at k=0, degrees per lunation, coefficient in days)
# A1 carries an extra -0.009173 T^2 and is handled separately.
PLANETARY_TERMS = (
    (251.88, 0.016321, 0.000165),
    (251.83, 26.651886, 0.000164),
    (349.42, 36.412478, 0.000126),
    (84.66, 18.206239, 0.000110),
    (141.74, 53.303771, 0.000062),
    (207.14, 2.453732, 0.000060),
    (154.84, 7.306860, 0.000056),
    (34.52, 27.261239, 0.000047),
    (207.19, 0.121824, 0.000042),
    (291.34, 1.844379, 0.000040),
    (161.72, 24.198154, 0.000037),
    (239.56, 25.513099, 0.000035),
    (331.55, 3.592518, 0.000023),
)


def _rad(deg: float) -> float:
    return math.radians(aa.normalize_degrees(deg))


def _periodic(terms, E: float, M: float, Mp: float, F: float, Om: float) -> float:
    s = 0.0
    for c, e_pow, m, mp, f, om in terms:
        s += c * (E ** e_pow) * math.sin(m * M + mp * Mp + f * F + om * Om)
    return s


def phase_jde(k: float, T: float) -> float:
    """
    True instant (JDE, TT) of the lunar phase with quarter-integer lunation number k.

    T is Julian centuries (TT) at the approximate instant; it only enters the
    slow secular terms, so a rough value is fine.
    """
    n = int(round(k * 4.0))
    kind = LunarPhaseKind(n % 4)
    T2 = T * T
    T3 = T2 * T
    T4 = T3 * T

    jde = 2451550.09766 + 29.530588861 * k \
        + 0.00015437 * T2 - 0.000000150 * T3 + 0.00000000073 * T4

    E = 1.0 - 0.002516 * T - 0.0000074 * T2

    M = _rad(2.5534 + 29.10535670 * k - 0.0000014 * T2 - 0.00000011 * T3)
    Mp = _rad(201.5643 + 385.81693528 * k + 0.0107582 * T2 + 0.00001238 * T3 - 0.000000058 * T4)
    F = _rad(160.7108 + 390.67050284 * k - 0.0016118 * T2 - 0.00000227 * T3 + 0.000000011 * T4)
    Om = _rad(124.7746 - 1.56375588 * k + 0.0020672 * T2 + 0.00000215 * T3)

    if kind is LunarPhaseKind.NEW_MOON:
        c1 = _periodic(NEW_MOON_TERMS, E, M, Mp, F, Om) + _periodic(SYZYGY_TERMS, E, M, Mp, F, Om)
    elif kind is LunarPhaseKind.FULL_MOON:
        c1 = _periodic(FULL_MOON_TERMS, E, M, Mp, F, Om) + _periodic(SYZYGY_TERMS, E, M, Mp, F, Om)
    else:
        c1 = _periodic(QUARTER_TERMS, E, M, Mp, F, Om)
        W = (
            0.00306
            - 0.00038 * E * math.cos(M)
            + 0.00026 * math.cos(Mp)
            - 0.00002 * math.cos(Mp - M)
            + 0.00002 * math.cos(Mp + M)
            + 0.00002 * math.cos(2.0 * F)
        )
        c1 += W if kind is LunarPhaseKind.FIRST_QUARTER else -W

    c2 = 0.000325 * math.sin(_rad(299.77 + 0.107408 * k - 0.009173 * T2))
    for a0, a1, coef in PLANETARY_TERMS:
        c2 += coef * math.sin(_rad(a0 + a1 * k))

    return jde + c1 + c2


def lunar_phase_for_lunation(k: float, delta_t_fn: Optional[ts.DeltaTFn] = None) -> LunarPhase:
    """Solve the phase with quarter-integer lunation number k; the instant is in universal time."""
    n = int(round(k * 4.0))
    k = n / 4.0

    jd_approx = LUNATION_0_JD + k * DAYS_PER_LUNATION
    T = aa.T_centuries(ts.ut1_to_tt(jd_approx, delta_t_fn))

    jde = phase_jde(k, T)
    jd = ts.tt_to_ut1(jde, delta_t_fn)
    return LunarPhase(kind=LunarPhaseKind(n % 4), jd=jd, lunation=k)


def _phase_kind(kind) -> LunarPhaseKind:
    try:
        return LunarPhaseKind(kind)
    except ValueError as e:
        raise InvalidArgumentError(f"lunar phase kind must be 0..3: {kind!r}") from e


def lunar_phase_near(
    jd_utc: float,
    delta_t_fn: Optional[ts.DeltaTFn] = None,
    kind: Optional[LunarPhaseKind] = None,
) -> LunarPhase:
    """
    The lunar phase whose mean instant is nearest to jd_utc.

    With kind set, only phases of that kind are considered.
    """
    q = (jd_utc - LUNATION_0_JD) / DAYS_PER_LUNATION * 4.0
    if kind is None:
        n = int(round(q))
    else:
        kind = _phase_kind(kind)
        n = 4 * int(round((q - kind) / 4.0)) + kind
    phase = lunar_phase_for_lunation(n / 4.0, delta_t_fn)
    logger.debug("lunar phase near JD %.5f: k=%.2f kind=%s JD=%.6f", jd_utc, phase.lunation, phase.kind.name, phase.jd)
    return phase


def lunar_phases_in_period(
    start_jd: float,
    end_jd: float,
    delta_t_fn: Optional[ts.DeltaTFn] = None,
    kind: Optional[LunarPhaseKind] = None,
) -> List[LunarPhase]:
    """
    All lunar phases with start_jd <= jd <= end_jd (universal time), in order.

    Starts from the phase nearest start_jd and advances a quarter lunation at a time.
    With kind set, only phases of that kind are returned.
    """
    if end_jd < start_jd:
        raise InvalidArgumentError(f"period end {end_jd} precedes start {start_jd}")
    if kind is not None:
        kind = _phase_kind(kind)

    max_steps = int((end_jd - start_jd) / (DAYS_PER_LUNATION / 4.0)) + 16

    out: List[LunarPhase] = []
    phase = lunar_phase_near(start_jd, delta_t_fn)
    if start_jd <= phase.jd <= end_jd:
        out.append(phase)

    for _ in range(max_steps):
        phase = lunar_phase_for_lunation(phase.lunation + 0.25, delta_t_fn)
        if phase.jd > end_jd:
            if kind is not None:
                return [p for p in out if p.kind is kind]
            return out
        out.append(phase)

    raise ConvergenceError(f"lunar phase search did not pass JD {end_jd} after {max_steps} steps")


def lunar_phases_in_year(
    year: int,
    delta_t_fn: Optional[ts.DeltaTFn] = None,
    kind: Optional[LunarPhaseKind] = None,
) -> List[LunarPhase]:
    """All lunar phases in a Gregorian calendar year (1..9999), optionally of one kind."""
    if not 1 <= year <= 9999:
        raise OutOfRangeError(f"year must be in 1..9999: {year}")
    return lunar_phases_in_period(year_start_jd(year), year_end_jd(year), delta_t_fn, kind)
