from __future__ import annotations

import argparse
from datetime import date, datetime, timezone
import importlib
import inspect
import logging
import math
import os
import sys

from .core.errors import ChronastroError, OutOfRangeError

ENV_LOG_LEVEL = "CHRONASTRO_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DIAG_TOOLS = {
    "deltat-compare": "chronastro.diagnostics.deltat_compare",
    "dut1-check": "chronastro.diagnostics.dut1_check",
}

PHASE_KINDS = ("new", "first", "full", "third")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_utc(s: str) -> datetime:
    """YYYY-MM-DD[THH:MM[:SS]]; naive input is UTC."""
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _fmt_dms(rad: float) -> str:
    from .reference import astro_args as aa

    d, m, s = aa.deg_to_dms(math.degrees(rad))
    return f"{d:d}°{m:02d}′{s:06.3f}″"


def _fmt_utc(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%d %H:%M:%S UTC")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_deltat(argv: list[str]) -> int:
    from .reference import deltat as dt

    p = argparse.ArgumentParser(prog="chronastro deltat", description="Print ΔT = TT - UT1 for a date.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, nargs="?", default=0, help="1..12 (default: start of year)")
    p.add_argument("day", type=int, nargs="?", default=0, help="day of month (default: mid-month)")
    p.add_argument("--model", choices=["nasa", "meeus", "both"], default="nasa")
    args = p.parse_args(argv)

    y = dt.decimal_year(args.year, args.month, args.day)
    models = ["nasa", "meeus"] if args.model == "both" else [args.model]

    print(f"decimal year = {y:.6f}")
    for m in models:
        print(f"  ΔT ({m:5s}) = {dt.delta_t(y, m):.3f} s")
    return 0


def cmd_timescales(argv: list[str]) -> int:
    from .core.time import datetime_utc_to_jd
    from .reference import deltat as dt
    from .reference import time_scales as ts

    p = argparse.ArgumentParser(prog="chronastro timescales", description="Show the time scales at a UTC instant.")
    p.add_argument("when", help="YYYY-MM-DD[THH:MM:SS] (UTC)")
    p.add_argument("--model", choices=["nasa", "meeus"], default="nasa", help="ΔT model")
    args = p.parse_args(argv)

    when = _parse_utc(args.when)
    jd_utc = datetime_utc_to_jd(when)
    delta_t = dt.delta_t(dt.decimal_year_from_datetime(when), args.model)

    print(f"UTC        = {when.isoformat()}")
    print(f"JD(UTC)    = {jd_utc:.6f}")
    print(f"ΔT         = {delta_t:.3f} s")
    try:
        leap = ts.tai_minus_utc(when)
    except OutOfRangeError:
        # no integer TAI-UTC before 1972: take UT1 = UTC
        print("TAI - UTC  = n/a (before 1972)")
        jd_ut1 = jd_utc
        jd_tt = ts.ut1_to_tt(jd_ut1, ts.make_delta_t_fn(args.model))
    else:
        dut1 = ts.ut1_minus_utc(when, delta_t_fn=ts.make_delta_t_fn(args.model))
        jd_ut1 = jd_utc + dut1 / ts.SECONDS_PER_DAY
        jd_tt = jd_utc + (leap + ts.TT_MINUS_TAI) / ts.SECONDS_PER_DAY
        print(f"TAI - UTC  = {leap:d} s")
        print(f"UT1 - UTC  = {dut1:+.3f} s")
    print(f"JD(TT)     = {jd_tt:.6f}")
    print(f"ERA        = {_fmt_dms(ts.earth_rotation_angle(jd_ut1))}")
    return 0


def _phase_kind(name: str | None):
    from .core.types import LunarPhaseKind

    return None if name is None else LunarPhaseKind(PHASE_KINDS.index(name))


def cmd_phase(argv: list[str]) -> int:
    from . import api

    p = argparse.ArgumentParser(prog="chronastro phase", description="Lunar phase nearest to a date (00:00 UTC).")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--kind", choices=PHASE_KINDS, help="only this phase")
    args = p.parse_args(argv)

    ph = api.lunar_phase_near(_parse_ymd(args.date), kind=_phase_kind(args.kind))
    print(f"{ph.kind.name:14s} {_fmt_utc(ph.datetime)}  (JD {ph.jd:.5f}, k = {ph.lunation:g})")
    return 0


def cmd_phases(argv: list[str]) -> int:
    from . import api

    p = argparse.ArgumentParser(prog="chronastro phases", description="All lunar phases in a year.")
    p.add_argument("year", type=int)
    p.add_argument("--kind", choices=PHASE_KINDS, help="only this phase")
    args = p.parse_args(argv)

    for ph in api.lunar_phases_in_year(args.year, kind=_phase_kind(args.kind)):
        print(f"{ph.kind.name:14s} {_fmt_utc(ph.datetime)}")
    return 0


def cmd_season(argv: list[str]) -> int:
    from . import api
    from .core.time import jd_to_datetime_utc

    p = argparse.ArgumentParser(prog="chronastro season", description="Equinoxes and solstices of a year.")
    p.add_argument("year", type=int)
    p.add_argument("--approx", action="store_true", help="mean instant + periodic terms only (no VSOP87 iteration)")
    args = p.parse_args(argv)

    for sm in api.seasonal_markers_in_year(args.year, approx=args.approx):
        if 1 <= args.year <= 9999:
            print(f"{sm.kind.name:18s} {_fmt_utc(jd_to_datetime_utc(sm.jd))}  (JDE {sm.jd_tt:.5f})")
        else:
            print(f"{sm.kind.name:18s} JD {sm.jd:.5f}  (JDE {sm.jd_tt:.5f})")
    return 0


def cmd_sun(argv: list[str]) -> int:
    from . import api

    p = argparse.ArgumentParser(prog="chronastro sun", description="Apparent geocentric position of the Sun.")
    p.add_argument("--jd-tt", type=float, default=2451545.0, help="Julian Date in TT (default: J2000.0)")
    args = p.parse_args(argv)

    pos = api.solar_position(args.jd_tt)
    print(f"JD_TT     = {args.jd_tt:.6f}")
    lng = pos.longitude % (2.0 * math.pi)
    print(f"longitude = {math.degrees(lng):.6f}°  ({_fmt_dms(lng)})")
    print(f"latitude  = {math.degrees(pos.latitude) * 3600.0:.3f}″")
    print(f"distance  = {pos.distance:.8f} AU")
    return 0


def cmd_planet(argv: list[str]) -> int:
    from . import api

    p = argparse.ArgumentParser(prog="chronastro planet", description="Heliocentric VSOP87D position of a body.")
    p.add_argument("body", help="mercury, venus, earth, ... (see CHRONASTRO_VSOP87D_DIR)")
    p.add_argument("--jd-tt", type=float, default=2451545.0, help="Julian Date in TT (default: J2000.0)")
    args = p.parse_args(argv)

    pos = api.body_position(args.body, args.jd_tt)
    print(f"{args.body.lower()} at JD_TT {args.jd_tt:.6f}")
    print(f"  L = {math.degrees(pos.L):.7f}°")
    print(f"  B = {math.degrees(pos.B):.7f}°")
    print(f"  R = {pos.R:.9f} AU")
    return 0


def cmd_distance(argv: list[str]) -> int:
    from . import api
    from .core.types import GeoPoint
    from .reference import geodesy

    p = argparse.ArgumentParser(prog="chronastro distance", description="Andoyer geodesic distance between two points.")
    p.add_argument("lat1", type=float, help="degrees, north positive")
    p.add_argument("lon1", type=float, help="degrees, east positive")
    p.add_argument("lat2", type=float)
    p.add_argument("lon2", type=float)
    p.add_argument("--a", type=float, default=geodesy.EARTH_EQUATORIAL_RADIUS_KM, help="equatorial radius (km)")
    p.add_argument("--f", type=float, default=geodesy.EARTH_FLATTENING, help="flattening")
    args = p.parse_args(argv)

    d = api.geodesic_distance(
        GeoPoint(args.lat1, args.lon1),
        GeoPoint(args.lat2, args.lon2),
        equatorial_radius=args.a,
        polar_radius=args.a * (1.0 - args.f),
    )
    print(f"{d:.3f} km")
    return 0


COMMANDS = {
    "deltat": (cmd_deltat, "Print ΔT for a year/month/day."),
    "timescales": (cmd_timescales, "Show JD(UTC), TAI-UTC, ΔT, DUT1, JD(TT) and ERA."),
    "phase": (cmd_phase, "Nearest lunar phase to a date."),
    "phases": (cmd_phases, "All lunar phases in a year."),
    "season": (cmd_season, "Equinoxes and solstices of a year."),
    "sun": (cmd_sun, "Apparent solar longitude and latitude."),
    "planet": (cmd_planet, "Heliocentric L, B, R of a body."),
    "distance": (cmd_distance, "Geodesic distance on the ellipsoid."),
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    env_level = os.environ.get(ENV_LOG_LEVEL, "WARNING").strip().upper()
    if env_level not in LOG_LEVELS:
        env_level = "WARNING"

    p = argparse.ArgumentParser(prog="chronastro", description="Time scales and ephemeris toolkit CLI.")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=env_level,
        help=f"logging level (default: ${ENV_LOG_LEVEL} or WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, (_, help_) in COMMANDS.items():
        sub.add_parser(name, help=help_, add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "diag":
            return _run_module_main(DIAG_TOOLS[args.tool], rest)
        fn, _ = COMMANDS[args.cmd]
        return fn(rest)
    except ChronastroError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
