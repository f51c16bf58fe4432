from __future__ import annotations

"""
chronastro.data.providers

Coefficient-set provider keyed by body name.

Search order for get_coefficients(body):
  1) CHRONASTRO_VSOP87D_DIR environment variable: a directory holding the original
     IMCCE files (VSOP87D.mer, VSOP87D.ven, VSOP87D.ear, ...)
  2) bundled truncated series (Meeus Appendix III): earth, venus

The VSOP87D text format: a header line per block containing "VARIABLE n"
(1=L, 2=B, 3=R) and "*T**e", followed by term lines whose last three numbers
are A, B, C.
"""

from functools import lru_cache
import logging
import os
from pathlib import Path
import re
from typing import Dict, List, Tuple, Union

from ..core.errors import DataNotFoundError
from ..core.types import PeriodicTerm, SeriesCoefficientSet
from . import earth_vsop87d, venus_vsop87d

logger = logging.getLogger(__name__)

ENV_VSOP87D_DIR = "CHRONASTRO_VSOP87D_DIR"

# body name -> file extension of the IMCCE distribution
VSOP87D_FILES: Dict[str, str] = {
    "mercury": "mer",
    "venus": "ven",
    "earth": "ear",
    "mars": "mar",
    "jupiter": "jup",
    "saturn": "sat",
    "uranus": "ura",
    "neptune": "nep",
}

_BUNDLED = {
    "earth": (earth_vsop87d.EARTH_SERIES, earth_vsop87d.AMPLITUDE_SCALE),
    "venus": (venus_vsop87d.VENUS_SERIES, venus_vsop87d.AMPLITUDE_SCALE),
}

_HEADER_RE = re.compile(r"VARIABLE\s+(\d)\s*\(\s*LBR\s*\)\s*\*T\*\*(\d)")
_VARIABLES = {1: "L", 2: "B", 3: "R"}


def _normalize_name(body: str) -> str:
    name = body.strip().lower()
    if name not in VSOP87D_FILES:
        raise DataNotFoundError(f"unknown body {body!r}; expected one of {', '.join(VSOP87D_FILES)}")
    return name


def _from_bundled(name: str) -> SeriesCoefficientSet:
    series, scale = _BUNDLED[name]
    rows = ((var, exp, a, b, c) for (var, exp), terms in series.items() for a, b, c in terms)
    return SeriesCoefficientSet.from_rows(name, rows, scale=scale)


def parse_vsop87d(lines, body: str) -> SeriesCoefficientSet:
    """Parse VSOP87D text lines into a coefficient set."""
    acc: Dict[Tuple[str, int], List[PeriodicTerm]] = {}
    key = None
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        m = _HEADER_RE.search(line)
        if m:
            key = (_VARIABLES[int(m.group(1))], int(m.group(2)))
            acc.setdefault(key, [])
            continue
        if key is None:
            raise DataNotFoundError(f"{body}: term before any VARIABLE header at line {lineno}")
        fields = line.split()
        try:
            a, b, c = (float(x) for x in fields[-3:])
        except ValueError as e:
            raise DataNotFoundError(f"{body}: malformed term at line {lineno}: {line.strip()!r}") from e
        acc[key].append(PeriodicTerm(a, b, c))

    cs = SeriesCoefficientSet(body=body, terms={k: tuple(v) for k, v in acc.items()})
    if cs.is_empty():
        raise DataNotFoundError(f"{body}: no VSOP87D terms found")
    return cs


def load_vsop87d_file(path: Union[str, Path], body: str) -> SeriesCoefficientSet:
    """Read an original-format VSOP87D file."""
    p = Path(path).expanduser()
    if not p.is_file():
        raise DataNotFoundError(f"VSOP87D file not found: {p}")
    with p.open("r", encoding="ascii", errors="replace") as f:
        cs = parse_vsop87d(f, body)
    logger.info("loaded %d VSOP87D terms for %s from %s", len(cs), body, p)
    return cs


def vsop87d_path(body: str) -> Union[Path, None]:
    """Path of the VSOP87D file for body under $CHRONASTRO_VSOP87D_DIR, if one exists."""
    d = os.environ.get(ENV_VSOP87D_DIR, "").strip()
    if not d:
        return None
    p = Path(d).expanduser() / f"VSOP87D.{VSOP87D_FILES[_normalize_name(body)]}"
    return p if p.is_file() else None


@lru_cache(maxsize=None)
def _get_coefficients(name: str, vsop_dir: str) -> SeriesCoefficientSet:
    # vsop_dir is part of the cache key so that changing the env var takes effect
    p = vsop87d_path(name)
    if p is not None:
        return load_vsop87d_file(p, name)

    if name in _BUNDLED:
        logger.debug("using bundled truncated VSOP87D series for %s", name)
        return _from_bundled(name)

    raise DataNotFoundError(
        f"no coefficients for {name!r}: only earth and venus are bundled; "
        f"point {ENV_VSOP87D_DIR} at the VSOP87D files for other bodies"
    )


def get_coefficients(body: str) -> SeriesCoefficientSet:
    """Coefficient set for a body (case-insensitive name)."""
    return _get_coefficients(_normalize_name(body), os.environ.get(ENV_VSOP87D_DIR, "").strip())


def list_bodies() -> Tuple[str, ...]:
    """Bodies that can currently be served (bundled or found on disk)."""
    return tuple(b for b in VSOP87D_FILES if b in _BUNDLED or vsop87d_path(b) is not None)


def clear_cache() -> None:
    _get_coefficients.cache_clear()
