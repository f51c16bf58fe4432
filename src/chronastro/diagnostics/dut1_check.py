#!/usr/bin/env python3
from __future__ import annotations

"""
Consistency check of the ΔT models against the leap-second list.

UT1 - UTC = 32.184 + (TAI - UTC) - ΔT must stay inside ±0.9 s while the leap
seconds are kept up to date, so a larger value points at the ΔT model (or at a
missing leap second).
"""

import argparse
from dataclasses import dataclass
from datetime import date
from typing import List

from chronastro.reference import deltat as dt
from chronastro.reference import time_scales as ts

DUT1_LIMIT = 0.9  # seconds


@dataclass(frozen=True)
class Dut1Row:
    year: int
    leap_seconds: int
    delta_t: float
    dut1: float

    @property
    def flagged(self) -> bool:
        return abs(self.dut1) > DUT1_LIMIT


def dut1_rows(y0: int = 1972, y1: int = 2022, model: str = "nasa") -> List[Dut1Row]:
    fn = ts.make_delta_t_fn(model)
    out: List[Dut1Row] = []
    for year in range(y0, y1 + 1):
        d = date(year, 1, 1)
        out.append(
            Dut1Row(
                year=year,
                leap_seconds=ts.total_leap_seconds(d),
                delta_t=dt.delta_t(float(year), model),
                dut1=ts.ut1_minus_utc(d, delta_t_fn=fn),
            )
        )
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Tabulate DUT1 = UT1 - UTC implied by a ΔT model on each 1 January.")
    p.add_argument("--y0", type=int, default=1972)
    p.add_argument("--y1", type=int, default=2022)
    p.add_argument("--model", choices=["nasa", "meeus"], default="nasa")
    p.add_argument("--strict", action="store_true", help="exit with status 1 if any |DUT1| > 0.9 s")
    args = p.parse_args(argv)

    if args.y0 < 1972:
        raise SystemExit("--y0 must be >= 1972 (no leap seconds before)")

    rows = dut1_rows(args.y0, args.y1, args.model)

    print(f"{'year':>4}  {'leap':>4}  {'ΔT (s)':>8}  {'DUT1 (s)':>8}")
    for r in rows:
        mark = "  <-- |DUT1| > 0.9" if r.flagged else ""
        print(f"{r.year:4d}  {r.leap_seconds:4d}  {r.delta_t:8.3f}  {r.dut1:+8.3f}{mark}")

    n_bad = sum(r.flagged for r in rows)
    print(f"\n{n_bad} of {len(rows)} years flagged ({args.model})")
    return 1 if (args.strict and n_bad) else 0


if __name__ == "__main__":
    raise SystemExit(main())
