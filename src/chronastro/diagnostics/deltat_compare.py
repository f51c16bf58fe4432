#!/usr/bin/env python3
from __future__ import annotations

import argparse


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "chronastro[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "chronastro[diagnostics]"') from e


def sample_models(y0: float, y1: float, step: float):
    """Years and both ΔT curves as numpy arrays."""
    np = _need_numpy()
    from chronastro.reference import deltat as dt

    ys = np.arange(float(y0), float(y1) + 1e-12, float(step), dtype=float)
    nasa = np.array([dt.delta_t_nasa(float(y)) for y in ys], dtype=float)
    meeus = np.array([dt.delta_t_meeus(float(y)) for y in ys], dtype=float)
    return ys, nasa, meeus


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot the NASA and Meeus ΔT models and their difference.")
    p.add_argument("--y0", type=int, default=-1999, help="start year of the full-range panel")
    p.add_argument("--y1", type=int, default=3000, help="end year of the full-range panel")
    p.add_argument("--zoom", type=int, nargs=2, default=(1600, 2100), metavar=("Y0", "Y1"), help="zoom panel range")
    p.add_argument("--step", type=float, default=1.0, help="sampling step in years")
    p.add_argument("--out", default="deltat_compare.png", help="output image filename")
    args = p.parse_args(argv)

    if args.y1 < args.y0 or args.zoom[1] < args.zoom[0]:
        raise SystemExit("year ranges must be increasing")

    plt = _need_matplotlib()

    fig, (ax_full, ax_zoom, ax_diff) = plt.subplots(3, 1, figsize=(10, 11))

    ys, nasa, meeus = sample_models(args.y0, args.y1, args.step)
    ax_full.plot(ys, nasa, linewidth=2, label="NASA (Espenak–Meeus)")
    ax_full.plot(ys, meeus, linewidth=1.5, linestyle="--", label="Meeus ch. 10")
    ax_full.set_title("ΔT = TT − UT1 (seconds)")

    zs, znasa, zmeeus = sample_models(args.zoom[0], args.zoom[1], min(args.step, 0.25))
    ax_zoom.plot(zs, znasa, linewidth=2, label="NASA")
    ax_zoom.plot(zs, zmeeus, linewidth=1.5, linestyle="--", label="Meeus")
    ax_zoom.set_title(f"ΔT {args.zoom[0]}..{args.zoom[1]}")

    ax_diff.plot(zs, znasa - zmeeus, linewidth=2)
    ax_diff.set_title("NASA − Meeus (seconds)")

    for ax in (ax_full, ax_zoom, ax_diff):
        ax.set_xlabel("Year")
        ax.grid(True, alpha=0.3)
    ax_full.legend()
    ax_zoom.legend()

    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
