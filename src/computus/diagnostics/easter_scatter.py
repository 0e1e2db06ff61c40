#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import computus


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "computus[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "computus[diagnostics]"') from e


def days_after_equinox(d: date) -> int:
    """Days after the ecclesiastical equinox, with March 22 = 1."""
    return (d - date(d.year, 3, 21)).days


def rolling_median(np, y, win: int = 19):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(days_after_equinox(computus.easter(int(Y))))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Gregorian Easter dates across years.")
    p.add_argument("--from-year", type=int, default=1583)
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=19, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    x, y = build_series(np, args.from_year, args.to_year)
    ax.scatter(x, y, s=12, marker="o", c="tab:blue", linewidths=0.0, alpha=0.35, label="Easter Sunday")

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="tab:red", linewidth=1.8, label="Rolling median")

    # March 22 .. April 25
    ax.set_ylim(0, 36)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Days after March 21")
    ax.set_title("Date of Easter Sunday")
    ax.legend(loc="upper right", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
