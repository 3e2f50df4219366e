#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import solarhijri


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "solarhijri[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarhijri[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    row: int
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"


STYLES: Tuple[Style, ...] = (
    Style("Arithmetic (2820-year cycle)", row=1, marker="s", size=40, hollow=False),
    Style("Astronomical (Tehran equinox)", row=0, marker="o", size=55, hollow=True),
)


def leap_flags(np, years: "np.ndarray", is_leap: Callable[[int], bool]) -> "np.ndarray":
    return np.array([bool(is_leap(int(Y))) for Y in years], dtype=bool)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year barcode: arithmetic vs astronomical Persian calendar.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--engine", default="astronomical", help="Astronomical engine name.")
    p.add_argument("--out", default="persian_leap_years.png")
    p.add_argument("--title", default="Persian leap years: arithmetic vs astronomical")
    p.add_argument("--year-step", type=int, default=10, help="Label every k years (default: 10).")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years = np.arange(args.start_year, args.end_year + 1)
    flags: Dict[int, "np.ndarray"] = {
        1: leap_flags(np, years, solarhijri.leap_persian),
        0: leap_flags(np, years, lambda Y: solarhijri.leap_persian_astronomical(Y, engine=args.engine)),
    }
    disagree = flags[0] != flags[1]

    fig, ax = plt.subplots(figsize=(16, 2.4))
    for st in STYLES:
        x = years[flags[st.row]]
        y = np.full(x.shape, st.row)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.2, label=st.label, zorder=5)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, label=st.label, zorder=5)

    for Y in years[disagree]:
        ax.axvspan(Y - 0.5, Y + 0.5, color="tab:red", alpha=0.18, lw=0, zorder=0)

    ax.set_xlim(args.start_year - 0.5, args.end_year + 0.5)
    ax.set_ylim(-0.7, 1.7)
    ax.tick_params(axis="both", which="both", length=0)
    step = max(1, int(args.year_step))
    xt = list(range(args.start_year, args.end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(Y) for Y in xt])
    ax.set_yticks([0, 1])
    ax.set_yticklabels(["astro", "arith"])
    ax.set_xlabel("Persian year")
    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)

    print(f"Leap years disagreeing: {int(disagree.sum())} of {len(years)}")
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
