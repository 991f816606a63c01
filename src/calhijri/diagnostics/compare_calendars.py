#!/usr/bin/env python3
from __future__ import annotations

import argparse
from collections import Counter
from datetime import date
from typing import List, Tuple

import calhijri
from calhijri.names import MONTHS_SHORT


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calhijri[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calhijri[diagnostics]"') from e


def month_offsets(from_year: int, to_year: int) -> List[Tuple[int, int, date, date, int]]:
    """
    (hy, hm, uaq_start, fcna_start, fcna - uaq in days) for every month
    in [from_year, to_year].
    """
    rows = []
    for hy in range(from_year, to_year + 1):
        for hm in range(1, 13):
            u = calhijri.first_day_of_month(hy, hm, calendar="uaq")
            f = calhijri.first_day_of_month(hy, hm, calendar="fcna")
            rows.append((hy, hm, u, f, (f - u).days))
    return rows


def plot_offsets(rows, out: str | None) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    x = np.array([hy + (hm - 1) / 12.0 for hy, hm, _, _, _ in rows], dtype=float)
    y = np.array([off for *_, off in rows], dtype=float)

    fig, ax = plt.subplots(figsize=(10, 3.5))
    ax.scatter(x, y, s=8, alpha=0.7)
    ax.axhline(0.0, color="k", linewidth=0.5)
    ax.set_xlabel("Hijri year")
    ax.set_ylabel("FCNA - Umm al-Qura (days)")
    ax.set_title("Month start offsets")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if out:
        fig.savefig(out, dpi=150)
        print(f"Saved {out}")
    else:
        plt.show()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare Umm al-Qura and FCNA month starts.")
    p.add_argument("--from-year", type=int, default=1440)
    p.add_argument("--to-year", type=int, default=1450)
    p.add_argument("--quiet", action="store_true", help="Only print the summary.")
    p.add_argument("--plot", action="store_true", help="Scatter plot of offsets (needs numpy + matplotlib).")
    p.add_argument("--out", type=str, default=None, help="Save plot to this file instead of showing it.")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    rows = month_offsets(Y0, Y1)

    if not args.quiet:
        print(f"{'Month':<14}  {'UAQ':<10}  {'FCNA':<10}  diff")
        print("-" * 44)
        for hy, hm, u, f, off in rows:
            label = f"{MONTHS_SHORT[hm - 1]} {hy}"
            print(f"{label:<14}  {u.isoformat():<10}  {f.isoformat():<10}  {off:+d}")

    counts = Counter(off for *_, off in rows)
    print(f"\n{len(rows)} months, offsets (FCNA - UAQ):")
    for off in sorted(counts):
        print(f"  {off:+d} days: {counts[off]}")

    if args.plot:
        plot_offsets(rows, args.out)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
