from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Tuple

import calhijri


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    # "uaq,fcna" -> ["uaq", "fcna"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> Tuple[int, int]:
    """Returns (failures, days outside the calendar's range)."""
    random.seed(seed)
    failures = 0
    outside = 0

    for _ in range(N):
        d0 = random_date(start, end)

        h = calhijri.to_hijri(d0, calendar=calendar)
        if h is None:
            outside += 1
            continue

        back = calhijri.to_gregorian(*h.astuple(), calendar=calendar)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("d0:", d0)
            print("hijri:", h)
            print("back:", back)
            if failures >= max_failures:
                break

    return failures, outside


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> hijri -> gregorian.")
    p.add_argument("--calendars", type=str, default="uaq,fcna", help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=42, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    total = 0
    for cal in parse_calendars(args.calendars):
        fails, outside = roundtrip_test(cal, args.N, start, end, args.seed, max_failures=args.max_failures)
        total += fails
        print(f"{cal}: N={args.N} failures={fails} outside_range={outside}")

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
