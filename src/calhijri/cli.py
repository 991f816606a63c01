from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_CALENDARS = ("uaq", "fcna")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def cmd_to_hijri(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri to-hijri", description="Gregorian -> Hijri date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", choices=_CALENDARS, default="uaq")
    p.add_argument("--format", default=None, help='Hijri format or preset name (iso, short, medium, long, full, iso_datetime), e.g. "iD iMMMM iYYYY ioooo"')
    args = p.parse_args(argv)

    try:
        h = calhijri.to_hijri(_parse_ymd(args.date), calendar=args.calendar)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if h is None:
        print("no result")
    elif args.format:
        print(calhijri.format_hijri_date(h, args.format, calendar=args.calendar))
    else:
        print(h.isoformat())
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri to-gregorian", description="Hijri -> Gregorian date")
    p.add_argument("hy", type=int)
    p.add_argument("hm", type=int)
    p.add_argument("hd", type=int)
    p.add_argument("--calendar", choices=_CALENDARS, default="uaq")
    args = p.parse_args(argv)

    try:
        d = calhijri.to_gregorian(args.hy, args.hm, args.hd, calendar=args.calendar)
    except calhijri.InvalidHijriDate as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(d.isoformat())
    return 0


def cmd_month(argv: list[str]) -> int:
    import calhijri
    from calhijri.names import MONTHS_LONG

    p = argparse.ArgumentParser(prog="calhijri month", description="First/last Gregorian day and length of a Hijri month")
    p.add_argument("hy", type=int)
    p.add_argument("hm", type=int)
    p.add_argument("--calendar", choices=_CALENDARS, default="uaq")
    p.add_argument("--debug", action="store_true", help="FCNA only: show lunation, anchor and conjunction")
    args = p.parse_args(argv)

    try:
        b = calhijri.month_bounds(args.hy, args.hm, calendar=args.calendar)
    except calhijri.InvalidHijriDate as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"{MONTHS_LONG[args.hm - 1]} {args.hy} AH ({args.calendar})")
    print(f"  first day : {b['first_date'].isoformat()}")
    print(f"  last day  : {b['last_date'].isoformat()}")
    print(f"  length    : {b['days']} days")

    if args.debug and args.calendar == "fcna":
        info = calhijri.get_engine("fcna").month_info(args.hy, args.hm)
        print(f"  k         : {info['k']} (epoch-relative {info['k_expected']})")
        print(f"  anchor JD : {info['anchor_jd']:.5f}")
        print(f"  conjunct. : {info['conjunction_utc']}")
    return 0


def cmd_new_moon(argv: list[str]) -> int:
    from calhijri.core.time import jd_to_datetime_utc
    from calhijri.reference import astro_args as aa
    from calhijri.reference.new_moon import new_moon_jde

    p = argparse.ArgumentParser(prog="calhijri new-moon", description="True new moon for a Meeus lunation index k.")
    p.add_argument("k", type=int, help="Lunation index (k=0: 2000-01-06)")
    args = p.parse_args(argv)

    jde_mean = aa.jde_mean_new_moon(args.k)
    jde_true = new_moon_jde(args.k)

    print(f"k = {args.k}")
    print(f"  JDE mean new moon = {jde_mean:.5f}")
    print(f"  JDE true new moon = {jde_true:.5f}")
    print(f"  correction        = {(jde_true - jde_mean) * 24.0:+.3f} h")
    try:
        print(f"  UTC (TT ~ UTC)    = {jd_to_datetime_utc(jde_true).isoformat(timespec='minutes')}")
    except OverflowError:
        print("  UTC               : outside datetime range")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calhijri", description="Hijri (Umm al-Qura / FCNA) calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-hijri", help="Gregorian -> Hijri date")
    sub.add_parser("to-gregorian", help="Hijri -> Gregorian date")
    sub.add_parser("month", help="Bounds and length of a Hijri month")
    sub.add_parser("new-moon", help="True new moon instant for lunation k")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "compare"],
        help="Which diagnostic to run",
    )

    # Shortcut: `calhijri YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["to-hijri", *argv]

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "to-hijri":
        return cmd_to_hijri(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "month":
        return cmd_month(rest)

    if args.cmd == "new-moon":
        return cmd_new_moon(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calhijri.diagnostics.round_trip",
            "compare": "calhijri.diagnostics.compare_calendars",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
