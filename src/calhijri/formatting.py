from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Dict, Optional

from . import names
from .api import to_gregorian
from .core.types import CalendarSystem, HijriDate

# Longest tokens first so iMMMM is not read as iMM + "MM"; quoted text is literal.
TOKEN_RE = re.compile(
    r"'[^']*'|iYYYY|iYY|iMMMM|iMMM|iMM|iM|iDD|iD|iEEEE|iEEE|iE|ioooo|iooo"
    r"|HH|H|hh|h|mm|m|ss|s|a|z{1,3}|ZZ|Z"
)

FORMAT_PATTERNS: Dict[str, str] = {
    "iso": "iYYYY-iMM-iDD",
    "short": "iD/iM/iYYYY",
    "medium": "iD iMMM iYYYY",
    "long": "iD iMMMM iYYYY ioooo",
    "full": "iEEEE, iD iMMMM iYYYY ioooo",
    "iso_datetime": "iYYYY-iMM-iDD'T'HH:mm:ssZZ",
}


def weekday_index(d: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return d.isoweekday() % 7


def _narrow_offset(dt: datetime) -> str:
    minutes = int(dt.utcoffset().total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    h, m = divmod(abs(minutes), 60)
    return f"{sign}{h}" if m == 0 else f"{sign}{h}:{m:02d}"


def format_hijri_date(
    h: HijriDate,
    fmt: str,
    *,
    calendar: CalendarSystem | str = CalendarSystem.UAQ,
) -> str:
    """
    Substitute Hijri tokens in fmt; anything else is copied through.

      iYYYY iYY     year (4-digit padded / last two digits)
      iMMMM iMMM    month name (long / medium)
      iMM iM        month number (padded / plain)
      iDD iD        day number (padded / plain)
      iEEEE iEEE iE weekday (long / short / number with Sunday = 1)
      ioooo iooo    era ("AH")
      HH H hh h     hour (24h / 12h, padded / plain)
      mm m ss s a   minute, second, AM/PM
      z zz zzz      zone name ("UTC")
      ZZ Z          UTC offset ("+00:00" / "+0")
      '...'         literal text

    `fmt` may also be a key of FORMAT_PATTERNS. Weekday, time and zone
    tokens read the Gregorian day (00:00 UTC) of the same calendar, so an
    invalid date raises InvalidHijriDate only when one of them is used.
    """
    fmt = FORMAT_PATTERNS.get(fmt, fmt)
    greg: Optional[datetime] = None

    def gregorian() -> datetime:
        nonlocal greg
        if greg is None:
            d = to_gregorian(h.hy, h.hm, h.hd, calendar=calendar)
            greg = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
        return greg

    def sub(m: re.Match) -> str:
        tok = m.group(0)
        if tok.startswith("'"):
            return tok[1:-1]
        if tok == "iYYYY":
            return f"{h.hy:04d}"
        if tok == "iYY":
            return f"{h.hy % 100:02d}"
        if tok == "iMMMM":
            return names.MONTHS_LONG[h.hm - 1]
        if tok == "iMMM":
            return names.MONTHS_MEDIUM[h.hm - 1]
        if tok == "iMM":
            return f"{h.hm:02d}"
        if tok == "iM":
            return str(h.hm)
        if tok == "iDD":
            return f"{h.hd:02d}"
        if tok == "iD":
            return str(h.hd)
        if tok in ("iEEEE", "iEEE", "iE"):
            wd = weekday_index(gregorian().date())
            if tok == "iEEEE":
                return names.WEEKDAYS_LONG[wd]
            if tok == "iEEE":
                return names.WEEKDAYS_SHORT[wd]
            return str(names.WEEKDAYS_NUMERIC[wd])
        if tok in ("ioooo", "iooo"):
            return names.ERA

        dt = gregorian()
        if tok in ("HH", "mm", "ss"):
            return dt.strftime({"HH": "%H", "mm": "%M", "ss": "%S"}[tok])
        if tok == "H":
            return str(dt.hour)
        if tok == "m":
            return str(dt.minute)
        if tok == "s":
            return str(dt.second)
        if tok in ("hh", "h"):
            hour12 = dt.hour % 12 or 12
            return f"{hour12:02d}" if tok == "hh" else str(hour12)
        if tok == "a":
            return "AM" if dt.hour < 12 else "PM"
        if tok.startswith("z"):
            return dt.tzname()
        if tok == "ZZ":
            return dt.isoformat()[-6:]
        return _narrow_offset(dt)

    return TOKEN_RE.sub(sub, fmt)
