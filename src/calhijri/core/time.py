from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
from typing import Any

from .errors import InvalidGregorianDate

JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_DAY = timedelta(days=1)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def midnight_jd(d: date) -> float:
    """JD at 00:00 UTC of the civil day d (JD counts from noon)."""
    return to_jdn(d) - 0.5


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD (UTC). Requires timezone-aware datetime.

    Works from the timedelta to the Unix epoch instead of dt.timestamp(),
    so dates far before 1970 do not depend on the platform's time_t.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return JD_UNIX_EPOCH + (dt - _UNIX_EPOCH) / ONE_DAY


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD (UTC) -> timezone-aware datetime in UTC, rounded to the microsecond.

    Raises OverflowError outside datetime's year 1..9999 range.
    """
    return _UNIX_EPOCH + timedelta(days=jd - JD_UNIX_EPOCH)


def utc_midnight(d: date) -> datetime:
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def start_of_utc_day(dt: datetime) -> datetime:
    """Truncate an aware datetime down to 00:00 UTC of its UTC calendar day."""
    return dt.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)


def utc_calendar_day(value: Any) -> date:
    """
    Reduce a Gregorian argument to a plain calendar day.

    - aware datetime: converted to UTC, time of day dropped
    - naive datetime: taken as UTC
    - date: used as is
    - str: ISO 8601 "YYYY-MM-DD" (or a full ISO datetime)
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            try:
                value = value.astimezone(timezone.utc)
            except OverflowError as e:
                raise InvalidGregorianDate(f"Gregorian date out of range: {value!r}") from e
        return date(value.year, value.month, value.day)
    if isinstance(value, date):
        return date(value.year, value.month, value.day)
    if isinstance(value, str):
        s = value.strip()
        try:
            if len(s) == 10:
                return date.fromisoformat(s)
            return utc_calendar_day(datetime.fromisoformat(s))
        except ValueError as e:
            raise InvalidGregorianDate(f"Invalid Gregorian date: {value!r}") from e
    raise InvalidGregorianDate(f"Invalid Gregorian date: {value!r}")


def add_days(d: date, days: int) -> date:
    """Calendar-day offset; no time zone or DST involved."""
    return d + timedelta(days=days)
