"""calhijri public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_gregorian,
    to_hijri,
    is_valid,
    days_in_month,
    month_bounds,
    first_day_of_month,
    last_day_of_month,
    list_engines,
    engine_info,
    get_engine,
    make_engine,
)
from .core.errors import CalhijriError, InvalidGregorianDate, InvalidHijriDate, YearTableError
from .core.types import CalendarSystem, HijriDate
from .formatting import FORMAT_PATTERNS, format_hijri_date

__all__ = [
    "to_gregorian",
    "to_hijri",
    "is_valid",
    "days_in_month",
    "month_bounds",
    "first_day_of_month",
    "last_day_of_month",
    "list_engines",
    "engine_info",
    "get_engine",
    "make_engine",
    "format_hijri_date",
    "FORMAT_PATTERNS",
    "CalendarSystem",
    "HijriDate",
    "CalhijriError",
    "InvalidGregorianDate",
    "InvalidHijriDate",
    "YearTableError",
]
