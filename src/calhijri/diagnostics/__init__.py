"""Diagnostics package.

- round_trip: random Gregorian -> Hijri -> Gregorian sweeps (no extras)
- compare_calendars: Umm al-Qura vs FCNA month starts; --plot needs the diagnostics extras
"""

__all__ = ["round_trip", "compare_calendars"]
