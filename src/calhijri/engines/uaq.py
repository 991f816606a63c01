"""
calhijri.engines.uaq
--------------------
Table lookup engine for the Umm al-Qura calendar. Pure calendar-day
arithmetic over the year table; no astronomy.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional, Tuple

from ..core.errors import InvalidHijriDate
from ..core.time import add_days, utc_calendar_day
from ..core.types import EngineId, HijriDate, YearRecord, well_formed
from .year_table import YearTable

logger = logging.getLogger(__name__)


def days_in_month(record: YearRecord, hm: int) -> int:
    return record.month_length(hm)


class UmmAlQuraEngine:
    def __init__(self, id: EngineId, table: YearTable):
        self.id = id
        self.table = table

    # ---------------------------------------------------------
    # Validity
    # ---------------------------------------------------------

    def is_valid(self, hy: int, hm: int, hd: int) -> bool:
        if not well_formed(hy, hm, hd):
            return False
        record = self.table.find_year(hy)
        if record is None:
            return False
        return hd <= days_in_month(record, hm)

    def days_in_month(self, hy: int, hm: int) -> int:
        record = self.table.find_year(hy) if well_formed(hy, hm, 1) else None
        if record is None:
            raise InvalidHijriDate(
                f"No Umm al-Qura month {hy}/{hm} "
                f"(table covers {self.table.first_year}..{self.table.last_year})"
            )
        return days_in_month(record, hm)

    # ---------------------------------------------------------
    # Forward: Hijri -> Gregorian
    # ---------------------------------------------------------

    def offset_from_year_start(self, hy: int, hm: int, hd: int) -> Optional[Tuple[YearRecord, int]]:
        """
        (record, days since 1 Muharram) without validating hm/hd;
        None when hy has no table record.
        """
        record = self.table.find_year(hy)
        if record is None:
            return None
        return record, record.days_before_month(hm) + hd - 1

    def month_start(self, hy: int, hm: int) -> Optional[date]:
        """Gregorian date of day 1 of (hy, hm); None outside the table."""
        hit = self.offset_from_year_start(hy, hm, 1)
        if hit is None:
            return None
        record, offset = hit
        return add_days(record.start, offset)

    def to_gregorian(self, hy: int, hm: int, hd: int) -> date:
        if not self.is_valid(hy, hm, hd):
            raise InvalidHijriDate(f"Invalid Umm al-Qura date {hy}/{hm}/{hd}")
        record, offset = self.offset_from_year_start(hy, hm, hd)
        return add_days(record.start, offset)

    # ---------------------------------------------------------
    # Inverse: Gregorian -> Hijri
    # ---------------------------------------------------------

    def to_hijri(self, d: Any) -> Optional[HijriDate]:
        day = utc_calendar_day(d)
        record = self.table.find_containing(day)
        if record is None:
            logger.debug("%s outside Umm al-Qura table (%s .. %s)", day, self.table.first_day, self.table.end_day)
            return None

        remaining = (day - record.start).days
        for hm in range(1, 13):
            n = days_in_month(record, hm)
            if remaining < n:
                return HijriDate(record.hy, hm, remaining + 1)
            remaining -= n

        # Past the end of this record's year with no following record.
        return None

    # ---------------------------------------------------------
    # High-Level API Methods
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "first_year": self.table.first_year,
            "last_year": self.table.last_year,
            "first_day": self.table.first_day.isoformat(),
            "end_day": self.table.end_day.isoformat(),
        }
