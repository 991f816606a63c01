"""
calhijri.engines.fcna
---------------------
FCNA/ISNA Hijri calendar: a global astronomical criterion.

If the new moon conjunction falls before 12:00 UTC on day D, the month
begins at 00:00 UTC of D+1; at or after 12:00 UTC it begins on D+2.

Conjunctions come from the Meeus chapter 49 series (reference.new_moon).
To find the conjunction belonging to a Hijri (year, month), the engine
starts from an anchor: the Umm al-Qura month start when the year is in the
table, otherwise the series evaluated at the epoch-relative lunation index.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from ..core.errors import InvalidHijriDate
from ..core.time import (
    ONE_DAY,
    datetime_utc_to_jd,
    jd_to_datetime_utc,
    midnight_jd,
    start_of_utc_day,
    utc_calendar_day,
    utc_midnight,
)
from ..core.types import EngineId, HijriDate, well_formed
from ..reference import astro_args as aa
from ..reference.new_moon import new_moon_jde
from .specs import FcnaParams
from .year_table import YearTable

logger = logging.getLogger(__name__)


def month_start_from_conjunction(conj: datetime, *, criterion_hour_utc: int = 12) -> datetime:
    """
    00:00 UTC of the day the month begins, for a conjunction at `conj`.

    Strictly before the criterion hour -> next day; at or after -> the day after.
    """
    midnight = start_of_utc_day(conj)
    cutoff = midnight + timedelta(hours=criterion_hour_utc)
    return midnight + (ONE_DAY if conj < cutoff else 2 * ONE_DAY)


class FcnaEngine:
    def __init__(self, id: EngineId, params: FcnaParams, table: Optional[YearTable] = None):
        self.id = id
        self.p = params
        self.table = table

    # ---------------------------------------------------------
    # Lunation index <-> (year, month)
    # ---------------------------------------------------------

    def lunation(self, hy: int, hm: int) -> int:
        return self.p.k_epoch + (hy - 1) * 12 + (hm - 1)

    def label(self, k: int) -> Tuple[int, int]:
        """Inverse of lunation(); floor division keeps months in 1..12 for k before the epoch."""
        years, months = divmod(k - self.p.k_epoch, 12)
        return years + 1, months + 1

    # ---------------------------------------------------------
    # Anchor resolver
    # ---------------------------------------------------------

    def anchor_jde(self, hy: int, hm: int) -> float:
        """Approximate instant near the conjunction that opens (hy, hm)."""
        if self.table is not None and self.p.anchor_from_table:
            record = self.table.find_year(hy)
            if record is not None:
                return midnight_jd(record.start) + record.days_before_month(hm)
            logger.debug("Year %d not in Umm al-Qura table, anchoring on lunation %d", hy, self.lunation(hy, hm))
        return new_moon_jde(self.lunation(hy, hm))

    # ---------------------------------------------------------
    # Criterion engine
    # ---------------------------------------------------------

    def conjunction(self, k: int) -> datetime:
        return jd_to_datetime_utc(new_moon_jde(k))

    def nearest_lunation(self, anchor: datetime | float) -> int:
        """
        Lunation whose true conjunction is closest to the anchor.

        The mean-motion guess can be off by a lunation near table/estimate
        error, so nearest_window neighbours on each side are compared.
        """
        anchor_jd = datetime_utc_to_jd(anchor) if isinstance(anchor, datetime) else float(anchor)
        k0 = round(aa.k_estimate(anchor_jd))
        w = self.p.nearest_window
        return min(range(k0 - w, k0 + w + 1), key=lambda k: abs(new_moon_jde(k) - anchor_jd))

    def nearest_new_moon(self, anchor: datetime | float) -> datetime:
        return self.conjunction(self.nearest_lunation(anchor))

    def month_start_from_conjunction(self, conj: datetime) -> datetime:
        return month_start_from_conjunction(conj, criterion_hour_utc=self.p.criterion_hour_utc)

    def lunation_start(self, k: int) -> datetime:
        """Month start for a known lunation index (no anchor needed)."""
        return self.month_start_from_conjunction(self.conjunction(k))

    def month_start(self, hy: int, hm: int) -> datetime:
        return self.month_start_from_conjunction(self.nearest_new_moon(self.anchor_jde(hy, hm)))

    def _next_label(self, hy: int, hm: int) -> Tuple[int, int]:
        return (hy, hm + 1) if hm < 12 else (hy + 1, 1)

    def _check_month(self, hy: int, hm: int) -> None:
        if not well_formed(hy, hm, 1) or not (1 <= hy <= self.p.max_year):
            raise InvalidHijriDate(f"No FCNA month {hy}/{hm} (years 1..{self.p.max_year})")

    def _month_span(self, hy: int, hm: int) -> Tuple[datetime, int]:
        start = self.month_start(hy, hm)
        nxt = self.month_start(*self._next_label(hy, hm))
        return start, round((nxt - start) / ONE_DAY)

    def days_in_month(self, hy: int, hm: int) -> int:
        self._check_month(hy, hm)
        return self._month_span(hy, hm)[1]

    # ---------------------------------------------------------
    # Validity and forward conversion
    # ---------------------------------------------------------

    def is_valid(self, hy: int, hm: int, hd: int) -> bool:
        if not well_formed(hy, hm, hd) or not (1 <= hy <= self.p.max_year):
            return False
        if hd > 30:
            return False
        return hd <= self._month_span(hy, hm)[1]

    def to_gregorian(self, hy: int, hm: int, hd: int) -> date:
        if not well_formed(hy, hm, hd) or not (1 <= hy <= self.p.max_year):
            raise InvalidHijriDate(f"Invalid FCNA date {hy}/{hm}/{hd}")
        start, length = self._month_span(hy, hm)
        if hd > length:
            raise InvalidHijriDate(f"Invalid FCNA date {hy}/{hm}/{hd}: month has {length} days")
        return (start + (hd - 1) * ONE_DAY).date()

    # ---------------------------------------------------------
    # Inverse: Gregorian -> Hijri (month locator)
    # ---------------------------------------------------------

    def to_hijri(self, d: Any) -> Optional[HijriDate]:
        day = utc_calendar_day(d)
        k0 = math.floor(aa.k_estimate(midnight_jd(day) - self.p.locate_backshift_days))
        w = self.p.locate_window

        if self.label(k0 + w)[0] < 1:
            # Every candidate lunation precedes 1 Muharram 1 AH.
            return None

        instant = utc_midnight(day)
        try:
            for k in range(k0 - w, k0 + w + 1):
                start = self.lunation_start(k)
                if start > instant:
                    continue
                if instant < self.lunation_start(k + 1):
                    hy, hm = self.label(k)
                    if not (1 <= hy <= self.p.max_year):
                        return None
                    return HijriDate(hy, hm, (instant - start).days + 1)
        except OverflowError:
            logger.debug("Lunations around %s fall outside the datetime range", day)
            return None

        logger.warning("No FCNA month brackets %s (k0=%d, window=%d)", day, k0, w)
        return None

    # ---------------------------------------------------------
    # High-Level API Methods
    # ---------------------------------------------------------

    def month_info(self, hy: int, hm: int) -> Dict[str, Any]:
        """Intermediate values behind one month boundary (for CLI/debugging)."""
        self._check_month(hy, hm)
        anchor = self.anchor_jde(hy, hm)
        k = self.nearest_lunation(anchor)
        conj = self.conjunction(k)
        start, length = self._month_span(hy, hm)
        return {
            "hy": hy,
            "hm": hm,
            "k": k,
            "k_expected": self.lunation(hy, hm),
            "anchor_jd": anchor,
            "conjunction_utc": conj.isoformat(),
            "start": start.date().isoformat(),
            "days": length,
        }

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "k_epoch": self.p.k_epoch,
            "max_year": self.p.max_year,
            "criterion_hour_utc": self.p.criterion_hour_utc,
            "table_anchors": self.table is not None and self.p.anchor_from_table,
        }
