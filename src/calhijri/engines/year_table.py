"""
calhijri.engines.year_table
---------------------------
The Umm al-Qura year table: one record per Hijri year (Gregorian date of
1 Muharram + 12-bit month-length mask), in ascending order, closed by a
single sentinel record whose start is the exclusive upper bound.

Source: calhijri/data/uaq_years.csv, 1318..1500 H plus the sentinel row.

The sentinel never leaves this module: lookups return None instead.
"""

from __future__ import annotations

import csv
import importlib.resources
import logging
from bisect import bisect_right
from datetime import date, timedelta
from functools import lru_cache
from typing import Any, Callable, Iterable, Iterator, List, Literal, Optional, Sequence

from ..core.errors import YearTableError
from ..core.types import YearRecord

logger = logging.getLogger(__name__)

FULL_MASK = 0xFFF


def bounded_search(
    records: Sequence[YearRecord],
    target: Any,
    *,
    key: Callable[[YearRecord], Any],
    mode: Literal["exact", "floor"],
) -> Optional[int]:
    """
    Binary search over records sorted by `key`, never returning the sentinel.

    mode="exact": index of the record whose key equals target
    mode="floor": index of the last record whose key is <= target
    """
    i = bisect_right(records, target, key=key) - 1
    if i < 0:
        return None
    if mode == "exact" and key(records[i]) != target:
        return None
    if records[i].is_sentinel:
        return None
    return i


class YearTable:
    """Immutable, validated sequence of YearRecord ending in one sentinel."""

    def __init__(self, records: Iterable[YearRecord]):
        self._records = tuple(records)
        self._validate()

    def _validate(self) -> None:
        recs = self._records
        if len(recs) < 2:
            raise YearTableError("Year table needs at least one year and a sentinel")
        if not recs[-1].is_sentinel:
            raise YearTableError(f"Last record (year {recs[-1].hy}) is not a sentinel")

        for prev, cur in zip(recs, recs[1:]):
            if not (0 < prev.month_mask <= FULL_MASK):
                raise YearTableError(f"Year {prev.hy}: month mask {prev.month_mask} out of range")
            if cur.hy != prev.hy + 1:
                raise YearTableError(f"Years not contiguous: {prev.hy} followed by {cur.hy}")
            expected = prev.start + timedelta(days=prev.year_length)
            if cur.start != expected:
                raise YearTableError(
                    f"Year {cur.hy} starts {cur.start.isoformat()}, "
                    f"expected {expected.isoformat()} from year {prev.hy}"
                )

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    @property
    def records(self) -> tuple[YearRecord, ...]:
        """Real years only (sentinel excluded)."""
        return self._records[:-1]

    @property
    def first_year(self) -> int:
        return self._records[0].hy

    @property
    def last_year(self) -> int:
        return self._records[-2].hy

    @property
    def first_day(self) -> date:
        return self._records[0].start

    @property
    def end_day(self) -> date:
        """Exclusive upper bound: the sentinel's start."""
        return self._records[-1].start

    def __len__(self) -> int:
        return len(self._records) - 1

    def __iter__(self) -> Iterator[YearRecord]:
        return iter(self.records)

    def __contains__(self, hy: object) -> bool:
        return isinstance(hy, int) and self.find_year(hy) is not None

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def find_year(self, hy: int) -> Optional[YearRecord]:
        i = bounded_search(self._records, hy, key=lambda r: r.hy, mode="exact")
        return None if i is None else self._records[i]

    def find_containing(self, d: date) -> Optional[YearRecord]:
        """The year whose 1 Muharram is the last one on or before d."""
        i = bounded_search(self._records, d, key=lambda r: r.start, mode="floor")
        return None if i is None else self._records[i]


# ============================================================
# Loading
# ============================================================

def read_year_rows(resource: str) -> List[YearRecord]:
    """Read packaged rows: hy,month_mask,gy,gm,gd (a mask of 0 is the sentinel)."""
    path = importlib.resources.files("calhijri.data").joinpath(resource)
    out: List[YearRecord] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            out.append(
                YearRecord(
                    hy=int(row["hy"]),
                    month_mask=int(row["month_mask"]),
                    start=date(int(row["gy"]), int(row["gm"]), int(row["gd"])),
                )
            )
    return out


def with_sentinel(records: Sequence[YearRecord]) -> List[YearRecord]:
    last = records[-1]
    sentinel = YearRecord(
        hy=last.hy + 1,
        month_mask=0,
        start=last.start + timedelta(days=last.year_length),
    )
    return [*records, sentinel]


@lru_cache(maxsize=None)
def load_year_table(resource: str = "uaq_years.csv", last_year: int = 1500) -> YearTable:
    """
    Process-wide table, built once per parameter set and shared read-only.

    A table cut short by `last_year` gets a derived sentinel; the full table
    keeps the packaged one, which the continuity check then verifies.
    """
    rows = read_year_rows(resource)
    kept = [r for r in rows if r.hy <= last_year]
    if rows[-1].is_sentinel and rows[-1].hy == last_year + 1:
        kept.append(rows[-1])
    else:
        kept = with_sentinel(kept)
    table = YearTable(kept)
    logger.debug(
        "Loaded Umm al-Qura table %d..%d (%s .. %s) from %s",
        table.first_year, table.last_year,
        table.first_day.isoformat(), table.end_day.isoformat(), resource,
    )
    return table
