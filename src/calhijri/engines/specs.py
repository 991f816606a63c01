from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..core.types import CalendarSystem, EngineId, EngineSpec


# ============================================================
# UMM AL-QURA (table)
# ============================================================

@dataclass(frozen=True)
class UaqParams:
    """
    Where the year table comes from: a packaged CSV resource, optionally
    cut off after `last_year`.
    """
    resource: str = "uaq_years.csv"
    last_year: int = 1500

    def __post_init__(self) -> None:
        if not (1318 <= self.last_year <= 1500):
            raise ValueError("last_year must be in 1318..1500 (the published table)")


# ============================================================
# FCNA / ISNA (astronomical)
# ============================================================

# Meeus lunation index of 1 Muharram 1 AH.
# Islamic epoch JD ~ 1948438.5 -> (1948438.5 - 2451550.09766) / 29.530588861 ~ -17037.
K_EPOCH = -17037

# Last Hijri year whose following month still starts inside datetime.date range.
FCNA_MAX_YEAR = 9665


@dataclass(frozen=True)
class FcnaParams:
    """
    Search windows are empirical margins carried over from the reference
    tables, not proven bounds. Re-validate across the whole supported range
    before narrowing them.

    nearest_window:        lunations tried on each side of the mean estimate
                           when locating the conjunction nearest an anchor
    locate_window:         lunations tried on each side when bracketing a
                           Gregorian day (Gregorian -> Hijri)
    locate_backshift_days: shift applied before estimating k in the locator,
                           so late-month days do not snap to the next conjunction
    criterion_hour_utc:    conjunction strictly before this hour -> month starts
                           the next day, otherwise the day after
    """
    k_epoch: int = K_EPOCH
    nearest_window: int = 2
    locate_window: int = 1
    locate_backshift_days: int = 15
    criterion_hour_utc: int = 12
    max_year: int = FCNA_MAX_YEAR
    anchor_from_table: bool = True

    def __post_init__(self) -> None:
        if self.nearest_window < 1 or self.locate_window < 1:
            raise ValueError("search windows must be >= 1")
        if not (0 <= self.locate_backshift_days < 30):
            raise ValueError("locate_backshift_days must be in 0..29")
        if not (0 <= self.criterion_hour_utc <= 23):
            raise ValueError("criterion_hour_utc must be in 0..23")
        if not (1 <= self.max_year <= FCNA_MAX_YEAR):
            raise ValueError(f"max_year must be in 1..{FCNA_MAX_YEAR}")


# ============================================================
# REGISTERED SPECS
# ============================================================

UAQ = EngineSpec(
    calendar=CalendarSystem.UAQ,
    id=EngineId("table", "uaq", "1.0"),
    payload=UaqParams(),
    meta={"description": "Umm al-Qura (Saudi Arabia) published table, 1318-1500 AH"},
)

FCNA = EngineSpec(
    calendar=CalendarSystem.FCNA,
    id=EngineId("astronomical", "fcna", "1.0"),
    payload=FcnaParams(),
    meta={"description": "FCNA/ISNA: conjunction before 12:00 UTC -> month starts next day"},
)

ALL_SPECS: Dict[CalendarSystem, EngineSpec] = {
    CalendarSystem.UAQ: UAQ,
    CalendarSystem.FCNA: FCNA,
}
