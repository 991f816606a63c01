from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Any, Dict, Literal


class CalendarSystem(str, Enum):
    """Hijri calendar variant. Plain strings "uaq"/"fcna" coerce to members."""
    UAQ = "uaq"
    FCNA = "fcna"

    @classmethod
    def coerce(cls, value: "CalendarSystem | str") -> "CalendarSystem":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown calendar '{value}'. Available: {[c.value for c in cls]}"
            ) from None

    def __str__(self) -> str:
        return self.value


def well_formed(hy: Any, hm: Any, hd: Any) -> bool:
    """Integer components with month in 1..12 and day >= 1 (year range is per calendar)."""
    for v in (hy, hm, hd):
        if isinstance(v, bool) or not isinstance(v, int):
            return False
    return 1 <= hm <= 12 and hd >= 1


@dataclass(frozen=True, order=True)
class HijriDate:
    hy: int
    hm: int
    hd: int

    def astuple(self) -> tuple[int, int, int]:
        return (self.hy, self.hm, self.hd)

    def isoformat(self) -> str:
        return f"{self.hy:04d}-{self.hm:02d}-{self.hd:02d}"


@dataclass(frozen=True)
class YearRecord:
    """
    One Umm al-Qura year: Gregorian date of 1 Muharram plus a 12-bit mask.

    Bit i (month i+1) set -> 30 days, clear -> 29 days.
    A mask of 0 marks the sentinel that bounds the table.
    """
    hy: int
    month_mask: int
    start: date

    @property
    def is_sentinel(self) -> bool:
        return self.month_mask == 0

    def month_length(self, hm: int) -> int:
        return 30 if (self.month_mask >> (hm - 1)) & 1 else 29

    def days_before_month(self, hm: int) -> int:
        return sum(self.month_length(m) for m in range(1, hm))

    @property
    def year_length(self) -> int:
        return self.days_before_month(13)


@dataclass(frozen=True)
class EngineId:
    family: Literal["table", "astronomical"]
    name: str
    version: str


@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper: which calendar, and the params to build it from."""
    calendar: CalendarSystem
    id: EngineId
    payload: Any  # UaqParams | FcnaParams
    meta: Dict[str, Any]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))
