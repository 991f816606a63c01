from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import CalendarSystem, EngineSpec, HijriDate
from .core.time import add_days
from .engines.factory import make_engine as _make_engine

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(calendar: CalendarSystem | str = CalendarSystem.UAQ) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_engine(calendar: CalendarSystem | str = CalendarSystem.UAQ) -> CalendarEngine:
    return _reg().get(calendar)

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

# ============================================================
# Conversions
# ============================================================

def is_valid(hy: int, hm: int, hd: int, *, calendar: CalendarSystem | str = CalendarSystem.UAQ) -> bool:
    return _reg().get(calendar).is_valid(hy, hm, hd)

def to_gregorian(hy: int, hm: int, hd: int, *, calendar: CalendarSystem | str = CalendarSystem.UAQ) -> date:
    """Raises InvalidHijriDate when is_valid() would be False."""
    return _reg().get(calendar).to_gregorian(hy, hm, hd)

def to_hijri(d: Any, *, calendar: CalendarSystem | str = CalendarSystem.UAQ) -> Optional[HijriDate]:
    """
    Gregorian day -> Hijri date, or None when the day is outside the
    calendar's convertible range. Raises InvalidGregorianDate for input
    that is not a date.
    """
    return _reg().get(calendar).to_hijri(d)

def days_in_month(hy: int, hm: int, *, calendar: CalendarSystem | str = CalendarSystem.UAQ) -> int:
    return _reg().get(calendar).days_in_month(hy, hm)

# ============================================================
# Month-level helpers
# ============================================================

def month_bounds(hy: int, hm: int, *, calendar: CalendarSystem | str = CalendarSystem.UAQ) -> Dict[str, Any]:
    eng = _reg().get(calendar)
    n = eng.days_in_month(hy, hm)
    first = eng.to_gregorian(hy, hm, 1)
    return {
        "hy": hy,
        "hm": hm,
        "calendar": CalendarSystem.coerce(calendar).value,
        "days": n,
        "first_date": first,
        "last_date": add_days(first, n - 1),
    }

def first_day_of_month(hy: int, hm: int, *, calendar: CalendarSystem | str = CalendarSystem.UAQ) -> date:
    return month_bounds(hy, hm, calendar=calendar)["first_date"]

def last_day_of_month(hy: int, hm: int, *, calendar: CalendarSystem | str = CalendarSystem.UAQ) -> date:
    return month_bounds(hy, hm, calendar=calendar)["last_date"]
