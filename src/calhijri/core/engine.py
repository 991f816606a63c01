from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

from .types import CalendarSystem, HijriDate

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def is_valid(self, hy: int, hm: int, hd: int) -> bool: ...
    def days_in_month(self, hy: int, hm: int) -> int: ...
    def to_gregorian(self, hy: int, hm: int, hd: int) -> date: ...
    def to_hijri(self, d: date) -> Optional[HijriDate]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[CalendarSystem, CalendarEngine]

    def get(self, calendar: CalendarSystem | str) -> CalendarEngine:
        key = CalendarSystem.coerce(calendar)
        if key not in self._engines:
            raise KeyError(f"No engine registered for '{key}'. Available: {self.list()}")
        return self._engines[key]

    def list(self) -> List[str]:
        return sorted(c.value for c in self._engines)

    def register(self, calendar: CalendarSystem | str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        key = CalendarSystem.coerce(calendar)
        if (not overwrite) and (key in self._engines):
            raise KeyError(f"Engine '{key}' already exists. Use overwrite=True to replace.")
        self._engines[key] = engine
