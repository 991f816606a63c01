from __future__ import annotations
from calhijri.core.engine import EngineRegistry
from calhijri.engines.specs import ALL_SPECS
from calhijri.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    engines = {}
    for calendar, spec in ALL_SPECS.items():
        engines[calendar] = make_engine(spec)
    return EngineRegistry(engines)
