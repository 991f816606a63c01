"""
calhijri.engines.factory
------------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from calhijri.core.engine import CalendarEngine
from calhijri.core.types import EngineSpec
from calhijri.engines.fcna import FcnaEngine
from calhijri.engines.specs import FcnaParams, UaqParams, UAQ
from calhijri.engines.uaq import UmmAlQuraEngine
from calhijri.engines.year_table import load_year_table


def make_engine(spec: EngineSpec) -> CalendarEngine:
    """The universal entry point."""
    if isinstance(spec.payload, UaqParams):
        p = spec.payload
        return UmmAlQuraEngine(
            id=spec.id,
            table=load_year_table(p.resource, p.last_year),
        )
    if isinstance(spec.payload, FcnaParams):
        # FCNA anchors on the standard Umm al-Qura table where it has the year.
        t = UAQ.payload
        table = load_year_table(t.resource, t.last_year)
        return FcnaEngine(id=spec.id, params=spec.payload, table=table)
    raise TypeError(f"Unknown engine params type: {type(spec.payload)}")
