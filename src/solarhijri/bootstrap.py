from __future__ import annotations
from solarhijri.core.engine import EngineRegistry
from solarhijri.engines.specs import ALL_SPECS
from solarhijri.engines.factory import make_calendar

def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_calendar(spec)
    return EngineRegistry(engines)
