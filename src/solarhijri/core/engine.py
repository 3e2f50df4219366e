from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from solarhijri.engines.interfaces import PersianCalendarProtocol


@dataclass
class EngineRegistry:
    _engines: Dict[str, PersianCalendarProtocol]

    def get(self, name: str) -> PersianCalendarProtocol:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: PersianCalendarProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
