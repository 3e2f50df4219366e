"""
solarhijri.engines.factory
--------------------------
Turns CalendarSpec data into live engine objects.
"""

from __future__ import annotations

from typing import Optional

from solarhijri.core.types import CalendarSpec
from solarhijri.engines.arithmetic import ArithmeticPersianCalendar
from solarhijri.engines.astronomical import AstronomicalPersianCalendar, SearchParams
from solarhijri.engines.interfaces import AstronomyModel, PersianCalendarProtocol
from solarhijri.engines.meeus import MeeusAstronomy
from solarhijri.engines.tehran import TehranParams


def make_astronomy(kind: str) -> AstronomyModel:
    if kind == "meeus":
        return MeeusAstronomy()
    if kind == "skyfield":
        from solarhijri.ephemeris.skyfield_astronomy import SkyfieldAstronomy
        return SkyfieldAstronomy.load()
    raise TypeError(f"Unknown astronomy model: {kind!r}")


def make_calendar(spec: CalendarSpec, *, astronomy: Optional[AstronomyModel] = None) -> PersianCalendarProtocol:
    """
    Build the engine a CalendarSpec describes. `astronomy` overrides the
    spec's model, e.g. with a deterministic stub.
    """
    if spec.kind == "arithmetic":
        return ArithmeticPersianCalendar()
    if spec.kind == "astronomical":
        return AstronomicalPersianCalendar(
            astronomy if astronomy is not None else make_astronomy(spec.astronomy),
            tehran=spec.tehran if spec.tehran is not None else TehranParams(),
            search=spec.search if spec.search is not None else SearchParams(),
        )
    raise TypeError(f"Unknown calendar kind: {spec.kind!r}")
