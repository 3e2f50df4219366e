from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.engine import EngineRegistry
from .core.time import (
    check_gregorian,
    gregorian_to_jd,
    jd_to_gregorian,
    jd_to_weekday,
    persian_weekday_name,
)
from .core.types import AstronomicalYear, CalendarSpec, GregorianDate, PersianDate
from .engines.astronomical import AstronomicalPersianCalendar
from .engines.factory import make_calendar as _make_calendar
from .engines.interfaces import AstronomyModel, PersianCalendarProtocol
from .engines.tehran import TehranEquinoxLocator

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

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(engine: str) -> PersianCalendarProtocol:
    return _reg().get(engine)

def make_calendar(spec: CalendarSpec, *, astronomy: Optional[AstronomyModel] = None) -> PersianCalendarProtocol:
    return _make_calendar(spec, astronomy=astronomy)

def register_engine(name: str, engine: PersianCalendarProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

def _astronomical(engine: str) -> AstronomicalPersianCalendar:
    eng = _reg().get(engine)
    if not isinstance(eng, AstronomicalPersianCalendar):
        raise TypeError(f"Engine '{engine}' is not an astronomical calendar")
    return eng

# ============================================================
# Arithmetic calendar
# ============================================================

def persian_to_jd(year: int, month: int, day: int, *, validate: bool = True, engine: str = "arithmetic") -> float:
    return _reg().get(engine).to_jd(year, month, day, validate=validate)

def jd_to_persian(jd: float, *, engine: str = "arithmetic") -> PersianDate:
    return _reg().get(engine).from_jd(jd)

def leap_persian(year: int, *, engine: str = "arithmetic") -> bool:
    return _reg().get(engine).is_leap(year)

# ============================================================
# Astronomical calendar
# ============================================================

def persian_astronomical_to_jd(
    year: int, month: int, day: int, *, validate: bool = True, engine: str = "astronomical"
) -> float:
    return _astronomical(engine).to_jd(year, month, day, validate=validate)

def jd_to_persian_astronomical(jd: float, *, engine: str = "astronomical") -> PersianDate:
    return _astronomical(engine).from_jd(jd)

def leap_persian_astronomical(year: int, *, engine: str = "astronomical") -> bool:
    return _astronomical(engine).is_leap(year)

def persian_astronomical_year(jd: float, *, engine: str = "astronomical") -> AstronomicalYear:
    return _astronomical(engine).astronomical_year(jd)

def _locator(engine: str) -> TehranEquinoxLocator:
    return _astronomical(engine).locator

def tehran_equinox(year: int, *, engine: str = "astronomical") -> float:
    return _locator(engine).equinox(year)

def tehran_equinox_jd(year: int, *, engine: str = "astronomical") -> int:
    return _locator(engine).equinox_jd(year)

# ============================================================
# Conversions and month/weekday helpers
# ============================================================

def convert_gregorian_to_persian(year: int, month: int, day: int) -> PersianDate:
    return jd_to_persian(gregorian_to_jd(year, month, day))

def convert_gregorian_to_persian_astronomical(
    year: int, month: int, day: int, *, engine: str = "astronomical"
) -> PersianDate:
    return jd_to_persian_astronomical(gregorian_to_jd(year, month, day), engine=engine)

def convert_persian_to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    return jd_to_gregorian(persian_to_jd(year, month, day))

def convert_persian_astronomical_to_gregorian(
    year: int, month: int, day: int, *, engine: str = "astronomical"
) -> GregorianDate:
    return jd_to_gregorian(persian_astronomical_to_jd(year, month, day, engine=engine))

def persian_month_length(year: int, month: int, *, engine: str = "arithmetic") -> int:
    return _reg().get(engine).month_length(year, month)

def persian_weekday(year: int, month: int, day: int, *, engine: str = "arithmetic") -> int:
    """Weekday of a Persian date, 0=Sunday (yekshanbe) .. 6=Saturday (shanbe)."""
    return jd_to_weekday(_reg().get(engine).to_jd(year, month, day))

def day_info(year: int, month: int, day: int, *, engine: str = "astronomical") -> Dict[str, Any]:
    """Everything the CLI prints for a Gregorian date."""
    check_gregorian(year, month, day)
    jd = gregorian_to_jd(year, month, day)
    wd = jd_to_weekday(jd)
    return {
        "gregorian": GregorianDate(year, month, day),
        "jd": jd,
        "persian": jd_to_persian(jd),
        "persian_astronomical": jd_to_persian_astronomical(jd, engine=engine),
        "weekday": wd,
        "weekday_name": persian_weekday_name(wd),
    }
