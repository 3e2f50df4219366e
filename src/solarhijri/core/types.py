from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Literal, NamedTuple, Optional


class GregorianDate(NamedTuple):
    year: int
    month: int
    day: int


class PersianDate(NamedTuple):
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class EquinoxEvent:
    """March equinox at the Tehran meridian: the day it falls on and its precise JD."""
    jd: int
    jd_frac: float


@dataclass(frozen=True)
class AstronomicalYear:
    """
    Persian astronomical year containing some JD.

    equinox_jd <= jd < next_equinox_jd; both are integer (noon-based) JDs
    as returned by TehranEquinoxLocator.equinox_jd.
    """
    year: int
    equinox_jd: int
    next_equinox_jd: int

    @property
    def length(self) -> int:
        return self.next_equinox_jd - self.equinox_jd


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    name: str
    kind: Literal["arithmetic", "astronomical"]
    astronomy: Literal["meeus", "skyfield"] = "meeus"
    tehran: Any = None   # TehranParams
    search: Any = None   # SearchParams
    meta: Optional[Dict[str, Any]] = None
