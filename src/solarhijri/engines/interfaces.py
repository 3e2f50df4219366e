"""
solarhijri.engines.interfaces
-----------------------------
Boundaries between the astronomical inputs (AstronomyModel) and the
calendar engines that consume them.

Time scales: equinox_jde and equation_of_time work in Julian Ephemeris Days
(TT); everything a calendar engine returns is civil JD (UT).
"""

from __future__ import annotations

from typing import Any, Dict, Protocol

from solarhijri.core.types import PersianDate


class AstronomyModel(Protocol):
    """
    Pure numeric functions the astronomical calendar is built from.
    Implementations must make equinox_jde strictly increasing in year.
    """

    def equinox_jde(self, year: int, which: int = 0) -> float:
        """
        JDE (TT) of an equinox/solstice in Gregorian `year`.
        which: 0 March equinox, 1 June solstice, 2 September equinox, 3 December solstice.
        """
        ...

    def delta_t_seconds(self, year: float) -> float:
        """ΔT = TT - UT in seconds."""
        ...

    def equation_of_time(self, jde: float) -> float:
        """Apparent minus mean solar time, as a fraction of a day."""
        ...


class PersianCalendarProtocol(Protocol):
    """
    Common surface of the arithmetic and astronomical engines.
    to_jd returns the JD of civil midnight starting the date.
    """

    def to_jd(self, year: int, month: int, day: int, *, validate: bool = True) -> float:
        ...

    def from_jd(self, jd: float) -> PersianDate:
        ...

    def is_leap(self, year: int) -> bool:
        ...

    def month_length(self, year: int, month: int) -> int:
        ...

    def info(self) -> Dict[str, Any]:
        ...
