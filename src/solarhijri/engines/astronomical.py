"""
solarhijri.engines.astronomical
-------------------------------
Astronomical Persian calendar: each year starts on the day (noon-to-noon JD
at the Tehran meridian) containing the March equinox, so the equinox falls
on Nowruz when it precedes apparent noon and on the day before otherwise.

The engine has no closed-form inverse; it brackets a JD between two
consecutive equinoxes with a bounded walk over Gregorian years.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from solarhijri.core.errors import ConvergenceError, InvalidArgumentError
from solarhijri.core.time import jd_to_gregorian, jd_to_jdn, jdn_to_jd
from solarhijri.core.types import AstronomicalYear, PersianDate
from solarhijri.engines import months
from solarhijri.engines.arithmetic import PERSIAN_EPOCH
from solarhijri.engines.interfaces import AstronomyModel
from solarhijri.engines.tehran import TehranEquinoxLocator, TehranParams

log = logging.getLogger(__name__)

# Mean interval between March equinoxes (days)
TROPICAL_YEAR = 365.24219878


@dataclass(frozen=True)
class SearchParams:
    tropical_year: float = TROPICAL_YEAR
    max_steps: int = 400  # per search; a monotonic model needs at most a handful

    def __post_init__(self) -> None:
        if not 360.0 < self.tropical_year < 370.0:
            raise InvalidArgumentError("tropical_year must be close to 365.24 days")
        if self.max_steps < 4:
            raise InvalidArgumentError("max_steps must be at least 4")


class AstronomicalPersianCalendar:
    """Fully implements PersianCalendarProtocol over an injected AstronomyModel."""

    name = "astronomical"

    def __init__(
        self,
        astronomy: AstronomyModel,
        *,
        tehran: TehranParams = TehranParams(),
        search: SearchParams = SearchParams(),
        locator: Optional[TehranEquinoxLocator] = None,
    ):
        self.astronomy = astronomy
        self.locator = locator if locator is not None else TehranEquinoxLocator(astronomy, tehran)
        self.search = search

    def info(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "name": self.name,
            "longitude_deg": self.locator.p.longitude_deg,
            "tropical_year": self.search.tropical_year,
            "max_steps": self.search.max_steps,
        }
        if hasattr(self.astronomy, "info"):
            out["astronomy"] = self.astronomy.info()
        return out

    # ---------------------------------------------------------
    # Year bracketing
    # ---------------------------------------------------------

    def _step(self, steps: int, jd: float) -> int:
        steps += 1
        if steps > self.search.max_steps:
            log.debug("equinox bracketing for jd=%s gave up after %d steps", jd, steps - 1)
            raise ConvergenceError(
                f"no equinox bracket for jd={jd} within {self.search.max_steps} steps; "
                "is the equinox model monotonic?"
            )
        if steps == self.search.max_steps // 2:
            log.warning("equinox bracketing for jd=%s has taken %d steps", jd, steps)
        return steps

    def astronomical_year(self, jd: float) -> AstronomicalYear:
        """
        Persian astronomical year containing jd, with the bracketing pair
        equinox_jd <= jd < next_equinox_jd.
        """
        eq = self.locator.equinox_jd
        steps = 0

        # seed two years back: the equinox of the seed year usually precedes jd
        guess = jd_to_gregorian(jd).year - 2
        lasteq = eq(guess)
        while lasteq > jd:
            steps = self._step(steps, jd)
            guess -= 1
            lasteq = eq(guess)

        nexteq = eq(guess + 1)
        while not jd < nexteq:
            steps = self._step(steps, jd)
            guess += 1
            lasteq, nexteq = nexteq, eq(guess + 1)

        year = math.floor((lasteq - PERSIAN_EPOCH) / self.search.tropical_year + 0.5) + 1
        log.debug("jd=%s -> year %d, equinoxes %d..%d (%d steps)", jd, year, lasteq, nexteq, steps)
        return AstronomicalYear(year=year, equinox_jd=lasteq, next_equinox_jd=nexteq)

    def new_year_jd(self, year: int) -> int:
        """Noon-based JD of the day containing the equinox that opens `year`."""
        ty = self.search.tropical_year
        guess = (PERSIAN_EPOCH - 1) + ty * ((year - 1) - 1)
        adr = self.astronomical_year(guess)
        steps = 0
        while adr.year < year:
            steps = self._step(steps, guess)
            guess = adr.equinox_jd + (ty + 2)
            adr = self.astronomical_year(guess)
        if adr.year != year:
            raise ConvergenceError(f"equinox search for year {year} overshot to year {adr.year}")
        return adr.equinox_jd

    # ---------------------------------------------------------
    # Leap years
    # ---------------------------------------------------------

    def is_leap(self, year: int) -> bool:
        return (self.new_year_jd(year + 1) - self.new_year_jd(year)) > 365

    def month_length(self, year: int, month: int) -> int:
        return months.month_length(month, self.is_leap(year))

    def check(self, year: int, month: int, day: int) -> None:
        months.check_persian(year, month, day, self.is_leap)

    # ---------------------------------------------------------
    # Forward / inverse
    # ---------------------------------------------------------

    def to_jd(self, year: int, month: int, day: int, *, validate: bool = True) -> float:
        """JD of the civil midnight that starts the date."""
        if validate:
            self.check(year, month, day)
        return self.new_year_jd(year) + 0.5 + months.days_before_month(month) + (day - 1)

    def from_jd(self, jd: float) -> PersianDate:
        jd = jdn_to_jd(jd_to_jdn(jd))  # civil midnight starting the day
        adr = self.astronomical_year(jd)
        yday = int(jd - (adr.equinox_jd + 0.5)) + 1
        month = months.month_from_yday(yday)
        day = int(jd - self.to_jd(adr.year, month, 1, validate=False)) + 1
        return PersianDate(adr.year, month, day)
