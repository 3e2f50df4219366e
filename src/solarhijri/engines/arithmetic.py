"""
solarhijri.engines.arithmetic
-----------------------------
Arithmetic Persian calendar: a fixed grand cycle of 2820 years containing
683 leap years (2816 = 2820 - 4 "leap-day units"), anchored so that year 475
starts a cycle. There is no year 0: year -1 is followed by year 1.
"""

from __future__ import annotations

from typing import Any, Dict

from solarhijri.core.errors import InvalidDateError
from solarhijri.core.mathutil import true_mod
from solarhijri.core.time import jd_to_jdn, jdn_to_jd
from solarhijri.core.types import PersianDate
from solarhijri.engines import months

PERSIAN_EPOCH = 1948320.5

GRAND_CYCLE_YEARS = 2820
GRAND_CYCLE_DAYS = 1029983


def _epoch_base(year: int) -> int:
    return year - (474 if year >= 0 else 473)


class ArithmeticPersianCalendar:
    """Fully implements PersianCalendarProtocol."""

    name = "arithmetic"

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cycle_years": GRAND_CYCLE_YEARS,
            "cycle_days": GRAND_CYCLE_DAYS,
            "epoch_jd": PERSIAN_EPOCH,
        }

    # ---------------------------------------------------------
    # Leap years
    # ---------------------------------------------------------

    def is_leap(self, year: int) -> bool:
        epyear = true_mod(_epoch_base(year), GRAND_CYCLE_YEARS) + 474
        return true_mod((epyear + 38) * 682, 2816) < 682

    def month_length(self, year: int, month: int) -> int:
        return months.month_length(month, self.is_leap(year))

    def check(self, year: int, month: int, day: int) -> None:
        if year == 0:
            raise InvalidDateError("the arithmetic Persian calendar has no year 0")
        months.check_persian(year, month, day, self.is_leap)

    # ---------------------------------------------------------
    # Forward: Persian date to JD
    # ---------------------------------------------------------

    def to_jd(self, year: int, month: int, day: int, *, validate: bool = True) -> float:
        if validate:
            self.check(year, month, day)
        epbase = _epoch_base(year)
        epyear = 474 + true_mod(epbase, GRAND_CYCLE_YEARS)
        return (
            day
            + months.days_before_month(month)
            + (epyear * 682 - 110) // 2816
            + (epyear - 1) * 365
            + (epbase // GRAND_CYCLE_YEARS) * GRAND_CYCLE_DAYS
            + (PERSIAN_EPOCH - 1)
        )

    # ---------------------------------------------------------
    # Inverse: JD to Persian date
    # ---------------------------------------------------------

    def from_jd(self, jd: float) -> PersianDate:
        jd = jdn_to_jd(jd_to_jdn(jd))  # civil midnight starting the day

        depoch = int(jd - self.to_jd(475, 1, 1, validate=False))
        cycle = depoch // GRAND_CYCLE_DAYS
        cyear = true_mod(depoch, GRAND_CYCLE_DAYS)
        if cyear == GRAND_CYCLE_DAYS - 1:
            ycycle = GRAND_CYCLE_YEARS
        else:
            aux1 = cyear // 366
            aux2 = true_mod(cyear, 366)
            ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1

        year = ycycle + GRAND_CYCLE_YEARS * cycle + 474
        if year <= 0:
            year -= 1

        yday = int(jd - self.to_jd(year, 1, 1, validate=False)) + 1
        month = months.month_from_yday(yday)
        day = int(jd - self.to_jd(year, month, 1, validate=False)) + 1
        return PersianDate(year, month, day)
