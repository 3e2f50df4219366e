"""
solarhijri.core.time
--------------------
Julian Day bridge for the proleptic Gregorian calendar.

A Julian Day (JD) counts days from noon; civil midnight therefore falls on
half-integers, e.g. 2000-01-01 00:00 is JD 2451544.5.
"""

from __future__ import annotations

import math
from datetime import date

from .errors import InvalidArgumentError, InvalidDateError
from .mathutil import true_mod
from .types import GregorianDate

GREGORIAN_EPOCH = 1721425.5

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def leap_gregorian(year: int) -> bool:
    return (year % 4 == 0) and not (year % 100 == 0 and year % 400 != 0)


def gregorian_month_length(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Gregorian month must be in 1..12, got {month}")
    if month == 2 and leap_gregorian(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def check_gregorian(year: int, month: int, day: int) -> None:
    n = gregorian_month_length(year, month)
    if not 1 <= day <= n:
        raise InvalidDateError(f"Gregorian {year}-{month:02d} has {n} days, got day {day}")


def gregorian_to_jd(year: int, month: int, day: int, *, validate: bool = True) -> float:
    """JD at civil midnight starting the given (proleptic) Gregorian date."""
    if validate:
        check_gregorian(year, month, day)
    y1 = year - 1
    if month <= 2:
        leap_adj = 0
    elif leap_gregorian(year):
        leap_adj = -1
    else:
        leap_adj = -2
    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * y1
        + y1 // 4
        - y1 // 100
        + y1 // 400
        + math.floor((367 * month - 362) / 12 + leap_adj + day)
    )


def jd_to_gregorian(jd: float) -> GregorianDate:
    """Gregorian date containing JD (days change at civil midnight)."""
    wjd = math.floor(jd - 0.5) + 0.5
    depoch = int(wjd - GREGORIAN_EPOCH)

    quadricent = depoch // 146097
    dqc = true_mod(depoch, 146097)
    cent = dqc // 36524
    dcent = true_mod(dqc, 36524)
    quad = dcent // 1461
    dquad = true_mod(dcent, 1461)
    yindex = dquad // 365

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    # the last day of a leap cycle belongs to the year just counted
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_jd(year, 1, 1, validate=False)
    if wjd < gregorian_to_jd(year, 3, 1, validate=False):
        leapadj = 0
    elif leap_gregorian(year):
        leapadj = 1
    else:
        leapadj = 2
    month = math.floor(((yearday + leapadj) * 12 + 373) / 367)
    day = int(wjd - gregorian_to_jd(year, month, 1, validate=False)) + 1
    return GregorianDate(year, month, day)


def jd_to_jdn(jd: float) -> int:
    """Integer day number whose noon falls within the civil day containing jd."""
    return int(math.floor(jd + 0.5))


def jdn_to_jd(jdn: int) -> float:
    """JD at the civil midnight that starts day number jdn."""
    return float(jdn) - 0.5


def date_to_jd(d: date) -> float:
    return gregorian_to_jd(d.year, d.month, d.day, validate=False)


def jd_to_date(jd: float) -> date:
    """JD -> datetime.date; limited to years 1..9999 by the datetime module."""
    y, m, dd = jd_to_gregorian(jd)
    if not 1 <= y <= 9999:
        raise InvalidArgumentError(f"year {y} is outside datetime.date range")
    return date(y, m, dd)


# ============================================================
# Weekdays
# ============================================================

# Index 0 is Sunday (yekshanbe), following jd_to_weekday.
PERSIAN_WEEKDAYS = (
    "یکشنبه",
    "دوشنبه",
    "سه شنبه",
    "چهارشنبه",
    "پنج شنبه",
    "جمعه",
    "شنبه",
)


def jd_to_weekday(jd: float) -> int:
    """Day of week for the civil day containing jd: 0=Sunday .. 6=Saturday."""
    return int(true_mod(math.floor(jd + 1.5), 7))


def persian_weekday_name(index: int) -> str:
    if not 0 <= index <= 6:
        raise InvalidArgumentError(f"weekday index must be in 0..6, got {index}")
    return PERSIAN_WEEKDAYS[index]
