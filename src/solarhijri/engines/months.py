"""
Month structure shared by both Persian variants: months 1-6 have 31 days,
7-11 have 30, and month 12 has 29 (30 in a leap year).
"""

from __future__ import annotations

import math
from typing import Callable

from solarhijri.core.errors import InvalidDateError


def days_before_month(month: int) -> int:
    """Days in the year preceding day 1 of `month`."""
    if month <= 7:
        return (month - 1) * 31
    return (month - 1) * 30 + 6


def month_from_yday(yday: int) -> int:
    """Month containing day-of-year `yday` (1-based)."""
    if yday <= 186:
        return math.ceil(yday / 31)
    return math.ceil((yday - 6) / 30)


def month_length(month: int, leap: bool) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Persian month must be in 1..12, got {month}")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if leap else 29


def check_persian(year: int, month: int, day: int, is_leap: Callable[[int], bool]) -> None:
    # is_leap only matters for the last day of Esfand
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Persian month must be in 1..12, got {month}")
    if day == 30 and month == 12:
        if not is_leap(year):
            raise InvalidDateError(f"Esfand {year} has 29 days")
        return
    n = month_length(month, leap=True)
    if not 1 <= day <= n:
        raise InvalidDateError(f"Persian {year}-{month:02d} has {n} days, got day {day}")
