# tests/conftest.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import pytest

from solarhijri.core.time import gregorian_to_jd
from solarhijri.engines.astronomical import AstronomicalPersianCalendar, SearchParams


@dataclass
class March21Astronomy:
    """Equinox at 07:12 UT every 21 March, no ΔT, no equation of time."""
    calls: Dict[int, int] = field(default_factory=dict)

    def equinox_jde(self, year: int, which: int = 0) -> float:
        self.calls[year] = self.calls.get(year, 0) + 1
        return gregorian_to_jd(year, 3, 21, validate=False) + 0.3

    def delta_t_seconds(self, year: float) -> float:
        return 0.0

    def equation_of_time(self, jde: float) -> float:
        return 0.0


@dataclass
class FrozenAstronomy:
    """Same equinox every year; no calendar can be built on it."""
    jde: float = 2451545.0

    def equinox_jde(self, year: int, which: int = 0) -> float:
        return self.jde

    def delta_t_seconds(self, year: float) -> float:
        return 0.0

    def equation_of_time(self, jde: float) -> float:
        return 0.0


@pytest.fixture
def march21():
    return March21Astronomy()


@pytest.fixture
def stub_calendar(march21):
    return AstronomicalPersianCalendar(march21)


@pytest.fixture
def frozen_calendar():
    return AstronomicalPersianCalendar(FrozenAstronomy(), search=SearchParams(max_steps=10))
