# tests/test_astronomical.py

import logging
import random

import pytest

from solarhijri.core.errors import ConvergenceError, InvalidArgumentError, InvalidDateError
from solarhijri.core.time import gregorian_to_jd, jd_to_gregorian, leap_gregorian
from solarhijri.engines.arithmetic import PERSIAN_EPOCH
from solarhijri.engines.astronomical import AstronomicalPersianCalendar, SearchParams
from solarhijri.engines.meeus import MeeusAstronomy


@pytest.fixture(scope="module")
def meeus_calendar():
    return AstronomicalPersianCalendar(MeeusAstronomy())


# ------------------------------------------------------------
# Deterministic stub: equinox every 21 March before Tehran noon
# ------------------------------------------------------------

def test_stub_nowruz_is_march_21(stub_calendar):
    for y in (1, 500, 1300, 1403, 1404, 2000):
        assert stub_calendar.to_jd(y, 1, 1) == gregorian_to_jd(y + 621, 3, 21)


def test_stub_conversions(stub_calendar):
    assert stub_calendar.from_jd(gregorian_to_jd(2024, 3, 20)) == (1402, 12, 30)
    assert stub_calendar.from_jd(gregorian_to_jd(2024, 3, 21)) == (1403, 1, 1)
    assert stub_calendar.from_jd(gregorian_to_jd(2024, 9, 22)) == (1403, 6, 31)
    assert stub_calendar.from_jd(gregorian_to_jd(2024, 9, 23)) == (1403, 7, 1)
    assert stub_calendar.to_jd(1403, 7, 1) == gregorian_to_jd(2024, 9, 23)


def test_stub_leap_follows_february(stub_calendar):
    # year Y runs from 21 March of Y+621 across February of Y+622
    for y in range(1300, 1500):
        assert stub_calendar.is_leap(y) is leap_gregorian(y + 622), y


def test_stub_year_zero_exists(stub_calendar):
    assert stub_calendar.to_jd(0, 1, 1) == gregorian_to_jd(621, 3, 21)
    assert stub_calendar.to_jd(1, 1, 1) == gregorian_to_jd(622, 3, 21) == PERSIAN_EPOCH - 1
    assert stub_calendar.from_jd(PERSIAN_EPOCH - 2) == (0, 12, 29)


def test_bracketing_invariant(stub_calendar):
    loc = stub_calendar.locator
    random.seed(5)
    lo, hi = gregorian_to_jd(1800, 1, 1), gregorian_to_jd(2200, 1, 1)
    for _ in range(500):
        jd = random.randint(int(lo), int(hi)) + 0.5
        adr = stub_calendar.astronomical_year(jd)
        assert adr.equinox_jd <= jd < adr.next_equinox_jd
        assert adr.length in (365, 366)
        gy = jd_to_gregorian(adr.equinox_jd + 0.5).year
        assert loc.equinox_jd(gy) == adr.equinox_jd
        assert loc.equinox_jd(gy + 1) == adr.next_equinox_jd
        assert adr.year == gy - 621


def test_stub_roundtrip(stub_calendar):
    random.seed(9)
    lo, hi = gregorian_to_jd(600, 1, 1), gregorian_to_jd(2600, 1, 1)
    for _ in range(1000):
        jd = random.randint(int(lo), int(hi)) + 0.5
        assert stub_calendar.to_jd(*stub_calendar.from_jd(jd)) == jd


def test_validation(stub_calendar):
    with pytest.raises(InvalidDateError):
        stub_calendar.to_jd(1403, 12, 30)
    assert stub_calendar.to_jd(1402, 12, 30) == gregorian_to_jd(2024, 3, 20)
    assert stub_calendar.to_jd(1403, 12, 30, validate=False) == stub_calendar.to_jd(1404, 1, 1)
    with pytest.raises(InvalidDateError):
        stub_calendar.to_jd(1403, 0, 1)
    assert stub_calendar.month_length(1402, 12) == 30
    assert stub_calendar.month_length(1403, 12) == 29


# ------------------------------------------------------------
# Search limits
# ------------------------------------------------------------

def test_frozen_model_does_not_converge(frozen_calendar):
    with pytest.raises(ConvergenceError):
        frozen_calendar.astronomical_year(2460000.5)
    with pytest.raises(ConvergenceError):
        frozen_calendar.astronomical_year(2400000.5)
    with pytest.raises(RuntimeError):
        frozen_calendar.from_jd(2460000.5)


def test_long_search_is_logged(frozen_calendar, caplog):
    with caplog.at_level(logging.WARNING, logger="solarhijri.engines.astronomical"):
        with pytest.raises(ConvergenceError):
            frozen_calendar.astronomical_year(2460000.5)
    assert any("has taken" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("kwargs", [{"tropical_year": 300.0}, {"max_steps": 2}])
def test_search_params_validation(kwargs):
    with pytest.raises(InvalidArgumentError):
        SearchParams(**kwargs)


def test_equinoxes_are_computed_once(march21, stub_calendar):
    for k in range(0, 400, 3):
        stub_calendar.from_jd(gregorian_to_jd(2024, 1, 1) + k)
    assert march21.calls
    assert max(march21.calls.values()) == 1


# ------------------------------------------------------------
# Meeus model against the civil calendar of Iran
# ------------------------------------------------------------

@pytest.mark.parametrize(
    "year, nowruz",
    [
        (1395, (2016, 3, 20)),
        (1396, (2017, 3, 21)),
        (1397, (2018, 3, 21)),
        (1398, (2019, 3, 21)),
        (1399, (2020, 3, 20)),
        (1400, (2021, 3, 21)),
        (1403, (2024, 3, 20)),
        (1404, (2025, 3, 21)),
    ],
)
def test_meeus_nowruz(meeus_calendar, year, nowruz):
    jd = gregorian_to_jd(*nowruz)
    assert meeus_calendar.to_jd(year, 1, 1) == jd
    assert meeus_calendar.from_jd(jd) == (year, 1, 1)
    assert meeus_calendar.from_jd(jd - 1)[0] == year - 1


def test_meeus_leap_years(meeus_calendar):
    assert [y for y in range(1395, 1404) if meeus_calendar.is_leap(y)] == [1395, 1399, 1403]


def test_meeus_roundtrip(meeus_calendar):
    random.seed(123)
    lo, hi = gregorian_to_jd(1600, 1, 1), gregorian_to_jd(2400, 12, 31)
    for _ in range(300):
        jd = random.randint(int(lo), int(hi)) + 0.5
        assert meeus_calendar.to_jd(*meeus_calendar.from_jd(jd)) == jd


def test_info(meeus_calendar):
    info = meeus_calendar.info()
    assert info["name"] == "astronomical"
    assert info["longitude_deg"] == 52.5
    assert "equinox" in info["astronomy"]


@pytest.mark.parametrize("frac", [0.0, 0.3, 0.5, 0.7, 0.999])
def test_from_jd_ignores_time_of_day(stub_calendar, meeus_calendar, frac):
    jd = gregorian_to_jd(2024, 3, 21) + frac
    assert stub_calendar.from_jd(jd) == (1403, 1, 1)
    assert meeus_calendar.from_jd(jd) == (1403, 1, 2)
    assert stub_calendar.from_jd(gregorian_to_jd(2024, 3, 21) - 0.001) == (1402, 12, 30)
