# tests/test_cli.py

import solarhijri
from solarhijri import cli


def test_day(capsys):
    assert cli.main(["day", "2024-03-20"]) == 0
    out = capsys.readouterr().out
    assert "Persian (arithmetic)  : 1403-01-01" in out
    assert "Persian (astronomical): 1403-01-01" in out
    assert "JD (midnight)         : 2460389.5" in out
    assert "چهارشنبه" in out


def test_date_shorthand(capsys):
    assert cli.main(["2025-03-20"]) == 0
    out = capsys.readouterr().out
    assert "Persian (arithmetic)  : 1404-01-01" in out
    assert "Persian (astronomical): 1403-12-30" in out


def test_to_gregorian(capsys):
    assert cli.main(["to-gregorian", "1404-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-20"
    assert cli.main(["to-gregorian", "1404-01-01", "--variant", "astronomical"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-21"


def test_equinox(capsys):
    assert cli.main(["--log-level", "ERROR", "equinox", "2024"]) == 0
    out = capsys.readouterr().out
    assert "Equinox day (JD)  = 2460389" in out
    assert "Nowruz            = 2024-03-20 (Persian year 1403)" in out


def test_diag_nowruz_table(capsys):
    assert cli.main(["diag", "nowruz-table", "--from-year", "1403", "--to-year", "1404"]) == 0
    out = capsys.readouterr().out
    assert "Years where the variants disagree: 1" in out


def test_diag_round_trip(capsys):
    assert cli.main(["diag", "round-trip", "--N", "50", "--start", "1900-01-01", "--end", "2100-12-31"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_negative_year_shorthand(capsys):
    assert cli.main(["-100-03-21"]) == 0
    out = capsys.readouterr().out
    assert "Gregorian             : -100-03-21" in out


def test_negative_year_to_gregorian(capsys):
    expected = solarhijri.convert_persian_to_gregorian(-100, 1, 1)
    assert cli.main(["to-gregorian", "--", "-100-01-01"]) == 0
    assert capsys.readouterr().out.strip() == cli._fmt(expected)
    assert cli.main(["to-gregorian", "-100-01-01", "--variant", "arithmetic"]) == 0
    assert capsys.readouterr().out.strip() == cli._fmt(expected)


def test_log_level_with_shorthand(capsys):
    assert cli.main(["--log-level", "ERROR", "2024-03-20"]) == 0
    assert "Persian (arithmetic)  : 1403-01-01" in capsys.readouterr().out


def test_dates_are_moved_behind_separator():
    assert cli._dates_last(["-100-03-21", "--ephemeris"]) == ["--ephemeris", "--", "-100-03-21"]
    assert cli._dates_last(["--", "-5-01-01"]) == ["--", "-5-01-01"]
    assert cli._dates_last(["2024"]) == ["2024"]
    assert cli._parse_ymd("-100-03-21") == (-100, 3, 21)
    assert cli._engine_name(False) == "astronomical"
