"""Diagnostics package.

- nowruz_table, round_trip: always available
- leap_years: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["nowruz_table", "round_trip", "leap_years"]
