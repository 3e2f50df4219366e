"""
solarhijri.engines.meeus
------------------------
Default AstronomyModel built from the analytical reference series; needs no
ephemeris files.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from solarhijri.reference import deltat, equinox, solar


@dataclass(frozen=True)
class MeeusAstronomy:
    def equinox_jde(self, year: int, which: int = 0) -> float:
        return equinox.equinox_jde(year, which)

    def delta_t_seconds(self, year: float) -> float:
        # evaluated at mid-March, the month of the equinox
        return deltat.delta_t_seconds(deltat.decimal_year(int(year), 3))

    def equation_of_time(self, jde: float) -> float:
        return solar.equation_of_time(jde)

    def info(self) -> Dict[str, Any]:
        return {
            "equinox": "Meeus ch. 27 (tables 27.A-C)",
            "delta_t": "Espenak-Meeus 2006",
            "equation_of_time": "truncated Meeus ch. 25/28",
        }
