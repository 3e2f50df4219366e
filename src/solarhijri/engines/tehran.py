"""
solarhijri.engines.tehran
-------------------------
The March equinox as reckoned at the Tehran meridian.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

from solarhijri.core.errors import InvalidArgumentError
from solarhijri.core.types import EquinoxEvent
from solarhijri.engines.interfaces import AstronomyModel

SECONDS_PER_DAY = 24 * 60 * 60

# 52°30' E, the meridian of Iran Standard Time
TEHRAN_LONGITUDE_DEG = 52.0 + 30.0 / 60.0


@dataclass(frozen=True)
class TehranParams:
    longitude_deg: float = TEHRAN_LONGITUDE_DEG  # east positive
    which: int = 0                               # event selector passed to equinox_jde

    def __post_init__(self) -> None:
        if not -180.0 <= self.longitude_deg <= 180.0:
            raise InvalidArgumentError("longitude_deg must be in -180..180")
        if self.which not in (0, 1, 2, 3):
            raise InvalidArgumentError("which must be in 0..3")

    @property
    def day_offset(self) -> float:
        """Meridian offset from Greenwich as a fraction of a day."""
        return self.longitude_deg / 360.0


class TehranEquinoxLocator:
    """
    Localises an AstronomyModel's equinox to apparent time at a meridian:

        JDE(TT) - ΔT  -> UT
        + EoT(JDE)    -> apparent time at Greenwich
        + lon/360     -> apparent time at the meridian

    The integer part of the result is the (noon-based) JD on which the
    equinox falls; per-year results are cached.
    """

    def __init__(self, astronomy: AstronomyModel, params: TehranParams = TehranParams()):
        self.astronomy = astronomy
        self.p = params
        self._equinox_cached = lru_cache(maxsize=4096)(self._equinox)

    def _equinox(self, year: int) -> float:
        a = self.astronomy
        jde = a.equinox_jde(year, self.p.which)
        jd_ut = jde - a.delta_t_seconds(year) / SECONDS_PER_DAY
        jd_app = jd_ut + a.equation_of_time(jde)
        return jd_app + self.p.day_offset

    def equinox(self, year: int) -> float:
        """Fractional JD of the equinox in apparent time at the meridian."""
        return self._equinox_cached(int(year))

    def equinox_jd(self, year: int) -> int:
        return math.floor(self.equinox(year))

    def event(self, year: int) -> EquinoxEvent:
        frac = self.equinox(year)
        return EquinoxEvent(jd=math.floor(frac), jd_frac=frac)

    def cache_clear(self) -> None:
        self._equinox_cached.cache_clear()
