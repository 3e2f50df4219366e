# ephemeris/skyfield_astronomy.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from solarhijri.core.errors import EphemerisUnavailableError
from solarhijri.ephemeris import require_ephemeris
from solarhijri.reference import solar

log = logging.getLogger(__name__)

DEFAULT_EPHEMERIS = "de421.bsp"


def _data_dir() -> Path:
    d = os.environ.get("SOLARHIJRI_DATA_DIR", "").strip()
    return Path(d).expanduser() if d else Path.home() / ".cache" / "solarhijri"


def _resolve_ephemeris(ephemeris: Optional[Union[str, Path]]) -> Union[str, Path]:
    """
    Resolution priority:
      1) explicit argument
      2) SOLARHIJRI_EPHEMERIS environment variable
      3) DEFAULT_EPHEMERIS, fetched by Skyfield's loader into the data dir
    An existing path is used as is; anything else is a kernel name for the loader.
    """
    if ephemeris is None:
        ephemeris = os.environ.get("SOLARHIJRI_EPHEMERIS", "").strip() or DEFAULT_EPHEMERIS
    p = Path(ephemeris).expanduser()
    return p if p.is_file() else str(ephemeris)


@dataclass
class SkyfieldAstronomy:
    """
    AstronomyModel backed by a JPL kernel through Skyfield.

    Requires optional deps:
      pip install "solarhijri[ephemeris]"
    """
    ts: Any
    eph: Any
    source: str = ""

    @classmethod
    def load(cls, ephemeris: Optional[Union[str, Path]] = None) -> "SkyfieldAstronomy":
        require_ephemeris()
        from skyfield.api import Loader, load_file

        target = _resolve_ephemeris(ephemeris)
        loader = Loader(str(_data_dir()))
        if isinstance(target, Path):
            log.debug("loading ephemeris file %s", target)
            eph = load_file(str(target))
        else:
            log.debug("loading ephemeris %s via %s", target, _data_dir())
            eph = loader(target)
        return cls(ts=loader.timescale(), eph=eph, source=str(target))

    def info(self) -> Dict[str, Any]:
        return {"equinox": f"Skyfield almanac.seasons ({self.source})", "delta_t": "Skyfield", "equation_of_time": "truncated Meeus ch. 25/28"}

    def equinox_jde(self, year: int, which: int = 0) -> float:
        from skyfield import almanac

        t0 = self.ts.utc(year, 1, 1)
        t1 = self.ts.utc(year + 1, 1, 1)
        try:
            times, events = almanac.find_discrete(t0, t1, almanac.seasons(self.eph))
        except ValueError as e:
            # kernel does not cover the requested year
            raise EphemerisUnavailableError(f"{self.source} has no coverage for {year}") from e
        for t, e in zip(times, events):
            if int(e) == which:
                return float(t.tt)
        raise EphemerisUnavailableError(f"no season event {which} found in {year}")

    def delta_t_seconds(self, year: float) -> float:
        return float(self.ts.utc(int(year), 3, 20).delta_t)

    def equation_of_time(self, jde: float) -> float:
        return solar.equation_of_time(jde)
