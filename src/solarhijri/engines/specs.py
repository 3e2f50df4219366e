from __future__ import annotations

from typing import Dict

from solarhijri.core.types import CalendarSpec
from solarhijri.engines.astronomical import SearchParams
from solarhijri.engines.tehran import TehranParams


ARITHMETIC = CalendarSpec(
    name="arithmetic",
    kind="arithmetic",
    meta={"description": "2820-year grand cycle (Birashk)"},
)

ASTRONOMICAL = CalendarSpec(
    name="astronomical",
    kind="astronomical",
    astronomy="meeus",
    tehran=TehranParams(),
    search=SearchParams(),
    meta={"description": "March equinox at 52°30' E, analytical series"},
)

# Not registered by default: needs the ephemeris extra and a JPL kernel.
EPHEMERIS = CalendarSpec(
    name="ephemeris",
    kind="astronomical",
    astronomy="skyfield",
    tehran=TehranParams(),
    search=SearchParams(),
    meta={"description": "March equinox at 52°30' E, JPL ephemeris via Skyfield"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    ARITHMETIC.name: ARITHMETIC,
    ASTRONOMICAL.name: ASTRONOMICAL,
}
