"""solarhijri public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    persian_to_jd,
    jd_to_persian,
    leap_persian,
    persian_astronomical_to_jd,
    jd_to_persian_astronomical,
    leap_persian_astronomical,
    persian_astronomical_year,
    tehran_equinox,
    tehran_equinox_jd,
    convert_gregorian_to_persian,
    convert_gregorian_to_persian_astronomical,
    convert_persian_to_gregorian,
    convert_persian_astronomical_to_gregorian,
    persian_month_length,
    persian_weekday,
    day_info,
    list_engines,
    engine_info,
    get_engine,
    make_calendar,
    register_engine,
)
from .core.time import (
    gregorian_to_jd,
    jd_to_gregorian,
    leap_gregorian,
    date_to_jd,
    jd_to_date,
    jd_to_weekday,
    persian_weekday_name,
    PERSIAN_WEEKDAYS,
)
from .core.errors import (
    SolarHijriError,
    InvalidArgumentError,
    InvalidDateError,
    ConvergenceError,
    EphemerisUnavailableError,
)
from .core.types import GregorianDate, PersianDate, AstronomicalYear, EquinoxEvent

__all__ = [
    "gregorian_to_jd",
    "jd_to_gregorian",
    "leap_gregorian",
    "date_to_jd",
    "jd_to_date",
    "persian_to_jd",
    "jd_to_persian",
    "leap_persian",
    "persian_astronomical_to_jd",
    "jd_to_persian_astronomical",
    "leap_persian_astronomical",
    "persian_astronomical_year",
    "tehran_equinox",
    "tehran_equinox_jd",
    "convert_gregorian_to_persian",
    "convert_gregorian_to_persian_astronomical",
    "convert_persian_to_gregorian",
    "convert_persian_astronomical_to_gregorian",
    "persian_month_length",
    "persian_weekday",
    "jd_to_weekday",
    "persian_weekday_name",
    "PERSIAN_WEEKDAYS",
    "day_info",
    "list_engines",
    "engine_info",
    "get_engine",
    "make_calendar",
    "register_engine",
    "GregorianDate",
    "PersianDate",
    "AstronomicalYear",
    "EquinoxEvent",
    "SolarHijriError",
    "InvalidArgumentError",
    "InvalidDateError",
    "ConvergenceError",
    "EphemerisUnavailableError",
]
