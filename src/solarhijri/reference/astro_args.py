from __future__ import annotations

from dataclasses import dataclass
from math import fmod
from typing import Literal


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0


# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0
JULIAN_CENTURY = 36525.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / JULIAN_CENTURY


# ------------------------------------------------------------
# Mean elements (degrees, wrapped)
# ------------------------------------------------------------

@dataclass(frozen=True)
class SolarMean:
    L0_deg: float  # geometric mean longitude of the Sun
    M_deg: float   # mean anomaly of the Sun


def solar_mean_elements(T: float) -> SolarMean:
    """Meeus (25.2), (25.3)."""
    T2 = T * T
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T2
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=wrap_deg(M))


def lunar_node_deg(T: float) -> float:
    """Longitude of the Moon's mean ascending node, Omega (degrees)."""
    T2 = T * T
    return wrap_deg(125.04452 - 1934.136261 * T + 0.0020708 * T2 + T2 * T / 450000.0)


def mean_obliquity_deg(T: float, model: Literal["iau2000", "iau1980"] = "iau2000") -> float:
    """
    Mean obliquity of the ecliptic (degrees).

    - 'iau2000': 84381.406" - 46.836769"T - 0.0001831"T^2 + 0.00200340"T^3
                 - 0.000000576"T^4 - 0.0000000434"T^5
    - 'iau1980': 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3
    """
    if model == "iau2000":
        T2 = T * T
        eps_arcsec = (
            84381.406
            - 46.836769 * T
            - 0.0001831 * T2
            + 0.00200340 * T2 * T
            - 0.000000576 * T2 * T2
            - 0.0000000434 * T2 * T2 * T
        )
        return arcsec_to_deg(eps_arcsec)

    if model == "iau1980":
        eps0 = 23.0 + 26.0 / 60.0 + 21.448 / 3600.0
        return eps0 - arcsec_to_deg(46.8150 * T + 0.00059 * (T * T) - 0.001813 * (T * T * T))

    raise ValueError("model must be one of: iau2000, iau1980")
