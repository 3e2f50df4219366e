# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from . import astro_args as aa


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    True and apparent solar longitude at JD(TT), truncated Meeus ch. 25
    series (accurate to ~0.01 deg).
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    M_rad = math.radians(sm.M_deg)

    # Equation of center
    C = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )
    L_true = aa.wrap_deg(sm.L0_deg + C)

    # aberration and the leading nutation term
    omega_rad = math.radians(aa.lunar_node_deg(T))
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def equation_of_time_minutes(jd_tt: float, eps_model: Literal["iau2000", "iau1980"] = "iau2000") -> float:
    """
    Apparent minus mean solar time, in minutes: EOT = 4 (L0 - alpha).
    """
    T = aa.T_centuries(jd_tt)
    L0_deg = aa.solar_mean_elements(T).L0_deg
    eps_rad = math.radians(aa.mean_obliquity_deg(T, model=eps_model))
    L_app_rad = math.radians(solar_longitude(jd_tt).L_app_deg)

    # right ascension; atan2 keeps the quadrant
    alpha_deg = aa.wrap_deg(math.degrees(math.atan2(math.cos(eps_rad) * math.sin(L_app_rad), math.cos(L_app_rad))))

    return 4.0 * aa.wrap180(L0_deg - alpha_deg)


def equation_of_time(jd_tt: float) -> float:
    """Equation of time as a fraction of a day."""
    return equation_of_time_minutes(jd_tt) / (24.0 * 60.0)
