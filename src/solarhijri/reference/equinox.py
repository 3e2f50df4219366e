"""
solarhijri.reference.equinox

Instants of the equinoxes and solstices after Meeus, Astronomical Algorithms
(2nd ed.), ch. 27: a mean instant from Table 27.A/27.B corrected by the 24
periodic terms of Table 27.C. Error is at most a couple of minutes over
-1000..+3000.
"""

from __future__ import annotations

import math
from typing import Tuple

from . import astro_args as aa

MARCH_EQUINOX = 0
JUNE_SOLSTICE = 1
SEPTEMBER_EQUINOX = 2
DECEMBER_SOLSTICE = 3

# Table 27.A, Y = year/1000, for years before 1000
_MEAN_BEFORE_1000: Tuple[Tuple[float, ...], ...] = (
    (1721139.29189, 365242.13740, 0.06134, 0.00111, -0.00071),
    (1721233.25401, 365241.72562, -0.05323, 0.00907, 0.00025),
    (1721325.70455, 365242.49558, -0.11677, -0.00297, 0.00074),
    (1721414.39987, 365242.88257, -0.00769, -0.00933, -0.00006),
)

# Table 27.B, Y = (year-2000)/1000
_MEAN_FROM_1000: Tuple[Tuple[float, ...], ...] = (
    (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
)

# Table 27.C: (A, B deg, C deg/century)
_PERIODIC_TERMS: Tuple[Tuple[int, float, float], ...] = (
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
)


def mean_equinox_jde(year: int, which: int = MARCH_EQUINOX) -> float:
    """Mean instant (JDE) of the event, tables 27.A/27.B."""
    if which not in (0, 1, 2, 3):
        raise ValueError(f"which must be 0..3 (March equinox .. December solstice), got {which}")
    if year < 1000:
        coeffs = _MEAN_BEFORE_1000[which]
        Y = year / 1000.0
    else:
        coeffs = _MEAN_FROM_1000[which]
        Y = (year - 2000) / 1000.0
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * Y + c
    return acc


def equinox_jde(year: int, which: int = MARCH_EQUINOX) -> float:
    """
    Julian Ephemeris Day (TT) of an equinox or solstice in a Gregorian year.

    which: 0 March equinox, 1 June solstice, 2 September equinox, 3 December solstice.
    """
    jde0 = mean_equinox_jde(year, which)
    T = aa.T_centuries(jde0)
    W = math.radians(35999.373 * T - 2.47)
    dlambda = 1.0 + 0.0334 * math.cos(W) + 0.0007 * math.cos(2.0 * W)
    S = sum(A * math.cos(math.radians(B + C * T)) for A, B, C in _PERIODIC_TERMS)
    return jde0 + (0.00001 * S) / dlambda
