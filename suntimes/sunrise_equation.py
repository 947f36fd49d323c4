"""Simple solar position formulas keyed on days since J2000.0.

These follow the "complete calculation on Earth" form of the sunrise
equation (https://en.wikipedia.org/wiki/Sunrise_equation). They are less
accurate than :mod:`suntimes.noaa` and serve the direct algorithm.
"""

from __future__ import annotations

import math

from .angle import Angle, sin
from .julian import J2000, JulianDays, to_julian_day

__all__ = [
    "AXIAL_TILT",
    "julian_day_number",
    "mean_solar_time",
    "solar_mean_anomaly",
    "equation_of_center",
    "ecliptic_longitude",
    "solar_transit",
    "declination",
]

AXIAL_TILT = Angle.from_deg(23.44)
_LEAP_SECOND_CORRECTION = 0.0008


def julian_day_number(day_start: int) -> JulianDays:
    """Whole days since J2000.0 for the UTC day starting at *day_start*.

    The small correction covers accumulated leap seconds and TT-UT1; the
    ceiling lands on the J2000-relative noon of the same UTC day.
    """

    offset = to_julian_day(day_start) - J2000 + _LEAP_SECOND_CORRECTION
    return JulianDays(float(math.ceil(offset)))


def mean_solar_time(days: JulianDays, longitude: Angle) -> JulianDays:
    return days - JulianDays.from_angle(longitude)


def solar_mean_anomaly(mean_time: JulianDays) -> Angle:
    return Angle.from_deg((357.5291 + 0.98560028 * mean_time.value) % 360.0)


def equation_of_center(mean_anomaly: Angle) -> Angle:
    c1 = 1.9148 * sin(mean_anomaly)
    c2 = 0.0200 * sin(2 * mean_anomaly)
    c3 = 0.0003 * sin(3 * mean_anomaly)
    return Angle.from_deg(c1 + c2 + c3)


def ecliptic_longitude(mean_anomaly: Angle) -> Angle:
    center = equation_of_center(mean_anomaly)
    return Angle.from_deg((mean_anomaly.deg + center.deg + 180.0 + 102.9372) % 360.0)


def solar_transit(mean_time: JulianDays, mean_anomaly: Angle, longitude: Angle) -> float:
    """Julian Date of the local true solar noon.

    *longitude* is the ecliptic longitude of the sun, not the observer's.
    """

    correction = 0.0053 * sin(mean_anomaly) - 0.0069 * sin(2 * longitude)
    return J2000 + mean_time.value + correction


def declination(longitude: Angle) -> Angle:
    return Angle.from_rad(math.asin(sin(longitude) * sin(AXIAL_TILT)))
