"""Solar position formulas of the NOAA solar calculator.

Every function takes the time as :class:`~suntimes.julian.JulianCenturies`
since J2000.0 and is a closed-form polynomial/trigonometric expression.
Coefficients come from the NOAA spreadsheet
(https://gml.noaa.gov/grad/solcalc/calcdetails.html), which in turn
follows Meeus, *Astronomical Algorithms*.
"""

from __future__ import annotations

import math

from .angle import Angle, cos, sin, tan
from .julian import JulianCenturies

__all__ = [
    "mean_longitude",
    "mean_anomaly",
    "eccentricity",
    "equation_of_center",
    "apparent_longitude",
    "mean_obliquity",
    "obliquity_correction",
    "declination",
    "equation_of_time",
]


def _omega(t: float) -> Angle:
    """Longitude of the ascending node of the moon's orbit (nutation term)."""
    return Angle.from_deg(125.04 - 1934.136 * t)


def mean_longitude(tp: JulianCenturies) -> Angle:
    t = tp.value
    return Angle.from_deg((280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0)


def mean_anomaly(tp: JulianCenturies) -> Angle:
    t = tp.value
    return Angle.from_deg(357.52911 + t * (35999.05029 - 0.0001537 * t))


def eccentricity(tp: JulianCenturies) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    t = tp.value
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(tp: JulianCenturies) -> Angle:
    anomaly = mean_anomaly(tp)
    t = tp.value
    return Angle.from_deg(
        sin(anomaly) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + sin(2 * anomaly) * (0.019993 - 0.000101 * t)
        + sin(3 * anomaly) * 0.000289
    )


def apparent_longitude(tp: JulianCenturies) -> Angle:
    true_longitude = mean_longitude(tp) + equation_of_center(tp)
    return true_longitude - Angle.from_deg(0.00569 + 0.00478 * sin(_omega(tp.value)))


def mean_obliquity(tp: JulianCenturies) -> Angle:
    t = tp.value
    seconds = 21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))
    return Angle.from_deg(23.0 + (26.0 + seconds / 60.0) / 60.0)


def obliquity_correction(tp: JulianCenturies) -> Angle:
    return mean_obliquity(tp) + Angle.from_deg(0.00256 * cos(_omega(tp.value)))


def declination(tp: JulianCenturies) -> Angle:
    return Angle.from_rad(
        math.asin(sin(obliquity_correction(tp)) * sin(apparent_longitude(tp)))
    )


def equation_of_time(tp: JulianCenturies) -> Angle:
    """Apparent minus mean solar time, as an angle of Earth's rotation.

    Divide by a full turn to obtain the correction in days.
    """

    obliquity = obliquity_correction(tp)
    longitude = mean_longitude(tp)
    anomaly = mean_anomaly(tp)
    e = eccentricity(tp)
    y = tan(obliquity / 2) ** 2

    value = (
        y * sin(2 * longitude)
        - 2 * e * sin(anomaly)
        + 4 * e * y * sin(anomaly) * cos(2 * longitude)
        - 0.5 * y * y * sin(4 * longitude)
        - 1.25 * e * e * sin(2 * anomaly)
    )
    return Angle.from_rad(value)
