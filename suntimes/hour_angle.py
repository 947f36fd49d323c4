"""Spherical-trigonometry solver linking hour angle and solar elevation.

Target crossings are described by a *time angle*: the angle between the
zenith and the target elevation, signed negative for the rising (dawn)
root and positive for the setting (dusk) root. ``acos`` yields the
magnitude of the hour angle and the sign is copied from the time angle,
so one evaluation serves both roots.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .angle import Angle, cos, sin, tan

__all__ = [
    "ElevationNotReached",
    "hour_angle",
    "noaa_hour_angle",
    "elevation_from_hour_angle",
]


class ElevationNotReached(ValueError):
    """Raised when the sun never crosses the requested elevation.

    ``sun_above`` is ``True`` when the sun stays above the target all day
    (polar day for that elevation), ``False`` when it stays below, and
    ``None`` when the equation produced no number at all.
    """

    def __init__(self, cos_hour_angle: float) -> None:
        self.cos_hour_angle = cos_hour_angle
        self.sun_above: Optional[bool]
        if math.isnan(cos_hour_angle):
            self.sun_above = None
        else:
            self.sun_above = cos_hour_angle < -1.0
        super().__init__(
            f"Sun never reaches the requested elevation (cos H = {cos_hour_angle!r})"
        )


def _signed_acos(cos_hour_angle: float, sign: float) -> Angle:
    # NaN fails both comparisons.
    if not -1.0 <= cos_hour_angle <= 1.0:
        raise ElevationNotReached(cos_hour_angle)
    return Angle.from_rad(math.copysign(math.acos(cos_hour_angle), sign))


def hour_angle(latitude: Angle, declination: Angle, time_angle: Angle) -> Angle:
    """Hour angle of a crossing, sunrise-equation form.

    Solves ``cos(w) = (cos(a) - sin(lat) sin(decl)) / (cos(lat) cos(decl))``.
    """

    numerator = cos(time_angle) - sin(latitude) * sin(declination)
    denominator = cos(latitude) * cos(declination)
    return _signed_acos(numerator / denominator, time_angle.rad)


def noaa_hour_angle(latitude: Angle, declination: Angle, time_angle: Angle) -> Angle:
    """Hour angle of a crossing, NOAA form.

    Algebraically the same root as :func:`hour_angle`, rearranged as
    ``cos(a) / (cos(lat) cos(decl)) - tan(lat) tan(decl)``.
    """

    value = cos(time_angle) / (cos(latitude) * cos(declination)) - tan(latitude) * tan(
        declination
    )
    return _signed_acos(value, time_angle.rad)


def elevation_from_hour_angle(latitude: Angle, declination: Angle, hour_angle: Angle) -> Angle:
    """Elevation of the sun above the horizon at *hour_angle*."""

    value = cos(hour_angle) * cos(latitude) * cos(declination) + sin(latitude) * sin(
        declination
    )
    return Angle.from_rad(math.asin(float(np.clip(value, -1.0, 1.0))))
