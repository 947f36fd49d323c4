"""Public entry points: solar event times and elevation for a location.

Coordinates are accepted in degrees (east-positive longitude); dates and
instants are UTC.
"""

from __future__ import annotations

import math
import operator
from datetime import date, datetime
from typing import Optional

from .angle import Angle
from .config import resolve_default_algorithm
from .events import SUNRISE_ELEVATION, Algorithm, DaylightStatus, SunEvent, SunTimes
from .julian import epoch_seconds, utc_day_start
from .solver import direct_sun_time, direct_sun_times, noaa_sun_time, noaa_sun_times, sun_elevation

__all__ = [
    "compute_sun_times",
    "compute_sun_time",
    "compute_sun_elevation",
    "daylight_status",
]


def _location(lat: float, lon: float) -> tuple[Angle, Angle]:
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError("Latitude and longitude must be finite numbers")
    # cos(latitude) vanishes at the poles and the hour angle is undefined.
    if not -90.0 < lat < 90.0:
        raise ValueError(f"Latitude must lie strictly between -90 and 90 degrees, got {lat}")
    if not -180.0 <= lon <= 180.0:
        raise ValueError(f"Longitude must lie between -180 and 180 degrees, got {lon}")
    return Angle.from_deg(lat), Angle.from_deg(lon)


def _algorithm(algorithm: Optional[Algorithm | str]) -> Algorithm:
    if algorithm is None:
        return resolve_default_algorithm()
    try:
        return Algorithm(algorithm)
    except ValueError as exc:
        raise ValueError(f"Unsupported algorithm: {algorithm}") from exc


def _day_start(date_utc: date) -> int:
    if isinstance(date_utc, datetime):
        raise TypeError("date_utc must be a date; use compute_sun_elevation for instants")
    return utc_day_start(date_utc)


def compute_sun_times(
    date_utc: date,
    lat: float,
    lon: float,
    algorithm: Optional[Algorithm | str] = None,
) -> SunTimes:
    """Compute all ten solar events for a UTC date and location.

    Parameters
    ----------
    date_utc:
        Calendar date in UTC.
    lat, lon:
        Geographic coordinates in degrees (east-positive longitude).
    algorithm:
        ``"direct"``, ``"noaa"`` or ``"noaa_cached"``. Defaults to the
        configured algorithm (``SUNTIMES_ALGORITHM``).

    Returns
    -------
    SunTimes
        Event instants in seconds since the Unix epoch; crossings the sun
        does not make that day are ``None``.

    Raises
    ------
    ValueError
        For coordinates outside the supported range or unknown algorithms.
    """

    latitude, longitude = _location(lat, lon)
    day_start = _day_start(date_utc)
    selected = _algorithm(algorithm)
    if selected is Algorithm.direct:
        return direct_sun_times(latitude, longitude, day_start)
    return noaa_sun_times(latitude, longitude, day_start, cached=selected is Algorithm.noaa_cached)


def compute_sun_time(
    date_utc: date,
    lat: float,
    lon: float,
    event: SunEvent | str,
    algorithm: Optional[Algorithm | str] = None,
) -> Optional[int]:
    """Compute a single solar event; ``None`` when it does not occur."""

    selected_event = SunEvent.parse(event)
    latitude, longitude = _location(lat, lon)
    day_start = _day_start(date_utc)
    if _algorithm(algorithm) is Algorithm.direct:
        return direct_sun_time(latitude, longitude, day_start, selected_event)
    return noaa_sun_time(latitude, longitude, day_start, selected_event)


def compute_sun_elevation(moment: datetime | int, lat: float, lon: float) -> float:
    """Elevation of the sun in degrees at *moment*.

    *moment* is a timezone-aware datetime or whole seconds since the Unix
    epoch (any integer type, numpy integers included).

    Raises
    ------
    TypeError
        If *moment* is neither a datetime nor an integer.
    """

    latitude, longitude = _location(lat, lon)
    if isinstance(moment, datetime):
        instant = epoch_seconds(moment)
    else:
        instant = operator.index(moment)
    return sun_elevation(latitude, longitude, instant).deg


def daylight_status(times: SunTimes, lat: float, lon: float) -> DaylightStatus:
    """Classify a day as ordinary, polar day or polar night.

    The day is ordinary when the sun rises or sets; otherwise the sun's
    elevation at solar noon decides.
    """

    if times.sunrise is not None or times.sunset is not None:
        return DaylightStatus.ok
    if compute_sun_elevation(times.noon, lat, lon) > SUNRISE_ELEVATION:
        return DaylightStatus.polar_day
    return DaylightStatus.polar_night
