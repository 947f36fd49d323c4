"""Event-time solvers.

Two algorithms locate the events of a UTC day:

* the *direct* algorithm evaluates the sunrise equation once
  (:mod:`suntimes.sunrise_equation`);
* the *NOAA* algorithm refines solar noon with two evaluations of the
  equation of time and then refines each crossing once more at its
  candidate instant (:mod:`suntimes.noaa`).

The cached NOAA path solves noon once per day and reuses it for all eight
crossings; it performs exactly the same arithmetic as the uncached path.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from . import noaa, sunrise_equation
from .angle import Angle
from .events import SunEvent, SunTimes
from .hour_angle import (
    ElevationNotReached,
    elevation_from_hour_angle,
    hour_angle,
    noaa_hour_angle,
)
from .julian import (
    SECONDS_PER_DAY,
    JulianCenturies,
    JulianDays,
    to_julian_day,
)

__all__ = [
    "SolarNoon",
    "time_of_solar_noon",
    "time_of_solar_elevation",
    "solar_noon",
    "noaa_sun_time",
    "noaa_sun_times",
    "direct_sun_time",
    "direct_sun_times",
    "sun_elevation",
]

LOGGER = logging.getLogger(__name__)

NOON = Angle.from_deg(180.0)
HALF_DAY = JulianDays(0.5)


def _log_absent(algorithm: str, event: SunEvent, day_start: int, exc: ElevationNotReached) -> None:
    LOGGER.debug(
        json.dumps(
            {
                "event": "sun_event_absent",
                "algorithm": algorithm,
                "sun_event": event.value,
                "day_start": day_start,
                "sun_above": exc.sun_above,
            }
        )
    )


# --------------------------------------------------------------------- NOAA


def _noaa_hour_angle_at(tp: JulianCenturies, latitude: Angle, time_angle: Angle) -> Angle:
    return noaa_hour_angle(latitude, noaa.declination(tp), time_angle)


def time_of_solar_noon(day: JulianCenturies, longitude: Angle) -> JulianDays:
    """Offset of local solar noon from the start of *day* (UTC midnight)."""

    # First guess ignores the equation of time.
    tp = day + JulianDays.from_angle(NOON - longitude)
    tp = day + JulianDays.from_angle(NOON - longitude - noaa.equation_of_time(tp))
    return JulianDays.from_angle(NOON - longitude - noaa.equation_of_time(tp))


def time_of_solar_elevation(
    noon: JulianCenturies, latitude: Angle, longitude: Angle, time_angle: Angle
) -> JulianDays:
    """Offset from UTC midnight of the crossing described by *time_angle*.

    *noon* is the refined solar noon. The hour angle found there gives a
    candidate instant; equation of time and hour angle are evaluated once
    more at that candidate.

    Raises
    ------
    ElevationNotReached
        If the sun does not cross the elevation at either evaluation.
    """

    candidate = noon + JulianDays.from_angle(_noaa_hour_angle_at(noon, latitude, time_angle))
    eq_of_time = noaa.equation_of_time(candidate)
    angle = _noaa_hour_angle_at(candidate, latitude, time_angle)
    return JulianDays.from_angle(NOON - longitude - eq_of_time + angle)


@dataclass(frozen=True)
class SolarNoon:
    """Solar noon of one UTC day, shared by that day's crossings."""

    day_start: int
    day: JulianCenturies
    offset: JulianDays

    @property
    def centuries(self) -> JulianCenturies:
        return self.day + self.offset

    @property
    def noon(self) -> int:
        return self.day_start + self.offset.to_seconds()

    @property
    def midnight(self) -> int:
        return self.day_start + (self.offset + HALF_DAY).to_seconds()


def solar_noon(day_start: int, longitude: Angle) -> SolarNoon:
    day = JulianCenturies.from_julian_day(to_julian_day(day_start))
    return SolarNoon(day_start=day_start, day=day, offset=time_of_solar_noon(day, longitude))


def noaa_sun_time(
    latitude: Angle,
    longitude: Angle,
    day_start: int,
    event: SunEvent,
    noon: Optional[SolarNoon] = None,
) -> Optional[int]:
    """Instant of *event* on the UTC day beginning at *day_start*.

    Pass a :class:`SolarNoon` for the same day and longitude to skip
    solving noon again.
    """

    if noon is None:
        noon = solar_noon(day_start, longitude)
    if event is SunEvent.noon:
        return noon.noon
    if event is SunEvent.midnight:
        return noon.midnight
    try:
        offset = time_of_solar_elevation(noon.centuries, latitude, longitude, event.time_angle)
    except ElevationNotReached as exc:
        _log_absent("noaa", event, day_start, exc)
        return None
    return day_start + offset.to_seconds()


def noaa_sun_times(
    latitude: Angle, longitude: Angle, day_start: int, cached: bool = True
) -> SunTimes:
    noon = solar_noon(day_start, longitude) if cached else None
    times: Dict[str, Optional[int]] = {
        event.value: noaa_sun_time(latitude, longitude, day_start, event, noon)
        for event in SunEvent
    }
    return SunTimes(**times)


# ------------------------------------------------------------------- direct


def _floor_to_instant(day_start: int, jd: float) -> int:
    """Whole seconds of *jd*, floored relative to the UTC day start like the NOAA path."""
    return day_start + JulianDays(jd - to_julian_day(day_start)).to_seconds()


def direct_sun_time(
    latitude: Angle, longitude: Angle, day_start: int, event: SunEvent
) -> Optional[int]:
    """Instant of *event* from a single pass of the sunrise equation."""

    days = sunrise_equation.julian_day_number(day_start)
    mean_time = sunrise_equation.mean_solar_time(days, longitude)
    anomaly = sunrise_equation.solar_mean_anomaly(mean_time)
    ecliptic = sunrise_equation.ecliptic_longitude(anomaly)
    transit = sunrise_equation.solar_transit(mean_time, anomaly, ecliptic)

    if event is SunEvent.noon:
        return _floor_to_instant(day_start, transit)
    if event is SunEvent.midnight:
        return _floor_to_instant(day_start, transit + HALF_DAY.value)

    declination = sunrise_equation.declination(ecliptic)
    try:
        angle = hour_angle(latitude, declination, event.time_angle)
    except ElevationNotReached as exc:
        _log_absent("direct", event, day_start, exc)
        return None
    return _floor_to_instant(day_start, transit + JulianDays.from_angle(angle).value)


def direct_sun_times(latitude: Angle, longitude: Angle, day_start: int) -> SunTimes:
    times = {
        event.value: direct_sun_time(latitude, longitude, day_start, event) for event in SunEvent
    }
    return SunTimes(**times)


# ---------------------------------------------------------------- elevation


def sun_elevation(latitude: Angle, longitude: Angle, instant: int) -> Angle:
    """Elevation of the sun at *instant*, without any noon finding."""

    tp = JulianCenturies.at(instant)
    since_midnight = JulianDays((instant % SECONDS_PER_DAY) / SECONDS_PER_DAY)
    angle = longitude + noaa.equation_of_time(tp) + since_midnight.to_angle() - NOON
    return elevation_from_hour_angle(latitude, noaa.declination(tp), angle)
