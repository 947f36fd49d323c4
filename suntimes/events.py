"""Event selectors and the aggregate of a day's solar event times."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from .angle import Angle
from .julian import to_datetime

__all__ = [
    "ASTRONOMICAL_TWILIGHT_ELEVATION",
    "NAUTICAL_TWILIGHT_ELEVATION",
    "CIVIL_TWILIGHT_ELEVATION",
    "SUNRISE_ELEVATION",
    "SunEvent",
    "Algorithm",
    "DaylightStatus",
    "SunTimes",
]

ASTRONOMICAL_TWILIGHT_ELEVATION = -18.0
NAUTICAL_TWILIGHT_ELEVATION = -12.0
CIVIL_TWILIGHT_ELEVATION = -6.0
# Solar semi-diameter plus standard refraction at the horizon.
SUNRISE_ELEVATION = -0.833


class SunEvent(str, Enum):
    """The ten solar events of a UTC day."""

    noon = "noon"
    midnight = "midnight"
    astro_dawn = "astro_dawn"
    naut_dawn = "naut_dawn"
    civil_dawn = "civil_dawn"
    sunrise = "sunrise"
    sunset = "sunset"
    civil_dusk = "civil_dusk"
    naut_dusk = "naut_dusk"
    astro_dusk = "astro_dusk"

    @classmethod
    def crossings(cls) -> tuple["SunEvent", ...]:
        """Events defined by the sun crossing an elevation, dawn to dusk."""
        return tuple(event for event in cls if event.is_crossing)

    @property
    def is_transit(self) -> bool:
        return self in (SunEvent.noon, SunEvent.midnight)

    @property
    def is_crossing(self) -> bool:
        return not self.is_transit

    @property
    def elevation(self) -> Optional[float]:
        """Target elevation in degrees, ``None`` for noon and midnight."""
        return _ELEVATIONS.get(self)

    @property
    def time_angle(self) -> Angle:
        """Signed zenith distance of the target elevation.

        Negative on the rising side, positive on the setting side.

        Raises
        ------
        ValueError
            For noon and midnight, which are transits rather than crossings.
        """

        try:
            return _TIME_ANGLES[self]
        except KeyError as exc:
            raise ValueError(f"{self.value} is not an elevation crossing") from exc

    @classmethod
    def parse(cls, value: "SunEvent | str") -> "SunEvent":
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unsupported sun event: {value}") from exc


_RISING = frozenset(
    {SunEvent.astro_dawn, SunEvent.naut_dawn, SunEvent.civil_dawn, SunEvent.sunrise}
)

_ELEVATIONS: Dict[SunEvent, float] = {
    SunEvent.astro_dawn: ASTRONOMICAL_TWILIGHT_ELEVATION,
    SunEvent.naut_dawn: NAUTICAL_TWILIGHT_ELEVATION,
    SunEvent.civil_dawn: CIVIL_TWILIGHT_ELEVATION,
    SunEvent.sunrise: SUNRISE_ELEVATION,
    SunEvent.sunset: SUNRISE_ELEVATION,
    SunEvent.civil_dusk: CIVIL_TWILIGHT_ELEVATION,
    SunEvent.naut_dusk: NAUTICAL_TWILIGHT_ELEVATION,
    SunEvent.astro_dusk: ASTRONOMICAL_TWILIGHT_ELEVATION,
}

_TIME_ANGLES: Dict[SunEvent, Angle] = {
    event: Angle.from_deg(-90.0 + elevation if event in _RISING else 90.0 - elevation)
    for event, elevation in _ELEVATIONS.items()
}


class Algorithm(str, Enum):
    """Available event-time algorithms."""

    direct = "direct"
    noaa = "noaa"
    noaa_cached = "noaa_cached"


class DaylightStatus(str, Enum):
    ok = "ok"
    polar_day = "polar_day"
    polar_night = "polar_night"


@dataclass(frozen=True)
class SunTimes:
    """Event instants of one UTC day, as integer seconds since the Unix epoch.

    Noon and midnight always exist. The eight crossings are ``None`` when
    the sun does not reach their elevation on that day.
    """

    noon: int
    midnight: int
    astro_dawn: Optional[int] = None
    naut_dawn: Optional[int] = None
    civil_dawn: Optional[int] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    civil_dusk: Optional[int] = None
    naut_dusk: Optional[int] = None
    astro_dusk: Optional[int] = None

    def get(self, event: SunEvent | str) -> Optional[int]:
        return getattr(self, SunEvent.parse(event).value)

    def as_dict(self) -> Dict[SunEvent, Optional[int]]:
        return {SunEvent(field.name): getattr(self, field.name) for field in fields(self)}

    def as_datetimes(self) -> Dict[SunEvent, Optional[datetime]]:
        return {
            event: None if instant is None else to_datetime(instant)
            for event, instant in self.as_dict().items()
        }

    def absent(self) -> tuple[SunEvent, ...]:
        return tuple(event for event, instant in self.as_dict().items() if instant is None)
