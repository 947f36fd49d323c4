"""Solar event times and sun elevation for a location and UTC date."""

from .angle import Angle
from .astro import compute_sun_elevation, compute_sun_time, compute_sun_times, daylight_status
from .events import Algorithm, DaylightStatus, SunEvent, SunTimes
from .hour_angle import ElevationNotReached

__all__ = [
    "Algorithm",
    "Angle",
    "DaylightStatus",
    "ElevationNotReached",
    "SunEvent",
    "SunTimes",
    "compute_sun_elevation",
    "compute_sun_time",
    "compute_sun_times",
    "daylight_status",
]
