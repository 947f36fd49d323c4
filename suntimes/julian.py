"""Julian Date arithmetic on top of integer UTC epoch seconds.

The solar formulas work on a continuous day count (Julian Date) and on
its rescaled form, Julian centuries since J2000.0. Instants enter and
leave this module as integer seconds since the Unix epoch; the mapping is
the affine transform ``jd = seconds / 86400 + 2440587.5``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime

import erfa

from .angle import Angle

__all__ = [
    "J2000",
    "DAYS_PER_CENTURY",
    "SECONDS_PER_DAY",
    "UNIX_EPOCH_JD",
    "JulianDays",
    "JulianCenturies",
    "to_julian_day",
    "from_julian_day",
    "centuries_since_j2000",
    "utc_day_start",
    "epoch_seconds",
    "to_datetime",
]

J2000 = erfa.DJ00  # 2451545.0, 2000-01-01T12:00 TT.
DAYS_PER_CENTURY = erfa.DJC  # 36525 days per Julian century.
SECONDS_PER_DAY = int(erfa.DAYSEC)
UNIX_EPOCH_JD = 2440587.5  # 1970-01-01T00:00Z as a Julian Date.

# Float noise from the epoch offset stays well below a millisecond for
# instants within several millennia of the present.
_FLOOR_SLACK_SECONDS = 1e-3


@dataclass(frozen=True, order=True)
class JulianDays:
    """A duration in (fractional) days."""

    value: float

    @classmethod
    def from_angle(cls, angle: Angle) -> "JulianDays":
        """One full turn of the sun corresponds to one day."""
        return cls(angle.rad / math.tau)

    def to_angle(self) -> Angle:
        return Angle.from_rad(self.value * math.tau)

    def to_seconds(self) -> int:
        """Whole seconds, rounded towards negative infinity."""
        return math.floor(self.value * SECONDS_PER_DAY)

    def __add__(self, other: "JulianDays") -> "JulianDays":
        if not isinstance(other, JulianDays):
            return NotImplemented
        return JulianDays(self.value + other.value)

    def __sub__(self, other: "JulianDays") -> "JulianDays":
        if not isinstance(other, JulianDays):
            return NotImplemented
        return JulianDays(self.value - other.value)


@dataclass(frozen=True, order=True)
class JulianCenturies:
    """A point on the J2000-relative time axis measured in Julian centuries."""

    value: float

    @classmethod
    def from_julian_day(cls, jd: float) -> "JulianCenturies":
        return cls(centuries_since_j2000(jd))

    @classmethod
    def at(cls, instant: int) -> "JulianCenturies":
        return cls.from_julian_day(to_julian_day(instant))

    def __add__(self, other: JulianDays) -> "JulianCenturies":
        if not isinstance(other, JulianDays):
            return NotImplemented
        return JulianCenturies(self.value + other.value / DAYS_PER_CENTURY)

    def __sub__(self, other: JulianDays) -> "JulianCenturies":
        if not isinstance(other, JulianDays):
            return NotImplemented
        return JulianCenturies(self.value - other.value / DAYS_PER_CENTURY)


def to_julian_day(instant: int) -> float:
    """Return the Julian Date of *instant* (seconds since the Unix epoch)."""

    return instant / SECONDS_PER_DAY + UNIX_EPOCH_JD


def from_julian_day(jd: float) -> int:
    """Return the Unix instant of *jd*, floored to whole seconds.

    A millisecond of slack absorbs float noise so that integer instants
    round-trip exactly. Event solvers floor relative to the UTC day start
    instead and do not go through this function.

    Raises
    ------
    ValueError
        If *jd* is not finite.
    """

    if not math.isfinite(jd):
        raise ValueError(f"Julian Date must be finite, got {jd!r}")
    seconds = (jd - UNIX_EPOCH_JD) * SECONDS_PER_DAY
    return math.floor(seconds + _FLOOR_SLACK_SECONDS)


def centuries_since_j2000(jd: float) -> float:
    return (jd - J2000) / DAYS_PER_CENTURY


def utc_day_start(day: date) -> int:
    """Return the instant of 00:00 UTC on *day*."""

    if isinstance(day, datetime):
        raise TypeError("utc_day_start expects a date, not a datetime")
    return day.toordinal() * SECONDS_PER_DAY - _UNIX_EPOCH_ORDINAL_SECONDS


def epoch_seconds(moment: datetime) -> int:
    """Convert a timezone-aware datetime into whole Unix seconds."""

    if moment.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    moment = moment.astimezone(UTC)
    days = moment.toordinal() * SECONDS_PER_DAY - _UNIX_EPOCH_ORDINAL_SECONDS
    return days + moment.hour * 3600 + moment.minute * 60 + moment.second


def to_datetime(instant: int) -> datetime:
    return datetime.fromtimestamp(instant, tz=UTC)


_UNIX_EPOCH_ORDINAL_SECONDS = date(1970, 1, 1).toordinal() * SECONDS_PER_DAY
