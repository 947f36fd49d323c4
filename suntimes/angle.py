"""Angle value type used by every solar formula."""

from __future__ import annotations

import math

__all__ = ["Angle", "sin", "cos", "tan"]


class Angle:
    """Immutable angle stored in radians.

    Construct with :meth:`from_deg` or :meth:`from_rad` and read back with
    :attr:`deg` or :attr:`rad`. No normalisation happens on construction;
    formulas that need a wrapped value do it explicitly.
    """

    __slots__ = ("_rad",)

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError("construct angles with Angle.from_deg or Angle.from_rad")

    @classmethod
    def from_rad(cls, rad: float) -> "Angle":
        angle = object.__new__(cls)
        object.__setattr__(angle, "_rad", float(rad))
        return angle

    @classmethod
    def from_deg(cls, deg: float) -> "Angle":
        return cls.from_rad(deg * (math.pi / 180.0))

    @property
    def rad(self) -> float:
        return self._rad

    @property
    def deg(self) -> float:
        return self._rad * (180.0 / math.pi)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Angle is immutable")

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_rad(self._rad + other._rad)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_rad(self._rad - other._rad)

    def __neg__(self) -> "Angle":
        return Angle.from_rad(-self._rad)

    def __mul__(self, factor: float) -> "Angle":
        if isinstance(factor, Angle):
            return NotImplemented
        return Angle.from_rad(self._rad * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Angle":
        if isinstance(divisor, Angle):
            return NotImplemented
        return Angle.from_rad(self._rad / divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._rad == other._rad

    def __hash__(self) -> int:
        return hash(self._rad)

    def __repr__(self) -> str:
        return f"Angle(deg={self.deg!r})"


def sin(angle: Angle) -> float:
    return math.sin(angle.rad)


def cos(angle: Angle) -> float:
    return math.cos(angle.rad)


def tan(angle: Angle) -> float:
    return math.tan(angle.rad)
