from __future__ import annotations

import math

import numpy as np
import pytest

from suntimes.angle import Angle
from suntimes.events import SunEvent
from suntimes.hour_angle import (
    ElevationNotReached,
    elevation_from_hour_angle,
    hour_angle,
    noaa_hour_angle,
)

LATITUDES = np.linspace(-60.0, 60.0, 7)
DECLINATIONS = np.linspace(-23.0, 23.0, 5)
HOUR_ANGLES = np.linspace(-165.0, 165.0, 12)


def test_hour_angle_inverts_elevation():
    for lat in LATITUDES:
        latitude = Angle.from_deg(float(lat))
        for decl in DECLINATIONS:
            declination = Angle.from_deg(float(decl))
            for h in HOUR_ANGLES:
                elevation = elevation_from_hour_angle(latitude, declination, Angle.from_deg(float(h)))
                zenith = Angle.from_deg(90.0) - elevation
                recovered = noaa_hour_angle(latitude, declination, zenith)
                assert recovered.deg == pytest.approx(abs(float(h)), abs=1e-6)
                rising = noaa_hour_angle(latitude, declination, -zenith)
                assert rising.deg == pytest.approx(-abs(float(h)), abs=1e-6)


def test_both_forms_agree():
    for lat in LATITUDES:
        latitude = Angle.from_deg(float(lat))
        for decl in DECLINATIONS:
            declination = Angle.from_deg(float(decl))
            for event in SunEvent.crossings():
                try:
                    simple = hour_angle(latitude, declination, event.time_angle)
                except ElevationNotReached:
                    with pytest.raises(ElevationNotReached):
                        noaa_hour_angle(latitude, declination, event.time_angle)
                    continue
                noaa = noaa_hour_angle(latitude, declination, event.time_angle)
                assert noaa.deg == pytest.approx(simple.deg, abs=1e-9)


def test_sign_follows_time_angle():
    latitude = Angle.from_deg(52.0)
    declination = Angle.from_deg(-6.0)
    dawn = noaa_hour_angle(latitude, declination, SunEvent.sunrise.time_angle)
    dusk = noaa_hour_angle(latitude, declination, SunEvent.sunset.time_angle)
    assert dawn.deg < 0.0 < dusk.deg
    assert dawn.deg == pytest.approx(-dusk.deg)
    # Shorter than twelve hours of daylight south of the celestial equator.
    assert dusk.deg < 90.0


def test_equator_at_equinox_rises_six_hours_before_noon():
    zero = Angle.from_deg(0.0)
    angle = hour_angle(zero, zero, Angle.from_deg(-90.0))
    assert angle.deg == pytest.approx(-90.0)


def test_polar_day_is_not_reached_from_above():
    with pytest.raises(ElevationNotReached) as info:
        noaa_hour_angle(Angle.from_deg(78.0), Angle.from_deg(23.4), SunEvent.sunrise.time_angle)
    assert info.value.sun_above is True
    assert info.value.cos_hour_angle < -1.0


def test_polar_night_is_not_reached_from_below():
    with pytest.raises(ElevationNotReached) as info:
        hour_angle(Angle.from_deg(78.0), Angle.from_deg(-23.4), SunEvent.sunset.time_angle)
    assert info.value.sun_above is False
    assert info.value.cos_hour_angle > 1.0


def test_nan_is_not_reached():
    with pytest.raises(ElevationNotReached) as info:
        noaa_hour_angle(Angle.from_rad(math.nan), Angle.from_deg(0.0), SunEvent.sunset.time_angle)
    assert info.value.sun_above is None


def test_elevation_from_hour_angle():
    latitude = Angle.from_deg(45.0)
    declination = Angle.from_deg(10.0)
    noon = elevation_from_hour_angle(latitude, declination, Angle.from_deg(0.0))
    assert noon.deg == pytest.approx(90.0 - 45.0 + 10.0)
    midnight = elevation_from_hour_angle(latitude, declination, Angle.from_deg(180.0))
    assert midnight.deg == pytest.approx(-(90.0 - 45.0 - 10.0))


def test_elevation_at_zenith_is_clamped():
    latitude = Angle.from_deg(23.0)
    assert elevation_from_hour_angle(latitude, latitude, Angle.from_deg(0.0)).deg == pytest.approx(90.0)
