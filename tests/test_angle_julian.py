from __future__ import annotations

import math
from datetime import UTC, date, datetime

import erfa
import pytest

from suntimes.angle import Angle, cos, sin, tan
from suntimes.julian import (
    J2000,
    JulianCenturies,
    JulianDays,
    centuries_since_j2000,
    epoch_seconds,
    from_julian_day,
    to_datetime,
    to_julian_day,
    utc_day_start,
)

SECONDS_PER_YEAR = 31_556_952


def test_angle_conversions():
    assert Angle.from_rad(0.0).deg == 0.0
    assert Angle.from_deg(90.0).rad == math.pi / 2
    assert Angle.from_rad(math.pi).deg == 180.0
    assert Angle.from_deg(360.0).rad == 2 * math.pi


def test_angle_arithmetic():
    a = Angle.from_deg(30.0)
    b = Angle.from_deg(15.0)
    assert (a + b).deg == pytest.approx(45.0)
    assert (a - b).deg == pytest.approx(15.0)
    assert (2 * a).deg == pytest.approx(60.0)
    assert (a * 3).deg == pytest.approx(90.0)
    assert (a / 2).deg == pytest.approx(15.0)
    assert (-a).deg == pytest.approx(-30.0)
    assert Angle.from_deg(720.0).deg == pytest.approx(720.0)


def test_angle_trigonometry():
    assert sin(Angle.from_deg(30.0)) == pytest.approx(0.5)
    assert cos(Angle.from_deg(60.0)) == pytest.approx(0.5)
    assert tan(Angle.from_deg(45.0)) == pytest.approx(1.0)


def test_angle_value_semantics():
    assert Angle.from_deg(90.0) == Angle.from_rad(math.pi / 2)
    assert len({Angle.from_deg(90.0), Angle.from_rad(math.pi / 2)}) == 1
    with pytest.raises(AttributeError):
        Angle.from_deg(1.0)._rad = 2.0  # type: ignore[misc]


def test_angle_requires_explicit_unit():
    with pytest.raises(TypeError):
        Angle(1.0)
    with pytest.raises(TypeError):
        Angle()


def test_julian_day_of_known_instants():
    assert to_julian_day(0) == 2440587.5
    j2000 = epoch_seconds(datetime(2000, 1, 1, 12, tzinfo=UTC))
    assert to_julian_day(j2000) == J2000
    assert centuries_since_j2000(to_julian_day(j2000)) == 0.0


@pytest.mark.parametrize(
    "day",
    [date(1700, 3, 1), date(1969, 12, 31), date(2000, 1, 1), date(2022, 10, 15), date(2250, 7, 4)],
)
def test_julian_day_matches_erfa(day: date):
    jd1, jd2 = erfa.cal2jd(day.year, day.month, day.day)
    assert to_julian_day(utc_day_start(day)) == pytest.approx(jd1 + jd2, abs=1e-9)


def test_round_trip_over_six_centuries():
    start = -300 * SECONDS_PER_YEAR
    stop = 300 * SECONDS_PER_YEAR
    for instant in range(start, stop, 9_999_991):
        assert from_julian_day(to_julian_day(instant)) == instant
    for instant in range(-1000, 1000):
        assert from_julian_day(to_julian_day(instant)) == instant


def test_from_julian_day_floors_to_seconds():
    assert from_julian_day(2440587.5 + 1.75 / 86400) == 1
    assert from_julian_day(2440587.5 - 0.25 / 86400) == -1


def test_from_julian_day_rejects_nan():
    with pytest.raises(ValueError):
        from_julian_day(math.nan)


def test_julian_durations():
    quarter = JulianDays.from_angle(Angle.from_deg(90.0))
    assert quarter.value == pytest.approx(0.25)
    assert quarter.to_angle().deg == pytest.approx(90.0)
    assert JulianDays(0.5).to_seconds() == 43200
    assert JulianDays(-0.1 / 86400).to_seconds() == -1

    tp = JulianCenturies(0.0) + JulianDays(36525.0)
    assert tp.value == pytest.approx(1.0)
    assert (tp - JulianDays(36525.0)).value == pytest.approx(0.0)
    assert JulianCenturies.from_julian_day(J2000 + 36525.0 / 2).value == pytest.approx(0.5)


def test_day_start_and_epoch_seconds():
    assert utc_day_start(date(1970, 1, 1)) == 0
    assert utc_day_start(date(1969, 12, 31)) == -86400
    assert utc_day_start(date(2022, 10, 15)) == 1665792000
    assert epoch_seconds(datetime(2022, 10, 15, 6, 30, 15, 999999, tzinfo=UTC)) == 1665815415
    assert to_datetime(1665792000) == datetime(2022, 10, 15, tzinfo=UTC)
    with pytest.raises(ValueError):
        epoch_seconds(datetime(2022, 10, 15))
    with pytest.raises(TypeError):
        utc_day_start(datetime(2022, 10, 15, tzinfo=UTC))
