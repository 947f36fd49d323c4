"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from suntimes import Algorithm, DaylightStatus, SunEvent


class LocationParams(BaseModel):
    """Validated observer coordinates."""

    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., gt=-90.0, lt=90.0, description="Latitude in degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")


class SunQueryParams(LocationParams):
    """Validated query parameters for the ``/sun`` endpoints."""

    date_utc: date = Field(..., alias="date", description="UTC calendar date (YYYY-MM-DD)")
    algorithm: Optional[Algorithm] = Field(
        None, description="Event-time algorithm; the configured default when omitted"
    )


class ElevationQueryParams(LocationParams):
    """Validated query parameters for the ``/elevation`` endpoint."""

    time_utc: datetime = Field(
        ..., alias="time", description="Instant with an explicit UTC offset (ISO-8601)"
    )

    @field_validator("time_utc")
    def validate_time_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("time must include a UTC offset")
        return value


class SunResponse(BaseModel):
    """All solar events of a UTC day."""

    ok: bool = True
    status: DaylightStatus = Field(..., description="Daylight status of the day")
    date_utc: date = Field(..., description="Requested UTC date")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    algorithm: Algorithm = Field(..., description="Applied algorithm")
    noon_utc: str = Field(..., description="Solar noon in UTC (ISO-8601)")
    midnight_utc: str = Field(..., description="Solar midnight in UTC (ISO-8601)")
    astro_dawn_utc: Optional[str] = Field(None, description="Astronomical dawn in UTC")
    naut_dawn_utc: Optional[str] = Field(None, description="Nautical dawn in UTC")
    civil_dawn_utc: Optional[str] = Field(None, description="Civil dawn in UTC")
    sunrise_utc: Optional[str] = Field(None, description="Sunrise in UTC")
    sunset_utc: Optional[str] = Field(None, description="Sunset in UTC")
    civil_dusk_utc: Optional[str] = Field(None, description="Civil dusk in UTC")
    naut_dusk_utc: Optional[str] = Field(None, description="Nautical dusk in UTC")
    astro_dusk_utc: Optional[str] = Field(None, description="Astronomical dusk in UTC")


class SunEventResponse(BaseModel):
    """A single solar event."""

    ok: bool = True
    event: SunEvent
    date_utc: date
    latitude: float
    longitude: float
    algorithm: Algorithm
    occurs: bool = Field(..., description="Whether the event happens on this date")
    time_utc: Optional[str] = Field(None, description="Event time in UTC (ISO-8601)")


class ElevationResponse(BaseModel):
    """Sun elevation at an instant."""

    ok: bool = True
    time_utc: str = Field(..., description="Queried instant in UTC (ISO-8601)")
    latitude: float
    longitude: float
    elevation_deg: float = Field(..., description="Elevation above the horizon in degrees")


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    algorithms: List[Algorithm]
    default_algorithm: Algorithm


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
