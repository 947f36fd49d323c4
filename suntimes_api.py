"""FastAPI application exposing solar event times and sun elevation."""

from __future__ import annotations

import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime
from typing import Any, Optional, Type, TypeVar

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from models import (
    ElevationQueryParams,
    ElevationResponse,
    ErrorResponse,
    HealthResponse,
    SunEventResponse,
    SunQueryParams,
    SunResponse,
)
from suntimes import (
    Algorithm,
    SunEvent,
    compute_sun_elevation,
    compute_sun_time,
    compute_sun_times,
    daylight_status,
)
from suntimes.config import ConfigurationError, resolve_default_algorithm, resolve_log_level
from suntimes.julian import to_datetime

logging.basicConfig(level=resolve_log_level(), format="%(message)s")
LOGGER = logging.getLogger("suntimes-api")

APP_DESCRIPTION = "Solar noon, twilight, sunrise and sunset times and sun elevation"


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - exercised in integration tests
    try:
        algorithm = resolve_default_algorithm()
    except ConfigurationError as exc:
        LOGGER.error(json.dumps({"event": "configuration_failed", "error": str(exc)}))
        raise
    LOGGER.info(json.dumps({"event": "startup", "default_algorithm": algorithm.value}))
    yield


app = FastAPI(
    title="Suntimes API",
    description=APP_DESCRIPTION,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _format_utc(instant: Optional[int]) -> Optional[str]:
    if instant is None:
        return None
    return to_datetime(instant).isoformat().replace("+00:00", "Z")


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def _resolve_algorithm(requested: Optional[Algorithm]) -> Algorithm:
    if requested is not None:
        return requested
    try:
        return resolve_default_algorithm()
    except ConfigurationError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


ModelT = TypeVar("ModelT", bound=BaseModel)


def _validated(model: Type[ModelT], **values: Any) -> ModelT:
    try:
        return model.model_validate(values)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


def sun_query_params(
    lat: float,
    lon: float,
    date_utc: date = Query(..., alias="date"),
    algorithm: Optional[Algorithm] = None,
) -> SunQueryParams:
    return _validated(SunQueryParams, lat=lat, lon=lon, date=date_utc, algorithm=algorithm)


def elevation_query_params(
    lat: float, lon: float, time_utc: datetime = Query(..., alias="time")
) -> ElevationQueryParams:
    return _validated(ElevationQueryParams, lat=lat, lon=lon, time=time_utc)


def _log_request(event: str, started: float, **fields: object) -> None:
    duration_ms = (time.perf_counter() - started) * 1000.0
    LOGGER.info(json.dumps({"event": event, **fields, "duration_ms": round(duration_ms, 3)}))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(
        ok=True,
        algorithms=list(Algorithm),
        default_algorithm=_resolve_algorithm(None),
    )


@app.get("/sun", response_model=SunResponse, responses=ERROR_RESPONSES)
def sun_endpoint(params: SunQueryParams = Depends(sun_query_params)) -> SunResponse:
    start_time = time.perf_counter()
    algorithm = _resolve_algorithm(params.algorithm)
    try:
        times = compute_sun_times(params.date_utc, params.lat, params.lon, algorithm)
        status = daylight_status(times, params.lat, params.lon)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    response = SunResponse(
        status=status,
        date_utc=params.date_utc,
        latitude=params.lat,
        longitude=params.lon,
        algorithm=algorithm,
        **{f"{event.value}_utc": _format_utc(instant) for event, instant in times.as_dict().items()},
    )
    _log_request(
        "sun",
        start_time,
        lat=params.lat,
        lon=params.lon,
        date=params.date_utc.isoformat(),
        algorithm=algorithm.value,
        status=status.value,
    )
    return response


@app.get("/sun/{event}", response_model=SunEventResponse, responses=ERROR_RESPONSES)
def sun_event_endpoint(
    event: SunEvent, params: SunQueryParams = Depends(sun_query_params)
) -> SunEventResponse:
    start_time = time.perf_counter()
    algorithm = _resolve_algorithm(params.algorithm)
    try:
        instant = compute_sun_time(params.date_utc, params.lat, params.lon, event, algorithm)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    _log_request(
        "sun_event",
        start_time,
        sun_event=event.value,
        lat=params.lat,
        lon=params.lon,
        date=params.date_utc.isoformat(),
        algorithm=algorithm.value,
        occurs=instant is not None,
    )
    return SunEventResponse(
        event=event,
        date_utc=params.date_utc,
        latitude=params.lat,
        longitude=params.lon,
        algorithm=algorithm,
        occurs=instant is not None,
        time_utc=_format_utc(instant),
    )


@app.get("/elevation", response_model=ElevationResponse, responses=ERROR_RESPONSES)
def elevation_endpoint(
    params: ElevationQueryParams = Depends(elevation_query_params),
) -> ElevationResponse:
    start_time = time.perf_counter()
    moment = params.time_utc.astimezone(UTC)
    try:
        elevation = compute_sun_elevation(moment, params.lat, params.lon)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    _log_request(
        "elevation",
        start_time,
        lat=params.lat,
        lon=params.lon,
        time=moment.isoformat(),
        elevation_deg=round(elevation, 6),
    )
    return ElevationResponse(
        time_utc=moment.isoformat().replace("+00:00", "Z"),
        latitude=params.lat,
        longitude=params.lon,
        elevation_deg=elevation,
    )
