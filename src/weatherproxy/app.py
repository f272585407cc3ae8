"""Starlette application exposing the ``/weather`` endpoint."""

from __future__ import annotations

import contextlib
import functools
import logging
import math
from collections.abc import AsyncIterator
from typing import Callable, Protocol

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from weatherproxy.client import OpenWeatherClient
from weatherproxy.config import Settings
from weatherproxy.credentials import load_api_key as load_api_key_from_file
from weatherproxy.exceptions import CredentialError, WeatherUpstreamError
from weatherproxy.formatting import format_summary
from weatherproxy.models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherSource(Protocol):
    def current_weather(self, lat: float, lon: float, api_key: str) -> WeatherSnapshot: ...


def parse_coordinate(raw: str | None) -> float:
    """Parse a query value as a decimal float.

    Stricter than ``float()``: non-ASCII digits, surrounding whitespace and
    ``_`` separators are rejected, a missing value is invalid, and literals
    that overflow to infinity are out of range.
    """
    if raw is None or not raw.isascii() or raw != raw.strip() or "_" in raw:
        raise ValueError(f"invalid decimal number: {raw!r}")
    value = float(raw)
    if math.isinf(value) and "inf" not in raw.lower():
        raise ValueError(f"value out of range: {raw!r}")
    return value


def _remote_addr(request: Request) -> str:
    if request.client is None:
        return "unknown"
    return f"{request.client.host}:{request.client.port}"


def weather(request: Request) -> PlainTextResponse:
    """Handle ``GET /weather?lat=<float>&lon=<float>``."""
    remote = _remote_addr(request)
    logger.info("Incoming request from %s for %s", remote, request.url.path)

    try:
        lat = parse_coordinate(request.query_params.get("lat"))
    except ValueError as exc:
        logger.warning("Error parsing latitude: %s", exc)
        return PlainTextResponse("Invalid latitude", status_code=400)
    try:
        lon = parse_coordinate(request.query_params.get("lon"))
    except ValueError as exc:
        logger.warning("Error parsing longitude: %s", exc)
        return PlainTextResponse("Invalid longitude", status_code=400)

    state = request.app.state
    try:
        api_key = state.load_api_key()
    except CredentialError as exc:
        logger.error("Failed to load API key for request from %s: %s", remote, exc)
        return PlainTextResponse("Failed to load API key", status_code=500)

    try:
        snapshot = state.weather_client.current_weather(lat, lon, api_key)
    except WeatherUpstreamError as exc:
        logger.error("Failed to fetch weather data for request from %s: %s", remote, exc)
        return PlainTextResponse("Failed to fetch weather data", status_code=500)

    body = format_summary(snapshot)
    logger.info("Response sent for request from %s: %s", remote, body)
    return PlainTextResponse(body)


def create_app(
    settings: Settings | None = None,
    *,
    load_api_key: Callable[[], str] | None = None,
    weather_client: WeatherSource | None = None,
) -> Starlette:
    """Build the application, wiring collaborators from *settings* when not given."""
    settings = settings or Settings()

    if load_api_key is None:
        load_api_key = functools.partial(
            load_api_key_from_file, settings.credentials_path, settings.api_key_name,
        )

    owned_client: OpenWeatherClient | None = None
    if weather_client is None:
        owned_client = OpenWeatherClient(base_url=settings.base_url, timeout=settings.timeout)
        weather_client = owned_client

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        yield
        if owned_client is not None:
            owned_client.close()

    app = Starlette(routes=[Route("/weather", weather, methods=["GET"])], lifespan=lifespan)
    app.state.load_api_key = load_api_key
    app.state.weather_client = weather_client
    return app
