"""Public client class for the OpenWeatherMap current weather API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from weatherproxy._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SyncTransport
from weatherproxy.exceptions import WeatherDecodeError
from weatherproxy.logging_setup import log_upstream_call
from weatherproxy.models.weather import WeatherSnapshot


def _validate_snapshot(data: Any) -> WeatherSnapshot:
    """Validate a decoded JSON body against the snapshot model."""
    try:
        return WeatherSnapshot.model_validate(data)
    except ValidationError as exc:
        raise WeatherDecodeError(f"Failed to validate weather response: {exc}") from exc


class OpenWeatherClient:
    """Synchronous client for the OpenWeatherMap API.

    Usage:
        with OpenWeatherClient() as client:
            snapshot = client.current_weather(51.5, -0.12, api_key="...")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OpenWeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_upstream_call
    def current_weather(self, lat: float, lon: float, api_key: str) -> WeatherSnapshot:
        """Get current conditions and temperature (metric units) at a coordinate."""
        params = [
            ("lat", f"{lat:f}"),
            ("lon", f"{lon:f}"),
            ("units", "metric"),
            ("APPID", api_key),
        ]
        data = self._transport.get("/weather", params)
        return _validate_snapshot(data)
