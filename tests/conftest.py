"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

from weatherproxy.models.weather import WeatherSnapshot

BASE_URL = "https://api.openweathermap.org/data/2.5"

SAMPLE_WEATHER = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 804, "main": "Clouds", "description": "overcast", "icon": "04d"},
    ],
    "base": "stations",
    "main": {
        "temp": 22.5,
        "feels_like": 22.1,
        "temp_min": 21.0,
        "temp_max": 23.9,
        "pressure": 1015,
        "humidity": 60,
    },
    "name": "London",
    "cod": 200,
}

SAMPLE_WEATHER_MULTI = {
    "weather": [
        {"main": "Rain", "description": "light rain"},
        {"main": "Mist", "description": "mist"},
    ],
    "main": {"temp": 8.04},
}

SAMPLE_WEATHER_EMPTY = {
    "weather": [],
    "main": {"temp": 18.0},
}

SAMPLE_UNAUTHORIZED = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}


class FakeWeatherClient:
    """Records calls and returns a fixed snapshot or raises a fixed error."""

    def __init__(
        self,
        snapshot: WeatherSnapshot | None = None,
        error: Exception | None = None,
    ) -> None:
        self.snapshot = snapshot
        self.error = error
        self.calls: list[tuple[float, float, str]] = []

    def current_weather(self, lat: float, lon: float, api_key: str) -> WeatherSnapshot:
        self.calls.append((lat, lon, api_key))
        if self.error is not None:
            raise self.error
        assert self.snapshot is not None
        return self.snapshot


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def credentials_file(tmp_path):
    """Write a credentials file and return its path."""

    def _write(text: str):
        p = tmp_path / ".env"
        p.write_text(text, encoding="utf-8")
        return p

    return _write
