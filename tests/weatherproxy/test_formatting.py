"""Tests for temperature classification and summary formatting."""

from __future__ import annotations

import pytest

from weatherproxy.formatting import classify_temperature, format_summary
from weatherproxy.models import WeatherSnapshot
from tests.conftest import SAMPLE_WEATHER, SAMPLE_WEATHER_MULTI


class TestClassifyTemperature:
    @pytest.mark.parametrize(
        ("celsius", "expected"),
        [
            (30.0, "hot"),
            (42.3, "hot"),
            (29.9, "moderate"),
            (20.0, "moderate"),
            (10.1, "moderate"),
            (10.0, "cold"),
            (-15.0, "cold"),
        ],
    )
    def test_thresholds(self, celsius: float, expected: str) -> None:
        assert classify_temperature(celsius) == expected


class TestFormatSummary:
    def test_moderate(self) -> None:
        snapshot = WeatherSnapshot.model_validate(SAMPLE_WEATHER)
        assert format_summary(snapshot) == "Weather: Clouds, Temperature: 22.5°C, Condition: moderate"

    def test_rounds_to_one_decimal(self) -> None:
        snapshot = WeatherSnapshot.model_validate(SAMPLE_WEATHER_MULTI)
        assert format_summary(snapshot) == "Weather: Rain, Temperature: 8.0°C, Condition: cold"

    def test_hot(self) -> None:
        snapshot = WeatherSnapshot.model_validate(
            {"weather": [{"main": "Clear", "description": "clear sky"}], "main": {"temp": 30}}
        )
        assert format_summary(snapshot) == "Weather: Clear, Temperature: 30.0°C, Condition: hot"
