"""Temperature classification and response formatting."""

from __future__ import annotations

from weatherproxy.models.weather import WeatherSnapshot

HOT_THRESHOLD = 30.0
COLD_THRESHOLD = 10.0


def classify_temperature(celsius: float) -> str:
    """Bucket a temperature as 'hot' (>= 30), 'cold' (<= 10) or 'moderate'."""
    if celsius >= HOT_THRESHOLD:
        return "hot"
    if celsius <= COLD_THRESHOLD:
        return "cold"
    return "moderate"


def format_summary(snapshot: WeatherSnapshot) -> str:
    """Format a snapshot as the single-line text body returned to callers."""
    temperature = snapshot.temperature
    return (
        f"Weather: {snapshot.primary_condition.main}, "
        f"Temperature: {temperature:.1f}°C, "
        f"Condition: {classify_temperature(temperature)}"
    )
