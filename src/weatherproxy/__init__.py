"""weatherproxy — plain-text proxy for the OpenWeatherMap current weather API."""

from weatherproxy.app import create_app
from weatherproxy.client import OpenWeatherClient
from weatherproxy.credentials import load_api_key
from weatherproxy.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialMissingError,
    WeatherAPIError,
    WeatherConnectionError,
    WeatherDecodeError,
    WeatherProxyError,
    WeatherTimeoutError,
    WeatherUpstreamError,
)
from weatherproxy.formatting import classify_temperature, format_summary
from weatherproxy.models import WeatherSnapshot

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialMissingError",
    "OpenWeatherClient",
    "WeatherAPIError",
    "WeatherConnectionError",
    "WeatherDecodeError",
    "WeatherProxyError",
    "WeatherSnapshot",
    "WeatherTimeoutError",
    "WeatherUpstreamError",
    "classify_temperature",
    "create_app",
    "format_summary",
    "load_api_key",
]

__version__ = "0.1.0"
