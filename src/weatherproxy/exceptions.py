"""Custom exceptions for the weather proxy."""

from __future__ import annotations


class WeatherProxyError(Exception):
    """Base exception for all weather proxy errors."""


class CredentialError(WeatherProxyError):
    """Base exception for API key loading failures."""


class CredentialFileError(CredentialError):
    """Raised when the credentials file cannot be opened or read."""


class CredentialMissingError(CredentialError):
    """Raised when the credentials file has no usable API key line."""


class WeatherUpstreamError(WeatherProxyError):
    """Base exception for failures talking to the weather API."""


class WeatherConnectionError(WeatherUpstreamError):
    """Raised when the client cannot connect to the API."""


class WeatherTimeoutError(WeatherUpstreamError):
    """Raised when a request to the API times out."""


class WeatherAPIError(WeatherUpstreamError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class WeatherDecodeError(WeatherUpstreamError):
    """Raised when the API response body cannot be decoded into a snapshot."""
