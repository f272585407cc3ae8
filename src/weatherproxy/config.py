"""Configuration loader using pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from weatherproxy._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from weatherproxy.credentials import DEFAULT_CREDENTIALS_PATH, DEFAULT_KEY_NAME


class Settings(BaseSettings):
    """Server configuration loaded from WEATHERPROXY_* environment variables."""

    host: str = "0.0.0.0"
    port: int = 8080

    # The API key itself is never part of the settings; it is re-read from
    # this file on every request.
    credentials_path: Path = DEFAULT_CREDENTIALS_PATH
    api_key_name: str = DEFAULT_KEY_NAME

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="WEATHERPROXY_", extra="ignore")
