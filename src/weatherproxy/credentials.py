"""API key loading from a local ``KEY=value`` file."""

from __future__ import annotations

import logging
from pathlib import Path

from weatherproxy.exceptions import CredentialFileError, CredentialMissingError

logger = logging.getLogger(__name__)

DEFAULT_CREDENTIALS_PATH = Path(".env")
DEFAULT_KEY_NAME = "OPENWEATHER_API_KEY"


def load_api_key(
    path: str | Path = DEFAULT_CREDENTIALS_PATH,
    key_name: str = DEFAULT_KEY_NAME,
) -> str:
    """Return the value of the first ``<key_name>=`` line in *path*.

    The file is read on every call. Raises CredentialFileError if the file
    cannot be read, CredentialMissingError if no line carries a value.
    """
    prefix = f"{key_name}="
    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                if line.startswith(prefix):
                    value = line[len(prefix):].rstrip("\r\n")
                    break
            else:
                value = ""
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read credentials file %s: %s", path, exc)
        raise CredentialFileError(f"Cannot read credentials file {path}: {exc}") from exc

    if not value:
        logger.warning("%s not found in %s", key_name, path)
        raise CredentialMissingError(f"{key_name} not found in {path}")
    return value
