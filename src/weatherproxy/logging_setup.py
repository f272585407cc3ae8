"""Logging configuration and outbound call logging for the weather proxy."""

from __future__ import annotations

import functools
import inspect
import logging
import sys
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_REDACTED_ARGS = frozenset({"api_key"})

upstream_logger = logging.getLogger("weatherproxy.upstream")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send all weatherproxy logs to stderr with millisecond timestamps."""
    root = logging.getLogger("weatherproxy")
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def _describe_args(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Build a readable argument summary, skipping ``self`` and masking secrets."""
    bound = inspect.signature(fn).bind_partial(*args, **kwargs)
    parts = []
    for name, value in bound.arguments.items():
        if name == "self":
            continue
        if name in _REDACTED_ARGS:
            parts.append(f"{name}='***'")
        else:
            parts.append(f"{name}={value!r}")
    return ", ".join(parts)


def log_upstream_call(fn: F) -> F:
    """Decorator that logs calls to the weather API with timing."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _describe_args(fn, args, kwargs)
        upstream_logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            upstream_logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        upstream_logger.info("OK: %s(%s) (%.3fs)", fn.__qualname__, arg_str, elapsed)
        return result

    return wrapper  # type: ignore[return-value]
