"""Environment validation helpers."""

from __future__ import annotations

import logging

from msgsocket.config.logging import APP_LOG_LEVEL
from msgsocket.config.origins import WS_ALLOWED_ORIGINS, WS_DEV_ORIGIN_SUBSTRINGS
from msgsocket.config.server import SERVER_HTTP_IMPL, SERVER_PORT, WS_PATH
from msgsocket.config.websocket import (
    WS_MAX_MESSAGE_BYTES,
    WS_IDLE_TIMEOUT_S,
    WS_WRITE_TIMEOUT_S,
)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_HTTP_IMPLS = {"h11", "httptools"}


def validate_env() -> None:
    """Validate required configuration once during startup."""
    errors: list[str] = []

    # Session limits
    if WS_MAX_MESSAGE_BYTES <= 0:
        errors.append(f"WS_MAX_MESSAGE_BYTES must be positive, got: {WS_MAX_MESSAGE_BYTES}")
    if WS_IDLE_TIMEOUT_S <= 0:
        errors.append(f"WS_IDLE_TIMEOUT_S must be positive, got: {WS_IDLE_TIMEOUT_S}")
    if WS_WRITE_TIMEOUT_S <= 0:
        errors.append(f"WS_WRITE_TIMEOUT_S must be positive, got: {WS_WRITE_TIMEOUT_S}")

    # Origin gate
    if not WS_ALLOWED_ORIGINS and not WS_DEV_ORIGIN_SUBSTRINGS:
        logging.getLogger(__name__).warning(
            "WS_ALLOWED_ORIGINS and WS_DEV_ORIGIN_SUBSTRINGS are both empty; "
            "every WebSocket upgrade will be rejected"
        )

    # Listener
    if not 0 < SERVER_PORT < 65536:
        errors.append(f"SERVER_PORT must be between 1 and 65535, got: {SERVER_PORT}")
    if not WS_PATH.startswith("/"):
        errors.append(f"WS_PATH must start with '/', got: {WS_PATH!r}")
    if SERVER_HTTP_IMPL not in _HTTP_IMPLS:
        errors.append(f"SERVER_HTTP_IMPL must be one of {sorted(_HTTP_IMPLS)}, got: {SERVER_HTTP_IMPL!r}")
    if APP_LOG_LEVEL not in _LOG_LEVELS:
        errors.append(f"APP_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got: {APP_LOG_LEVEL}")

    if errors:
        raise ValueError("; ".join(errors))


__all__ = ["validate_env"]
