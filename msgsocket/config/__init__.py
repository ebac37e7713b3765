"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- websocket: message limits, timeouts and close codes
- origins: upgrade origin allow-list and development bypass
- server: listener host/port and WebSocket route
- logging: log level and format

Validation lives in msgsocket/helpers/validation.py.
"""

from .websocket import (
    WS_MAX_MESSAGE_BYTES,
    WS_IDLE_TIMEOUT_S,
    WS_WRITE_TIMEOUT_S,
    WS_CLOSE_POLICY_CODE,
    WS_CLOSE_TOO_LARGE_CODE,
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    WS_NORMAL_CLOSE_CODES,
    WS_STRUCTURED_PREFIX,
)
from .origins import WS_ALLOWED_ORIGINS, WS_DEV_ORIGIN_SUBSTRINGS
from .server import SERVER_HOST, SERVER_PORT, SERVER_ACCESS_LOG, SERVER_HTTP_IMPL, WS_PATH
from .logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT

__all__ = [
    # websocket
    "WS_MAX_MESSAGE_BYTES",
    "WS_IDLE_TIMEOUT_S",
    "WS_WRITE_TIMEOUT_S",
    "WS_CLOSE_POLICY_CODE",
    "WS_CLOSE_TOO_LARGE_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_NORMAL_CLOSE_CODES",
    "WS_STRUCTURED_PREFIX",
    # origins
    "WS_ALLOWED_ORIGINS",
    "WS_DEV_ORIGIN_SUBSTRINGS",
    # server
    "SERVER_HOST",
    "SERVER_PORT",
    "SERVER_ACCESS_LOG",
    "SERVER_HTTP_IMPL",
    "WS_PATH",
    # logging
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
]
