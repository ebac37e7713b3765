"""Configuration for test clients."""

from .defaults import DEFAULT_ORIGIN, DEFAULT_SERVER_WS_URL, DEFAULT_WS_PATH, SMOKE_MESSAGES

__all__ = [
    "DEFAULT_ORIGIN",
    "DEFAULT_SERVER_WS_URL",
    "DEFAULT_WS_PATH",
    "SMOKE_MESSAGES",
]
