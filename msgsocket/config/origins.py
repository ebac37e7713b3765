"""Origin allow-list configuration for WebSocket upgrades.

Two independent lists drive the origin gate:

    WS_ALLOWED_ORIGINS: Fully qualified origins compared case-insensitively.
    WS_DEV_ORIGIN_SUBSTRINGS: Development bypass. Any origin containing one of
        these substrings is accepted regardless of scheme or port.

Both are comma-separated environment variables. Set a variable to an empty
string to disable that list.
"""

from __future__ import annotations

from ..utils.env import env_list

_DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:4000",
    "http://localhost:8080",
    "http://127.0.0.1:4000",
    "http://127.0.0.1:8080",
)
_DEFAULT_DEV_SUBSTRINGS = ("localhost", "127.0.0.1")

WS_ALLOWED_ORIGINS = env_list("WS_ALLOWED_ORIGINS", _DEFAULT_ALLOWED_ORIGINS)
WS_DEV_ORIGIN_SUBSTRINGS = env_list("WS_DEV_ORIGIN_SUBSTRINGS", _DEFAULT_DEV_SUBSTRINGS)

__all__ = [
    "WS_ALLOWED_ORIGINS",
    "WS_DEV_ORIGIN_SUBSTRINGS",
]
