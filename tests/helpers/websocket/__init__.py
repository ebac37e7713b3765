"""WebSocket helpers for test clients."""

from .ws import normalize_ws_url

__all__ = ["normalize_ws_url"]
