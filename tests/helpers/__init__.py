"""Common utilities for test clients."""

__all__ = [
    "cli",
    "websocket",
]
