"""Single-connection WebSocket message server."""

__version__ = "0.1.0"
