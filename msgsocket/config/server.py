"""HTTP listener configuration."""

import os

from ..utils.env import env_flag


SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "4000"))
SERVER_ACCESS_LOG = env_flag("SERVER_ACCESS_LOG", False)
# uvicorn HTTP parser: "h11" or "httptools"
SERVER_HTTP_IMPL = os.getenv("SERVER_HTTP_IMPL", "h11").strip().lower()

# Route serving the WebSocket upgrade
WS_PATH = os.getenv("WS_PATH", "/ws")


__all__ = [
    "SERVER_HOST",
    "SERVER_PORT",
    "SERVER_ACCESS_LOG",
    "SERVER_HTTP_IMPL",
    "WS_PATH",
]
