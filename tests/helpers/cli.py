from __future__ import annotations

import os
from argparse import ArgumentParser

from tests.config import DEFAULT_ORIGIN, DEFAULT_SERVER_WS_URL


def add_connection_args(
    parser: ArgumentParser,
    *,
    server_help: str | None = None,
) -> None:
    """
    Register standard connection flags for test utilities.

    - ``--server`` defaults to ``SERVER_WS_URL`` env or ``DEFAULT_SERVER_WS_URL``.
    - ``--origin`` defaults to ``SERVER_ORIGIN`` env or ``DEFAULT_ORIGIN``.
    """

    default_server = os.getenv("SERVER_WS_URL", DEFAULT_SERVER_WS_URL)
    parser.add_argument(
        "--server",
        default=default_server,
        help=server_help
        or f"WebSocket server URL (default env SERVER_WS_URL or {DEFAULT_SERVER_WS_URL})",
    )
    parser.add_argument(
        "--origin",
        default=os.getenv("SERVER_ORIGIN", DEFAULT_ORIGIN),
        help=f"Origin header sent with the upgrade (default env SERVER_ORIGIN or {DEFAULT_ORIGIN})",
    )


__all__ = ["add_connection_args"]
