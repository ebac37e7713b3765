"""Shared response helpers for WebSocket error handling.

Two failure shapes reach the client:

- A malformed structured command is answered with a JSON error payload and
  the session stays open::

      {"error": "invalid JSON: Expecting value: line 1 column 2 (char 1)"}

- A rejected upgrade is refused during the handshake, before the connection
  is accepted. The ASGI server turns the close into an HTTP 403.
"""

from __future__ import annotations

import json

from fastapi import WebSocket

from ...errors import CommandParseError


def build_parse_error_payload(exc: CommandParseError) -> str:
    """Serialize a command parse failure as a JSON error message."""
    return json.dumps({"error": exc.message}, ensure_ascii=False)


async def refuse_handshake(
    ws: WebSocket,
    *,
    close_code: int,
    reason: str | None = None,
) -> None:
    """Close a WebSocket that has not been accepted yet.

    Args:
        ws: The pending WebSocket connection.
        close_code: WebSocket close code (e.g., 1008 policy violation).
        reason: Optional close reason.
    """
    await ws.close(code=close_code, reason=reason)


__all__ = ["build_parse_error_payload", "refuse_handshake"]
