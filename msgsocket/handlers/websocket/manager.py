"""WebSocket upgrade entry point.

Each upgrade request goes through:

1. Origin gate: the ``Origin`` header is checked before anything is
   allocated. A rejected origin is refused during the handshake with a
   policy-violation close (HTTP 403 on the wire).
2. Accept: the connection is upgraded and handed to a ConnectionSession.
3. Session: the session owns the socket until it closes.

Non-upgrade HTTP requests on the same path are answered by the HTTP
fallback route in ``msgsocket.server``.
"""

from __future__ import annotations

import logging

from fastapi import WebSocket

from ...config.websocket import WS_CLOSE_POLICY_CODE
from ...logging import log_context
from ...messages.counter import MessageCounter
from ...messages.text import TextTransformer
from .errors import refuse_handshake
from .origin import OriginPolicy, check_websocket_origin
from .session import ConnectionSession

logger = logging.getLogger(__name__)


def _client_label(ws: WebSocket) -> str:
    client = ws.client
    if client is None:
        return "-"
    return f"{client.host}:{client.port}"


async def handle_websocket_connection(
    ws: WebSocket,
    counter: MessageCounter,
    *,
    policy: OriginPolicy | None = None,
) -> None:
    """Gate, accept and serve one WebSocket connection.

    Args:
        ws: The incoming WebSocket connection from FastAPI.
        counter: Process-wide message counter shared by all sessions.
        policy: Origin policy override (defaults to configured policy).
    """
    client_id = _client_label(ws)
    with log_context(client_id=client_id):
        if not check_websocket_origin(ws, policy):
            await refuse_handshake(ws, close_code=WS_CLOSE_POLICY_CODE)
            return

        try:
            await ws.accept()
        except Exception as exc:  # noqa: BLE001
            logger.warning("upgrade error: %s", exc)
            return

        session = ConnectionSession(ws, TextTransformer(counter))
        with log_context(session_id=session.session_id):
            logger.info("WebSocket connection accepted")
            await session.run()
            logger.info("WebSocket connection closed")


__all__ = ["handle_websocket_connection"]
