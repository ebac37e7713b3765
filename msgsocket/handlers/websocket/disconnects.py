"""Helpers for classifying WebSocket disconnects and close codes."""

from __future__ import annotations

from anyio import BrokenResourceError, ClosedResourceError, EndOfStream
from fastapi import WebSocketDisconnect
from websockets.exceptions import ConnectionClosed

from ...config.websocket import WS_NORMAL_CLOSE_CODES

# Close code reported when the peer's close frame carried no status
NO_STATUS_CLOSE_CODE = 1005

_RUNTIME_DISCONNECT_ERRORS = (
    ConnectionResetError,
    BrokenPipeError,
    EOFError,
    BrokenResourceError,
    ClosedResourceError,
    EndOfStream,
)

_RUNTIME_DISCONNECT_MESSAGES = (
    "websocket is not connected",
    "cannot call receive once a disconnect message has been received",
    'cannot call "receive" once a disconnect message has been received',
    'cannot call "send" once a close message has been sent',
)


def is_expected_disconnect(exc: BaseException) -> bool:
    """Return True when the exception represents normal transport teardown."""

    if isinstance(exc, (WebSocketDisconnect, ConnectionClosed)):
        return True
    if isinstance(exc, _RUNTIME_DISCONNECT_ERRORS):
        return True
    if isinstance(exc, RuntimeError):
        message = str(exc).strip().lower()
        return any(fragment in message for fragment in _RUNTIME_DISCONNECT_MESSAGES)
    return False


def is_normal_close(code: int | None) -> bool:
    """Return True for orderly peer closes (normal closure, going away).

    A close without a status code is treated as abnormal.
    """
    if code is None:
        code = NO_STATUS_CLOSE_CODE
    return code in WS_NORMAL_CLOSE_CODES


__all__ = ["NO_STATUS_CLOSE_CODE", "is_expected_disconnect", "is_normal_close"]
