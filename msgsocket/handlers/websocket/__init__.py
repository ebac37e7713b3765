"""WebSocket handler exports."""

from .manager import handle_websocket_connection
from .origin import OriginPolicy, check_websocket_origin, origin_allowed
from .session import ConnectionSession, SessionState

__all__ = [
    "ConnectionSession",
    "OriginPolicy",
    "SessionState",
    "check_websocket_origin",
    "handle_websocket_connection",
    "origin_allowed",
]
