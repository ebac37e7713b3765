"""WebSocket-specific runtime configuration values.

This module defines constants for the per-connection session:

Limits:
    WS_MAX_MESSAGE_BYTES: Largest inbound message (encoded size) a session
        accepts. Anything bigger terminates the session without a reply.

Timeouts:
    WS_IDLE_TIMEOUT_S: Close the session when no message arrives within this
        many seconds. The budget slides forward after every successful read.

    WS_WRITE_TIMEOUT_S: Upper bound for a single response write.

Close Codes (RFC 6455):
    1008: Policy violation (origin rejected during the handshake)
    1009: Message too big
    4000+: Application-defined (idle timeout)

Protocol:
    WS_STRUCTURED_PREFIX: Leading character that marks a text message as a
        JSON command instead of plain text.

Environment Variables:
    All values can be overridden.
"""

from __future__ import annotations

import os

# ============================================================================
# Limits & Timeouts
# ============================================================================

WS_MAX_MESSAGE_BYTES = int(os.getenv("WS_MAX_MESSAGE_BYTES", "4096"))  # 4 KiB
WS_IDLE_TIMEOUT_S = float(os.getenv("WS_IDLE_TIMEOUT_S", "30"))
WS_WRITE_TIMEOUT_S = float(os.getenv("WS_WRITE_TIMEOUT_S", "5"))

# ============================================================================
# WebSocket Close Codes
# ============================================================================

WS_CLOSE_POLICY_CODE = int(os.getenv("WS_CLOSE_POLICY_CODE", "1008"))  # Policy violation
WS_CLOSE_TOO_LARGE_CODE = int(os.getenv("WS_CLOSE_TOO_LARGE_CODE", "1009"))  # Message too big
WS_CLOSE_IDLE_CODE = int(os.getenv("WS_CLOSE_IDLE_CODE", "4000"))  # Application-defined
WS_CLOSE_IDLE_REASON = os.getenv("WS_CLOSE_IDLE_REASON", "idle_timeout")

# Peer close codes that count as an orderly shutdown (normal, going away)
WS_NORMAL_CLOSE_CODES = frozenset({1000, 1001})

# ============================================================================
# Protocol
# ============================================================================

WS_STRUCTURED_PREFIX = "{"

__all__ = [
    "WS_MAX_MESSAGE_BYTES",
    "WS_IDLE_TIMEOUT_S",
    "WS_WRITE_TIMEOUT_S",
    "WS_CLOSE_POLICY_CODE",
    "WS_CLOSE_TOO_LARGE_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_NORMAL_CLOSE_CODES",
    "WS_STRUCTURED_PREFIX",
]
