"""Per-connection message session.

A ConnectionSession owns one accepted WebSocket and drives it through an
explicit state machine::

    OPEN -> READING -> DISPATCHING -> WRITING -> READING -> ... -> CLOSED

Reading:
    Waits for the next message within the idle budget. The budget slides
    forward after every successful read. A timeout, a read error, a peer
    disconnect or an oversized message ends the session.

Dispatching:
    Binary frames are discarded. Text beginning with ``{`` is a structured
    command; anything else goes through the plain-text transformer. A
    malformed command produces a JSON error reply instead of a close.

Writing:
    Each reply is sent with its own write timeout. A failed or slow write
    ends the session.

Closed:
    Terminal. ``run()`` always finishes here and the connection is released
    exactly once, whichever path led out of the loop.

Usage:
    session = ConnectionSession(websocket, TextTransformer(counter))
    await session.run()
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
import uuid
from enum import Enum
from typing import Any

from fastapi import WebSocket

from ...config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    WS_CLOSE_TOO_LARGE_CODE,
    WS_IDLE_TIMEOUT_S,
    WS_MAX_MESSAGE_BYTES,
    WS_STRUCTURED_PREFIX,
    WS_WRITE_TIMEOUT_S,
)
from ...errors import CommandParseError, MessageTooLargeError
from ...messages.command import process_command
from ...messages.text import TextTransformer
from .disconnects import is_expected_disconnect, is_normal_close
from .errors import build_parse_error_payload

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    OPEN = "open"
    READING = "reading"
    DISPATCHING = "dispatching"
    WRITING = "writing"
    CLOSED = "closed"


class ConnectionSession:
    """Runs the read/dispatch/write loop for a single WebSocket.

    Attributes:
        session_id: Identifier used in log context.
        state: Current SessionState.
    """

    def __init__(
        self,
        websocket: WebSocket,
        transformer: TextTransformer,
        *,
        max_message_bytes: int | None = None,
        idle_timeout_s: float | None = None,
        write_timeout_s: float | None = None,
        session_id: str | None = None,
    ):
        """Initialize a session for an accepted WebSocket.

        Args:
            websocket: The accepted connection. Only this session may use it.
            transformer: Plain-text transformer bound to the shared counter.
            max_message_bytes: Override for the inbound size limit.
            idle_timeout_s: Override for the idle-read timeout.
            write_timeout_s: Override for the per-write timeout.
            session_id: Override for the generated session identifier.
        """
        self._ws = websocket
        self._transformer = transformer
        self._max_message_bytes = int(max_message_bytes or WS_MAX_MESSAGE_BYTES)
        self._idle_timeout_s = float(idle_timeout_s or WS_IDLE_TIMEOUT_S)
        self._write_timeout_s = float(write_timeout_s or WS_WRITE_TIMEOUT_S)
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.state = SessionState.OPEN
        self._read_deadline = 0.0
        self._peer_closed = False  # Peer already tore down the transport

    @property
    def closed(self) -> bool:
        return self.state is SessionState.CLOSED

    async def run(self) -> None:
        """Serve messages until a terminal condition, then release the socket."""
        self._open()
        try:
            while not self.closed:
                try:
                    text = await self._read()
                except MessageTooLargeError as exc:
                    logger.warning("read error: %s", exc)
                    await self.close(code=WS_CLOSE_TOO_LARGE_CODE, reason="message too big")
                    break
                if text is None:
                    continue
                await self._write(self.dispatch(text))
        except Exception:  # noqa: BLE001
            logger.exception("WebSocket session error")
        finally:
            await self.close()

    def dispatch(self, text: str) -> str:
        """Route one text message to its handler and return the reply."""
        self.state = SessionState.DISPATCHING
        if text.startswith(WS_STRUCTURED_PREFIX):
            try:
                return process_command(text).decode("utf-8")
            except CommandParseError as exc:
                logger.warning("JSON processing error: %s", exc)
                return build_parse_error_payload(exc)
        return self._transformer.transform(text)

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        """Release the connection (idempotent)."""
        if self.closed:
            return
        self.state = SessionState.CLOSED
        if self._peer_closed:
            return
        with contextlib.suppress(Exception):
            await self._ws.close(code=code, reason=reason)

    def _open(self) -> None:
        self.state = SessionState.OPEN
        self._arm_read_deadline()
        logger.info(
            "WebSocket session opened max_message_bytes=%s idle_timeout_s=%.1f",
            self._max_message_bytes,
            self._idle_timeout_s,
        )

    def _arm_read_deadline(self) -> None:
        self._read_deadline = time.monotonic() + self._idle_timeout_s

    async def _read(self) -> str | None:
        """Wait for the next message.

        Returns the text of a text message, or None when the message was
        discarded or the session closed while reading.

        Raises:
            MessageTooLargeError: If the message exceeds the size limit.
        """
        self.state = SessionState.READING
        remaining = max(0.0, self._read_deadline - time.monotonic())
        try:
            message = await asyncio.wait_for(self._ws.receive(), timeout=remaining)
        except asyncio.TimeoutError:
            logger.info("WebSocket idle timeout reached; closing connection")
            await self.close(code=WS_CLOSE_IDLE_CODE, reason=WS_CLOSE_IDLE_REASON)
            return None
        except Exception as exc:  # noqa: BLE001
            if is_expected_disconnect(exc):
                self._peer_closed = True
                logger.debug("WebSocket disconnected while reading: %s", exc)
            else:
                logger.warning("read error: %s", exc)
            await self.close()
            return None

        if message.get("type") == "websocket.disconnect":
            self._handle_peer_close(message)
            return None

        text = message.get("text")
        self._enforce_size_limit(message, text)
        self._arm_read_deadline()
        if text is None:
            logger.debug("discarding non-text WebSocket message")
            return None
        return text

    def _handle_peer_close(self, message: dict[str, Any]) -> None:
        self._peer_closed = True
        code = message.get("code")
        if is_normal_close(code):
            logger.debug("WebSocket closed by peer code=%s", code)
        else:
            logger.warning(
                "read error: unexpected close code=%s reason=%r",
                code,
                message.get("reason") or "",
            )
        self.state = SessionState.CLOSED

    def _enforce_size_limit(self, message: dict[str, Any], text: str | None) -> None:
        if text is not None:
            size = len(text.encode("utf-8"))
        else:
            size = len(message.get("bytes") or b"")
        if size > self._max_message_bytes:
            raise MessageTooLargeError(size=size, limit=self._max_message_bytes)

    async def _write(self, response: str) -> None:
        self.state = SessionState.WRITING
        try:
            await asyncio.wait_for(self._ws.send_text(response), timeout=self._write_timeout_s)
        except asyncio.TimeoutError:
            logger.warning("write error: timed out after %.1fs", self._write_timeout_s)
            await self.close()
        except Exception as exc:  # noqa: BLE001
            if is_expected_disconnect(exc):
                self._peer_closed = True
            logger.warning("write error: %s", exc)
            await self.close()


__all__ = ["ConnectionSession", "SessionState"]
