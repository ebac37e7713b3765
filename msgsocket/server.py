"""Main FastAPI server for the msgsocket message server.

This module provides:

- A plain-text landing/probe endpoint (/)
- A health check endpoint (/healthz)
- The WebSocket endpoint for message sessions (/ws by default)
- An HTTP fallback on the WebSocket path for non-upgrade requests

Server Lifecycle:
    1. On import: configure logging and validate configuration
    2. Accept WebSocket upgrades on the WebSocket path (origin-gated)
    3. Serve each connection with its own ConnectionSession

Example:
    Run directly with uvicorn:
        $ uvicorn msgsocket.server:app --host 0.0.0.0 --port 4000 --ws-max-size 4096 \
            --http msgsocket.handlers.protocols:GetOnlyH11Protocol

    Or through the console script, which applies the configured limits:
        $ msgsocket
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request, WebSocket
from fastapi.responses import ORJSONResponse, PlainTextResponse

from .config import (
    SERVER_ACCESS_LOG,
    SERVER_HOST,
    SERVER_HTTP_IMPL,
    SERVER_PORT,
    WS_MAX_MESSAGE_BYTES,
    WS_PATH,
)
from .handlers.protocols import get_http_protocol
from .handlers.websocket import handle_websocket_connection
from .helpers.validation import validate_env
from .logging import configure_logging
from .messages.counter import MessageCounter

logger = logging.getLogger(__name__)

app = FastAPI(default_response_class=ORJSONResponse)

configure_logging()
validate_env()

# Shared by every session on this process
app.state.message_counter = MessageCounter()

_FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Landing endpoint used as a liveness probe."""
    return "WebSockets!\n"


@app.get("/healthz")
async def healthz():
    """Health check endpoint."""
    return {"status": "ok"}


@app.websocket(WS_PATH)
async def websocket_endpoint(websocket: WebSocket):
    """Main WebSocket endpoint for message sessions."""
    await handle_websocket_connection(websocket, app.state.message_counter)


@app.api_route(WS_PATH, methods=_FALLBACK_METHODS, include_in_schema=False)
async def websocket_http_fallback(request: Request):
    """Answer plain HTTP requests that reach the WebSocket path.

    Only GET may be upgraded; any other method is refused outright. A GET
    that gets here carried no upgrade headers.
    """
    if request.method != "GET":
        return PlainTextResponse(
            "method not allowed\n",
            status_code=405,
            headers={"Allow": "GET"},
        )
    logger.info("websocket upgrade missing on %s", request.url.path)
    return PlainTextResponse(
        "Bad Request\n",
        status_code=400,
        headers={"Sec-WebSocket-Version": "13"},
    )


def main() -> None:
    """Run the server with uvicorn using the configured listener and limits.

    The HTTP protocol only upgrades GET requests, so any other method with
    upgrade headers still reaches the 405 fallback route.
    """
    uvicorn.run(
        app,
        host=SERVER_HOST,
        port=SERVER_PORT,
        http=get_http_protocol(SERVER_HTTP_IMPL),
        ws_max_size=WS_MAX_MESSAGE_BYTES,
        access_log=SERVER_ACCESS_LOG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
