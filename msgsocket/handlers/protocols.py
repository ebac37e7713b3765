"""uvicorn HTTP protocols that only upgrade GET requests to WebSocket.

Stock uvicorn hands any request carrying ``Upgrade: websocket`` to its
WebSocket protocol without looking at the method, so a ``POST /ws`` with
upgrade headers would be rejected by the handshake code with a 400. These
subclasses keep such requests on the HTTP path, where the fallback route on
the WebSocket path answers them with 405.
"""

from __future__ import annotations

from uvicorn.protocols.http.h11_impl import H11Protocol
from uvicorn.protocols.http.httptools_impl import HttpToolsProtocol


class _GetOnlyUpgradeMixin:
    scope: dict

    def _should_upgrade(self) -> bool:
        # scope["method"] is set before uvicorn asks this question
        if self.scope.get("method") != "GET":
            return False
        return super()._should_upgrade()  # type: ignore[misc]


class GetOnlyH11Protocol(_GetOnlyUpgradeMixin, H11Protocol):
    """h11 protocol that refuses to upgrade non-GET requests."""


class GetOnlyHttpToolsProtocol(_GetOnlyUpgradeMixin, HttpToolsProtocol):
    """httptools protocol that refuses to upgrade non-GET requests."""


HTTP_PROTOCOLS = {
    "h11": GetOnlyH11Protocol,
    "httptools": GetOnlyHttpToolsProtocol,
}


def get_http_protocol(name: str) -> type:
    """Return the protocol class for ``name`` (``h11`` or ``httptools``)."""
    try:
        return HTTP_PROTOCOLS[name]
    except KeyError:
        raise ValueError(f"unknown HTTP implementation: {name!r}") from None


__all__ = [
    "GetOnlyH11Protocol",
    "GetOnlyHttpToolsProtocol",
    "HTTP_PROTOCOLS",
    "get_http_protocol",
]
