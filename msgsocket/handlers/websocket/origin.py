"""Origin gate for WebSocket upgrade requests.

The gate combines two independent predicates with a logical OR:

1. Development bypass: the origin contains one of the configured substrings
   (``localhost``, ``127.0.0.1`` by default). Case-sensitive, any scheme or
   port.
2. Allow-list: the origin equals one of the configured fully qualified
   origins, compared case-insensitively.

An empty or missing origin is always rejected. The gate runs once per
upgrade, before the connection is accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fastapi import WebSocket

from ...config.origins import WS_ALLOWED_ORIGINS, WS_DEV_ORIGIN_SUBSTRINGS

logger = logging.getLogger(__name__)


class OriginPolicy:
    """Decides whether a declared origin may open a WebSocket session.

    Attributes:
        allowed_origins: Exact origins accepted (stored lowercased).
        dev_substrings: Substrings that unconditionally admit an origin.
    """

    def __init__(
        self,
        allowed_origins: Iterable[str] = WS_ALLOWED_ORIGINS,
        dev_substrings: Iterable[str] = WS_DEV_ORIGIN_SUBSTRINGS,
    ) -> None:
        self.allowed_origins = frozenset(origin.lower() for origin in allowed_origins if origin)
        self.dev_substrings = tuple(fragment for fragment in dev_substrings if fragment)

    def matches_dev_substring(self, origin: str) -> bool:
        return any(fragment in origin for fragment in self.dev_substrings)

    def matches_allow_list(self, origin: str) -> bool:
        return origin.lower() in self.allowed_origins

    def is_allowed(self, origin: str | None) -> bool:
        """Return True when ``origin`` passes either predicate."""
        if not origin:
            return False
        return self.matches_dev_substring(origin) or self.matches_allow_list(origin)


default_policy = OriginPolicy()


def origin_allowed(origin: str | None) -> bool:
    """Check ``origin`` against the configured default policy."""
    return default_policy.is_allowed(origin)


def check_websocket_origin(ws: WebSocket, policy: OriginPolicy | None = None) -> bool:
    """Evaluate the upgrade request's ``Origin`` header and log the decision."""
    origin = ws.headers.get("origin", "")
    active = policy if policy is not None else default_policy
    allowed = active.is_allowed(origin)
    if allowed:
        logger.info("allowed cross-origin websocket: Origin=%r", origin)
    else:
        logger.warning(
            "blocked cross-origin websocket: Origin=%r Path=%s",
            origin,
            ws.url.path,
        )
    return allowed


__all__ = [
    "OriginPolicy",
    "check_websocket_origin",
    "default_policy",
    "origin_allowed",
]
