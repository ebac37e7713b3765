"""Inbound message size limit exception."""


class MessageTooLargeError(Exception):
    """Raised when an inbound message exceeds the per-session size limit.

    Attributes:
        size: Encoded size of the offending message in bytes.
        limit: The configured maximum in bytes.
    """

    def __init__(self, *, size: int, limit: int) -> None:
        super().__init__(f"message of {size} bytes exceeds limit of {limit} bytes")
        self.size = max(0, int(size))
        self.limit = max(0, int(limit))


__all__ = ["MessageTooLargeError"]
