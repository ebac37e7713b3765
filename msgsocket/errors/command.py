"""Structured command payload exceptions.

A malformed command is a protocol-level problem, not a transport failure:
the session reports it to the client and keeps reading.
"""


class CommandParseError(Exception):
    """Raised when a structured payload cannot be decoded into a command.

    Attributes:
        detail: Description of the underlying decoding failure.
        message: Client-facing message (``"invalid JSON: <detail>"``).
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        self.message = f"invalid JSON: {detail}"
        super().__init__(self.message)


__all__ = ["CommandParseError"]
