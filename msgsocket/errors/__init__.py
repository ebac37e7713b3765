"""Centralized exception classes for the message server.

Organization:
    - command.py: Structured command payload parse errors (recoverable)
    - limits.py: Inbound message size violations (fatal to the session)
"""

from .command import CommandParseError
from .limits import MessageTooLargeError

__all__ = [
    "CommandParseError",
    "MessageTooLargeError",
]
