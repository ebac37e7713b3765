"""Message protocol: structured commands and plain-text transforms."""

from .command import (
    CommandRequest,
    CommandResponse,
    execute_command,
    parse_command_request,
    process_command,
)
from .counter import MessageCounter
from .text import TextTransformer, apply_prefix_transform, reverse_text

__all__ = [
    "CommandRequest",
    "CommandResponse",
    "MessageCounter",
    "TextTransformer",
    "apply_prefix_transform",
    "execute_command",
    "parse_command_request",
    "process_command",
    "reverse_text",
]
