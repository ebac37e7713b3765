"""Plain-text message protocol.

Plain-text messages may carry a command prefix:

    UPPER:<text>    -> <text> uppercased
    REVERSE:<text>  -> <text> reversed by code point

Every non-empty plain-text message, prefixed or not, is then decorated with
the next value of the shared message counter::

    "UPPER:hello" -> "[Msg #7] HELLO"
"""

from __future__ import annotations

from .counter import MessageCounter

UPPER_PREFIX = "UPPER:"
REVERSE_PREFIX = "REVERSE:"


def reverse_text(text: str) -> str:
    """Reverse ``text`` by code point so multi-byte characters stay intact."""
    return text[::-1]


def apply_prefix_transform(message: str) -> str:
    """Apply the ``UPPER:``/``REVERSE:`` transform, or return ``message`` as-is."""
    if message.startswith(UPPER_PREFIX):
        return message[len(UPPER_PREFIX):].upper()
    if message.startswith(REVERSE_PREFIX):
        return reverse_text(message[len(REVERSE_PREFIX):])
    return message


def decorate_with_count(text: str, count: int) -> str:
    return f"[Msg #{count}] {text}"


class TextTransformer:
    """Builds responses for plain-text messages using a shared counter."""

    def __init__(self, counter: MessageCounter) -> None:
        self._counter = counter

    def transform(self, message: str) -> str:
        """Return the response for one plain-text message.

        The prefix transform and the counter decoration are applied in
        sequence. An empty message is echoed back unchanged and does not
        consume a counter value.
        """
        response = apply_prefix_transform(message)
        if message:
            response = decorate_with_count(response, self._counter.next())
        return response


__all__ = [
    "UPPER_PREFIX",
    "REVERSE_PREFIX",
    "TextTransformer",
    "apply_prefix_transform",
    "decorate_with_count",
    "reverse_text",
]
