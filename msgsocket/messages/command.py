"""Structured arithmetic command processing.

Structured messages are JSON objects of the form::

    {"command": "add", "a": 2, "b": 3}

and are answered with::

    {"result": 5, "command": "add"}

Domain problems (division by zero, unknown command, non-finite result) are
reported through an ``error`` key on an otherwise normal response; the key is
omitted entirely when there is no error. Only undecodable input raises.
"""

from __future__ import annotations

import json
import math
import operator
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..errors import CommandParseError

DIVISION_BY_ZERO_ERROR = "division by zero"
NON_FINITE_RESULT_ERROR = "result is not a finite number"

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
}

# Numbers in [1e-6, 1e21) are written in plain decimal notation, integral
# ones without a fraction. Anything outside uses a minimal exponent (1e-7).
_FIXED_NOTATION_MIN = 1e-6
_FIXED_NOTATION_MAX = 1e21

_FIELDS = ("command", "a", "b")


@dataclass(frozen=True)
class CommandRequest:
    command: str = ""
    a: float = 0.0
    b: float = 0.0


@dataclass
class CommandResponse:
    command: str
    result: float = 0.0
    error: str | None = None

    def to_json(self) -> str:
        """Serialize the payload compactly with ``result`` in wire notation."""
        fields = [
            f'"result":{format_json_number(self.result)}',
            f'"command":{_json_string(self.command)}',
        ]
        if self.error is not None:
            fields.append(f'"error":{_json_string(self.error)}')
        return "{" + ",".join(fields) + "}"


def _json_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def format_json_number(value: float) -> str:
    """Format a finite float as a JSON number.

    ``5.0`` becomes ``5``, ``1.5e-05`` becomes ``0.000015`` and ``1e-07``
    becomes ``1e-7``.
    """
    if value.is_integer() and abs(value) < _FIXED_NOTATION_MAX:
        return str(int(value))
    if _FIXED_NOTATION_MIN <= abs(value) < _FIXED_NOTATION_MAX:
        return format(Decimal(repr(value)), "f")
    mantissa, _, exponent = repr(value).partition("e")
    return f"{mantissa}e{exponent[0]}{exponent[1:].lstrip('0')}"


def _fold_fields(data: dict[str, Any]) -> dict[str, Any]:
    # Keys match case-insensitively; a later key overrides an earlier one
    # and null leaves the field untouched.
    fields: dict[str, Any] = {}
    for key, value in data.items():
        name = key.lower()
        if name in _FIELDS and value is not None:
            fields[name] = value
    return fields


def _coerce_operand(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CommandParseError(f"field '{key}' must be a number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise CommandParseError(f"field '{key}' is out of range") from exc
    # json.loads turns literals such as 1e400 into inf
    if not math.isfinite(number):
        raise CommandParseError(f"field '{key}' is out of range")
    return number


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid number literal {name!r}")


def parse_command_request(payload: bytes | str) -> CommandRequest:
    """Decode a structured payload into a CommandRequest.

    Field names match case-insensitively (``"A"`` fills ``a``). Missing or
    null fields fall back to their zero values and unknown keys are ignored.

    Raises:
        CommandParseError: If the payload is not a JSON object with a string
            ``command`` and finite numeric ``a``/``b``.
    """
    try:
        data = json.loads(payload, parse_constant=_reject_constant)
    except ValueError as exc:
        raise CommandParseError(str(exc)) from exc

    if not isinstance(data, dict):
        raise CommandParseError(f"expected a JSON object, got {type(data).__name__}")

    fields = _fold_fields(data)
    command = fields.get("command", "")
    if not isinstance(command, str):
        raise CommandParseError(f"field 'command' must be a string, got {type(command).__name__}")

    return CommandRequest(
        command=command,
        a=_coerce_operand(fields, "a"),
        b=_coerce_operand(fields, "b"),
    )


def execute_command(request: CommandRequest) -> CommandResponse:
    """Run one arithmetic command and build its response."""
    response = CommandResponse(command=request.command)

    if request.command == "divide":
        if request.b == 0:
            response.error = DIVISION_BY_ZERO_ERROR
            return response
        result = request.a / request.b
    else:
        operation = _OPERATIONS.get(request.command)
        if operation is None:
            response.error = f"unknown command: {request.command}"
            return response
        result = operation(request.a, request.b)

    if not math.isfinite(result):
        response.error = NON_FINITE_RESULT_ERROR
        return response
    response.result = result
    return response


def process_command(payload: bytes | str) -> bytes:
    """Parse, execute and serialize a structured command.

    Args:
        payload: Raw JSON text of the inbound message.

    Returns:
        UTF-8 encoded JSON response.

    Raises:
        CommandParseError: If the payload is malformed.
    """
    response = execute_command(parse_command_request(payload))
    return response.to_json().encode("utf-8")


__all__ = [
    "DIVISION_BY_ZERO_ERROR",
    "NON_FINITE_RESULT_ERROR",
    "CommandRequest",
    "CommandResponse",
    "execute_command",
    "format_json_number",
    "parse_command_request",
    "process_command",
]
