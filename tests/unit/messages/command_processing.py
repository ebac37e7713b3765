"""Unit tests for structured arithmetic command processing."""

from __future__ import annotations

import json

import pytest

from msgsocket.errors import CommandParseError
from msgsocket.messages.command import (
    DIVISION_BY_ZERO_ERROR,
    NON_FINITE_RESULT_ERROR,
    CommandRequest,
    execute_command,
    format_json_number,
    parse_command_request,
    process_command,
)


def _run(payload: dict | str) -> dict:
    raw = payload if isinstance(payload, str) else json.dumps(payload)
    return json.loads(process_command(raw.encode("utf-8")))


def test_add_returns_result_without_error_key() -> None:
    response = _run({"command": "add", "a": 2, "b": 3})
    assert response == {"result": 5, "command": "add"}
    assert "error" not in response


@pytest.mark.parametrize(
    "command,a,b,expected",
    [
        ("add", 1.5, 2.25, 3.75),
        ("subtract", 10, 4, 6),
        ("multiply", -3, 2.5, -7.5),
        ("divide", 7, 2, 3.5),
    ],
)
def test_arithmetic_commands(command: str, a: float, b: float, expected: float) -> None:
    response = _run({"command": command, "a": a, "b": b})
    assert response["result"] == pytest.approx(expected)
    assert response["command"] == command
    assert "error" not in response


def test_divide_by_zero_sets_error_and_zero_result() -> None:
    response = _run({"command": "divide", "a": 1, "b": 0})
    assert response == {"result": 0, "command": "divide", "error": DIVISION_BY_ZERO_ERROR}


def test_unknown_command_names_the_command() -> None:
    response = _run({"command": "foo", "a": 1, "b": 1})
    assert "foo" in response["error"]
    assert response["result"] == 0
    assert response["command"] == "foo"


def test_integral_results_are_written_without_fraction() -> None:
    raw = process_command('{"command":"add","a":2,"b":3}')
    assert raw == b'{"result":5,"command":"add"}'


def test_fractional_results_keep_fraction() -> None:
    raw = process_command('{"command":"divide","a":1,"b":4}')
    assert raw == b'{"result":0.25,"command":"divide"}'


def test_missing_fields_default_to_zero_values() -> None:
    request = parse_command_request("{}")
    assert request == CommandRequest(command="", a=0.0, b=0.0)
    response = _run("{}")
    assert response["error"] == "unknown command: "


def test_null_fields_are_treated_as_missing() -> None:
    request = parse_command_request('{"command": "add", "a": null, "b": 4}')
    assert request == CommandRequest(command="add", a=0.0, b=4.0)


def test_field_names_match_case_insensitively() -> None:
    raw = process_command('{"Command":"add","A":2,"B":3}')
    assert raw == b'{"result":5,"command":"add"}'


def test_later_folded_key_overrides_earlier_one() -> None:
    request = parse_command_request('{"command": "add", "a": 1, "A": 7, "b": 2, "B": null}')
    assert request == CommandRequest(command="add", a=7.0, b=2.0)


def test_out_of_range_operand_is_a_parse_error_not_a_domain_error() -> None:
    with pytest.raises(CommandParseError) as exc_info:
        process_command('{"command":"add","a":1e400,"b":1}')
    assert "out of range" in exc_info.value.detail


@pytest.mark.parametrize(
    "value,expected",
    [
        (5.0, "5"),
        (-7.5, "-7.5"),
        (0.25, "0.25"),
        (1.5e-05, "0.000015"),
        (1e-06, "0.000001"),
        (1e-07, "1e-7"),
        (-2.5e-10, "-2.5e-10"),
        (1e21, "1e+21"),
        (1.2345e22, "1.2345e+22"),
    ],
)
def test_format_json_number(value: float, expected: str) -> None:
    assert format_json_number(value) == expected


def test_small_results_use_minimal_exponent() -> None:
    raw = process_command('{"command":"divide","a":1,"b":10000000}')
    assert raw == b'{"result":1e-7,"command":"divide"}'


def test_unknown_keys_are_ignored() -> None:
    response = _run({"command": "multiply", "a": 3, "b": 3, "extra": [1, 2]})
    assert response == {"result": 9, "command": "multiply"}


def test_overflowing_result_reports_domain_error() -> None:
    response = _run({"command": "multiply", "a": 1e308, "b": 10})
    assert response["error"] == NON_FINITE_RESULT_ERROR
    assert response["result"] == 0


@pytest.mark.parametrize(
    "payload",
    [
        "{",
        '{"command": "add"',
        '{"command": "add", "a": 1, "b": 2} trailing',
        "[1, 2]",
        '{"command": 5, "a": 1, "b": 2}',
        '{"command": "add", "a": "1", "b": 2}',
        '{"command": "add", "a": true, "b": 2}',
        '{"command": "add", "a": NaN, "b": 2}',
        '{"command": "add", "a": 1e400, "b": 1}',
        '{"command": "add", "a": 1, "b": -1e400}',
    ],
)
def test_malformed_payload_raises_parse_error(payload: str) -> None:
    with pytest.raises(CommandParseError) as exc_info:
        process_command(payload)
    assert exc_info.value.message.startswith("invalid JSON: ")
    assert exc_info.value.detail


def test_invalid_utf8_raises_parse_error() -> None:
    with pytest.raises(CommandParseError):
        process_command(b'{"command": "\xff"}')


def test_execute_command_does_not_mutate_request() -> None:
    request = CommandRequest(command="add", a=1, b=2)
    first = execute_command(request)
    second = execute_command(request)
    assert first == second
    assert first.result == 3
