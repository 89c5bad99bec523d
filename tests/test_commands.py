"""Tests for command parsing and results."""

from secure_window.core.commands import Command, CommandResult, ResultStatus, parse_command


def test_parse_known_commands() -> None:
    assert parse_command("secureModeOn") is Command.SECURE_MODE_ON
    assert parse_command("secureModeOff") is Command.SECURE_MODE_OFF


def test_parse_anything_else_is_unknown() -> None:
    assert parse_command("unknown") is Command.UNKNOWN
    assert parse_command("secure_mode_on") is Command.UNKNOWN
    assert parse_command(Command.SECURE_MODE_OFF) is Command.SECURE_MODE_OFF


def test_result_constructors() -> None:
    ok = CommandResult.success("secureModeOn")
    assert ok.is_success and ok.value is None

    missing = CommandResult.not_implemented("bogus")
    assert missing.is_not_implemented

    failed = CommandResult.error("secureModeOn", "no_window", "No active window", {"id": 1})
    assert failed.status is ResultStatus.ERROR
    assert failed.to_dict() == {
        "status": "error",
        "command": "secureModeOn",
        "value": {"id": 1},
        "error_code": "no_window",
        "error_message": "No active window",
    }
