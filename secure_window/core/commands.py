"""Secure mode commands and their results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class Command(str, Enum):
    """Commands understood by the secure display toggle."""
    SECURE_MODE_ON = "secureModeOn"
    SECURE_MODE_OFF = "secureModeOff"
    UNKNOWN = "unknown"


class ResultStatus(str, Enum):
    """Outcome of a dispatched command."""
    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "not_implemented"


_KNOWN_COMMANDS = {
    Command.SECURE_MODE_ON.value: Command.SECURE_MODE_ON,
    Command.SECURE_MODE_OFF.value: Command.SECURE_MODE_OFF,
}


def parse_command(name: Union[str, Command]) -> Command:
    """
    Map a method name onto a Command.

    Matching is exact; anything other than the two secure mode
    method names (including the literal "unknown") is UNKNOWN.
    """
    if isinstance(name, Command):
        return name
    return _KNOWN_COMMANDS.get(name, Command.UNKNOWN)


@dataclass(frozen=True)
class CommandResult:
    """Structured reply to a dispatched command."""
    status: ResultStatus
    command: str
    value: Any = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, command: str, value: Any = None) -> "CommandResult":
        return cls(ResultStatus.SUCCESS, command, value=value)

    @classmethod
    def error(
        cls,
        command: str,
        code: str,
        message: Optional[str] = None,
        details: Any = None,
    ) -> "CommandResult":
        return cls(
            ResultStatus.ERROR,
            command,
            value=details,
            error_code=code,
            error_message=message,
        )

    @classmethod
    def not_implemented(cls, command: str) -> "CommandResult":
        return cls(ResultStatus.NOT_IMPLEMENTED, command)

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    @property
    def is_not_implemented(self) -> bool:
        return self.status is ResultStatus.NOT_IMPLEMENTED

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "command": self.command,
            "value": self.value,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }
