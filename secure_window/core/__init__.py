"""Core modules for Secure Window."""

from .config import AppConfig, get_config
from .events import Event, EventBus, get_event_bus
from .commands import Command, CommandResult, ResultStatus, parse_command
from .channel import BinaryMessenger, JSONMethodCodec, MethodCall, MethodChannel

__all__ = [
    "AppConfig",
    "get_config",
    "Event",
    "EventBus",
    "get_event_bus",
    "Command",
    "CommandResult",
    "ResultStatus",
    "parse_command",
    "BinaryMessenger",
    "JSONMethodCodec",
    "MethodCall",
    "MethodChannel",
]
