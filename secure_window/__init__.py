"""Secure Window - toggle OS display-privacy on the current window."""

__app_id__ = "io.github.secure_window"
__app_name__ = "Secure Window"
__version__ = "0.1.0"

from secure_window.core.commands import Command, CommandResult, ResultStatus
from secure_window.secure.toggle import SecureDisplayToggle
from secure_window.plugin import SecureWindowPlugin

__all__ = [
    "Command",
    "CommandResult",
    "ResultStatus",
    "SecureDisplayToggle",
    "SecureWindowPlugin",
]
