"""Exceptions raised by Secure Window."""

from typing import Any, Optional


class SecureWindowError(Exception):
    """Base class for Secure Window errors."""


class MethodCodecError(SecureWindowError):
    """A method call or reply could not be encoded or decoded."""


class PlatformChannelError(SecureWindowError):
    """The handler on the other side of a channel replied with an error."""

    def __init__(self, code: str, message: Optional[str] = None, details: Any = None):
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code
        self.message = message
        self.details = details


class MissingPluginError(SecureWindowError):
    """No handler answered the method call on the channel."""

    def __init__(self, channel: str, method: str):
        super().__init__(f"No implementation found for method {method} on channel {channel}")
        self.channel = channel
        self.method = method
