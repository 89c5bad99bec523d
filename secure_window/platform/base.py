"""Backend interface for display-privacy flags."""

from typing import Any, Callable, Optional, Protocol, runtime_checkable

# Opaque, host-owned reference to an on-screen window
WindowHandle = Any

WindowProvider = Callable[[], Optional[WindowHandle]]


@runtime_checkable
class DisplayPrivacyBackend(Protocol):
    """Applies or clears a window's capture-privacy flag."""

    name: str

    @property
    def is_available(self) -> bool: ...

    def apply(self, window: WindowHandle, secure: bool) -> bool:
        """Set (secure=True) or clear the flag. Returns True if the platform accepted it."""
        ...

    def is_secure(self, window: WindowHandle) -> bool: ...


def native_handle(window: WindowHandle) -> Optional[int]:
    """
    Convert a window handle to the integer id native APIs expect.

    Returns:
        The id, or None if the handle is not an integer
    """
    try:
        return int(window)
    except (TypeError, ValueError):
        return None
