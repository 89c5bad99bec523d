"""In-memory display-privacy backend."""

from typing import Dict, List, Tuple

from .base import WindowHandle


class MemoryBackend:
    """
    Keeps the privacy flag in a dict keyed by window handle.

    Used when no real display is available and in tests. A window
    that was never touched reports the platform default (off).
    """

    name = "memory"

    def __init__(self):
        self._flags: Dict[WindowHandle, bool] = {}
        self.calls: List[Tuple[WindowHandle, bool]] = []

    @property
    def is_available(self) -> bool:
        return True

    def apply(self, window: WindowHandle, secure: bool) -> bool:
        self.calls.append((window, secure))
        self._flags[window] = secure
        return True

    def is_secure(self, window: WindowHandle) -> bool:
        return self._flags.get(window, False)

    def forget(self, window: WindowHandle) -> None:
        """Drop a window's flag, as the platform does when it is recreated."""
        self._flags.pop(window, None)
