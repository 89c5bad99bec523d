"""Windows display-affinity backend."""

import ctypes
import logging
import sys

from .base import WindowHandle, native_handle

logger = logging.getLogger(__name__)

WDA_NONE = 0x00000000
WDA_MONITOR = 0x00000001
WDA_EXCLUDEFROMCAPTURE = 0x00000011


class Win32Backend:
    """
    Capture privacy through SetWindowDisplayAffinity.

    WDA_EXCLUDEFROMCAPTURE removes the window from screenshots,
    recordings and switcher thumbnails. Windows older than 10 2004
    reject it, in which case WDA_MONITOR (window shows as black)
    is used instead.

    Windows only lets a process change the affinity of its own
    windows, so the handle must belong to the calling process.
    """

    name = "win32"

    def __init__(self, user32=None):
        """
        Initialize the backend.

        Args:
            user32: user32 library object; defaults to ctypes.windll.user32
        """
        if user32 is None and sys.platform == "win32":
            user32 = ctypes.windll.user32
        self._user32 = user32

    @property
    def is_available(self) -> bool:
        return self._user32 is not None

    def apply(self, window: WindowHandle, secure: bool) -> bool:
        if not self.is_available:
            return False

        hwnd = native_handle(window)
        if hwnd is None:
            return False

        if not secure:
            return self._set_affinity(hwnd, WDA_NONE)

        if self._set_affinity(hwnd, WDA_EXCLUDEFROMCAPTURE):
            return True

        logger.info("WDA_EXCLUDEFROMCAPTURE rejected for %#x, falling back to WDA_MONITOR", hwnd)
        return self._set_affinity(hwnd, WDA_MONITOR)

    def is_secure(self, window: WindowHandle) -> bool:
        if not self.is_available:
            return False

        hwnd = native_handle(window)
        if hwnd is None:
            return False

        affinity = ctypes.c_uint32(WDA_NONE)
        if not self._user32.GetWindowDisplayAffinity(hwnd, ctypes.byref(affinity)):
            return False
        return affinity.value != WDA_NONE

    def _set_affinity(self, hwnd: int, affinity: int) -> bool:
        return self._user32.SetWindowDisplayAffinity(hwnd, affinity) != 0
