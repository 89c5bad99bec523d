"""Platform display-privacy backends."""

import logging
import os
import sys
from typing import Optional, Union

from secure_window.core.config import BackendName

from .base import DisplayPrivacyBackend, WindowHandle, WindowProvider
from .memory import MemoryBackend
from .win32 import Win32Backend
from .x11 import X11Backend

logger = logging.getLogger(__name__)

__all__ = [
    "DisplayPrivacyBackend",
    "WindowHandle",
    "WindowProvider",
    "MemoryBackend",
    "Win32Backend",
    "X11Backend",
    "create_backend",
]


def create_backend(
    name: Union[str, BackendName] = BackendName.AUTO,
    x11_display: Optional[str] = None,
) -> DisplayPrivacyBackend:
    """
    Create a display-privacy backend.

    Args:
        name: auto, win32, x11 or memory
        x11_display: X display name for the x11 backend

    Returns:
        The backend instance

    Raises:
        ValueError: If the name is not a known backend
    """
    try:
        name = BackendName(name)
    except ValueError:
        raise ValueError(f"Unknown display privacy backend: {name!r}") from None

    if name is BackendName.WIN32:
        return Win32Backend()
    if name is BackendName.X11:
        return X11Backend(display_name=x11_display)
    if name is BackendName.MEMORY:
        return MemoryBackend()

    if sys.platform == "win32":
        return Win32Backend()

    if x11_display or os.environ.get("DISPLAY"):
        backend = X11Backend(display_name=x11_display)
        if backend.is_available:
            return backend

    logger.warning("No display privacy support on this platform, using in-memory backend")
    return MemoryBackend()
