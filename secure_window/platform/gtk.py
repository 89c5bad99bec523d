"""Window handles for GTK4 windows."""

import logging
from typing import Optional

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from .base import WindowProvider

logger = logging.getLogger(__name__)


def get_native_handle(window: Gtk.Window) -> Optional[int]:
    """
    Get the native window id backing a GTK window.

    Args:
        window: GTK window

    Returns:
        X11 window id, or None if the window is not realized or
        not running on X11
    """
    surface = window.get_surface()
    if surface is None:
        return None

    # GTK4 on X11 should have get_xid()
    if hasattr(surface, "get_xid"):
        return surface.get_xid()

    logger.debug("Surface %s has no native X11 id", type(surface).__name__)
    return None


def gtk_window_provider(window: Gtk.Window) -> WindowProvider:
    """
    Build a window provider that follows a GTK window.

    The handle is looked up on every call, so a window that is
    unrealized and realized again yields its new native id.
    """
    def provide() -> Optional[int]:
        return get_native_handle(window)

    return provide
