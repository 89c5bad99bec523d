"""X11 window property backend for display privacy."""

import logging
from typing import List, Optional

from .base import WindowHandle, native_handle

logger = logging.getLogger(__name__)

PRIVACY_ATOM = "_SECURE_WINDOW_PRIVACY"

# _NET_WM_STATE client message actions
_NET_WM_STATE_REMOVE = 0
_NET_WM_STATE_ADD = 1

# Source indication for requests from normal applications
_SOURCE_APPLICATION = 1


class X11Backend:
    """
    X11-specific display privacy.

    NOTE: X11 has no way to exclude a window from capture. Any
    client can read the screen. What this backend can do:
    - Hide the window from the taskbar and pager, so switchers
      show no thumbnail of it
    - Mark the window with a _SECURE_WINDOW_PRIVACY property that
      cooperating compositors and capture tools can honor

    Window handles are X window ids (ints).
    """

    name = "x11"

    def __init__(self, display_name: Optional[str] = None, display=None):
        """
        Initialize X11 backend.

        Args:
            display_name: X display to open, None uses $DISPLAY
            display: Already opened Xlib display
        """
        self._display_name = display_name
        self._display = display

        # Try to import Xlib
        try:
            from Xlib import display as xdisplay
            from Xlib import X, Xatom, error
            from Xlib.protocol import event as xevent
            self._xlib_available = True
            self._xdisplay = xdisplay
            self._X = X
            self._Xatom = Xatom
            self._xerror = error
            self._xevent = xevent
        except ImportError:
            self._xlib_available = False
            logger.info("python-xlib not available. X11 privacy backend disabled.")

    @property
    def is_available(self) -> bool:
        return self._xlib_available

    def _get_display(self):
        if self._display is None:
            self._display = self._xdisplay.Display(self._display_name)
        return self._display

    def apply(self, window: WindowHandle, secure: bool) -> bool:
        if not self._xlib_available:
            return False

        xid = native_handle(window)
        if xid is None:
            return False

        try:
            display = self._get_display()
            x_window = display.create_resource_object("window", xid)

            state_atom = display.intern_atom("_NET_WM_STATE")
            skip = [
                display.intern_atom("_NET_WM_STATE_SKIP_TASKBAR"),
                display.intern_atom("_NET_WM_STATE_SKIP_PAGER"),
            ]
            privacy_atom = display.intern_atom(PRIVACY_ATOM)

            # Unmapped windows: the WM reads the property when mapping.
            # Other states the window has are kept.
            current = x_window.get_full_property(state_atom, self._Xatom.ATOM)
            states = [s for s in (current.value if current else []) if s not in skip]
            if secure:
                states.extend(skip)
            x_window.change_property(state_atom, self._Xatom.ATOM, 32, states)

            # Mapped windows: the WM only honors a request on the root window
            self._request_state(display, x_window, state_atom, skip, secure)

            x_window.change_property(privacy_atom, self._Xatom.CARDINAL, 32, [1 if secure else 0])

            display.sync()
            return True

        except (self._xerror.XError, self._xerror.DisplayError, self._xerror.ConnectionClosedError) as e:
            logger.warning("Error setting X11 privacy on window %s: %s", window, e)
            return False

    def _request_state(self, display, x_window, state_atom: int, atoms: List[int], add: bool) -> None:
        """Send a _NET_WM_STATE client message for up to two state atoms."""
        action = _NET_WM_STATE_ADD if add else _NET_WM_STATE_REMOVE
        message = self._xevent.ClientMessage(
            window=x_window,
            client_type=state_atom,
            data=(32, [action, atoms[0], atoms[1], _SOURCE_APPLICATION, 0]),
        )
        mask = self._X.SubstructureRedirectMask | self._X.SubstructureNotifyMask
        display.screen().root.send_event(message, event_mask=mask)

    def is_secure(self, window: WindowHandle) -> bool:
        if not self._xlib_available:
            return False

        xid = native_handle(window)
        if xid is None:
            return False

        try:
            display = self._get_display()
            x_window = display.create_resource_object("window", xid)
            prop = x_window.get_full_property(display.intern_atom(PRIVACY_ATOM), self._Xatom.CARDINAL)
        except (self._xerror.XError, self._xerror.DisplayError, self._xerror.ConnectionClosedError) as e:
            logger.warning("Error reading X11 privacy on window %s: %s", window, e)
            return False

        return bool(prop and len(prop.value) and prop.value[0] == 1)

    def close(self) -> None:
        """Close the X display connection if this backend opened one."""
        if self._display is not None:
            self._display.close()
            self._display = None
