"""Secure display mode toggle."""

import logging
from typing import Optional, Union

from secure_window.core.commands import Command, CommandResult, parse_command
from secure_window.core.config import get_config
from secure_window.core.events import Event, EventBus, get_event_bus
from secure_window.platform.base import DisplayPrivacyBackend, WindowHandle, WindowProvider

logger = logging.getLogger(__name__)


def _no_window() -> Optional[WindowHandle]:
    return None


class SecureDisplayToggle:
    """
    Turns a window's capture-privacy flag on and off.

    Holds the secure mode intent (the last command applied) and
    pushes it to the platform through a backend. The window is
    looked up through an injected provider, so the toggle never
    keeps a reference to the host's window objects.

    All calls are expected on the host's UI command thread.
    """

    def __init__(
        self,
        window_provider: Optional[WindowProvider] = None,
        backend: Optional[DisplayPrivacyBackend] = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Initialize the toggle.

        Args:
            window_provider: Callable returning the current window handle
            backend: Display-privacy backend; defaults to the configured one
            event_bus: Event bus for change notifications
        """
        if backend is None:
            from secure_window.platform import create_backend
            config = get_config()
            backend = create_backend(config.backend.name, config.backend.x11_display)

        self._window_provider = window_provider or _no_window
        self._backend = backend
        self._event_bus = event_bus or get_event_bus()
        self._secure = False

    def enable(self, window: Optional[WindowHandle] = None) -> None:
        """
        Suppress screenshots, recording and thumbnails of a window.

        Args:
            window: Window handle; the provider's window when omitted
        """
        self._set_secure(True, window)

    def disable(self, window: Optional[WindowHandle] = None) -> None:
        """
        Restore normal capture visibility of a window.

        Args:
            window: Window handle; the provider's window when omitted
        """
        self._set_secure(False, window)

    def dispatch(
        self,
        command: Union[str, Command],
        window: Optional[WindowHandle] = None,
    ) -> CommandResult:
        """
        Run a command received from the host.

        Args:
            command: "secureModeOn", "secureModeOff" or a Command
            window: Window handle; the provider's window when omitted

        Returns:
            success for the two secure mode commands,
            not_implemented for anything else
        """
        name = command.value if isinstance(command, Command) else str(command)
        parsed = parse_command(command)

        if parsed is Command.SECURE_MODE_ON:
            self.enable(window)
        elif parsed is Command.SECURE_MODE_OFF:
            self.disable(window)
        else:
            logger.info("Command not implemented: %s", name)
            self._event_bus.emit(Event.COMMAND_NOT_IMPLEMENTED, name)
            return CommandResult.not_implemented(name)

        return CommandResult.success(name)

    def reapply(self, window: Optional[WindowHandle] = None) -> None:
        """
        Apply the current intent to a recreated window.

        The platform resets the flag when a window is recreated;
        hosts call this once the new window exists.
        """
        self._set_secure(self._secure, window)

    def _set_secure(self, secure: bool, window: Optional[WindowHandle]) -> None:
        changed = secure != self._secure
        self._secure = secure

        if window is None:
            window = self._window_provider()

        if window is None:
            logger.debug("No active window, secure mode %s not applied", "on" if secure else "off")
            self._event_bus.emit(Event.WINDOW_UNAVAILABLE, secure)
        elif not self._backend.apply(window, secure):
            logger.warning(
                "%s backend did not accept secure mode %s for window %s",
                self._backend.name, "on" if secure else "off", window,
            )

        if changed:
            self._event_bus.emit(Event.SECURE_MODE_CHANGED, secure)

    def is_window_secure(self, window: Optional[WindowHandle] = None) -> bool:
        """Ask the platform whether a window currently has the flag set."""
        if window is None:
            window = self._window_provider()
        if window is None:
            return False
        return self._backend.is_secure(window)

    @property
    def is_secure(self) -> bool:
        """The secure mode intent: True after secureModeOn."""
        return self._secure

    @property
    def backend(self) -> DisplayPrivacyBackend:
        return self._backend
