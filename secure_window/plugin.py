"""Host plugin binding the secure display toggle to a method channel."""

import logging
from typing import Optional

from secure_window.core.channel import BinaryMessenger, MethodCall, MethodChannel
from secure_window.core.commands import CommandResult
from secure_window.core.config import AppConfig, get_config
from secure_window.platform.base import DisplayPrivacyBackend, WindowProvider
from secure_window.secure.toggle import SecureDisplayToggle

logger = logging.getLogger(__name__)


class SecureWindowPlugin:
    """
    Answers secureModeOn / secureModeOff calls from a host runtime.

    Create one with register_with(); it installs itself as the
    handler of the configured channel on the host's messenger.
    """

    def __init__(self, toggle: SecureDisplayToggle, channel: MethodChannel):
        self.toggle = toggle
        self.channel = channel

    @classmethod
    def register_with(
        cls,
        messenger: BinaryMessenger,
        window_provider: WindowProvider,
        backend: Optional[DisplayPrivacyBackend] = None,
        config: Optional[AppConfig] = None,
    ) -> "SecureWindowPlugin":
        """
        Register the plugin on a messenger.

        Args:
            messenger: Host messenger carrying method calls
            window_provider: Callable returning the host's current window
            backend: Display-privacy backend; defaults to the configured one
            config: Configuration; defaults to the global one

        Returns:
            The registered plugin
        """
        config = config or get_config()

        if backend is None:
            from secure_window.platform import create_backend
            backend = create_backend(config.backend.name, config.backend.x11_display)

        toggle = SecureDisplayToggle(window_provider=window_provider, backend=backend)
        plugin = cls(toggle, MethodChannel(messenger, config.channel.name))
        plugin.channel.set_method_call_handler(plugin.on_method_call)
        logger.debug("Registered on channel %s with %s backend", config.channel.name, backend.name)

        if config.secure_on_start:
            toggle.enable()

        return plugin

    def on_method_call(self, call: MethodCall) -> CommandResult:
        """Handle a method call arriving on the channel."""
        return self.toggle.dispatch(call.method)

    def unregister(self) -> None:
        """Stop answering calls on the channel."""
        self.channel.set_method_call_handler(None)
