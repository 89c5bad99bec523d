"""In-process method channel between a host runtime and Secure Window."""

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .commands import CommandResult, ResultStatus
from .errors import MethodCodecError, MissingPluginError, PlatformChannelError

logger = logging.getLogger(__name__)

MessageHandler = Callable[[bytes], Optional[bytes]]


@dataclass(frozen=True)
class MethodCall:
    """A named method invocation with optional arguments."""
    method: str
    args: Any = None


class BinaryMessenger:
    """
    Routes raw byte messages to the handler registered for a channel.

    Delivery is synchronous: send() returns the handler's reply.
    """

    def __init__(self):
        self._handlers: Dict[str, MessageHandler] = {}
        self._lock = threading.Lock()

    def set_message_handler(self, channel: str, handler: Optional[MessageHandler]) -> None:
        """
        Install or remove the handler for a channel.

        Args:
            channel: Channel name
            handler: Callable taking the message bytes, or None to remove
        """
        with self._lock:
            if handler is None:
                self._handlers.pop(channel, None)
            else:
                self._handlers[channel] = handler

    def send(self, channel: str, message: bytes) -> Optional[bytes]:
        """
        Send a message and return the reply.

        Returns:
            Reply bytes, or None when nothing listens on the channel
        """
        with self._lock:
            handler = self._handlers.get(channel)

        if handler is None:
            logger.debug("No handler registered on channel %s", channel)
            return None

        return handler(message)

    def has_handler(self, channel: str) -> bool:
        """Check if a channel has a handler."""
        with self._lock:
            return channel in self._handlers


class JSONMethodCodec:
    """
    JSON encoding for method calls and their reply envelopes.

    Replies:
    - success: [result]
    - error: [code, message, details]
    - not implemented: empty message
    """

    def encode_method_call(self, call: MethodCall) -> bytes:
        return self._dumps({"method": call.method, "args": call.args})

    def decode_method_call(self, message: bytes) -> MethodCall:
        data = self._loads(message)
        if not isinstance(data, dict) or not isinstance(data.get("method"), str):
            raise MethodCodecError(f"Invalid method call: {data!r}")
        return MethodCall(data["method"], data.get("args"))

    def encode_success_envelope(self, result: Any = None) -> bytes:
        return self._dumps([result])

    def encode_error_envelope(
        self,
        code: str,
        message: Optional[str] = None,
        details: Any = None,
    ) -> bytes:
        return self._dumps([code, message, details])

    def decode_envelope(self, envelope: bytes) -> Any:
        """
        Decode a reply envelope.

        Returns:
            The result carried by a success envelope

        Raises:
            PlatformChannelError: For an error envelope
            MethodCodecError: For anything else
        """
        data = self._loads(envelope)
        if isinstance(data, list):
            if len(data) == 1:
                return data[0]
            if len(data) == 3 and isinstance(data[0], str):
                raise PlatformChannelError(data[0], data[1], data[2])
        raise MethodCodecError(f"Invalid envelope: {data!r}")

    def _dumps(self, value: Any) -> bytes:
        try:
            return json.dumps(value, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise MethodCodecError(str(e)) from e

    def _loads(self, message: bytes) -> Any:
        try:
            return json.loads(message.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise MethodCodecError(str(e)) from e


MethodCallHandler = Callable[[MethodCall], CommandResult]


class MethodChannel:
    """
    Named channel carrying method calls over a BinaryMessenger.

    One side installs a handler with set_method_call_handler(),
    the other side calls invoke_method().
    """

    def __init__(
        self,
        messenger: BinaryMessenger,
        name: str,
        codec: Optional[JSONMethodCodec] = None,
    ):
        self.messenger = messenger
        self.name = name
        self.codec = codec or JSONMethodCodec()

    def set_method_call_handler(self, handler: Optional[MethodCallHandler]) -> None:
        """
        Install the handler answering calls on this channel.

        Args:
            handler: Callable returning a CommandResult, or None to detach
        """
        if handler is None:
            self.messenger.set_message_handler(self.name, None)
            return

        def on_message(message: bytes) -> bytes:
            return self._handle_message(handler, message)

        self.messenger.set_message_handler(self.name, on_message)

    def _handle_message(self, handler: MethodCallHandler, message: bytes) -> bytes:
        try:
            call = self.codec.decode_method_call(message)
        except MethodCodecError as e:
            logger.warning("Malformed method call on %s: %s", self.name, e)
            return self.codec.encode_error_envelope("bad_call", str(e))

        try:
            result = handler(call)
        except Exception as e:
            logger.exception("Failed to handle %s on channel %s", call.method, self.name)
            return self.codec.encode_error_envelope("error", str(e))

        if result.status is ResultStatus.SUCCESS:
            return self.codec.encode_success_envelope(result.value)
        if result.status is ResultStatus.ERROR:
            return self.codec.encode_error_envelope(
                result.error_code or "error", result.error_message, result.value
            )
        return b""

    def invoke_method(self, method: str, args: Any = None) -> Any:
        """
        Invoke a method on the channel and wait for its reply.

        Args:
            method: Method name, e.g. "secureModeOn"
            args: JSON-serializable arguments

        Returns:
            The value of the success reply

        Raises:
            MissingPluginError: No handler, or the handler did not implement the method
            PlatformChannelError: The handler replied with an error
        """
        reply = self.messenger.send(self.name, self.codec.encode_method_call(MethodCall(method, args)))
        if not reply:
            raise MissingPluginError(self.name, method)
        return self.codec.decode_envelope(reply)
