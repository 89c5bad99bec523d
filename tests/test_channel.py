"""Tests for the method channel and its JSON codec."""

import pytest

from secure_window.core.channel import BinaryMessenger, JSONMethodCodec, MethodCall, MethodChannel
from secure_window.core.commands import CommandResult
from secure_window.core.errors import MethodCodecError, MissingPluginError, PlatformChannelError


def test_codec_method_call() -> None:
    codec = JSONMethodCodec()
    message = codec.encode_method_call(MethodCall("secureModeOn"))
    assert message == b'{"method":"secureModeOn","args":null}'
    assert codec.decode_method_call(message) == MethodCall("secureModeOn")


@pytest.mark.parametrize("message", [b"not json", b"[1,2]", b'{"args":1}', b'{"method":3}', b"\xff"])
def test_codec_rejects_malformed_calls(message) -> None:
    with pytest.raises(MethodCodecError):
        JSONMethodCodec().decode_method_call(message)


def test_codec_envelopes() -> None:
    codec = JSONMethodCodec()
    assert codec.decode_envelope(codec.encode_success_envelope({"a": 1})) == {"a": 1}

    with pytest.raises(PlatformChannelError) as exc_info:
        codec.decode_envelope(codec.encode_error_envelope("no_window", "gone", [1]))
    assert exc_info.value.code == "no_window"
    assert exc_info.value.message == "gone"
    assert exc_info.value.details == [1]

    with pytest.raises(MethodCodecError):
        codec.decode_envelope(b"[1,2]")


def test_messenger_without_handler_returns_none() -> None:
    messenger = BinaryMessenger()
    assert messenger.send("nobody", b"{}") is None
    assert not messenger.has_handler("nobody")


def test_invoke_success() -> None:
    channel = MethodChannel(BinaryMessenger(), "test")
    seen = []

    def handler(call):
        seen.append(call)
        return CommandResult.success(call.method, value="done")

    channel.set_method_call_handler(handler)
    assert channel.invoke_method("ping", {"x": 1}) == "done"
    assert seen == [MethodCall("ping", {"x": 1})]


def test_invoke_not_implemented_raises_missing_plugin() -> None:
    channel = MethodChannel(BinaryMessenger(), "test")
    channel.set_method_call_handler(lambda call: CommandResult.not_implemented(call.method))

    with pytest.raises(MissingPluginError) as exc_info:
        channel.invoke_method("bogus")
    assert exc_info.value.method == "bogus"
    assert exc_info.value.channel == "test"


def test_invoke_without_handler_raises_missing_plugin() -> None:
    channel = MethodChannel(BinaryMessenger(), "test")
    with pytest.raises(MissingPluginError):
        channel.invoke_method("secureModeOn")


def test_error_result_becomes_platform_error() -> None:
    channel = MethodChannel(BinaryMessenger(), "test")
    channel.set_method_call_handler(lambda call: CommandResult.error(call.method, "denied", "nope"))

    with pytest.raises(PlatformChannelError) as exc_info:
        channel.invoke_method("secureModeOn")
    assert exc_info.value.code == "denied"


def test_handler_exception_becomes_error_envelope() -> None:
    def handler(call):
        raise RuntimeError("boom")

    channel = MethodChannel(BinaryMessenger(), "test")
    channel.set_method_call_handler(handler)

    with pytest.raises(PlatformChannelError) as exc_info:
        channel.invoke_method("secureModeOn")
    assert exc_info.value.code == "error"
    assert exc_info.value.message == "boom"


def test_malformed_message_gets_bad_call_reply() -> None:
    messenger = BinaryMessenger()
    channel = MethodChannel(messenger, "test")
    channel.set_method_call_handler(lambda call: CommandResult.success(call.method))

    reply = messenger.send("test", b"garbage")
    with pytest.raises(PlatformChannelError) as exc_info:
        channel.codec.decode_envelope(reply)
    assert exc_info.value.code == "bad_call"


def test_detach_handler() -> None:
    messenger = BinaryMessenger()
    channel = MethodChannel(messenger, "test")
    channel.set_method_call_handler(lambda call: CommandResult.success(call.method))
    assert messenger.has_handler("test")

    channel.set_method_call_handler(None)
    assert not messenger.has_handler("test")
