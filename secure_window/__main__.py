#!/usr/bin/env python3
"""Entry point for Secure Window."""

import argparse
import logging
import sys
from typing import List, Optional

from secure_window import __app_name__, __version__
from secure_window.core.channel import BinaryMessenger
from secure_window.core.commands import Command
from secure_window.core.config import BackendName, get_config
from secure_window.core.errors import MissingPluginError, SecureWindowError
from secure_window.core.logging import setup_logging
from secure_window.platform import create_backend
from secure_window.plugin import SecureWindowPlugin

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_IMPLEMENTED = 2


def parse_window_id(value: str) -> int:
    """Parse a window id given in decimal or 0x hex."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid window id: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secure-window",
        description="Toggle screenshot and screen-recording privacy on a window.",
    )
    parser.add_argument("--version", action="version", version=f"{__app_name__} {__version__}")
    parser.add_argument(
        "--backend",
        choices=[b.value for b in BackendName],
        help="display privacy backend (default from config)",
    )
    parser.add_argument("--window", type=parse_window_id, help="native window id (HWND or X11 id)")
    parser.add_argument("--log-level", help="logging level (default from config)")

    sub = parser.add_subparsers(dest="action", required=True)
    sub.add_parser("on", help="enable secure mode")
    sub.add_parser("off", help="disable secure mode")
    sub.add_parser("status", help="show whether secure mode is set on the window")
    send = sub.add_parser("send", help="send a raw method name over the channel")
    send.add_argument("method")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = get_config()

    setup_logging(args.log_level or config.log_level)

    backend = create_backend(args.backend or config.backend.name, config.backend.x11_display)
    if not backend.is_available:
        print(f"{backend.name} backend is not available on this system", file=sys.stderr)
        return EXIT_ERROR

    messenger = BinaryMessenger()
    plugin = SecureWindowPlugin.register_with(
        messenger,
        window_provider=lambda: args.window,
        backend=backend,
        config=config,
    )

    if args.action == "status":
        print("on" if plugin.toggle.is_window_secure() else "off")
        return EXIT_OK

    method = {
        "on": Command.SECURE_MODE_ON.value,
        "off": Command.SECURE_MODE_OFF.value,
    }.get(args.action, getattr(args, "method", None))

    try:
        plugin.channel.invoke_method(method)
    except MissingPluginError:
        print("not implemented")
        return EXIT_NOT_IMPLEMENTED
    except SecureWindowError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.window is None:
        logger.warning("No --window given, nothing was changed")
    print(method)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
