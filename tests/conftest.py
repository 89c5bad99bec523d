"""Shared fixtures for Secure Window tests."""

import os

import pytest

from secure_window.core import config as config_module
from secure_window.core import events as events_module
from secure_window.core.events import EventBus
from secure_window.platform.memory import MemoryBackend
from secure_window.secure.toggle import SecureDisplayToggle


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch, tmp_path):
    """Keep config and event bus globals from leaking between tests."""
    for key in list(os.environ):
        if key.startswith("SECURE_WINDOW_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "config.toml")
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(events_module, "_event_bus", None)


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def window() -> int:
    return 0x3A00007


@pytest.fixture
def toggle(backend, event_bus, window) -> SecureDisplayToggle:
    return SecureDisplayToggle(window_provider=lambda: window, backend=backend, event_bus=event_bus)
