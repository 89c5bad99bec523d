"""Notifications about secure mode and the command channel."""

import logging
import threading
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional
from enum import Enum, auto

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class Event(Enum):
    """Things listeners can be told about."""
    # Payload: the new intent (bool)
    SECURE_MODE_CHANGED = auto()
    # Payload: the intent that could not be applied (bool)
    WINDOW_UNAVAILABLE = auto()
    # Payload: the method name
    COMMAND_NOT_IMPLEMENTED = auto()


class EventBus:
    """
    Fans secure mode notifications out to listeners.

    Listeners run inline on the thread that emits, so a host sees
    SECURE_MODE_CHANGED before dispatch() returns. A listener that
    raises is logged and skipped.
    """

    def __init__(self):
        self._listeners: Dict[Event, List[Listener]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event: Event, listener: Listener) -> None:
        """Add a listener; adding the same one twice has no effect."""
        with self._lock:
            if listener not in self._listeners[event]:
                self._listeners[event].append(listener)

    def unsubscribe(self, event: Event, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

    def emit(self, event: Event, data: Any = None) -> None:
        """
        Notify every listener of an event.

        Args:
            event: The event that happened
            data: Payload handed to each listener
        """
        with self._lock:
            listeners = list(self._listeners[event])

        for listener in listeners:
            try:
                listener(data)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event.name)


_event_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """Get the process-wide event bus."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus
