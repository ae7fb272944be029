"""In-memory, newest-first event log store."""

import threading
from collections import deque
from typing import Protocol

from ..models import KycEvent


class ILogStore(Protocol):
    """Append-only collection of KycEvents, newest first."""

    def append(self, event: KycEvent) -> None:
        """Insert an event at the front."""
        ...

    def snapshot(self) -> tuple[KycEvent, ...]:
        """Get an immutable copy, newest first."""
        ...

    def clear(self) -> None:
        """Remove all events."""
        ...


class LogStore:
    """Thread-safe in-memory log store.

    Ordering is by insertion, not by timestamp. Nothing is persisted; the
    store lives exactly as long as its owner.
    """

    def __init__(self):
        self._events: deque[KycEvent] = deque()
        self._lock = threading.Lock()

    def append(self, event: KycEvent) -> None:
        """Insert an event at the front."""
        with self._lock:
            self._events.appendleft(event)

    def snapshot(self) -> tuple[KycEvent, ...]:
        """Get an immutable copy, newest first."""
        with self._lock:
            return tuple(self._events)

    def clear(self) -> None:
        """Remove all events."""
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
