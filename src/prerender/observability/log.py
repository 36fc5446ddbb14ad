"""Event log — bounded record of one render pass.

Keeps the most recent ``RenderEvent`` objects in a ring buffer and a running
count per event type.  Counts cover every event ever appended, including
ones the buffer has since evicted, so the build summary stays exact on
sites larger than the buffer.

Thread Safety:
    All methods are protected by a ``threading.Lock``.  Render callbacks may
    settle from worker threads, so the log must tolerate concurrent writers.

"""

import threading
from collections import Counter, deque

from prerender.observability.events import RenderEvent


class EventLog:
    """Ring buffer of render events with per-type totals.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_counts", "_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[RenderEvent] = deque(maxlen=max_events)
        self._counts: Counter[type] = Counter()
        self._lock = threading.Lock()

    def append(self, event: RenderEvent) -> None:
        with self._lock:
            self._events.append(event)
            self._counts[type(event)] += 1

    def count(self, event_type: type) -> int:
        """Number of *event_type* events appended so far (evicted ones included)."""
        with self._lock:
            return self._counts[event_type]

    def events(self, event_type: type | None = None) -> list[RenderEvent]:
        """Retained events, oldest first, optionally of one type only."""
        with self._lock:
            if event_type is None:
                return list(self._events)
            return [e for e in self._events if isinstance(e, event_type)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
