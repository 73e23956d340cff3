"""Event log — queryable, thread-safe store for build events.

Keeps a bounded ring buffer of ``BuildEvent`` objects so a long-running
watch session does not grow without limit.  Events can be filtered by type,
time and file path.

Thread Safety:
    All methods take a ``threading.Lock``.  Compilations running in several
    threads (or tree reads in ``asyncio.to_thread``) may record concurrently.

"""

import threading
from collections import deque
from collections.abc import Sequence
from typing import Any

from whisker.observability.events import BuildEvent, MetadataSkipped

# Event attributes that identify the file an event is about, in lookup order.
_PATH_FIELDS = ("path", "root", "target")


def _event_path(event: BuildEvent) -> str:
    for name in _PATH_FIELDS:
        value = getattr(event, name, None)
        if value:
            return str(value)
    return ""


class EventLog:
    """Bounded event store with query support.

    Args:
        max_events: Maximum number of events to retain; the oldest are
            dropped first.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._events: deque[BuildEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: BuildEvent) -> None:
        with self._lock:
            self._events.append(event)

    def append_many(self, events: Sequence[BuildEvent]) -> None:
        with self._lock:
            self._events.extend(events)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        path: str | None = None,
        limit: int = 100,
    ) -> list[BuildEvent]:
        """Return matching events, most recent first.

        Args:
            event_type: Only events of this class.
            since_ns: Only events recorded after this monotonic timestamp.
            path: Substring that the event's file path must contain.
            limit: Maximum number of events returned.

        """
        with self._lock:
            snapshot = list(self._events)

        results: list[BuildEvent] = []
        for event in reversed(snapshot):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if since_ns and event.timestamp_ns < since_ns:
                continue
            if path is not None and path not in _event_path(event):
                continue
            results.append(event)
        return results

    def recent(self, n: int = 20) -> list[BuildEvent]:
        """Return the N most recent events, oldest first."""
        with self._lock:
            items = list(self._events)
        return items[-n:]

    def skipped_metadata(self) -> list[MetadataSkipped]:
        """Every recorded ``MetadataSkipped`` event, oldest first."""
        with self._lock:
            return [e for e in self._events if isinstance(e, MetadataSkipped)]

    def clear(self) -> int:
        """Drop all events and return how many there were."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Summary counts by event type."""
        with self._lock:
            events = list(self._events)

        type_counts: dict[str, int] = {}
        for event in events:
            name = type(event).__name__
            type_counts[name] = type_counts.get(name, 0) + 1

        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": type_counts,
        }
