"""In-memory analytics event store.

A bounded FIFO buffer: once full, each append evicts the oldest event. One
lock guards appends and snapshot reads so queries always see a consistent
list.
"""

import threading
from collections import deque
from typing import Deque, List, Optional

import structlog

from config.settings import settings
from models.analytics import AnalyticsEventPayload

logger = structlog.get_logger(__name__)


class EventStore:
    """Process-wide analytics event buffer.

    Construct one per process (or per test) and inject it into the
    AnalyticsService. It can later be swapped for a persistent repository
    exposing the same methods.

    Args:
        capacity: Maximum events kept (defaults to settings.analytics_max_events).
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity if capacity is not None else settings.analytics_max_events
        if self.capacity <= 0:
            raise ValueError("EventStore capacity must be positive")
        self._events: Deque[AnalyticsEventPayload] = deque(maxlen=self.capacity)
        self._lock = threading.Lock()
        self._evicted = 0

    def append(self, event: AnalyticsEventPayload) -> None:
        """Append an event, evicting the oldest when at capacity."""
        with self._lock:
            if len(self._events) == self.capacity:
                self._evicted += 1
            self._events.append(event)

    def snapshot(self) -> List[AnalyticsEventPayload]:
        """Copy of all stored events, oldest first."""
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
            self._evicted = 0

    def reset(self) -> None:
        """Drop all events. Intended for tests."""
        self.clear()
        logger.debug("event_store_reset")

    @property
    def evicted_count(self) -> int:
        """Events dropped due to capacity since creation or last clear."""
        return self._evicted

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
