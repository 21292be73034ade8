"""In-memory metrics implementation.

Counters only; all mutations are serialized by a lock because the
datastore is shared between threads.
"""

import threading
import time
from collections import defaultdict
from typing import Any

from ..ports.metrics import MetricsPort


class InMemoryMetrics(MetricsPort):
    """Thread-safe in-memory implementation of the MetricsPort."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: dict[str, int] = defaultdict(int)
        self._start_time = time.time()

    def increment(self, name: str, value: int = 1) -> None:
        with self._lock:
            self._counters[name] += value

    def get_counter(self, name: str) -> int:
        """Return the current value of a counter (0 if never incremented)."""
        with self._lock:
            return self._counters.get(name, 0)

    def get_all(self) -> dict[str, Any]:
        """Snapshot of the counters and the adapter's uptime."""
        with self._lock:
            return {
                "uptime_seconds": round(time.time() - self._start_time, 2),
                "counters": dict(self._counters),
            }

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
