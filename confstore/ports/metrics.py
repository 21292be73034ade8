"""Metrics port - Abstract interface for metrics collection.

This port lets the application layer count cache hits, misses and health
events without depending on a specific metrics backend.
"""

from abc import ABC, abstractmethod
from typing import Any


class MetricsPort(ABC):
    """Abstract interface for counter metrics."""

    @abstractmethod
    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter metric.

        Args:
            name: The metric name (e.g., "datastore.cache.hits")
            value: The increment value (default: 1)
        """
        ...

    @abstractmethod
    def get_all(self) -> dict[str, Any]:
        """Get all metrics as a dictionary."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset all metrics."""
        ...
