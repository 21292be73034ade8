"""In-memory TTL/LRU implementation of the CachePort."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import DataEntity
from ..ports.cache import CachePort
from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort


class CacheEntry(BaseModel):
    """Cached entity with its insertion time."""

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        validate_assignment=True,
    )

    entity: DataEntity
    timestamp: float
    hits: int = Field(default=0, ge=0)

    def is_expired(self, ttl_seconds: float) -> bool:
        """Check if this cache entry has expired based on TTL."""
        return time.time() - self.timestamp >= ttl_seconds

    def increment_hits(self) -> None:
        self.hits += 1


class CacheConfig(BaseModel):
    """Configuration for the datastore cache."""

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        validate_assignment=True,
    )

    ttl_seconds: float = Field(default=300.0, gt=0)
    max_entries: int = Field(default=1000, gt=0)
    enabled: bool = Field(default=True)
    enable_metrics: bool = Field(default=True)


class InMemoryCache(CachePort):
    """Bounded, thread-safe entity cache.

    Entries expire after ``ttl_seconds``; once ``max_entries`` is exceeded
    the least recently used entries are evicted. The cache can be switched
    off at runtime, in which case every lookup misses and puts are ignored.
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        metrics: MetricsPort | None = None,
        logger: LoggerPort | None = None,
        name: str = "DatastoreCacheService",
    ):
        """Initialize the cache.

        Args:
            config: Cache configuration (defaults used if None)
            metrics: Optional metrics port for eviction statistics
            logger: Optional logger for debugging
            name: Name used in logs and statistics
        """
        self._config = config or CacheConfig()
        self._metrics = metrics
        self._logger = logger
        self._name = name
        self._lock = threading.Lock()
        self._cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._enabled = self._config.enabled
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def name(self) -> str:
        return self._name

    def is_enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def enable(self) -> None:
        """Turn the cache on."""
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        """Turn the cache off and drop its content."""
        with self._lock:
            self._enabled = False
            self._clear_locked()

    def get(self, key: str) -> DataEntity | None:
        with self._lock:
            if not self._enabled:
                return None
            entry = self._cache.get(key)
            if entry is None:
                self._cache_misses += 1
                return None
            if entry.is_expired(self._config.ttl_seconds):
                del self._cache[key]
                self._cache_misses += 1
                self._record_eviction(key, "expired")
                return None
            self._cache.move_to_end(key)
            entry.increment_hits()
            self._cache_hits += 1
            return entry.entity

    def put(self, key: str, entity: DataEntity) -> None:
        with self._lock:
            if not self._enabled:
                return
            self._cache[key] = CacheEntry(entity=entity, timestamp=time.time())
            self._cache.move_to_end(key)
            while len(self._cache) > self._config.max_entries:
                evicted, _ = self._cache.popitem(last=False)
                self._record_eviction(evicted, "lru")

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._clear_locked()

    def _clear_locked(self) -> None:
        self._cache.clear()
        self._cache_hits = 0
        self._cache_misses = 0

    def _record_eviction(self, key: str, reason: str) -> None:
        if self._config.enable_metrics and self._metrics:
            self._metrics.increment("cache.evictions")
        if self._logger:
            self._logger.debug("Evicted cache entry", cache=self._name, key=key, reason=reason)

    def get_cache_stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        with self._lock:
            total = self._cache_hits + self._cache_misses
            return {
                "name": self._name,
                "enabled": self._enabled,
                "cache_hits": self._cache_hits,
                "cache_misses": self._cache_misses,
                "hit_rate": self._cache_hits / total if total else 0.0,
                "cache_size": len(self._cache),
                "config": {
                    "ttl_seconds": self._config.ttl_seconds,
                    "max_entries": self._config.max_entries,
                },
            }
