"""Datastore service - cache-aside access to stored key/value pairs.

Reads go to the cache first and fall back to storage, populating the cache
on the way back. Writes and deletes go to storage and then invalidate the
cached entry so the next read fetches the fresh value.

Every public operation is guarded by a HealthGate. A StorageUnavailableError
raised by the storage port disables the gate; from then on reads return the
caller's default and writes are no-ops, without touching storage or cache.
"""

from __future__ import annotations

from typing import Any, overload

from ..domain.exceptions import StorageUnavailableError
from ..domain.models import VALUE_FALSE, VALUE_TRUE, DataEntity, ReferenceItem
from ..ports.cache import CachePort
from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort
from ..ports.storage import DataEntityRepository
from .health_gate import HealthGate
from .key_replacer import KeyReplacer


class DatastoreService:
    """Process-wide facade over a data entity repository and optional cache."""

    def __init__(
        self,
        repository: DataEntityRepository,
        cache: CachePort | None = None,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
        health_gate: HealthGate | None = None,
    ):
        """Initialize the datastore service.

        Args:
            repository: Storage port holding the authoritative entities
            cache: Optional cache; can also be bound later with bind_cache
            logger: Optional logger for diagnostics
            metrics: Optional metrics port for cache statistics
            health_gate: Gate to use; a fresh enabled gate is created if None
        """
        self._repository = repository
        self._cache = cache
        self._logger = logger
        self._metrics = metrics
        self._health_gate = health_gate or HealthGate(logger=logger, metrics=metrics)
        self._key_replacer = KeyReplacer(self.get_value, logger=logger, metrics=metrics)

    @property
    def health_gate(self) -> HealthGate:
        return self._health_gate

    @property
    def cache(self) -> CachePort | None:
        return self._cache

    def is_enabled(self) -> bool:
        """Return True while the datastore is usable."""
        return self._health_gate.is_enabled()

    def bind_cache(self, cache: CachePort | None) -> None:
        """Attach the cache once the rest of the application is ready.

        The cache cannot always be built together with the service because
        the cache subsystem may itself read its settings from the datastore.
        """
        self._cache = cache
        if self._logger:
            if cache is None:
                self._logger.info("Datastore's cache unbound.")
            else:
                self._logger.info("Datastore's cache started.")

    def _disable(self, error: StorageUnavailableError) -> None:
        self._health_gate.disable(error)

    def _record(self, metric: str) -> None:
        if self._metrics:
            self._metrics.increment(metric)

    # Single key access

    @overload
    def get_value(self, key: str, default: str) -> str: ...

    @overload
    def get_value(self, key: str, default: str | None = None) -> str | None: ...

    def get_value(self, key: str, default: str | None = None) -> str | None:
        """Get the value stored under a key.

        Args:
            key: The key to look up
            default: Returned when the key is absent or the datastore is disabled

        Returns:
            The stored value or ``default``
        """
        if not self._health_gate.is_enabled():
            return default

        cache = self._cache
        if cache is not None and not cache.is_enabled():
            cache = None
        try:
            entity = cache.get(key) if cache is not None else None
            if entity is not None:
                self._record("datastore.cache.hits")
                if self._logger:
                    self._logger.debug("Datastore cache hit", key=key)
                return entity.value

            if cache is not None:
                self._record("datastore.cache.misses")

            entity = self._repository.find_by_key(key)
            if entity is None:
                return default

            if cache is not None:
                cache.put(key, entity)
            return entity.value
        except StorageUnavailableError as e:
            self._disable(e)
            return default

    def set_value(self, key: str, value: str) -> None:
        """Create or update the value stored under a key.

        An existing cached copy is invalidated rather than overwritten so
        that a concurrent reader cannot put a stale value back over it.
        """
        if not self._health_gate.is_enabled():
            return

        entity = DataEntity(key=key, value=value)
        try:
            if self._repository.find_by_key(key) is not None:
                self._repository.update(entity)
                if self._cache is not None:
                    self._cache.invalidate(key)
            else:
                self._repository.create(entity)
        except StorageUnavailableError as e:
            self._disable(e)

    def remove_key(self, key: str) -> None:
        """Remove a key. Removing an absent key does nothing."""
        if not self._health_gate.is_enabled():
            return

        try:
            self._repository.delete(key)
            if self._cache is not None:
                self._cache.invalidate(key)
        except StorageUnavailableError as e:
            self._disable(e)

    def key_exists(self, key: str) -> bool:
        """Check whether a key is stored. Does not populate the cache."""
        if not self._health_gate.is_enabled():
            return False

        try:
            if self._cache is not None and self._cache.get(key) is not None:
                return True
            return self._repository.find_by_key(key) is not None
        except StorageUnavailableError as e:
            self._disable(e)
            return False

    def get_boolean_value(self, key: str, default: bool) -> bool:
        """Read a value written by set_boolean_value.

        Values other than "true" and "false" read back as ``default``.
        """
        value = self.get_value(key)
        if value == VALUE_TRUE:
            return True
        if value == VALUE_FALSE:
            return False
        return default

    def set_boolean_value(self, key: str, value: bool) -> None:
        self.set_value(key, VALUE_TRUE if value else VALUE_FALSE)

    # Prefix queries

    def get_data_by_prefix(self, prefix: str) -> list[ReferenceItem]:
        """List stored pairs whose key starts with ``prefix``.

        Args:
            prefix: Case-sensitive key prefix

        Returns:
            Matching items in storage enumeration order; empty when the
            datastore is disabled
        """
        items: list[ReferenceItem] = []
        if not self._health_gate.is_enabled():
            return items

        try:
            for entity in self._repository.find_all():
                if entity.key.startswith(prefix):
                    items.append(ReferenceItem.from_entity(entity))
        except StorageUnavailableError as e:
            self._disable(e)
        return items

    def remove_data_by_prefix(self, prefix: str) -> None:
        """Remove every key starting with ``prefix``.

        Each key goes through remove_key. A storage failure partway leaves
        the keys removed so far deleted; the remaining ones are skipped.
        """
        if not self._health_gate.is_enabled():
            return

        try:
            entities = self._repository.find_all()
        except StorageUnavailableError as e:
            self._disable(e)
            return

        for entity in entities:
            if not self._health_gate.is_enabled():
                break
            if entity.key.startswith(prefix):
                self.remove_key(entity.key)

    # Templating

    @overload
    def replace_keys(self, source: str) -> str: ...

    @overload
    def replace_keys(self, source: None) -> None: ...

    def replace_keys(self, source: str | None) -> str | None:
        """Replace ``#dskey{key}`` tokens in ``source`` with stored values."""
        return self._key_replacer.replace_keys(source)

    def get_stats(self) -> dict[str, Any]:
        """Get datastore status and metrics.

        Returns:
            Dictionary with the gate state, cache binding and metrics
        """
        stats: dict[str, Any] = {
            "enabled": self._health_gate.is_enabled(),
            "cache_bound": self._cache is not None,
        }
        if self._metrics:
            stats["metrics"] = self._metrics.get_all()
        return stats
