"""In-memory implementation of the DataEntityRepository.

Infrastructure adapter used for testing and for processes that do not need
durable configuration.
"""

import threading

from ..domain.exceptions import StorageUnavailableError
from ..domain.models import DataEntity
from ..ports.storage import DataEntityRepository


class InMemoryDataEntityRepository(DataEntityRepository):
    """Dict-backed repository keeping insertion order."""

    def __init__(self, entities: list[DataEntity] | None = None) -> None:
        self._lock = threading.Lock()
        self._storage: dict[str, DataEntity] = {}
        self._available = True
        for entity in entities or []:
            self._storage[entity.key] = entity

    def _check_available(self, operation: str, key: str | None = None) -> None:
        if not self._available:
            raise StorageUnavailableError(operation=operation, key=key)

    def find_by_key(self, key: str) -> DataEntity | None:
        with self._lock:
            self._check_available("find_by_key", key)
            return self._storage.get(key)

    def find_all(self) -> list[DataEntity]:
        with self._lock:
            self._check_available("find_all")
            return list(self._storage.values())

    def create(self, entity: DataEntity) -> None:
        with self._lock:
            self._check_available("create", entity.key)
            self._storage[entity.key] = entity

    def update(self, entity: DataEntity) -> None:
        with self._lock:
            self._check_available("update", entity.key)
            self._storage[entity.key] = entity

    def delete(self, key: str) -> None:
        with self._lock:
            self._check_available("delete", key)
            self._storage.pop(key, None)

    def mark_unavailable(self) -> None:
        """Make every subsequent call raise StorageUnavailableError."""
        self._available = False

    def clear(self) -> None:
        """Remove all stored entities (useful for testing)."""
        with self._lock:
            self._storage.clear()

    def get_all(self) -> dict[str, str]:
        """Snapshot of the stored key/value pairs (useful for testing)."""
        with self._lock:
            return {key: entity.value for key, entity in self._storage.items()}
