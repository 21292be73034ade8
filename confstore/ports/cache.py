"""Cache port - Interface for the optional entity cache."""

from abc import ABC, abstractmethod

from ..domain.models import DataEntity


class CachePort(ABC):
    """Abstract interface for a key-addressed entity cache.

    The cache is a performance shadow of the storage port and is never
    authoritative. Eviction policy is left to the implementation.
    """

    @abstractmethod
    def get(self, key: str) -> DataEntity | None:
        """Get a cached entity.

        Args:
            key: The key to look up

        Returns:
            The cached entity, or None on a miss
        """
        ...

    @abstractmethod
    def put(self, key: str, entity: DataEntity) -> None:
        """Cache an entity under a key."""
        ...

    @abstractmethod
    def invalidate(self, key: str) -> None:
        """Drop the cached entry for a key, if any."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every cached entry."""
        ...

    def is_enabled(self) -> bool:
        """Whether lookups can currently hit.

        Caches that cannot be switched off are always enabled.
        """
        return True
