"""Storage port - Interface for the persistent key/value backend."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..domain.models import DataEntity


class DataEntityRepository(ABC):
    """Abstract repository for stored data entities.

    Implementations are synchronous and must be safe to call from several
    threads. Any method may raise ``StorageUnavailableError`` when the
    backend cannot be used.
    """

    @abstractmethod
    def find_by_key(self, key: str) -> DataEntity | None:
        """Find an entity by its primary key.

        Args:
            key: The key to look up

        Returns:
            The entity if found, None otherwise
        """
        ...

    @abstractmethod
    def find_all(self) -> Sequence[DataEntity]:
        """Enumerate every stored entity."""
        ...

    @abstractmethod
    def create(self, entity: DataEntity) -> None:
        """Store a new entity.

        Creating a key that already exists replaces its value.
        """
        ...

    @abstractmethod
    def update(self, entity: DataEntity) -> None:
        """Replace the value of an existing entity."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete an entity. Deleting an absent key is not an error."""
        ...
