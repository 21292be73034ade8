"""Factories wiring the datastore service with its default adapters."""

from __future__ import annotations

from ..application.datastore_service import DatastoreService
from ..application.health_gate import HealthGate
from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort
from ..ports.storage import DataEntityRepository
from .config import DatastoreConfig
from .in_memory_cache import InMemoryCache
from .in_memory_metrics import InMemoryMetrics
from .in_memory_repository import InMemoryDataEntityRepository
from .simple_logger import SimpleLogger
from .sqlite_repository import SqliteDataEntityRepository


class DatastoreServiceFactory:
    """Builds datastore services from a DatastoreConfig.

    Startup is two-phase: ``create`` returns a working service without a
    cache, and ``start_cache`` binds one afterwards. Applications whose
    cache layer reads settings from the datastore call ``start_cache`` once
    that layer is ready; ``create_started`` does both for everyone else.
    """

    def __init__(
        self,
        config: DatastoreConfig | None = None,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
    ):
        self._config = config or DatastoreConfig()
        self._logger = logger or SimpleLogger(
            "confstore.datastore", level=self._config.logging_level
        )
        self._metrics = metrics or InMemoryMetrics()

    @property
    def config(self) -> DatastoreConfig:
        return self._config

    def create_repository(self) -> DataEntityRepository:
        """Create the storage adapter selected by the configuration."""
        if self._config.storage_backend == "sqlite":
            return SqliteDataEntityRepository(self._config.sqlite_path)
        return InMemoryDataEntityRepository()

    def create(self, repository: DataEntityRepository | None = None) -> DatastoreService:
        """Create a datastore service with no cache bound yet."""
        return DatastoreService(
            repository=repository or self.create_repository(),
            logger=self._logger,
            metrics=self._metrics,
            health_gate=HealthGate(logger=self._logger, metrics=self._metrics),
        )

    def start_cache(self, service: DatastoreService) -> InMemoryCache | None:
        """Bind the configured cache to a service.

        Returns:
            The bound cache, or None when caching is disabled by configuration
        """
        if not self._config.cache_enabled:
            self._logger.info("Datastore's cache disabled by configuration.")
            return None

        cache = InMemoryCache(
            config=self._config.to_cache_config(),
            metrics=self._metrics,
            logger=self._logger,
        )
        service.bind_cache(cache)
        return cache

    def create_started(self, repository: DataEntityRepository | None = None) -> DatastoreService:
        """Create a service and bind its cache in one step."""
        service = self.create(repository)
        self.start_cache(service)
        return service
