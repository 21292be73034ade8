"""Infrastructure layer - Concrete implementations of ports."""

from .config import DatastoreConfig
from .configuration_adapter import EnvironmentConfigurationAdapter
from .factories import DatastoreServiceFactory
from .in_memory_cache import CacheConfig, CacheEntry, InMemoryCache
from .in_memory_metrics import InMemoryMetrics
from .in_memory_repository import InMemoryDataEntityRepository
from .simple_logger import SimpleLogger
from .sqlite_repository import SqliteDataEntityRepository

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "DatastoreConfig",
    "DatastoreServiceFactory",
    "EnvironmentConfigurationAdapter",
    "InMemoryCache",
    "InMemoryDataEntityRepository",
    "InMemoryMetrics",
    "SimpleLogger",
    "SqliteDataEntityRepository",
]
