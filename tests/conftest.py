"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from confstore.application.datastore_service import DatastoreService
from confstore.infrastructure.in_memory_cache import CacheConfig, InMemoryCache
from confstore.infrastructure.in_memory_metrics import InMemoryMetrics
from confstore.infrastructure.in_memory_repository import InMemoryDataEntityRepository
from confstore.ports.logger import LoggerPort


@pytest.fixture
def mock_logger():
    """Create a mock logger honouring the LoggerPort interface."""
    return Mock(spec=LoggerPort)


@pytest.fixture
def metrics():
    """Create an in-memory metrics collector."""
    return InMemoryMetrics()


@pytest.fixture
def repository():
    """Create an empty in-memory repository."""
    return InMemoryDataEntityRepository()


@pytest.fixture
def cache():
    """Create an in-memory cache with a long TTL."""
    return InMemoryCache(config=CacheConfig(ttl_seconds=60.0, max_entries=100))


@pytest.fixture
def datastore(repository, cache, mock_logger, metrics):
    """Create a datastore service with a bound cache."""
    return DatastoreService(
        repository=repository,
        cache=cache,
        logger=mock_logger,
        metrics=metrics,
    )


@pytest.fixture
def uncached_datastore(repository, mock_logger, metrics):
    """Create a datastore service without any cache."""
    return DatastoreService(repository=repository, logger=mock_logger, metrics=metrics)
