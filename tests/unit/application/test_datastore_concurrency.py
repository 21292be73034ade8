"""Concurrency tests for the DatastoreService."""

import threading
from concurrent.futures import ThreadPoolExecutor

from confstore.application.datastore_service import DatastoreService
from confstore.infrastructure.in_memory_cache import CacheConfig, InMemoryCache
from confstore.infrastructure.in_memory_repository import InMemoryDataEntityRepository
from confstore.infrastructure.sqlite_repository import SqliteDataEntityRepository

WORKERS = 8
ROUNDS = 50


def _exercise(service: DatastoreService, worker: int) -> list[str]:
    """Write, read and delete keys owned by one worker."""
    errors = []
    for i in range(ROUNDS):
        key = f"worker.{worker}.{i}"
        service.set_value(key, f"v{i}")
        if service.get_value(key) != f"v{i}":
            errors.append(f"lost write for {key}")
        service.set_value(key, f"w{i}")
        if service.get_value(key) != f"w{i}":
            errors.append(f"stale read for {key}")
        if i % 2:
            service.remove_key(key)
            if service.key_exists(key):
                errors.append(f"resurrected {key}")
    return errors


class TestDatastoreConcurrency:
    """Test cases for concurrent use of one service."""

    def test_disjoint_keys_in_memory(self):
        """Test concurrent writers on disjoint keys with a bound cache."""
        repository = InMemoryDataEntityRepository()
        service = DatastoreService(
            repository=repository,
            cache=InMemoryCache(config=CacheConfig(ttl_seconds=60.0, max_entries=10_000)),
        )

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(lambda w: _exercise(service, w), range(WORKERS)))

        assert all(errors == [] for errors in results)
        assert service.is_enabled() is True
        assert len(repository.get_all()) == WORKERS * ROUNDS // 2
        for worker in range(WORKERS):
            assert service.get_value(f"worker.{worker}.0") == "w0"

    def test_disjoint_keys_sqlite(self, tmp_path):
        """Test concurrent writers against a file-backed SQLite repository."""
        repository = SqliteDataEntityRepository(str(tmp_path / "datastore.db"))
        service = DatastoreService(repository=repository, cache=InMemoryCache())
        try:
            with ThreadPoolExecutor(max_workers=4) as pool:
                results = list(pool.map(lambda w: _exercise(service, w), range(4)))
        finally:
            repository.close()

        assert all(errors == [] for errors in results)

    def test_concurrent_failures_disable_once(self, mock_logger):
        """Test that simultaneous storage failures leave the service disabled."""
        repository = InMemoryDataEntityRepository()
        repository.mark_unavailable()
        service = DatastoreService(repository=repository, logger=mock_logger)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            values = list(pool.map(lambda i: service.get_value(f"k{i}", "d"), range(32)))

        assert values == ["d"] * 32
        assert service.is_enabled() is False
        assert mock_logger.critical.call_count >= 1

    def test_racing_creates_of_new_key_sqlite(self, tmp_path):
        """Test that two writers creating the same new key keep the service enabled."""

        class LookupBarrierRepository(SqliteDataEntityRepository):
            """Holds every lookup until both writers have seen the key as absent."""

            def __init__(self, db_path: str) -> None:
                super().__init__(db_path)
                self.barrier = threading.Barrier(2, timeout=5)

            def find_by_key(self, key):
                entity = super().find_by_key(key)
                self.barrier.wait()
                return entity

        repository = LookupBarrierRepository(str(tmp_path / "datastore.db"))
        service = DatastoreService(repository=repository)
        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                list(pool.map(lambda value: service.set_value("k", value), ["a", "b"]))

            assert service.is_enabled() is True
            assert len(repository.find_all()) == 1
            assert repository.find_all()[0].value in {"a", "b"}
        finally:
            repository.close()
