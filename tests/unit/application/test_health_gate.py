"""Tests for the HealthGate."""

import threading

from confstore.application.health_gate import DISABLED_MESSAGE, HealthGate
from confstore.domain.exceptions import StorageUnavailableError


class TestHealthGate:
    """Test cases for HealthGate."""

    def test_starts_enabled(self):
        """Test the initial state."""
        gate = HealthGate()
        assert gate.is_enabled() is True
        assert gate.enabled is True

    def test_disable(self):
        """Test the transition to disabled."""
        gate = HealthGate()
        assert gate.disable(StorageUnavailableError()) is True
        assert gate.is_enabled() is False

    def test_disable_is_idempotent(self):
        """Test that only the first call reports a transition."""
        gate = HealthGate()
        assert gate.disable() is True
        assert gate.disable() is False
        assert gate.is_enabled() is False

    def test_every_disable_is_logged(self, mock_logger):
        """Test that each call logs the cause at critical level."""
        gate = HealthGate(logger=mock_logger)
        first = StorageUnavailableError("db down")
        second = StorageUnavailableError("still down")

        gate.disable(first)
        gate.disable(second)

        assert mock_logger.critical.call_count == 2
        args, kwargs = mock_logger.critical.call_args_list[0]
        assert args[0] == DISABLED_MESSAGE
        assert kwargs["exc_info"] is first
        assert kwargs["first_occurrence"] is True
        assert mock_logger.critical.call_args_list[1].kwargs["first_occurrence"] is False

    def test_disable_counts_metric(self, metrics):
        """Test the disable counter."""
        gate = HealthGate(metrics=metrics)
        gate.disable()
        gate.disable()
        assert metrics.get_counter("datastore.disabled") == 2

    def test_concurrent_disable(self, mock_logger):
        """Test that racing disables leave the gate disabled with one transition."""
        gate = HealthGate(logger=mock_logger)
        barrier = threading.Barrier(16)
        results: list[bool] = []
        results_lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            transitioned = gate.disable(StorageUnavailableError())
            with results_lock:
                results.append(transitioned)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert gate.is_enabled() is False
        assert results.count(True) == 1
        assert mock_logger.critical.call_count >= 1
