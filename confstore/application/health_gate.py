"""Health gate guarding every storage access of the datastore."""

from __future__ import annotations

import threading

from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort

DISABLED_MESSAGE = (
    "##### CRITICAL ERROR ##### : Datastore has been disabled due to an unavailable storage"
)


class HealthGate:
    """One-way switch that turns the datastore off after a storage failure.

    The gate starts enabled and can only be disabled. Once disabled it stays
    so for the lifetime of the instance; restoring the datastore requires a
    new instance (in practice a process restart).
    """

    def __init__(self, logger: LoggerPort | None = None, metrics: MetricsPort | None = None):
        self._lock = threading.Lock()
        self._enabled = True
        self._logger = logger
        self._metrics = metrics

    @property
    def enabled(self) -> bool:
        return self.is_enabled()

    def is_enabled(self) -> bool:
        """Return True while storage access is allowed."""
        with self._lock:
            return self._enabled

    def disable(self, cause: BaseException | None = None) -> bool:
        """Disable the gate.

        Every call logs the cause at critical level; only the first call
        changes state.

        Args:
            cause: The failure that triggered the disable

        Returns:
            True if this call performed the transition
        """
        with self._lock:
            transitioned = self._enabled
            self._enabled = False

        if self._metrics:
            self._metrics.increment("datastore.disabled")
        if self._logger:
            self._logger.critical(
                DISABLED_MESSAGE,
                exc_info=cause,
                error=str(cause) if cause is not None else None,
                first_occurrence=transitioned,
            )
        return transitioned
