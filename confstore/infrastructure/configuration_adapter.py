"""Configuration adapter loading datastore settings from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

from ..domain.exceptions import ConfigurationError
from .config import DatastoreConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw}")


class EnvironmentConfigurationAdapter:
    """Adapter that loads a DatastoreConfig from environment variables.

    Recognized variables:
        DATASTORE_STORAGE_BACKEND: "memory" or "sqlite" (default "memory")
        DATASTORE_SQLITE_PATH: database file for the sqlite backend
        DATASTORE_CACHE_ENABLED: start the entity cache (default true)
        DATASTORE_CACHE_TTL_SECONDS: cache time-to-live (default 300)
        DATASTORE_CACHE_MAX_ENTRIES: cache size bound (default 1000)
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    def load_configuration(self) -> DatastoreConfig:
        """Load the datastore configuration.

        Returns:
            DatastoreConfig: Validated configuration

        Raises:
            ConfigurationError: If any variable is missing a valid value
        """
        env = self._environ
        try:
            return DatastoreConfig(
                storage_backend=env.get("DATASTORE_STORAGE_BACKEND", "memory").strip().lower(),
                sqlite_path=env.get("DATASTORE_SQLITE_PATH", ":memory:"),
                cache_enabled=_parse_bool(
                    "DATASTORE_CACHE_ENABLED", env.get("DATASTORE_CACHE_ENABLED", "true")
                ),
                cache_ttl_seconds=float(env.get("DATASTORE_CACHE_TTL_SECONDS", "300")),
                cache_max_entries=int(env.get("DATASTORE_CACHE_MAX_ENTRIES", "1000")),
                log_level=env.get("LOG_LEVEL", "INFO"),
            )
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
