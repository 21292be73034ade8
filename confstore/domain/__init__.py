"""Domain layer - Core entities, constants and errors."""

from .exceptions import ConfigurationError, DatastoreError, StorageUnavailableError
from .models import VALUE_FALSE, VALUE_MISSING, VALUE_TRUE, DataEntity, ReferenceItem

__all__ = [
    "VALUE_FALSE",
    "VALUE_MISSING",
    "VALUE_TRUE",
    "ConfigurationError",
    "DataEntity",
    "DatastoreError",
    "ReferenceItem",
    "StorageUnavailableError",
]
