"""confstore - Cache-accelerated key/value configuration store."""

from .application.datastore_service import DatastoreService
from .domain.exceptions import StorageUnavailableError
from .domain.models import VALUE_MISSING, DataEntity
from .infrastructure.factories import DatastoreServiceFactory

__all__ = [
    "VALUE_MISSING",
    "DataEntity",
    "DatastoreService",
    "DatastoreServiceFactory",
    "StorageUnavailableError",
]
__version__ = "0.1.0"
