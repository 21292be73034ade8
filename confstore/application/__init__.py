"""Application layer - Datastore orchestration."""

from .datastore_service import DatastoreService
from .health_gate import HealthGate
from .key_replacer import DATASTORE_KEY_PATTERN, KeyReplacer

__all__ = [
    "DATASTORE_KEY_PATTERN",
    "DatastoreService",
    "HealthGate",
    "KeyReplacer",
]
