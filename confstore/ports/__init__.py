"""Ports layer - Interfaces to external collaborators."""

from .cache import CachePort
from .logger import LoggerPort
from .metrics import MetricsPort
from .storage import DataEntityRepository

__all__ = [
    "CachePort",
    "DataEntityRepository",
    "LoggerPort",
    "MetricsPort",
]
