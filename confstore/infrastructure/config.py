"""Configuration objects for the infrastructure layer."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .in_memory_cache import CacheConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DatastoreConfig(BaseModel):
    """Strongly-typed configuration for building a datastore service."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
        validate_assignment=True,
    )

    # Storage settings
    storage_backend: Literal["memory", "sqlite"] = Field(
        default="memory",
        description="Which storage adapter backs the datastore",
    )
    sqlite_path: str = Field(
        default=":memory:",
        min_length=1,
        description="Database file used by the sqlite backend",
    )

    # Cache settings
    cache_enabled: bool = Field(
        default=True,
        description="Whether the entity cache is started",
    )
    cache_ttl_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Time-to-live of cached entities in seconds",
    )
    cache_max_entries: int = Field(
        default=1000,
        gt=0,
        description="Maximum number of cached entities",
    )

    log_level: LogLevel = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_cache_config(self) -> CacheConfig:
        """Build the cache configuration from these settings."""
        return CacheConfig(
            ttl_seconds=self.cache_ttl_seconds,
            max_entries=self.cache_max_entries,
            enabled=self.cache_enabled,
        )

    @property
    def logging_level(self) -> int:
        """Numeric level for the standard logging module."""
        return logging.getLevelNamesMapping()[self.log_level]
