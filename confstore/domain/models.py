"""Domain models using Pydantic for validation."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

VALUE_TRUE: Final = "true"
VALUE_FALSE: Final = "false"

# Substituted for template tokens whose key cannot be resolved
VALUE_MISSING: Final = "DS Value Missing"


class DataEntity(BaseModel):
    """A stored key/value pair."""

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "key": "portal.site.name",
                "value": "My Portal",
            }
        },
    )

    key: str = Field(..., description="Unique key of the entry")
    value: str = Field(..., description="Stored value")


class ReferenceItem(BaseModel):
    """A (code, name) pair returned by prefix listings.

    Lists of items keep the storage enumeration order and can be turned
    into an associative list with :meth:`as_tuple`.
    """

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        frozen=True,
    )

    code: str
    name: str

    def as_tuple(self) -> tuple[str, str]:
        """Return the item as a ``(key, value)`` tuple."""
        return (self.code, self.name)

    @classmethod
    def from_entity(cls, entity: DataEntity) -> ReferenceItem:
        """Build a reference item from a stored entity."""
        return cls(code=entity.key, name=entity.value)
