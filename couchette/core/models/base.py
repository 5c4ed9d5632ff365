"""
Base Pydantic models for couchette.

Provides common configuration and base classes for all couchette models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CouchetteBaseModel(BaseModel):
    """Base model for all couchette Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
        - use_enum_values: Serialize enums as values
        - revalidate_instances: Trust model instances (performance)
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ImmutableModel(CouchetteBaseModel):
    """Immutable base model for values that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ResponseModel(CouchetteBaseModel):
    """Immutable snapshot decoded from a server JSON response.

    Lenient: JSON types are coerced and fields the server adds in newer
    releases are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=False,
        extra="ignore",
        populate_by_name=True,
        revalidate_instances="never",
    )
