"""Base schema configuration for phrasal Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with strict validation defaults.

    Note: extra="ignore" lets the generation server add envelope fields
    (model, created_at, done, token counts) without failing validation.
    Strings are kept verbatim; model output is never whitespace-stripped.
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
        validate_default=True,
        use_enum_values=True,
        strict=True,
    )
