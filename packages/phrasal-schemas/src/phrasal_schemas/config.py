"""Resolved run settings."""

from __future__ import annotations

from pydantic import Field

from phrasal_schemas.base import BaseSchema

DEFAULT_LLM_HOST = "http://localhost:11434/api/generate"
DEFAULT_TRANSLATION_LANGUAGE = "en-US"


class RunSettings(BaseSchema):
    """Inputs of a single segmentation and translation run."""

    llm_host: str = Field(
        ..., min_length=1, description="Generation endpoint URL"
    )
    translation_language: str = Field(
        ..., min_length=1, description="Target locale (e.g. en-US)"
    )
