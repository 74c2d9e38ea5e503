"""Wire payloads for the text generation endpoint."""

from __future__ import annotations

from pydantic import Field

from phrasal_schemas.base import BaseSchema

DEFAULT_MODEL_ID = "llama3"


class GenerationRequest(BaseSchema):
    """Request body for a single non-streaming generation call."""

    model: str = Field(..., min_length=1, description="Model identifier")
    prompt: str = Field(..., description="Prompt text")
    stream: bool = Field(False, description="Streaming flag, always false")


class GenerationResponse(BaseSchema):
    """Response envelope returned by the generation endpoint."""

    response: str = Field(..., description="Raw generated text")
