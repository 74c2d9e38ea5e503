"""Protocol definitions and errors for text generation clients."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import Field

from phrasal_schemas.base import BaseSchema


class GenerationErrorCode(StrEnum):
    """Categorized error codes for run failures."""

    INPUT_ERROR = "input_error"
    TRANSPORT_ERROR = "transport_error"
    UPSTREAM_STATUS = "upstream_status"
    DECODE_ERROR = "decode_error"


class GenerationStage(StrEnum):
    """Pipeline stage that issued a failing call."""

    SEGMENTATION = "segmentation"
    TRANSLATION = "translation"


class GenerationErrorDetails(BaseSchema):
    """Detailed generation error context."""

    endpoint: str | None = Field(None, description="Endpoint URL that was called")
    status_code: int | None = Field(None, description="HTTP status code if applicable")
    stage: GenerationStage | None = Field(
        None, description="Pipeline stage that failed"
    )
    segment_index: int | None = Field(
        None, ge=0, description="Zero-based segment index for translation failures"
    )
    field: str | None = Field(None, description="Input field associated with the error")
    provided: str | None = Field(None, description="Provided value if available")


class GenerationErrorInfo(BaseSchema):
    """Structured generation error data."""

    code: GenerationErrorCode = Field(..., description="Generation error code")
    message: str = Field(..., min_length=1, description="Error message")
    details: GenerationErrorDetails | None = Field(None, description="Error details")

    def describe(self) -> str:
        """Render the error as a single human-readable line.

        Returns:
            str: Message prefixed with the failing stage when known.
        """
        details = self.details
        if details is None or details.stage is None:
            return self.message
        if details.segment_index is not None:
            return (
                f"{details.stage} of segment {details.segment_index + 1} failed: "
                f"{self.message}"
            )
        return f"{details.stage} failed: {self.message}"


class GenerationError(Exception):
    """Generation error with structured details."""

    def __init__(self, info: GenerationErrorInfo) -> None:
        """Initialize the generation error.

        Args:
            info: Structured generation error information.
        """
        super().__init__(info.message)
        self.info = info

    @property
    def code(self) -> GenerationErrorCode:
        """Return the categorized error code."""
        return GenerationErrorCode(self.info.code)

    def record_stage(
        self, stage: GenerationStage, *, segment_index: int | None = None
    ) -> None:
        """Record the pipeline stage on the error details.

        Args:
            stage: Stage that issued the failing call.
            segment_index: Zero-based segment index for translation calls.
        """
        details = self.info.details or GenerationErrorDetails()
        details = details.model_copy(
            update={"stage": stage, "segment_index": segment_index}
        )
        self.info = self.info.model_copy(update={"details": details})


class InputError(GenerationError):
    """Raised when resolved run inputs are unusable."""


class TransportError(GenerationError):
    """Raised when the generation endpoint cannot be reached."""


class UpstreamStatusError(GenerationError):
    """Raised when the generation endpoint answers with a non-200 status."""

    @property
    def status_code(self) -> int | None:
        """Return the HTTP status code reported by the endpoint."""
        if self.info.details is None:
            return None
        return self.info.details.status_code


class DecodeError(GenerationError):
    """Raised when a response body or model output cannot be decoded."""


@runtime_checkable
class GenerationClientProtocol(Protocol):
    """Protocol for text generation clients."""

    def generate(self, endpoint: str, model: str, prompt: str) -> str:
        """Run one generation request and return the generated text.

        Raises:
            TransportError: When the endpoint cannot be reached.
            UpstreamStatusError: When the endpoint returns a non-200 status.
            DecodeError: When the response body is not a generation envelope.
        """
        raise NotImplementedError
