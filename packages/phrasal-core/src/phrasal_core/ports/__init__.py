"""Ports for phrasal-core."""

from phrasal_core.ports.generation import (
    DecodeError,
    GenerationClientProtocol,
    GenerationError,
    GenerationErrorCode,
    GenerationErrorDetails,
    GenerationErrorInfo,
    GenerationStage,
    InputError,
    TransportError,
    UpstreamStatusError,
)

__all__ = [
    "DecodeError",
    "GenerationClientProtocol",
    "GenerationError",
    "GenerationErrorCode",
    "GenerationErrorDetails",
    "GenerationErrorInfo",
    "GenerationStage",
    "InputError",
    "TransportError",
    "UpstreamStatusError",
]
