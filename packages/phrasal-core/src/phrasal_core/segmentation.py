"""Segmentation stage: split source text into coherent phrases."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from phrasal_core.ports.generation import (
    DecodeError,
    GenerationClientProtocol,
    GenerationErrorCode,
    GenerationErrorDetails,
    GenerationErrorInfo,
    GenerationStage,
)
from phrasal_core.prompts import build_segmentation_prompt
from phrasal_schemas.generation import DEFAULT_MODEL_ID
from phrasal_schemas.results import SEGMENT_LIST_ADAPTER, Segment

_log = logging.getLogger(__name__)


def parse_segments(output_text: str) -> list[Segment]:
    """Parse model output as a JSON array of strings.

    The output must be the bare array; surrounding prose or code fences
    are rejected.

    Args:
        output_text: Raw generated text.

    Returns:
        list[Segment]: Segments in generation order.

    Raises:
        DecodeError: If the text is not a JSON array of strings.
    """
    try:
        return SEGMENT_LIST_ADAPTER.validate_json(output_text)
    except ValidationError as exc:
        raise DecodeError(
            GenerationErrorInfo(
                code=GenerationErrorCode.DECODE_ERROR,
                message=(
                    "Model output is not a JSON array of strings: "
                    f"{_first_error(exc)}"
                ),
                details=GenerationErrorDetails(
                    stage=GenerationStage.SEGMENTATION,
                    provided=output_text[:200],
                ),
            )
        ) from exc


def segment(
    client: GenerationClientProtocol, endpoint: str, source_text: str
) -> list[Segment]:
    """Ask the model to segment *source_text* and decode the result.

    Args:
        client: Generation client used for the request.
        endpoint: Generation endpoint URL.
        source_text: Text to segment.

    Returns:
        list[Segment]: Segments in generation order.
    """
    prompt = build_segmentation_prompt(source_text)
    output_text = client.generate(endpoint, DEFAULT_MODEL_ID, prompt)
    segments = parse_segments(output_text)
    _log.debug("Segmentation produced %d segments", len(segments))
    return segments


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0]["msg"])
