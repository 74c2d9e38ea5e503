"""Translation stage: translate one segment into the target locale."""

from __future__ import annotations

import logging

from phrasal_core.ports.generation import GenerationClientProtocol
from phrasal_core.prompts import build_translation_prompt
from phrasal_schemas.generation import DEFAULT_MODEL_ID
from phrasal_schemas.results import Segment

_log = logging.getLogger(__name__)


def translate(
    client: GenerationClientProtocol,
    endpoint: str,
    segment: Segment,
    target_locale: str,
) -> str:
    """Translate *segment* into *target_locale*.

    The generated text is returned verbatim.

    Args:
        client: Generation client used for the request.
        endpoint: Generation endpoint URL.
        segment: Segment to translate.
        target_locale: Target locale (e.g. en-US).

    Returns:
        str: Translation text.
    """
    prompt = build_translation_prompt(segment, target_locale)
    translation = client.generate(endpoint, DEFAULT_MODEL_ID, prompt)
    _log.debug("Translated segment of %d chars into %s", len(segment), target_locale)
    return translation
