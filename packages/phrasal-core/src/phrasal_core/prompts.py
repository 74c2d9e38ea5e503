"""Prompt templates for segmentation and translation requests."""

from __future__ import annotations

SEGMENTATION_EXAMPLE_TEXT = (
    "Hey, kannst du mir den heutigen Mittagsmenü schicken? Ich bin gerade total "
    "eingebunden bei der Arbeit und schaffe es nicht reinzukommen."
)

SEGMENTATION_EXAMPLE_OUTPUT = """[
    "Hey",
    "kannst du mir",
    "den heutigen Mittagsmenü schicken?",
    "Ich bin gerade",
    "total eingebunden",
    "bei der Arbeit",
    "und",
    "schaffe es nicht reinzukommen."
]"""

SEGMENTATION_TEMPLATE = """\
Divide the text below into small sections, each representing a particular \
thought or idea. Use grammar as a basis and avoid creating a section with a \
single word. You can break a phrase into subject and predicate.

Example text:

{example_text}

Example output:

{example_output}

Actual text:

{text}

Actual output:

Provide only the JSON array as the output without any additional text or \
explanation."""

TRANSLATION_TEMPLATE = """\
Translate the following text to {language}:

{text}

Provide only the translation without any additional text or explanation."""


def build_segmentation_prompt(text: str) -> str:
    """Render the prompt asking the model to split text into sections.

    Args:
        text: Source text to segment.

    Returns:
        str: Prompt with the worked example and the actual text.
    """
    return SEGMENTATION_TEMPLATE.format(
        example_text=SEGMENTATION_EXAMPLE_TEXT,
        example_output=SEGMENTATION_EXAMPLE_OUTPUT,
        text=text,
    )


def build_translation_prompt(text: str, language: str) -> str:
    """Render the prompt asking the model to translate one segment.

    Args:
        text: Segment to translate.
        language: Target locale (e.g. en-US).

    Returns:
        str: Translation prompt.
    """
    return TRANSLATION_TEMPLATE.format(language=language, text=text)
