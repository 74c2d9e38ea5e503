"""Segment-then-translate pipeline."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import TypeAlias

from phrasal_core.ports.generation import (
    GenerationClientProtocol,
    GenerationError,
    GenerationStage,
)
from phrasal_core.segmentation import segment
from phrasal_core.translation import translate
from phrasal_schemas.results import RESULT_LIST_ADAPTER, ResultItem

_log = logging.getLogger(__name__)

ProgressCallback: TypeAlias = Callable[[int, int], None]


class PipelineState(StrEnum):
    """Lifecycle states of a single pipeline run."""

    IDLE = "idle"
    SEGMENTING = "segmenting"
    TRANSLATING = "translating"
    DONE = "done"
    FAILED = "failed"


class PhrasePipeline:
    """Segment a text, then translate each segment in order.

    Calls are strictly sequential; the first failure ends the run and no
    partial result is returned.
    """

    def __init__(
        self,
        client: GenerationClientProtocol,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            client: Generation client shared by both stages.
            progress_callback: Optional callback invoked after each translated
                segment with (completed, total).
        """
        self.client = client
        self.progress_callback = progress_callback
        self.state = PipelineState.IDLE
        self.completed = 0

    def run(
        self, source_text: str, endpoint: str, target_locale: str
    ) -> list[ResultItem]:
        """Run segmentation and per-segment translation.

        Args:
            source_text: Text to segment and translate.
            endpoint: Generation endpoint URL.
            target_locale: Target locale for translations.

        Returns:
            list[ResultItem]: One item per segment, in segmentation order.

        Raises:
            GenerationError: On the first failure of any call.
        """
        self.completed = 0
        self.state = PipelineState.SEGMENTING
        try:
            segments = segment(self.client, endpoint, source_text)
        except GenerationError as exc:
            self.state = PipelineState.FAILED
            exc.record_stage(GenerationStage.SEGMENTATION)
            raise

        self.state = PipelineState.TRANSLATING
        results: list[ResultItem] = []
        for index, source in enumerate(segments):
            try:
                translation = translate(self.client, endpoint, source, target_locale)
            except GenerationError as exc:
                self.state = PipelineState.FAILED
                _log.debug("Translation aborted at segment %d", index + 1)
                exc.record_stage(GenerationStage.TRANSLATION, segment_index=index)
                raise
            results.append(ResultItem(source=source, translation=translation))
            self.completed = index + 1
            if self.progress_callback is not None:
                self.progress_callback(self.completed, len(segments))

        self.state = PipelineState.DONE
        return results


def run(
    source_text: str,
    endpoint: str,
    target_locale: str,
    *,
    client: GenerationClientProtocol,
) -> list[ResultItem]:
    """Run the pipeline once with *client*.

    Returns:
        list[ResultItem]: One item per segment, in segmentation order.
    """
    return PhrasePipeline(client).run(source_text, endpoint, target_locale)


def render_results(results: list[ResultItem]) -> str:
    """Serialize results as 4-space indented JSON.

    Keys appear as source, then translation. Non-ASCII text is kept as UTF-8.

    Args:
        results: Pipeline results.

    Returns:
        str: JSON document.
    """
    return RESULT_LIST_ADAPTER.dump_json(results, indent=4).decode("utf-8")
