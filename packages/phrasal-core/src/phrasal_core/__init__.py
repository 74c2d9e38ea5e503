"""phrasal-core: Segmentation and translation pipeline for phrasal."""

from phrasal_core.pipeline import (
    PhrasePipeline,
    PipelineState,
    render_results,
    run,
)
from phrasal_core.ports import (
    DecodeError,
    GenerationClientProtocol,
    GenerationError,
    GenerationErrorCode,
    GenerationErrorInfo,
    InputError,
    TransportError,
    UpstreamStatusError,
)
from phrasal_core.segmentation import parse_segments, segment
from phrasal_core.settings import resolve_run_settings, resolve_setting
from phrasal_core.translation import translate
from phrasal_core.version import VERSION

__version__ = VERSION

__all__ = [
    "VERSION",
    "DecodeError",
    "GenerationClientProtocol",
    "GenerationError",
    "GenerationErrorCode",
    "GenerationErrorInfo",
    "InputError",
    "PhrasePipeline",
    "PipelineState",
    "TransportError",
    "UpstreamStatusError",
    "parse_segments",
    "render_results",
    "resolve_run_settings",
    "resolve_setting",
    "run",
    "segment",
    "translate",
]
