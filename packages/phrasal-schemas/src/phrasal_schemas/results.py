"""Result schemas for segmented translation runs."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import Field, TypeAdapter

from phrasal_schemas.base import BaseSchema

Segment: TypeAlias = str


class ResultItem(BaseSchema):
    """A source segment paired with its translation."""

    source: Segment = Field(..., description="Segment of the original text")
    translation: str = Field(..., description="Translation of the segment")


SEGMENT_LIST_ADAPTER: TypeAdapter[list[Segment]] = TypeAdapter(list[Segment])
RESULT_LIST_ADAPTER: TypeAdapter[list[ResultItem]] = TypeAdapter(list[ResultItem])
