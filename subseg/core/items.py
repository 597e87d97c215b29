"""Wrap segments as editor items."""

from __future__ import annotations

from collections.abc import Sequence

from subseg.data_models import SubtitleItem, SubtitleSegment, SubtitleType


def to_subtitle_items(
    segments: Sequence[SubtitleSegment],
    default_type: SubtitleType = SubtitleType.SITUATION,
) -> list[SubtitleItem]:
    """Give every segment ``default_type`` and zero confidence until classified."""
    return [
        SubtitleItem(
            id=seg.id,
            start_time=seg.start_time,
            end_time=seg.end_time,
            text=seg.text,
            type=default_type,
            confidence=0.0,
        )
        for seg in segments
    ]
