"""Plain-text summary of segments."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import IO

from subseg.data_models import SegmentationResult, SubtitleSegment

_PREVIEW_CHARS = 30


def format_time(seconds: float) -> str:
    """Format seconds as M:SS.s."""
    mins = math.floor(seconds / 60)
    secs = f"{seconds % 60:.1f}".rjust(4, "0")
    return f"{mins}:{secs}"


def summarize_segments(segments: Sequence[SubtitleSegment]) -> str:
    """One line per segment: index, time range, duration and a text preview."""
    lines = []
    for idx, seg in enumerate(segments, start=1):
        preview = seg.text
        if len(preview) > _PREVIEW_CHARS:
            preview = preview[:_PREVIEW_CHARS] + "..."
        lines.append(
            f"[{idx}] {format_time(seg.start_time)} → {format_time(seg.end_time)} "
            f'({seg.duration:.1f}s): "{preview}"'
        )
    return "\n".join(lines)


def export_txt(result: SegmentationResult, output: IO[str]) -> None:
    """Write the segment summary to the given output stream."""
    output.write(summarize_segments(result.segments) + "\n")
