"""JSON exporter for segmentation results."""

from __future__ import annotations

import json
from typing import IO, Any

from subseg.data_models import SegmentationResult, SubtitleSegment, WordTimestamp


def _word_to_dict(word: WordTimestamp) -> dict[str, Any]:
    data: dict[str, Any] = {
        "word": word.word,
        "start": word.start_time,
        "end": word.end_time,
    }
    if word.confidence is not None:
        data["confidence"] = word.confidence
    return data


def segment_to_dict(seg: SubtitleSegment, include_words: bool = True) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": seg.id,
        "start": seg.start_time,
        "end": seg.end_time,
        "duration": seg.duration,
        "text": seg.text,
    }
    if include_words:
        data["words"] = [_word_to_dict(w) for w in seg.words]
    return data


def export_json(
    result: SegmentationResult, output: IO[str], include_words: bool = True,
) -> None:
    """Write segmentation result as JSON to the given output stream."""
    meta = result.metadata
    data = {
        "metadata": {
            "format_version": meta.format_version,
            "source_file": meta.source_file,
            "duration_seconds": meta.duration_seconds,
            "mode": meta.mode,
            "language": meta.language,
            "num_segments": len(result.segments),
            "processing_time_seconds": meta.processing_time_seconds,
            "created_at": meta.created_at.isoformat(),
        },
        "segments": [segment_to_dict(s, include_words) for s in result.segments],
        "full_text": result.full_text,
    }
    json.dump(data, output, indent=2, ensure_ascii=False)
