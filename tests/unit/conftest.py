"""Shared fixtures for unit tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from subseg.data_models import (
    SegmentationMetadata,
    SegmentationResult,
    SubtitleSegment,
    WordTimestamp,
)


@pytest.fixture
def sample_result() -> SegmentationResult:
    segments = [
        SubtitleSegment(
            id="seg_1",
            text="안녕하세요 여러분",
            start_time=0.0,
            end_time=1.8,
            words=[
                WordTimestamp(word="안녕하세요", start_time=0.0, end_time=1.0, confidence=0.9),
                WordTimestamp(word="여러분", start_time=1.0, end_time=1.8),
            ],
        ),
        SubtitleSegment(
            id="seg_2",
            text="오늘은 날씨가 정말 좋네요",
            start_time=1.8,
            end_time=4.0,
        ),
    ]
    metadata = SegmentationMetadata(
        source_file="clips/interview.json",
        duration_seconds=4.0,
        mode="words",
        language="ko",
        processing_time_seconds=0.25,
        created_at=datetime(2026, 2, 9, 12, 0, 0),
    )
    return SegmentationResult(metadata=metadata, segments=segments)
