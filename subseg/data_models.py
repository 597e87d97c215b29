"""Data models for transcripts and caption segments."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

_WHITESPACE_RE = re.compile(r"\s")


def count_chars(text: str) -> int:
    """Count characters of ``text`` excluding whitespace."""
    return len(_WHITESPACE_RE.sub("", text))


@dataclass(frozen=True)
class WordTimestamp:
    word: str
    start_time: float
    end_time: float
    confidence: float | None = None

    def __post_init__(self) -> None:
        if self.start_time > self.end_time:
            raise ValueError(
                f"start_time ({self.start_time}) must not be greater than "
                f"end_time ({self.end_time})"
            )
        if self.confidence is not None and not 0.0 <= self.confidence <= 1.0:
            raise ValueError(
                f"confidence ({self.confidence}) must be within [0, 1]"
            )


@dataclass
class STTResult:
    full_text: str
    words: list[WordTimestamp]
    duration: float
    language: str | None = None


@dataclass
class SubtitleSegment:
    id: str
    text: str
    start_time: float
    end_time: float
    words: list[WordTimestamp] = field(default_factory=list)

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def char_count(self) -> int:
        return count_chars(self.text)


class SubtitleType(str, Enum):
    ENTERTAINMENT = "ENTERTAINMENT"
    SITUATION = "SITUATION"
    EXPLANATION = "EXPLANATION"
    TRANSCRIPT = "TRANSCRIPT"

    @property
    def label(self) -> str:
        return _SUBTITLE_TYPE_LABELS[self]


_SUBTITLE_TYPE_LABELS: dict[SubtitleType, str] = {
    SubtitleType.ENTERTAINMENT: "예능",
    SubtitleType.SITUATION: "상황",
    SubtitleType.EXPLANATION: "설명",
    SubtitleType.TRANSCRIPT: "말자막",
}


@dataclass
class SubtitleItem:
    """A segment wrapped for the editor, before any type is recommended."""

    id: str
    start_time: float
    end_time: float
    text: str
    type: SubtitleType = SubtitleType.SITUATION
    confidence: float = 0.0


@dataclass
class SegmentationMetadata:
    source_file: str
    duration_seconds: float
    mode: str = "words"
    language: str | None = None
    format_version: str = "1.0"
    processing_time_seconds: float = 0.0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class SegmentationResult:
    metadata: SegmentationMetadata
    segments: list[SubtitleSegment]

    @property
    def full_text(self) -> str:
        return " ".join(s.text for s in self.segments)
