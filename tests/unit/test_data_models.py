"""Tests for data model dataclasses."""

from datetime import UTC, datetime

import pytest

from subseg.data_models import (
    SegmentationMetadata,
    SegmentationResult,
    STTResult,
    SubtitleItem,
    SubtitleSegment,
    SubtitleType,
    WordTimestamp,
    count_chars,
)


class TestWordTimestamp:
    def test_create_required_fields(self) -> None:
        word = WordTimestamp(word="안녕", start_time=0.0, end_time=0.4)
        assert word.word == "안녕"
        assert word.start_time == 0.0
        assert word.end_time == 0.4
        assert word.confidence is None

    def test_start_equals_end_is_valid(self) -> None:
        word = WordTimestamp(word="a", start_time=1.0, end_time=1.0)
        assert word.end_time == 1.0

    def test_start_after_end_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            WordTimestamp(word="a", start_time=2.0, end_time=1.0)

    def test_confidence_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError):
            WordTimestamp(word="a", start_time=0.0, end_time=1.0, confidence=1.2)

    def test_frozen(self) -> None:
        word = WordTimestamp(word="a", start_time=0.0, end_time=1.0)
        with pytest.raises(AttributeError):
            word.word = "b"  # type: ignore[misc]


class TestSubtitleSegment:
    def test_duration_property(self) -> None:
        seg = SubtitleSegment(id="s", text="hi", start_time=1.0, end_time=3.5)
        assert seg.duration == pytest.approx(2.5)

    def test_words_default_empty(self) -> None:
        seg = SubtitleSegment(id="s", text="hi", start_time=0.0, end_time=1.0)
        assert seg.words == []

    def test_char_count_ignores_whitespace(self) -> None:
        seg = SubtitleSegment(id="s", text="밥을 먹고 잤다", start_time=0.0, end_time=1.0)
        assert seg.char_count == 6


class TestCountChars:
    def test_mixed_whitespace(self) -> None:
        assert count_chars(" a\tb\nc ") == 3

    def test_empty(self) -> None:
        assert count_chars("") == 0


class TestSubtitleType:
    def test_values(self) -> None:
        assert [t.value for t in SubtitleType] == [
            "ENTERTAINMENT",
            "SITUATION",
            "EXPLANATION",
            "TRANSCRIPT",
        ]

    def test_labels(self) -> None:
        assert SubtitleType.ENTERTAINMENT.label == "예능"
        assert SubtitleType.TRANSCRIPT.label == "말자막"

    def test_is_str(self) -> None:
        assert SubtitleType.SITUATION == "SITUATION"


class TestSubtitleItem:
    def test_defaults(self) -> None:
        item = SubtitleItem(id="s", start_time=0.0, end_time=1.0, text="hi")
        assert item.type is SubtitleType.SITUATION
        assert item.confidence == 0.0


class TestSTTResult:
    def test_language_defaults_to_none(self) -> None:
        result = STTResult(full_text="", words=[], duration=0.0)
        assert result.language is None


class TestSegmentationMetadata:
    def test_defaults(self) -> None:
        meta = SegmentationMetadata(source_file="a.json", duration_seconds=10.0)
        assert meta.mode == "words"
        assert meta.format_version == "1.0"
        assert meta.language is None
        assert meta.processing_time_seconds == 0.0

    def test_created_at_is_utc(self) -> None:
        before = datetime.now(UTC)
        meta = SegmentationMetadata(source_file="a.json", duration_seconds=1.0)
        assert meta.created_at.tzinfo is not None
        assert meta.created_at >= before


class TestSegmentationResult:
    def test_full_text_joins_segments(self) -> None:
        result = SegmentationResult(
            metadata=SegmentationMetadata(source_file="a.json", duration_seconds=2.0),
            segments=[
                SubtitleSegment(id="1", text="hello", start_time=0.0, end_time=1.0),
                SubtitleSegment(id="2", text="world", start_time=1.0, end_time=2.0),
            ],
        )
        assert result.full_text == "hello world"

    def test_full_text_empty(self) -> None:
        result = SegmentationResult(
            metadata=SegmentationMetadata(source_file="a.json", duration_seconds=0.0),
            segments=[],
        )
        assert result.full_text == ""
