"""Tests for subseg.core.normalize."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from subseg.core.normalize import (
    convert_whisper_response,
    load_segments,
    load_stt_result,
    merge_stt_results,
    segment_from_dict,
    stt_result_from_dict,
)
from subseg.core.splitter import split_subtitles
from subseg.data_models import STTResult, WordTimestamp
from subseg.exceptions import InputFormatError


class TestConvertWhisperResponse:
    def test_word_timestamps_used(self) -> None:
        result = convert_whisper_response({
            "text": "안녕 하세요",
            "duration": 1.2,
            "language": "korean",
            "words": [
                {"word": " 안녕", "start": 0.0, "end": 0.5},
                {"word": " ", "start": 0.5, "end": 0.6},
                {"word": "하세요", "start": 0.6, "end": 1.2},
            ],
        })
        assert [w.word for w in result.words] == ["안녕", "하세요"]
        assert all(w.confidence == 1.0 for w in result.words)
        assert result.full_text == "안녕 하세요"
        assert result.duration == 1.2
        assert result.language == "korean"

    def test_time_offset_applied(self) -> None:
        result = convert_whisper_response(
            {"text": "a", "words": [{"word": "a", "start": 1.0, "end": 2.0}]},
            time_offset=30.0,
        )
        assert result.words[0].start_time == 31.0
        assert result.words[0].end_time == 32.0

    def test_segments_spread_over_words(self) -> None:
        result = convert_whisper_response({
            "text": "one two three four",
            "duration": 6.0,
            "segments": [
                {"start": 0.0, "end": 2.0, "text": " one two", "no_speech_prob": 0.2},
                {"start": 3.0, "end": 6.0, "text": " three four"},
            ],
        })
        assert [(w.word, w.start_time, w.end_time) for w in result.words] == [
            ("one", 0.0, 1.0),
            ("two", 1.0, 2.0),
            ("three", 3.0, 4.5),
            ("four", 4.5, 6.0),
        ]
        assert result.words[0].confidence == pytest.approx(0.8)
        assert result.words[2].confidence == 1.0

    def test_full_text_spread_as_last_resort(self) -> None:
        result = convert_whisper_response({"text": "a b c d", "duration": 4.0})
        assert [(w.start_time, w.end_time) for w in result.words] == [
            (0.0, 1.0),
            (1.0, 2.0),
            (2.0, 3.0),
            (3.0, 4.0),
        ]

    def test_empty_response(self) -> None:
        result = convert_whisper_response({})
        assert result.words == []
        assert result.full_text == ""
        assert result.duration == 0.0


class TestMergeSttResults:
    def test_empty(self) -> None:
        merged = merge_stt_results([])
        assert merged.words == []
        assert merged.duration == 0.0

    def test_single_returned_as_is(self) -> None:
        result = STTResult(full_text="a", words=[], duration=1.0)
        assert merge_stt_results([result]) is result

    def test_concatenates(self) -> None:
        first = STTResult(
            full_text="hello",
            words=[WordTimestamp(word="hello", start_time=0.0, end_time=1.0)],
            duration=30.0,
            language="ko",
        )
        second = STTResult(
            full_text="world",
            words=[WordTimestamp(word="world", start_time=30.5, end_time=31.0)],
            duration=10.0,
            language="en",
        )
        merged = merge_stt_results([first, second])
        assert merged.full_text == "hello world"
        assert [w.word for w in merged.words] == ["hello", "world"]
        assert merged.duration == 40.0
        assert merged.language == "ko"


class TestSttResultFromDict:
    def test_camel_case_keys(self) -> None:
        result = stt_result_from_dict({
            "fullText": "hi",
            "words": [{"word": "hi", "startTime": 0.1, "endTime": 0.4, "confidence": 0.7}],
            "duration": 1.0,
            "language": "ko",
        })
        assert result.full_text == "hi"
        assert result.words[0] == WordTimestamp(
            word="hi", start_time=0.1, end_time=0.4, confidence=0.7,
        )
        assert result.language == "ko"

    def test_snake_case_and_probability(self) -> None:
        result = stt_result_from_dict({
            "full_text": "hi",
            "words": [{"text": "hi", "start_time": 0.0, "end_time": 0.5, "probability": 0.5}],
        })
        assert result.words[0].confidence == 0.5

    def test_duration_defaults_to_last_word_end(self) -> None:
        result = stt_result_from_dict({
            "fullText": "a b",
            "words": [
                {"word": "a", "start": 0.0, "end": 0.5},
                {"word": "b", "start": 0.5, "end": 1.7},
            ],
        })
        assert result.duration == 1.7

    def test_blank_words_skipped(self) -> None:
        result = stt_result_from_dict({
            "fullText": "a b",
            "words": [
                {"word": "a", "start": 0.0, "end": 0.5},
                {"word": "  ", "start": 0.5, "end": 0.6},
                {"word": "", "start": 0.6, "end": 0.7},
                {"word": "b", "start": 0.7, "end": 1.2},
            ],
        })
        assert [w.word for w in result.words] == ["a", "b"]
        segments = split_subtitles(result)
        assert [s.text for s in segments] == ["a b"]


class TestSegmentFromDict:
    def test_blank_words_skipped(self) -> None:
        seg = segment_from_dict({
            "id": "seg_1",
            "start": 0.0,
            "end": 1.0,
            "text": "hi",
            "words": [
                {"word": " ", "start": 0.0, "end": 0.1},
                {"word": "hi", "start": 0.1, "end": 1.0},
            ],
        })
        assert [w.word for w in seg.words] == ["hi"]

    def test_exported_shape(self) -> None:
        seg = segment_from_dict({
            "id": "seg_1",
            "start": 0.0,
            "end": 2.0,
            "duration": 2.0,
            "text": " hello ",
            "words": [{"word": "hello", "start": 0.0, "end": 2.0}],
        })
        assert seg.id == "seg_1"
        assert seg.text == "hello"
        assert seg.end_time == 2.0
        assert len(seg.words) == 1

    def test_missing_id_raises(self) -> None:
        with pytest.raises(KeyError):
            segment_from_dict({"start": 0.0, "end": 1.0, "text": "x"})


class TestLoadSttResult:
    def _write(self, path: Path, data: object) -> Path:
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    def test_normalized_file(self, tmp_path: Path) -> None:
        path = self._write(tmp_path / "stt.json", {
            "fullText": "안녕",
            "words": [{"word": "안녕", "startTime": 0.0, "endTime": 0.5}],
            "duration": 0.5,
        })
        assert load_stt_result(path).words[0].word == "안녕"

    def test_whisper_file(self, tmp_path: Path) -> None:
        path = self._write(tmp_path / "whisper.json", {"text": "a b", "duration": 2.0})
        assert len(load_stt_result(path).words) == 2

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InputFormatError, match="Invalid JSON"):
            load_stt_result(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = self._write(tmp_path / "list.json", [1, 2])
        with pytest.raises(InputFormatError):
            load_stt_result(path)

    def test_unknown_shape(self, tmp_path: Path) -> None:
        path = self._write(tmp_path / "other.json", {"foo": 1})
        with pytest.raises(InputFormatError, match="neither"):
            load_stt_result(path)

    def test_invalid_word_times(self, tmp_path: Path) -> None:
        path = self._write(tmp_path / "stt.json", {
            "fullText": "x",
            "words": [{"word": "x", "start": 2.0, "end": 1.0}],
        })
        with pytest.raises(InputFormatError, match="Malformed"):
            load_stt_result(path)


class TestLoadSegments:
    def test_export_document(self, tmp_path: Path) -> None:
        path = tmp_path / "a.segments.json"
        path.write_text(json.dumps({
            "metadata": {},
            "segments": [{"id": "s1", "start": 0.0, "end": 1.0, "text": "a"}],
        }), encoding="utf-8")
        segments = load_segments(path)
        assert [s.id for s in segments] == ["s1"]

    def test_bare_list(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps([
            {"id": "s1", "startTime": 0.0, "endTime": 1.0, "text": "a"},
            {"id": "s2", "startTime": 1.0, "endTime": 2.0, "text": "b"},
        ]), encoding="utf-8")
        assert len(load_segments(path)) == 2

    def test_no_segments(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(InputFormatError):
            load_segments(path)

    def test_missing_id(self, tmp_path: Path) -> None:
        path = tmp_path / "noid.json"
        path.write_text(json.dumps([{"start": 0.0, "end": 1.0}]), encoding="utf-8")
        with pytest.raises(InputFormatError, match="Malformed"):
            load_segments(path)
