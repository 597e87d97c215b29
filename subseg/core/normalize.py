"""Normalize transcription payloads into STTResult and segment lists."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from subseg.data_models import STTResult, SubtitleSegment, WordTimestamp
from subseg.exceptions import InputFormatError

logger = logging.getLogger(__name__)


def _first(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _spread_words(
    text: str, start: float, duration: float, confidence: float | None,
) -> list[WordTimestamp]:
    """Spread the words of ``text`` evenly across ``duration`` seconds."""
    tokens = text.split()
    if not tokens or duration < 0:
        return []
    per_word = duration / len(tokens)
    return [
        WordTimestamp(
            word=token,
            start_time=start + i * per_word,
            end_time=start + (i + 1) * per_word,
            confidence=confidence,
        )
        for i, token in enumerate(tokens)
    ]


def convert_whisper_response(
    response: Mapping[str, Any], time_offset: float = 0.0,
) -> STTResult:
    """Convert a Whisper verbose-JSON payload into an STTResult.

    Word timestamps are used when present. Otherwise segment timestamps are
    spread over each segment's words, and as a last resort the full text is
    spread over the whole duration.
    """
    text = response.get("text") or ""
    duration = float(response.get("duration") or 0.0)
    raw_words = response.get("words") or []
    raw_segments = response.get("segments") or []

    words: list[WordTimestamp] = []
    if raw_words:
        for raw in raw_words:
            token = str(raw["word"]).strip()
            if not token:
                continue
            words.append(
                WordTimestamp(
                    word=token,
                    start_time=float(raw["start"]) + time_offset,
                    end_time=float(raw["end"]) + time_offset,
                    confidence=1.0,
                )
            )
    elif raw_segments:
        for seg in raw_segments:
            start = float(seg["start"])
            no_speech = float(seg.get("no_speech_prob") or 0.0)
            words.extend(
                _spread_words(
                    str(seg.get("text") or ""),
                    start + time_offset,
                    float(seg["end"]) - start,
                    min(max(1.0 - no_speech, 0.0), 1.0),
                )
            )
    else:
        words = _spread_words(text, time_offset, duration, 1.0)

    return STTResult(
        full_text=text,
        words=words,
        duration=duration,
        language=response.get("language"),
    )


def merge_stt_results(results: Sequence[STTResult]) -> STTResult:
    """Concatenate results of consecutive audio chunks."""
    if not results:
        return STTResult(full_text="", words=[], duration=0.0)
    if len(results) == 1:
        return results[0]
    return STTResult(
        full_text=" ".join(r.full_text for r in results),
        words=[w for r in results for w in r.words],
        duration=sum(r.duration for r in results),
        language=results[0].language,
    )


def _word_from_dict(raw: Mapping[str, Any]) -> WordTimestamp:
    confidence = _first(raw, "confidence", "probability")
    return WordTimestamp(
        word=str(_first(raw, "word", "text", default="")).strip(),
        start_time=float(_first(raw, "startTime", "start_time", "start")),
        end_time=float(_first(raw, "endTime", "end_time", "end")),
        confidence=float(confidence) if confidence is not None else None,
    )


def _words_from_list(raw_words: Sequence[Mapping[str, Any]] | None) -> list[WordTimestamp]:
    words = [_word_from_dict(raw) for raw in raw_words or []]
    # blank tokens would leave double spaces in segment text
    return [w for w in words if w.word]


def stt_result_from_dict(data: Mapping[str, Any]) -> STTResult:
    """Parse the normalized STT shape (``fullText``/``full_text`` + ``words``)."""
    words = _words_from_list(data.get("words"))
    duration = _first(data, "duration")
    if duration is None:
        duration = words[-1].end_time if words else 0.0
    return STTResult(
        full_text=str(_first(data, "fullText", "full_text", default="")),
        words=words,
        duration=float(duration),
        language=data.get("language"),
    )


def segment_from_dict(data: Mapping[str, Any]) -> SubtitleSegment:
    return SubtitleSegment(
        id=str(data["id"]),
        text=str(data.get("text") or "").strip(),
        start_time=float(_first(data, "startTime", "start_time", "start")),
        end_time=float(_first(data, "endTime", "end_time", "end")),
        words=_words_from_list(data.get("words")),
    )


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputFormatError(f"Invalid JSON in {path}: {e}") from e


def load_stt_result(path: Path) -> STTResult:
    """Load a normalized STT file or a Whisper verbose-JSON response."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise InputFormatError(f"Expected a JSON object in {path}")
    try:
        if "fullText" in data or "full_text" in data:
            result = stt_result_from_dict(data)
        elif "text" in data:
            result = convert_whisper_response(data)
        else:
            raise InputFormatError(
                f"{path} is neither an STT result nor a Whisper response"
            )
    except (KeyError, TypeError, ValueError) as e:
        raise InputFormatError(f"Malformed transcript in {path}: {e}") from e
    logger.debug("Loaded %d words from %s", len(result.words), path)
    return result


def load_segments(path: Path) -> list[SubtitleSegment]:
    """Load segments from a JSON export or a bare list of segments."""
    data = _read_json(path)
    raw_segments = data.get("segments") if isinstance(data, dict) else data
    if not isinstance(raw_segments, list):
        raise InputFormatError(f"No segment list found in {path}")
    try:
        return [segment_from_dict(raw) for raw in raw_segments]
    except (KeyError, TypeError, ValueError) as e:
        raise InputFormatError(f"Malformed segment in {path}: {e}") from e
