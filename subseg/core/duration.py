"""Segmentation and retiming from text and a total duration.

Used when a transcription source returns text without word timestamps,
and after manual edits invalidate existing timings. Time is allocated in
proportion to non-whitespace character counts, so every timestamp produced
here is an estimate rather than a measurement.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import replace

from subseg.core.ids import IdFactory, generate_id
from subseg.core.merger import merge_short_segments
from subseg.core.options import DEFAULT_OPTIONS, SplitterOptions
from subseg.data_models import SubtitleSegment, count_chars

logger = logging.getLogger(__name__)

# Split after sentence-final punctuation, keeping runs like "?!" or "..." whole.
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.?!。？！])(?![.?!。？！])\s*")
_WORD_CHAR_RE = re.compile(r"\w")


def split_into_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def _split_on_natural_breaks(sentence: str, pattern: re.Pattern[str]) -> list[str]:
    """Split ``sentence`` at ``pattern`` without losing any text.

    A punctuation separator stays at the end of the left part; a word
    separator (a conjunction) moves to the start of the right part.
    """
    raw_parts: list[str] = []
    prefix = ""
    last = 0
    for match in pattern.finditer(sentence):
        if match.end() == match.start():
            continue
        separator = match.group(0).strip()
        left = sentence[last:match.start()]
        if _WORD_CHAR_RE.search(separator):
            raw_parts.append(prefix + left)
            prefix = separator + " "
        else:
            raw_parts.append(prefix + left + separator)
            prefix = ""
        last = match.end()
    raw_parts.append(prefix + sentence[last:])

    parts: list[str] = []
    for part in (p.strip() for p in raw_parts):
        if not part:
            continue
        if parts and not _WORD_CHAR_RE.search(part):
            parts[-1] = f"{parts[-1]}{part}"
        else:
            parts.append(part)
    return parts


def split_by_word_count(
    words: Sequence[str],
    start_time: float,
    total_duration: float,
    options: SplitterOptions,
    id_factory: IdFactory = generate_id,
) -> list[SubtitleSegment]:
    """Chunk ``words`` into runs that each last about ``target_duration``."""
    if not words:
        return []

    per_word = total_duration / len(words)
    if per_word > 0:
        per_segment = max(1, math.ceil(options.target_duration / per_word))
    else:
        per_segment = len(words)

    segments: list[SubtitleSegment] = []
    current_time = start_time
    for i in range(0, len(words), per_segment):
        chunk = words[i : i + per_segment]
        chunk_duration = len(chunk) * per_word
        segments.append(
            SubtitleSegment(
                id=id_factory(),
                text=" ".join(chunk).strip(),
                start_time=current_time,
                end_time=current_time + chunk_duration,
            )
        )
        current_time += chunk_duration
    return segments


def split_long_sentence(
    sentence: str,
    start_time: float,
    total_duration: float,
    options: SplitterOptions,
    id_factory: IdFactory = generate_id,
) -> list[SubtitleSegment]:
    """Break a sentence longer than ``max_duration`` into shorter segments."""
    parts = _split_on_natural_breaks(sentence, options.natural_break_pattern)
    if len(parts) <= 1:
        return split_by_word_count(
            sentence.split(), start_time, total_duration, options, id_factory,
        )

    total_chars = sum(count_chars(p) for p in parts)
    segments: list[SubtitleSegment] = []
    current_time = start_time
    for part in parts:
        part_duration = count_chars(part) / total_chars * total_duration
        if part_duration > options.max_duration:
            segments.extend(
                split_by_word_count(
                    part.split(), current_time, part_duration, options, id_factory,
                )
            )
        else:
            segments.append(
                SubtitleSegment(
                    id=id_factory(),
                    text=part,
                    start_time=current_time,
                    end_time=current_time + part_duration,
                )
            )
        current_time += part_duration
    return segments


def split_text_by_duration(
    text: str,
    total_duration: float,
    options: SplitterOptions | None = None,
    *,
    id_factory: IdFactory | None = None,
    converge: bool = False,
) -> list[SubtitleSegment]:
    """Segment plain ``text`` spread over ``total_duration`` seconds."""
    opts = options or DEFAULT_OPTIONS
    make_id = id_factory or generate_id

    sentences = split_into_sentences(text)
    if not sentences:
        return []

    total_chars = count_chars(text)
    if total_chars == 0 or total_duration <= 0:
        logger.debug(
            "Nothing to time: %d characters over %.2fs", total_chars, total_duration,
        )
        return []
    chars_per_second = total_chars / total_duration

    segments: list[SubtitleSegment] = []
    current_time = 0.0
    for sentence in sentences:
        estimated = count_chars(sentence) / chars_per_second
        if estimated > opts.max_duration:
            segments.extend(
                split_long_sentence(sentence, current_time, estimated, opts, make_id)
            )
        else:
            segments.append(
                SubtitleSegment(
                    id=make_id(),
                    text=sentence,
                    start_time=current_time,
                    end_time=current_time + estimated,
                )
            )
        current_time += estimated

    return merge_short_segments(segments, opts, id_factory=make_id, converge=converge)


def recalculate_timings(
    segments: Sequence[SubtitleSegment], total_duration: float,
) -> list[SubtitleSegment]:
    """Re-time ``segments`` back to back so they fill ``total_duration`` exactly.

    Segments without any characters share the time evenly when the whole
    list is blank. Word timestamps no longer match the new timing and are
    dropped. A negative duration leaves the input untouched.
    """
    if not segments:
        return []
    if total_duration < 0:
        logger.warning(
            "Cannot retime segments to a negative duration (%.2fs)", total_duration,
        )
        return list(segments)

    total_chars = sum(seg.char_count for seg in segments)
    last = len(segments) - 1

    result: list[SubtitleSegment] = []
    current_time = 0.0
    for i, seg in enumerate(segments):
        if total_chars == 0:
            share = 1 / len(segments)
        else:
            share = seg.char_count / total_chars
        end_time = total_duration if i == last else current_time + share * total_duration
        result.append(
            replace(seg, start_time=current_time, end_time=end_time, words=[])
        )
        current_time = end_time
    return result
