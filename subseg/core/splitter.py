"""Word-stream segmentation into caption-length segments."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from subseg.core.boundaries import DEFAULT_RULES, BoundaryRules, get_boundary_rules
from subseg.core.ids import IdFactory, generate_id
from subseg.core.merger import merge_short_segments
from subseg.core.options import DEFAULT_OPTIONS, SplitterOptions
from subseg.data_models import STTResult, SubtitleSegment, WordTimestamp, count_chars

logger = logging.getLogger(__name__)


def should_split(
    *,
    elapsed: float,
    char_count: int,
    text: str,
    word: WordTimestamp,
    next_word: WordTimestamp | None,
    options: SplitterOptions,
    rules: BoundaryRules,
) -> bool:
    """Decide whether the buffered words close a segment after ``word``.

    Rules are checked in a fixed priority order and the first match wins:

    1. ``word`` is the last word of the stream.
    2. ``elapsed`` reached ``max_duration``.
    3. ``char_count`` reached ``max_characters``.
    4. ``word`` ends a sentence and ``elapsed`` reached ``min_duration``.
    5. ``text`` contains a natural break and ``elapsed`` reached
       ``target_duration``.
    6. The silence before ``next_word`` is at least ``silence_gap`` and
       ``elapsed`` reached ``min_duration``.
    7. ``elapsed`` reached ``target_duration`` and ``next_word`` opens a
       new clause.
    """
    if next_word is None:
        return True

    if elapsed >= options.max_duration:
        return True

    if char_count >= options.max_characters:
        return True

    is_sentence_end = (
        options.sentence_delimiters.search(word.word) is not None
        or rules.is_sentence_end(word.word)
    )
    if is_sentence_end and elapsed >= options.min_duration:
        return True

    is_natural_break = options.natural_break_pattern.search(text) is not None
    if is_natural_break and elapsed >= options.target_duration:
        return True

    gap = next_word.start_time - word.end_time
    if gap >= options.silence_gap and elapsed >= options.min_duration:
        return True

    if elapsed >= options.target_duration and rules.is_clause_start(next_word.word):
        return True

    return False


def create_segment(
    words: Sequence[WordTimestamp],
    start_time: float,
    id_factory: IdFactory = generate_id,
) -> SubtitleSegment:
    return SubtitleSegment(
        id=id_factory(),
        text=" ".join(w.word for w in words).strip(),
        start_time=start_time,
        end_time=words[-1].end_time,
        words=list(words),
    )


def segment_words(
    words: Sequence[WordTimestamp],
    options: SplitterOptions | None = None,
    *,
    rules: BoundaryRules | None = None,
    id_factory: IdFactory | None = None,
) -> list[SubtitleSegment]:
    """Scan ``words`` once and cut draft segments where ``should_split`` fires."""
    if not words:
        return []

    opts = options or DEFAULT_OPTIONS
    boundary_rules = rules or DEFAULT_RULES
    make_id = id_factory or generate_id

    segments: list[SubtitleSegment] = []
    current: list[WordTimestamp] = []
    current_start = words[0].start_time

    for i, word in enumerate(words):
        next_word = words[i + 1] if i + 1 < len(words) else None
        current.append(word)

        text = " ".join(w.word for w in current)
        if should_split(
            elapsed=word.end_time - current_start,
            char_count=count_chars(text),
            text=text,
            word=word,
            next_word=next_word,
            options=opts,
            rules=boundary_rules,
        ):
            segments.append(create_segment(current, current_start, make_id))
            current = []
            if next_word is not None:
                current_start = next_word.start_time

    if current:
        segments.append(create_segment(current, current_start, make_id))

    logger.debug("Split %d words into %d draft segments", len(words), len(segments))
    return segments


def split_subtitles(
    stt_result: STTResult,
    options: SplitterOptions | None = None,
    *,
    rules: BoundaryRules | None = None,
    id_factory: IdFactory | None = None,
    converge: bool = False,
) -> list[SubtitleSegment]:
    """Segment a transcription result and merge segments that are too short.

    Boundary rules default to the ones registered for ``stt_result.language``.
    """
    if not stt_result.words:
        return []

    opts = options or DEFAULT_OPTIONS
    boundary_rules = rules or get_boundary_rules(stt_result.language)
    drafts = segment_words(
        stt_result.words, opts, rules=boundary_rules, id_factory=id_factory,
    )
    return merge_short_segments(
        drafts, opts, id_factory=id_factory, converge=converge,
    )
