"""Merge segments that are shorter than the minimum duration."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from subseg.core.ids import IdFactory, generate_id
from subseg.core.options import DEFAULT_OPTIONS, SplitterOptions
from subseg.data_models import SubtitleSegment

logger = logging.getLogger(__name__)


def _can_merge(
    current: SubtitleSegment, nxt: SubtitleSegment, options: SplitterOptions,
) -> bool:
    if current.duration >= options.min_duration:
        return False
    summed = current.duration + nxt.duration
    span = nxt.end_time - current.start_time
    return max(summed, span) <= options.max_duration


def _merge_pair(
    current: SubtitleSegment, nxt: SubtitleSegment, id_factory: IdFactory,
) -> SubtitleSegment:
    return SubtitleSegment(
        id=id_factory(),
        text=f"{current.text} {nxt.text}".strip(),
        start_time=current.start_time,
        end_time=nxt.end_time,
        words=[*current.words, *nxt.words],
    )


def _merge_pass(
    segments: Sequence[SubtitleSegment],
    options: SplitterOptions,
    id_factory: IdFactory,
) -> list[SubtitleSegment]:
    result: list[SubtitleSegment] = []
    i = 0
    while i < len(segments):
        current = segments[i]
        nxt = segments[i + 1] if i + 1 < len(segments) else None
        if nxt is not None and _can_merge(current, nxt, options):
            result.append(_merge_pair(current, nxt, id_factory))
            i += 2
        else:
            result.append(current)
            i += 1
    return result


def merge_short_segments(
    segments: Sequence[SubtitleSegment],
    options: SplitterOptions | None = None,
    *,
    id_factory: IdFactory | None = None,
    converge: bool = False,
) -> list[SubtitleSegment]:
    """Fuse each too-short segment with its successor in one greedy pass.

    A merged pair is consumed whole: it is not re-checked against its new
    neighbour, so a run of three or more short segments may still leave a
    short segment behind. ``converge=True`` repeats the pass until the
    segment count stops changing.
    """
    if len(segments) <= 1:
        return list(segments)

    opts = options or DEFAULT_OPTIONS
    make_id = id_factory or generate_id

    result = _merge_pass(segments, opts, make_id)
    if converge:
        while True:
            merged = _merge_pass(result, opts, make_id)
            if len(merged) == len(result):
                break
            result = merged

    logger.debug("Merged %d segments into %d", len(segments), len(result))
    return result
