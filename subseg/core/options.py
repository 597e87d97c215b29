"""Splitter options: constant defaults overlaid with caller values."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)

SENTENCE_DELIMITERS = re.compile(r"[.?!。？！]")

# Punctuation, or a coordinating conjunction with whitespace on both sides.
NATURAL_BREAK_PATTERN = re.compile(
    r"[,，、:;]"
    r"|\s+(그리고|그래서|하지만|그러나|그런데|또한|그리고는|그래서는|근데|아니면|또는)\s+"
)


@dataclass(frozen=True)
class SplitterOptions:
    min_duration: float = 1.5
    target_duration: float = 2.5
    max_duration: float = 3.5
    max_characters: int = 50
    sentence_delimiters: re.Pattern[str] = SENTENCE_DELIMITERS
    natural_break_pattern: re.Pattern[str] = NATURAL_BREAK_PATTERN
    silence_gap: float = 0.5

    def __post_init__(self) -> None:
        if self.min_duration <= 0:
            raise ValueError(f"min_duration ({self.min_duration}) must be positive")
        if self.max_duration <= 0:
            raise ValueError(f"max_duration ({self.max_duration}) must be positive")
        if self.max_characters < 1:
            raise ValueError(
                f"max_characters ({self.max_characters}) must be at least 1"
            )
        if self.silence_gap < 0:
            raise ValueError(f"silence_gap ({self.silence_gap}) must not be negative")

        # max_duration is the hard ceiling; min and target give way to it.
        min_duration = min(self.min_duration, self.max_duration)
        target_duration = min(max(self.target_duration, min_duration), self.max_duration)
        if (min_duration, target_duration) != (self.min_duration, self.target_duration):
            logger.debug(
                "Clamped durations %s/%s/%s to %s/%s/%s",
                self.min_duration, self.target_duration, self.max_duration,
                min_duration, target_duration, self.max_duration,
            )
            object.__setattr__(self, "min_duration", min_duration)
            object.__setattr__(self, "target_duration", target_duration)

    def with_overrides(self, **kwargs: Any) -> SplitterOptions:
        return build_options(kwargs, base=self)


DEFAULT_OPTIONS = SplitterOptions()

_OPTION_NAMES = frozenset(f.name for f in fields(SplitterOptions))
_PATTERN_NAMES = frozenset({"sentence_delimiters", "natural_break_pattern"})


def build_options(
    overrides: Mapping[str, Any] | None = None,
    *,
    base: SplitterOptions = DEFAULT_OPTIONS,
) -> SplitterOptions:
    """Overlay ``overrides`` on ``base`` and return a new options instance.

    ``None`` values are skipped so callers can pass partially filled
    mappings straight from CLI flags or YAML. Pattern fields accept either
    compiled patterns or pattern strings.
    """
    if not overrides:
        return base

    unknown = set(overrides) - _OPTION_NAMES
    if unknown:
        raise ValueError(f"Unknown splitter option(s): {', '.join(sorted(unknown))}")

    values: dict[str, Any] = {}
    for key, value in overrides.items():
        if value is None:
            continue
        if key in _PATTERN_NAMES and isinstance(value, str):
            value = re.compile(value)
        values[key] = value

    if not values:
        return base
    return replace(base, **values)
