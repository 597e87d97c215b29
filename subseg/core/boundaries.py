"""Language-specific sentence and clause boundary rules."""

from __future__ import annotations

import logging
import re
from typing import Protocol

logger = logging.getLogger(__name__)


class BoundaryRules(Protocol):
    def is_sentence_end(self, word: str) -> bool: ...

    def is_clause_start(self, word: str) -> bool: ...


_KOREAN_SENTENCE_ENDINGS = re.compile(
    r"(?:다|요|죠|네|나|까|지|고|며|면서|는데|니까|거든|잖아|래|세요"
    r"|습니다|합니다|입니다|됩니다|니다)\s*$"
)
_KOREAN_CLAUSE_STARTS = re.compile(
    r"^(?:그리고|그래서|하지만|그러나|그런데|또한|근데|아니면|또는|그럼|자|이제|그때)"
)


class KoreanBoundaryRules:
    """Korean verb endings close a sentence; conjunctions open a clause."""

    def is_sentence_end(self, word: str) -> bool:
        return _KOREAN_SENTENCE_ENDINGS.search(word) is not None

    def is_clause_start(self, word: str) -> bool:
        return _KOREAN_CLAUSE_STARTS.match(word) is not None


_ENGLISH_CLAUSE_STARTS = re.compile(
    r"^(?:and|but|so|because|then|however|or|now|well)\b",
    re.IGNORECASE,
)


class EnglishBoundaryRules:
    """English sentences end on punctuation alone."""

    def is_sentence_end(self, word: str) -> bool:
        return False

    def is_clause_start(self, word: str) -> bool:
        return _ENGLISH_CLAUSE_STARTS.match(word) is not None


DEFAULT_RULES: BoundaryRules = KoreanBoundaryRules()

_RULES_BY_LANGUAGE: dict[str, BoundaryRules] = {
    "ko": DEFAULT_RULES,
    "korean": DEFAULT_RULES,
    "en": EnglishBoundaryRules(),
    "english": EnglishBoundaryRules(),
}


def get_boundary_rules(language: str | None) -> BoundaryRules:
    """Resolve boundary rules for an ISO code or language name."""
    if not language:
        return DEFAULT_RULES
    key = language.strip().lower()
    rules = _RULES_BY_LANGUAGE.get(key) or _RULES_BY_LANGUAGE.get(key.split("-")[0])
    if rules is None:
        logger.debug("No boundary rules for language %r, using Korean rules", language)
        return DEFAULT_RULES
    return rules
