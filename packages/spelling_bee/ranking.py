"""
Filter a raw word list down to valid answers and order them by score.

Ordering is ascending by (score, word): cheapest words first, the pangrams
last. Ties fall back to the raw string (case-sensitive, code-point order),
so the result is fully deterministic for a given input.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple

from .letters import Letters, normalize
from .scoring import word_score
from .validation import is_valid_word


class ScoredWord(NamedTuple):
    word: str
    score: int


def filter_word_list(words: Iterable[str], required: Letters, extra: Letters) -> List[str]:
    """
    Keep only the words valid for (required, extra), in input order.
    Unmatched words are dropped silently.
    """
    required = normalize(required)
    extra = normalize(extra)
    return [w for w in words if is_valid_word(w, required, extra)]


def rank_scored(words: Iterable[str], required: Letters, extra: Letters) -> List[ScoredWord]:
    """Valid words paired with their score, sorted by (score, word)."""
    required = normalize(required)
    extra = normalize(extra)
    all_letters = required.union(extra)

    scored = [ScoredWord(w, word_score(w, all_letters))
              for w in filter_word_list(words, required, extra)]
    scored.sort(key=lambda s: (s.score, s.word))
    return scored


def rank_words(words: Iterable[str], required: Letters, extra: Letters) -> List[str]:
    """
    Valid words ordered by ascending score, ties broken alphabetically.
    Returns [] when nothing survives filtering.
    """
    return [s.word for s in rank_scored(words, required, extra)]
