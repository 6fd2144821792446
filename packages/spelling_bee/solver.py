"""
Puzzle-level entry point.

solve() ties everything together:
  1) builds the required/extra LetterSets from raw strings
  2) obtains the word list ONCE through a provider, with explicit options
  3) filters, scores and ranks the words

The provider is the only thing that can fail; its ProviderFailure is raised
to the caller unchanged (no retry, no partial result).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from packages.datasets.wordlist import WordListOptions, get_word_list
from .letters import LetterSet
from .ranking import ScoredWord, rank_scored

# A provider turns options into a sequence of candidate words.
WordListProvider = Callable[[WordListOptions], Iterable[str]]


@dataclass(frozen=True)
class PuzzleSpec:
    """The required and extra letters of one puzzle."""
    required: LetterSet
    extra: LetterSet

    @property
    def all_letters(self) -> LetterSet:
        return self.required.union(self.extra)


def build_puzzle(required_raw: str, extra_raw: str) -> PuzzleSpec:
    return PuzzleSpec(LetterSet.normalize(required_raw), LetterSet.normalize(extra_raw))


def solve_scored(
        required_raw: str,
        extra_raw: str,
        options: Optional[WordListOptions] = None,
        *,
        provider: WordListProvider = get_word_list,
) -> List[ScoredWord]:
    """
    Like solve(), but keeps each word's score alongside it.
    """
    puzzle = build_puzzle(required_raw, extra_raw)
    words = provider(options if options is not None else WordListOptions())
    return rank_scored(words, puzzle.required, puzzle.extra)


def solve(
        required_raw: str,
        extra_raw: str,
        options: Optional[WordListOptions] = None,
        *,
        provider: WordListProvider = get_word_list,
) -> List[str]:
    """
    Every word constructible from the puzzle letters, lowest score first.

    Args:
      required_raw : letters every answer must contain (usually one)
      extra_raw    : additional allowed letters (usually six)
      options      : where to load the word list from (defaults to WordListOptions())
      provider     : word-list source; swap in a stub for tests

    Raises:
      ProviderFailure if the word list could not be obtained.
    """
    return [s.word for s in solve_scored(required_raw, extra_raw, options, provider=provider)]
