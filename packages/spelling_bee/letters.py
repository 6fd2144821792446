"""
Case-folded letter sets.

A LetterSet is the unit every other module works with: the puzzle's required
letters, its extra letters, and the distinct letters of a candidate word.

Conventions:
  - members are single characters, stored lower-case where that is still
    one character
  - duplicates collapse silently (set semantics)
  - immutable after construction; empty sets are legal
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, Union

# Anything that can be turned into a LetterSet: a raw string, any iterable of
# characters, or an existing LetterSet.
Letters = Union["LetterSet", str, Iterable[str]]


def _fold(ch: str) -> str:
    """
    Lower-case one character. A few characters lower-case to more than one
    code point (U+0130 becomes 'i' plus a combining dot); those are kept as-is
    so members stay single characters.
    """
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


class LetterSet:
    __slots__ = ("_letters",)

    def __init__(self, letters: Iterable[str] = ()):
        folded = set()
        for ch in letters:
            if len(ch) != 1:
                raise ValueError(f"LetterSet members must be single characters, got {ch!r}")
            folded.add(_fold(ch))
        self._letters: FrozenSet[str] = frozenset(folded)

    @classmethod
    def normalize(cls, raw: Letters) -> "LetterSet":
        """
        Build a LetterSet from raw input. Already-normalized sets are returned
        as-is, so normalizing twice is a no-op.
        """
        if isinstance(raw, LetterSet):
            return raw
        return cls(raw)

    def union(self, other: Letters) -> "LetterSet":
        return LetterSet(self._letters | normalize(other)._letters)

    def contains(self, ch: str) -> bool:
        return len(ch) == 1 and _fold(ch) in self._letters

    def issubset(self, other: Letters) -> bool:
        return self._letters <= normalize(other)._letters

    def size(self) -> int:
        return len(self._letters)

    __or__ = union

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and self.contains(ch)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._letters))

    def __len__(self) -> int:
        return len(self._letters)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LetterSet):
            return self._letters == other._letters
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._letters)

    def __repr__(self) -> str:
        return f"LetterSet({''.join(self)!r})"


def normalize(raw: Letters) -> LetterSet:
    """Module-level shorthand for LetterSet.normalize."""
    return LetterSet.normalize(raw)


def word_letters(word: str) -> LetterSet:
    """Distinct (case-folded) letters of a word, e.g. 'Hello' -> {h, e, l, o}."""
    return LetterSet(word)
