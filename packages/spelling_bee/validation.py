"""
Word validation for the spelling-bee rules.

A word is valid iff:
  - it has at least MIN_WORD_LENGTH characters
  - it contains every required letter at least once (presence, not count)
  - it uses only letters from required ∪ extra

Case never matters: the word and both letter sets are case-folded here, so
callers can pass raw strings straight from the command line or a word list.
"""

from .letters import Letters, normalize, word_letters

# Minimum word length, fixed by the rules of the game.
MIN_WORD_LENGTH = 4


def is_valid_word(word: str, required: Letters, extra: Letters) -> bool:
    """
    Return True if `word` can be built for the puzzle (required, extra).

    An empty `required` set imposes no required-letter constraint.

    Examples:
      is_valid_word("Face", "f", "tpayec")    -> True
      is_valid_word("faced", "f", "tpayec")   -> False  ('d' not allowed)
      is_valid_word("tape", "f", "tpayec")    -> False  (missing 'f')
    """
    if len(word) < MIN_WORD_LENGTH:
        return False

    required = normalize(required)
    allowed = required.union(extra)
    letters = word_letters(word)

    # Every required letter must appear somewhere in the word
    for r in required:
        if r not in letters:
            return False

    # ...and the word may only use letters from the puzzle's alphabet
    return letters.issubset(allowed)
