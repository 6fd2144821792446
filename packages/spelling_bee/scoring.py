"""
Spelling-bee scoring for a single word.

Rules (https://www.nytimes.com/puzzles/spelling-bee):
  - words shorter than 4 letters are worth 0 points
  - 4-letter words are worth 1 point
  - longer words earn 1 point per letter
  - a pangram (uses every letter of the puzzle at least once) earns
    PANGRAM_BONUS extra points

The word is NOT re-validated here. Scoring a word the validator would reject
returns a meaningless number, never an error.
"""

from .letters import Letters, normalize, word_letters
from .validation import MIN_WORD_LENGTH

PANGRAM_BONUS = 7


def is_pangram(word: str, all_letters: Letters) -> bool:
    """True if `word` uses every letter of `all_letters` at least once."""
    return normalize(all_letters).issubset(word_letters(word))


def word_score(word: str, all_letters: Letters) -> int:
    """
    Points for `word` given the puzzle alphabet (required ∪ extra).

    Examples (alphabet = f,t,p,a,y,e,c):
      word_score("face", ...)       -> 1
      word_score("catface", ...)    -> 7
      word_score("ftpayec", ...)    -> 14   (7 + pangram bonus)
    """
    n = len(word)
    if n < MIN_WORD_LENGTH:
        return 0

    points = 1 if n == MIN_WORD_LENGTH else n

    if is_pangram(word, all_letters):
        points += PANGRAM_BONUS

    return points
