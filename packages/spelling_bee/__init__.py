from .letters import LetterSet, normalize, word_letters
from .validation import MIN_WORD_LENGTH, is_valid_word
from .scoring import PANGRAM_BONUS, is_pangram, word_score
from .ranking import ScoredWord, filter_word_list, rank_scored, rank_words
from .solver import PuzzleSpec, build_puzzle, solve, solve_scored

__all__ = [
    "LetterSet", "normalize", "word_letters",
    "MIN_WORD_LENGTH", "is_valid_word",
    "PANGRAM_BONUS", "is_pangram", "word_score",
    "ScoredWord", "filter_word_list", "rank_scored", "rank_words",
    "PuzzleSpec", "build_puzzle", "solve", "solve_scored",
]
