import pytest
from packages.spelling_bee import (
    PANGRAM_BONUS,
    filter_word_list,
    is_pangram,
    is_valid_word,
    word_score,
)

REQUIRED = "f"
EXTRA = "tpayec"
ALL_LETTERS = "ftpayec"

VALID_WORDS = ["Face", "catface", "caffeate", "feat"]
INVALID_WORDS = ["Faced", "grommet", "clicker"]


# --- validation ---

@pytest.mark.parametrize("word", VALID_WORDS)
def test_valid_words(word):
    assert is_valid_word(word, REQUIRED, EXTRA) is True


@pytest.mark.parametrize("word", INVALID_WORDS)
def test_invalid_words(word):
    assert is_valid_word(word, REQUIRED, EXTRA) is False


@pytest.mark.parametrize("word", ["", "f", "fa", "fac"])
def test_short_words_are_never_valid(word):
    assert is_valid_word(word, REQUIRED, EXTRA) is False
    assert is_valid_word(word, "", "abcdefghijklmnopqrstuvwxyz") is False


def test_missing_required_letter():
    assert is_valid_word("tape", REQUIRED, EXTRA) is False


def test_every_required_letter_needed():
    assert is_valid_word("face", "fc", "tpaye") is True
    assert is_valid_word("feta", "fc", "tpaye") is False


def test_validation_ignores_case():
    assert is_valid_word("FACE", "F", "TPAYEC") is True
    assert is_valid_word("face", "F", "TpAyEc") is True


def test_empty_required_means_no_constraint():
    assert is_valid_word("tape", "", "tape") is True
    assert is_valid_word("tapes", "", "tape") is False


def test_required_and_extra_may_overlap():
    assert is_valid_word("face", "fa", "face") is True


# --- filtering ---

def test_filter_word_list_empty():
    assert filter_word_list([], REQUIRED, EXTRA) == []


def test_filter_word_list_keeps_order():
    words = INVALID_WORDS[:1] + VALID_WORDS + INVALID_WORDS[1:]
    assert filter_word_list(words, REQUIRED, EXTRA) == VALID_WORDS


def test_filter_word_list_no_matches():
    assert filter_word_list(INVALID_WORDS, REQUIRED, EXTRA) == []


# --- scoring ---

@pytest.mark.parametrize("word", ["", "a", "aa", "aaa"])
def test_score_zero_below_min_length(word):
    assert word_score(word, ALL_LETTERS) == 0


@pytest.mark.parametrize("word,expected", [
    ("face", 1),        # 4 letter words are worth 1 point
    ("facet", 5),       # longer words are worth 1 point per letter
    ("effect", 6),
    ("catface", 7),
    ("caffeate", 8),
    ("affectate", 9),
])
def test_score_without_pangram(word, expected):
    assert word_score(word, ALL_LETTERS) == expected


@pytest.mark.parametrize("word,expected", [
    ("ftpayec", 14),
    ("ftpayecpay", 17),
    ("FTPAYEC", 14),
])
def test_score_with_pangram(word, expected):
    assert word_score(word, ALL_LETTERS) == expected
    assert is_pangram(word, ALL_LETTERS)


def test_four_letter_pangram():
    assert word_score("abcd", "dcba") == 1 + PANGRAM_BONUS


def test_score_does_not_validate():
    # 'grommet' is not a valid answer, but scoring still returns a number
    assert word_score("grommet", ALL_LETTERS) == 7
