import pytest

from packages.spelling_bee import LetterSet, normalize, word_letters


def test_normalize_case_folds_and_dedupes():
    s = normalize("HeLLo")
    assert s == LetterSet("helo")
    assert s.size() == 4
    assert list(s) == ["e", "h", "l", "o"]


def test_normalize_is_idempotent():
    once = normalize("FtPaYeC")
    assert normalize(once) == once
    assert normalize(normalize("FtPaYeC")) == normalize("FtPaYeC")


def test_empty_input_gives_empty_set():
    s = normalize("")
    assert s.size() == 0
    assert len(s) == 0
    assert not s.contains("a")


def test_contains_is_case_insensitive():
    s = normalize("abc")
    assert s.contains("A")
    assert "b" in s
    assert "z" not in s
    assert 3 not in s


def test_union():
    required, extra = normalize("f"), normalize("TPAYEC")
    assert required.union(extra) == normalize("ftpayec")
    assert (required | "x") == normalize("fx")


def test_non_ascii_letters():
    s = normalize("ÄÖü")
    assert s.contains("ä") and s.contains("Ü")
    assert s.size() == 3


def test_word_letters():
    assert word_letters("hello") == LetterSet("helo")


def test_members_stay_single_characters():
    # 'İ'.lower() is two code points; such letters are kept as given
    s = normalize("İi")
    assert [len(m) for m in s] == [1, 1]
    assert s.size() == 2
    assert s.contains("İ")
    assert normalize(list(s)) == s


def test_multi_character_items_rejected():
    with pytest.raises(ValueError, match="single characters"):
        LetterSet(["ab"])
    assert not normalize("ab").contains("ab")
