from pathlib import Path
from packages.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["face", "facet", "Effect", "catface"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 4 and rep["unique_count"] == 4
    assert rep["issues"] == []
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=4" in s and "min_len=4" in s and s.endswith("OK")


def test_validate_wordlist_flags_invalid_lines(tmp_path: Path):
    words = tmp_path / "words.txt"
    # blank line and '???' are invalid; 'cat' is merely too short
    words.write_text("face\n\n???\ncat\nfacet\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert rep["too_short"] == 1
    assert rep["count"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_duplicates_do_not_fail(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["face", "Face", "facet"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert any("duplicates" in msg and "face" in msg for msg in rep["issues"])


def test_validate_wordlist_min_length(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["face", "facet"])

    rep = validate_wordlist(str(words), min_length=5)
    assert rep["count"] == 1 and rep["too_short"] == 1


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])
