"""
Word-list validator for the spelling-bee solver.

What this module does:
- Check a dictionary file before it is fed to the solver.
- Count words usable as answers (alphabetic, at least `min_length` letters).
- Detect blank/non-alphabetic lines, too-short words and duplicates
  (case-insensitive); compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.spelling_bee.validation import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word-list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest word counted as usable
    count: int           # usable words after cleaning
    unique_count: int    # usable words after case-insensitive dedupe
    invalid_lines: int   # blank or non-alphabetic lines
    too_short: int       # alphabetic words below min_length
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and sort each line into a bucket.

    Rules:
      - one token per line, surrounding whitespace ignored
      - must be alphabetic (any script; case is irrelevant)
      - empty/whitespace-only lines are INVALID
      - alphabetic words shorter than min_length are counted separately

    Returns:
      (usable_words, invalid_count, too_short_count)
    """
    usable: List[str] = []
    invalid = 0
    too_short = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w or not w.isalpha():
                invalid += 1
            elif len(w) < min_length:
                too_short += 1
            else:
                usable.append(w)

    return usable, invalid, too_short


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a newline-separated dictionary file.

    Parameters
    ----------
    path : str
        Word-list file (one word per line).
    min_length : int
        Shortest word that can ever be an answer (4 for the spelling bee).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        requires an existing file with at least one usable word and no
        invalid lines; short words and duplicates are reported as issues but
        do not fail the check, since the solver ignores them anyway.
    """
    p = Path(path)

    if not p.exists():
        rep = WordlistReport(path, False, min_length, 0, 0, 0, 0, "",
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    usable, invalid, too_short = _load_and_check(p, min_length)
    unique = {w.lower() for w in usable}

    issues: List[str] = []
    if not usable:
        issues.append("word list contains 0 usable words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if too_short:
        issues.append(f"word list has {too_short} word(s) shorter than {min_length}")
    if len(unique) != len(usable):
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        seen, dups = set(), []
        for w in usable:
            k = w.lower()
            if k in seen and k not in dups:
                dups.append(k)
            seen.add(k)
        issues.append(f"word list contains duplicates (e.g., {dups[:5]})")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(usable),
        unique_count=len(unique),
        invalid_lines=invalid,
        too_short=too_short,
        sha256=_sha256_file(p),
        passed=bool(usable) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=370105 (uniq=370105, short=1240, invalid=0, sha=abc123...) | min_len=4 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, short={report['too_short']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| min_len={report['min_length']} | {status}"
    )
