from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str, *, drop_blanks: bool = False) -> List[str]:
    """
    Read a UTF-8 text file into a list of whitespace-stripped lines.
    With drop_blanks=True, empty/whitespace-only lines are skipped.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = [ln.strip() for ln in p.read_text(encoding="utf-8").splitlines()]
    return [ln for ln in lines if ln] if drop_blanks else lines


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line to a UTF-8 text file (trailing newline included),
    creating parent directories as needed. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
