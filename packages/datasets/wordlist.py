"""
Word-list provider.

Produces the raw, ordered sequence of candidate words the solver filters.
Two sources are supported:
  - a local UTF-8 file, one word per line (`path`)
  - an HTTP(S) URL serving plain text or an HTML page (`url`)

Where the words come from is decided by an explicit WordListOptions value
passed into every call; there is no module-level default that callers mutate.

Words are returned stripped of surrounding whitespace with blanks dropped.
Case is preserved: normalization belongs to the solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from .io import read_lines

# Large English list, one lowercase word per line (~370k words).
DEFAULT_WORDLIST_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


class ProviderFailure(RuntimeError):
    """The word list could not be obtained (file, network, or parse failure)."""


@dataclass(frozen=True)
class WordListOptions:
    path: Optional[str] = None         # local file; takes precedence over url
    url: str = DEFAULT_WORDLIST_URL    # remote source when no path is given
    timeout: float = 30.0              # seconds, for HTTP requests


def _split_words(text: str) -> List[str]:
    return [ln.strip() for ln in text.splitlines() if ln.strip()]


def load_word_list(path: Path | str) -> List[str]:
    """Read a newline-separated word list from disk."""
    try:
        return read_lines(path, drop_blanks=True)
    except (OSError, UnicodeDecodeError) as e:
        raise ProviderFailure(f"could not read word list {path}: {e}") from e


def fetch_word_list(url: str = DEFAULT_WORDLIST_URL, timeout: float = 30.0) -> List[str]:
    """
    Download a word list. HTML pages are reduced to their visible text first,
    one block per line, so simple "list of words" pages work too.
    """
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise ProviderFailure(f"could not fetch word list from {url}: {e}") from e

    text = r.text
    if "html" in r.headers.get("Content-Type", "").lower():
        soup = BeautifulSoup(text, "html.parser")
        text = soup.get_text("\n", strip=True)
    return _split_words(text)


def get_word_list(options: Optional[WordListOptions] = None) -> List[str]:
    """
    Produce the candidate words described by `options`.

    Raises:
      ProviderFailure on any I/O, HTTP or decoding problem.
    """
    options = options if options is not None else WordListOptions()
    if options.path:
        return load_word_list(options.path)
    return fetch_word_list(options.url, timeout=options.timeout)
