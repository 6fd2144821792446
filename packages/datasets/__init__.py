from .io import read_lines, write_lines
from .wordlist import (
    DEFAULT_WORDLIST_URL,
    ProviderFailure,
    WordListOptions,
    fetch_word_list,
    get_word_list,
    load_word_list,
)
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "read_lines", "write_lines",
    "DEFAULT_WORDLIST_URL", "ProviderFailure", "WordListOptions",
    "fetch_word_list", "get_word_list", "load_word_list",
    "validate_wordlist", "pretty_summary",
]
