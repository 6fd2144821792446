# apps/cli/spelling_bee.py
"""
CLI entry point for solving a spelling-bee puzzle.

This script:
  1) Checks the required/extra letter arguments (both must be non-empty).
  2) Optionally validates a local word list and prints a one-line summary.
  3) Loads the word list, filters + ranks it (with a progress bar), and
     prints the answers one per line, lowest score first.

Any error ends the run with exit code 1.
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from tqdm import tqdm

from packages.datasets import (
    DEFAULT_WORDLIST_URL,
    ProviderFailure,
    WordListOptions,
    get_word_list,
    pretty_summary,
    validate_wordlist,
)
from packages.spelling_bee import build_puzzle, is_pangram, solve_scored


def preprocess_args(required: str, extra: str) -> Tuple[str, str]:
    """
    Reject zero-length letter arguments before anything reaches the solver.
    """
    if len(required) == 0:
        raise ValueError("argument required cannot be 0 characters")
    if len(extra) == 0:
        raise ValueError("argument extra cannot be 0 characters")
    return required, extra


def _plain_progress(words: Sequence[str], every: float = 1.0) -> Iterator[str]:
    """
    Yield `words` unchanged while writing a one-line text progress indicator
    to stderr (at most once per `every` seconds, plus a final line).
    """
    total = len(words)
    start = time.time()
    last_print = 0.0
    for idx, w in enumerate(words, 1):
        yield w
        now = time.time()
        if (now - last_print >= every) or (idx == total):
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
            sys.stderr.flush()
            last_print = now
    if total:
        sys.stderr.write("\n"); sys.stderr.flush()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="spelling-bee",
        description="Gives solutions to the spelling-bee game",
    )
    ap.add_argument("-r", "--required", required=True,
                    help="a concatenated string of required letters (usually only one)")
    ap.add_argument("-e", "--extra", required=True,
                    help="a concatenated string of extra letters (usually six)")
    ap.add_argument("--wordlist", help="local word list, one word per line (overrides --url)")
    ap.add_argument("--url", default=DEFAULT_WORDLIST_URL, help="word list to download")
    ap.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    ap.add_argument("--scores", action="store_true", help="print each word's score next to it")
    ap.add_argument("--check", action="store_true",
                    help="validate --wordlist and print a summary before solving")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show filtering progress (auto=bar when stderr is a terminal, else plain text)."
    )
    return ap


def run(args: argparse.Namespace) -> None:
    required, extra = preprocess_args(args.required, args.extra)

    # 1) Optional word-list check (counts, SHA, short/invalid lines)
    if args.check:
        if not args.wordlist:
            raise ValueError("--check needs --wordlist")
        print(pretty_summary(validate_wordlist(args.wordlist)), file=sys.stderr)

    options = WordListOptions(path=args.wordlist, url=args.url, timeout=args.timeout)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    def provider(opts: WordListOptions) -> Iterable[str]:
        words = get_word_list(opts)
        if mode == "bar":
            return tqdm(words, ncols=80, desc="Filtering", unit="word")
        if mode == "plain":
            return _plain_progress(words)
        return words

    # 3) Solve and print in ranked order
    ranked = solve_scored(required, extra, options, provider=provider)
    for word, score in ranked:
        print(f"{word}\t{score}" if args.scores else word)

    all_letters = build_puzzle(required, extra).all_letters
    pangrams = [w for w, _ in ranked if is_pangram(w, all_letters)]
    total = sum(s for _, s in ranked)
    print(f"Found {len(ranked)} words | total score {total} | pangrams: {', '.join(pangrams) or '-'}",
          file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args and solve. Returns the process exit code.
    """
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except (ValueError, OSError, ProviderFailure) as err:
        sys.stderr.write(f"Whoops. There was an error while executing your CLI '{err}'\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
