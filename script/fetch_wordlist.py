"""
Download a word list and write a clean local copy for the solver.

What it does:
- Fetches the list (plain text or an HTML page) through the word-list provider.
- De-duplicates while preserving the source order (case-sensitive).
- Optionally drops words shorter than --min-length and sorts alphabetically.

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/words.txt
    # only words that can ever be answers, sorted:
    python -m script.fetch_wordlist --min-length 4 --sort --out packages/datasets/data/words.txt
"""

import argparse

from packages.datasets import DEFAULT_WORDLIST_URL, fetch_word_list, write_lines


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Download a word list for the spelling-bee solver")
    ap.add_argument("--url", default=DEFAULT_WORDLIST_URL)
    ap.add_argument("--out", default="packages/datasets/data/words.txt")
    ap.add_argument("--timeout", type=float, default=30.0)
    ap.add_argument("--min-length", type=int, default=0, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = unique_preserve_order(fetch_word_list(args.url, timeout=args.timeout))
    if args.min_length:
        words = [w for w in words if len(w) >= args.min_length]
    if args.sort:
        words = sorted(words)

    path = write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {path}")

if __name__ == "__main__":
    main()
