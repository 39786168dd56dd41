"""
Cut an N-letter dictionary out of a general word list.

The assistant rejects word lists that mix lengths, so run this once over
something like /usr/share/dict/words first.

Features:
- Keeps only lowercase a-z words of exactly N letters (proper nouns,
  apostrophes and accented words are dropped).
- Preserves original order (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.

Usage:
    python -m script.make_dictionary --in /usr/share/dict/words --N 5 \
        --out words_5.txt
"""

import argparse
from pathlib import Path

from wordle_assist.datasets import select_words


def main():
    ap = argparse.ArgumentParser(description="Build an N-letter word list from a general dictionary.")
    ap.add_argument("--in", dest="inp", default="/usr/share/dict/words", help="input word list")
    ap.add_argument("--out", dest="out", required=True, help="output .txt file")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out)
    if not inp.exists():
        raise FileNotFoundError(inp)

    lines = inp.read_text(encoding="utf-8").splitlines()
    out = select_words(lines, args.N)
    if args.sort:
        out = sorted(out)

    outp.parent.mkdir(parents=True, exist_ok=True)
    outp.write_text("\n".join(out) + "\n", encoding="utf-8")
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} {args.N}-letter words)")


if __name__ == "__main__":
    main()
