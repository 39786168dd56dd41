# apps/cli/assist.py
"""
CLI entry point for the Wordle assistant.

Modes:
  1) Interactive (default): show candidates and a ranked suggestion list,
     read the feedback for the guess you made, narrow, repeat.
  2) --word WORD: auto-play one hidden word and show each guess.
  3) --check-all-words: auto-play every dictionary word (tqdm progress),
     one summary line per word, optional CSV.

Usage:
    python -m apps.cli.assist words_5.txt
    python -m apps.cli.assist words_5.txt --word crane
    python -m apps.cli.assist words_5.txt --check-all-words --out reports/all.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from tqdm import tqdm

from wordle_assist.datasets import DictionaryError, load_dictionary, pretty_summary, validate_dictionary
from wordle_assist.engine import CandidateEngine, ConflictError, SessionState, letter_frequencies
from wordle_assist.harness import (
    Session,
    check_all_words,
    format_ranking,
    format_words,
    guess_word,
    summarize,
    write_csv,
)
from wordle_assist.harness.display import DEFAULT_LIMIT

log = logging.getLogger("wordle_assist")

PROMPT = "Type the guess you made. Prefix each letter with: green=*, yellow=?, gray=!: "


def _log_letter_frequencies(words: List[str]) -> None:
    freq = sorted(letter_frequencies(words).items(), key=lambda kv: -kv[1])
    log.debug("letter frequency:\n%s", "\n".join(f"\t({ch!r}, {f:.6f})" for ch, f in freq))


def _play_word(word: str, dictionary: List[str]) -> None:
    print(f"{len(dictionary)} words in dictionary")
    print(f"checking: {word}")
    steps = guess_word(word, dictionary)
    for n, (guess, remaining) in enumerate(steps, 1):
        if not guess:
            print("dunno lol")
            print("is the word in the dictionary?")
            break
        print(f"  {n}: guessing {guess}")
        print(f"    {remaining} candidates left")
    print(f"{len(steps)} guesses required")


def _check_all(dictionary: List[str], progress: str, out: str | None) -> None:
    if progress == "auto":
        progress = "bar" if sys.stderr.isatty() else "off"

    results = []
    runs = check_all_words(dictionary)
    if progress == "bar":
        runs = tqdm(runs, total=len(dictionary), ncols=80, desc="Solving", unit="word")
    for r in runs:
        results.append(r)
        if progress == "bar":
            tqdm.write(r.line())  # keeps the bar at the bottom
        else:
            print(r.line())

    stats = summarize(results)
    print(f"solved {stats['solved']}/{stats['count']} | mean guesses "
          f"{stats['mean_guesses']:.3f} | worst {stats['max_guesses']}")
    if out:
        print(f"Wrote: {write_csv(results, out)}")


def _interactive(dictionary: List[str], limit: int) -> int:
    session = Session(CandidateEngine(dictionary))

    while True:
        engine = session.engine
        if session.state is SessionState.EXHAUSTED:
            history = engine.history
            if history and history[-1].solved:
                print(f"no candidates left! {history[-1].guess!r} isn't in the dictionary")
            else:
                print("no candidates left!")
            return 0
        if session.state is SessionState.SOLVED:
            print(f"the answer is: {session.answer}")
            return 0

        print(f"{len(engine)} candidates.")
        print(format_words("candidates", engine.candidates, limit=limit))
        print(format_ranking(engine.rank(), limit=limit))

        while True:
            try:
                line = input(PROMPT).strip()
            except EOFError:
                print()
                return 0
            if not line:
                return 0

            result = session.submit(line)
            if result.accepted:
                log.info("%d candidates removed", result.removed)
                break
            kind = "Bad input" if isinstance(result.error, ConflictError) else "Input error"
            print(f"{kind}: {result.error}")


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load and validate the dictionary, dispatch on mode.
    """
    ap = argparse.ArgumentParser(description="wordle-assist: narrow and rank Wordle candidates")
    ap.add_argument("dictionary_path",
                    help="word list, one word per line, all the same length "
                         "(see script/make_dictionary.py)")
    ap.add_argument("--N", type=int, help="word length (default: length of the first word)")
    ap.add_argument("--limit", type=int, default=DEFAULT_LIMIT,
                    help="how many candidates/suggestions to print")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug output")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--word", help="try to guess a specific word")
    mode.add_argument("--check-all-words", action="store_true",
                      help="try to guess every word in the dictionary")
    ap.add_argument("--out", help="CSV path for --check-all-words results")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar for --check-all-words (auto=bar on a TTY)")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # 1) Validate the word list, then load it for real; any invalid entry
    #    rejects the file
    try:
        rep = validate_dictionary(args.dictionary_path, args.N)
        log.info(pretty_summary(rep))
        dictionary = load_dictionary(args.dictionary_path, args.N)
    except (FileNotFoundError, DictionaryError) as e:
        log.error("dictionary file %r could not be used: %s", args.dictionary_path, e)
        ap.print_help()
        return 1

    if args.verbose:
        _log_letter_frequencies(dictionary)

    # 2) Dispatch
    if args.word:
        word = args.word.strip().lower()
        if len(word) != len(dictionary[0]):
            print(f'wrong number of letters in "{word}"')
            return 1
        _play_word(word, dictionary)
        return 0

    if args.check_all_words:
        _check_all(dictionary, args.progress, args.out)
        return 0

    return _interactive(dictionary, args.limit)


if __name__ == "__main__":
    sys.exit(main())
