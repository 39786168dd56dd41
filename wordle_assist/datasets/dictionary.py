"""
Dictionary loading.

Contract (applied uniformly):
  - one word per line, blank lines ignored, case folded to lowercase
  - the first word sets the length L (unless N is given explicitly)
  - any entry that isn't a-z only, or isn't exactly L letters, REJECTS the
    whole file with DictionaryError; nothing is silently dropped
  - repeated words are kept once (first occurrence), with a warning

General word lists (e.g., /usr/share/dict/words) mix lengths, so they are
rejected as-is; use script/make_dictionary.py to cut an L-letter list first.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from wordle_assist.engine.feedback import is_word

log = logging.getLogger(__name__)


class DictionaryError(ValueError):
    """The word list is empty or not a clean, length-homogeneous list."""


def read_entries(p: Path | str) -> List[Tuple[int, str]]:
    """
    Read (line_number, token) for every non-blank line of a UTF-8 file,
    stripped and lowercased. Raises FileNotFoundError if the path is missing,
    DictionaryError if the file isn't UTF-8 text.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    out: List[Tuple[int, str]] = []
    try:
        with p.open("r", encoding="utf-8") as f:
            for lineno, raw in enumerate(f, start=1):
                w = raw.strip()
                if w:
                    out.append((lineno, w.lower()))
    except UnicodeDecodeError as e:
        raise DictionaryError(f"{p}: not UTF-8 text ({e.reason} near line {len(out) + 1})") from e
    return out


def invalid_entries(entries: Iterable[Tuple[int, str]], N: int) -> List[Tuple[int, str]]:
    """Entries that aren't clean N-letter a-z words."""
    return [(ln, w) for ln, w in entries if len(w) != N or not is_word(w)]


def load_dictionary(p: Path | str, N: Optional[int] = None) -> List[str]:
    """
    Load a length-homogeneous word list.

    Args:
      p : path to the word list
      N : expected word length; defaults to the first word's length

    Returns:
      Unique words in file order.

    Raises:
      FileNotFoundError, DictionaryError
    """
    entries = read_entries(p)
    if not entries:
        raise DictionaryError(f"{p}: no words found")
    if N is None:
        N = len(entries[0][1])

    bad = invalid_entries(entries, N)
    if bad:
        examples = ", ".join(f"line {ln}: {w!r}" for ln, w in bad[:5])
        raise DictionaryError(
            f"{p}: {len(bad)} entr{'y is' if len(bad) == 1 else 'ies are'} "
            f"not {N}-letter a-z words ({examples})")

    seen = set()
    words: List[str] = []
    for _, w in entries:
        if w in seen:
            continue
        seen.add(w)
        words.append(w)

    if len(words) != len(entries):
        log.warning("%s: dropped %d duplicate word(s)", p, len(entries) - len(words))
    log.info("loaded %d %d-letter words from %s", len(words), N, p)
    return words


def select_words(lines: Iterable[str], N: int) -> List[str]:
    """
    Pick the clean N-letter words out of a general word list: lowercase a-z
    only (proper nouns and apostrophes are skipped), duplicates removed,
    order kept.
    """
    seen = set()
    out: List[str] = []
    for raw in lines:
        w = raw.strip()
        if len(w) == N and is_word(w) and w not in seen:
            seen.add(w)
            out.append(w)
    return out
