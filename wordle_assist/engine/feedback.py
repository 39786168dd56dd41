"""
Feedback model for one submitted guess.

Conventions:
  - '*' : green  = letter confirmed at this exact position
  - '?' : yellow = letter present in the solution, but not at this position
  - '!' : gray   = letter absent (or present fewer times than guessed)

A Feedback carries the guess word itself plus one Clue per position; the
clues alone don't say which letter they refer to.

Input grammar (one line typed by the user):
    <marker><letter> repeated exactly N times, e.g. "?i*r!a!t!e"
Whitespace between tokens is ignored and letters are case-insensitive.
"""

from __future__ import annotations

import enum
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Tuple

log = logging.getLogger(__name__)


class FeedbackError(ValueError):
    """Base class for feedback the session refuses to apply."""


class ParseError(FeedbackError):
    """Malformed feedback line (bad marker, bad letter, wrong pair count)."""


class FeedbackLengthError(ParseError):
    """Feedback whose length doesn't match the session's word length."""


class ConflictError(FeedbackError):
    """Feedback that contradicts something said in an earlier round."""


class Clue(enum.Enum):
    GREEN = "*"
    YELLOW = "?"
    GRAY = "!"

    @property
    def marker(self) -> str:
        return self.value

    @property
    def pattern_char(self) -> str:
        """Compact G / Y / - form, handy for logs and CSV columns."""
        return _PATTERN_CHARS[self]

    @classmethod
    def from_marker(cls, ch: str) -> "Clue":
        try:
            return cls(ch)
        except ValueError:
            raise ParseError(f"unknown annotation {ch!r}") from None


_PATTERN_CHARS: Dict[Clue, str] = {Clue.GREEN: "G", Clue.YELLOW: "Y", Clue.GRAY: "-"}


def is_word(s: str) -> bool:
    """True for a non-empty, lowercase ASCII a-z token."""
    return bool(s) and s.isascii() and s.isalpha() and s.islower()


@dataclass(frozen=True)
class Feedback:
    guess: str
    clues: Tuple[Clue, ...]

    def __post_init__(self):
        object.__setattr__(self, "clues", tuple(self.clues))
        if not is_word(self.guess):
            raise ParseError(f"guess must be lowercase a-z letters, got {self.guess!r}")
        if len(self.guess) != len(self.clues):
            raise FeedbackLengthError(
                f"guess {self.guess!r} has {len(self.guess)} letters but {len(self.clues)} clues")
        for c in self.clues:
            if not isinstance(c, Clue):
                raise TypeError(f"expected Clue, got {c!r}")

    def __len__(self) -> int:
        return len(self.guess)

    def __str__(self) -> str:
        return "".join(c.marker + ch for ch, c in zip(self.guess, self.clues))

    @property
    def pattern(self) -> str:
        return "".join(c.pattern_char for c in self.clues)

    @property
    def solved(self) -> bool:
        return all(c is Clue.GREEN for c in self.clues)

    def letter_bounds(self) -> Dict[str, Tuple[int, bool]]:
        """
        Single pass over the guess: for each letter, (k, capped) where
          k      = number of GREEN/YELLOW occurrences (lower bound in the answer)
          capped = some occurrence was GRAY, so the answer holds exactly k
        """
        confirmed: Counter = Counter()
        capped: Dict[str, bool] = {}
        for ch, c in zip(self.guess, self.clues):
            if c is Clue.GRAY:
                capped[ch] = True
            else:
                confirmed[ch] += 1
                capped.setdefault(ch, False)
        return {ch: (confirmed[ch], cap) for ch, cap in capped.items()}


def parse_feedback(raw: str, N: int) -> Feedback:
    """
    Parse a marker-prefixed feedback line into a Feedback.

    Args:
      raw : user input, e.g. "?i*r!a!t!e"
      N   : expected word length

    Raises:
      ParseError          : unknown marker, missing/non-letter after a marker
      FeedbackLengthError : more or fewer than N (marker, letter) pairs

    Examples:
      parse_feedback("*c?r!a!n!e", 5).pattern -> "GY---"
    """
    marker = None
    letters: List[str] = []
    clues: List[Clue] = []

    for ch in raw:
        if ch.isspace():
            continue
        if len(letters) == N:
            raise FeedbackLengthError("too many letters in input")
        if marker is None:
            marker = Clue.from_marker(ch)
            continue
        letter = ch.lower()
        if not is_word(letter):
            raise ParseError(f"expected a letter after {marker.marker!r}, got {ch!r}")
        letters.append(letter)
        clues.append(marker)
        marker = None

    if marker is not None:
        raise ParseError(f"unprocessed input {marker.marker!r}")
    if len(letters) != N:
        raise FeedbackLengthError(f"expected {N} letters, got {len(letters)}")

    return Feedback("".join(letters), tuple(clues))


def consistent(word: str, feedback: Feedback) -> bool:
    """
    Could `word` be the answer, given `feedback`?

    Positional rules:
      - GREEN at i  : word[i] == guess[i]
      - YELLOW at i : word[i] != guess[i]
    Count rules, per letter of the guess (see Feedback.letter_bounds):
      - word holds the letter at least k times
      - and at most k times when any occurrence was GRAY

    GRAY has no positional rule of its own: on a repeated letter it caps the
    count, it does not mean the letter is absent.
    """
    guess = feedback.guess
    if len(word) != len(guess):
        return False

    for i, (w, g, c) in enumerate(zip(word, guess, feedback.clues)):
        if (c is Clue.GREEN and w != g) or (c is Clue.YELLOW and w == g):
            log.debug("%s: %r at %d violates %s %r", word, w, i, c.name, g)
            return False

    for ch, (k, capped) in feedback.letter_bounds().items():
        n = word.count(ch)
        if n < k:
            log.debug("%s: lacks required letter %s (%d times)", word, ch, k)
            return False
        if capped and n > k:
            log.debug("%s: has %s %d times, at most %d allowed", word, ch, n, k)
            return False

    return True
