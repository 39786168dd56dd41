"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

This is what the game itself would show; the assistant only needs it to
auto-play words in simulation mode and to cross-check filtering in tests.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter
from typing import List

from .feedback import Clue, Feedback


def score(guess: str, answer: str) -> Feedback:
    """
    Compute the Feedback for `guess` against `answer`.

    Raises ValueError if the lengths differ.

    Examples:
      score("belle", "level").pattern -> "-GYYY"
      score("lemon", "level").pattern -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess {guess!r} and answer {answer!r} differ in length")

    clues: List[Clue] = [Clue.GRAY] * len(guess)

    # Pass 1: greens, and leftover counts from the answer for pass 2
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            clues[i] = Clue.GREEN
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the true multiplicity in the answer
    for i, g in enumerate(guess):
        if clues[i] is Clue.GREEN:
            continue
        if remaining[g] > 0:
            clues[i] = Clue.YELLOW
            remaining[g] -= 1

    return Feedback(guess, tuple(clues))
