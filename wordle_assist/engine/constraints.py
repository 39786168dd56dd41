"""
Candidate filtering given game history.

Given:
  - a pool of words (the dictionary, or the current candidates)
  - a history of Feedback rounds
  - target word length N

Return:
  - words that are consistent with ALL feedback seen so far.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .feedback import Clue, Feedback, consistent

History = Iterable[Feedback]


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words of length N consistent with every Feedback in `history`.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []
    for w in words:
        if len(w) != N:
            continue
        if all(consistent(w, fb) for fb in history):
            out.append(w)
    return out


def find_conflict(history: History, feedback: Feedback) -> Optional[str]:
    """
    Describe how `feedback` contradicts earlier rounds at the same position,
    or return None if it doesn't.

    Only position-level contradictions are caught here (a different green at
    a slot already known, or a non-green clue on the known green letter);
    anything subtler just shows up as an empty candidate set.
    """
    greens: Dict[int, str] = {}
    for fb in history:
        for i, (ch, c) in enumerate(zip(fb.guess, fb.clues)):
            if c is Clue.GREEN:
                greens[i] = ch

    for i, (ch, c) in enumerate(zip(feedback.guess, feedback.clues)):
        known = greens.get(i)
        if known is None:
            continue
        if c is Clue.GREEN and ch != known:
            return f"you already said that letter {i + 1} is {known!r}"
        if c is not Clue.GREEN and ch == known:
            return f"you already said that letter {i + 1} is {known!r}, not {c.name.lower()}"
    return None
