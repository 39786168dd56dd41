"""
Candidate engine: owns the working candidate set for one session.

- apply_feedback: prune the set to words consistent with one more round.
- rank:           score + sort the current set (never truncated).
- state:          awaiting feedback, solved (1 left) or exhausted (0 left).

The set starts as the full dictionary, only ever shrinks, and keeps
dictionary order so output is reproducible.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, List

from .constraints import filter_candidates
from .feedback import Feedback, FeedbackLengthError
from .ranking import Ranking, rank

log = logging.getLogger(__name__)


class SessionState(enum.Enum):
    AWAITING_FEEDBACK = "awaiting feedback"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class CandidateEngine:
    def __init__(self, words: Iterable[str]):
        words = list(words)
        if not words:
            raise ValueError("cannot start a session with an empty dictionary")
        N = len(words[0])
        bad = [w for w in words if len(w) != N]
        if bad:
            raise ValueError(f"dictionary words must all have {N} letters (e.g., {bad[:5]})")

        self.word_length: int = N
        self.dictionary_size: int = len(words)
        self._candidates: List[str] = words
        self._history: List[Feedback] = []

    def __len__(self) -> int:
        return len(self._candidates)

    @property
    def candidates(self) -> List[str]:
        return list(self._candidates)

    @property
    def history(self) -> List[Feedback]:
        return list(self._history)

    @property
    def state(self) -> SessionState:
        if not self._candidates:
            return SessionState.EXHAUSTED
        if len(self._candidates) == 1:
            return SessionState.SOLVED
        return SessionState.AWAITING_FEEDBACK

    def apply_feedback(self, feedback: Feedback) -> int:
        """
        Keep only candidates consistent with `feedback`; returns how many were
        removed. May leave the set empty; that is a state, not an error.

        Raises FeedbackLengthError (nothing mutated) if the feedback doesn't
        have the session's word length.
        """
        if len(feedback) != self.word_length:
            raise FeedbackLengthError(
                f"expected {self.word_length} letters, got {len(feedback)} in {str(feedback)!r}")

        before = len(self._candidates)
        self._candidates = filter_candidates(self._candidates, [feedback], self.word_length)
        self._history.append(feedback)

        removed = before - len(self._candidates)
        log.debug("feedback %s (%s) removed %d of %d candidates",
                  feedback, feedback.pattern, removed, before)
        return removed

    def rank(self) -> Ranking:
        return rank(self._candidates)
