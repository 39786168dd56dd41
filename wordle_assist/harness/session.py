"""
Interactive session state machine.

    start -> AWAITING_FEEDBACK
    AWAITING_FEEDBACK + valid line -> apply -> AWAITING_FEEDBACK, SOLVED or EXHAUSTED
    AWAITING_FEEDBACK + bad line   -> AWAITING_FEEDBACK (nothing mutated)

An empty candidate set is EXHAUSTED even after an all-green line: the answer
wasn't in the dictionary.

UI-agnostic: the CLI owns reading lines and printing; this owns what a line
does to the candidate set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wordle_assist.engine import (
    CandidateEngine,
    ConflictError,
    FeedbackError,
    SessionState,
    find_conflict,
    parse_feedback,
)


@dataclass
class TurnResult:
    accepted: bool
    state: SessionState
    removed: int = 0
    error: Optional[FeedbackError] = None


class Session:
    def __init__(self, engine: CandidateEngine):
        self.engine = engine
        self._solved_by_guess: Optional[str] = None

    @property
    def state(self) -> SessionState:
        if self.engine.state is SessionState.EXHAUSTED:
            return SessionState.EXHAUSTED
        if self._solved_by_guess is not None:
            return SessionState.SOLVED
        return self.engine.state

    @property
    def finished(self) -> bool:
        return self.state is not SessionState.AWAITING_FEEDBACK

    @property
    def answer(self) -> Optional[str]:
        """The solution once SOLVED, else None."""
        if self.state is not SessionState.SOLVED:
            return None
        if self._solved_by_guess is not None:
            return self._solved_by_guess
        if self.engine.state is SessionState.SOLVED:
            return self.engine.candidates[0]
        return None

    def submit(self, line: str) -> TurnResult:
        """
        Parse one feedback line and apply it.

        Malformed or contradictory input comes back as accepted=False with the
        error attached; the candidate set is left alone so the caller can
        re-prompt.
        """
        if self.finished:
            raise RuntimeError(f"session is already {self.state.value}")

        try:
            feedback = parse_feedback(line, self.engine.word_length)
            conflict = find_conflict(self.engine.history, feedback)
            if conflict:
                raise ConflictError(conflict)
            removed = self.engine.apply_feedback(feedback)
        except FeedbackError as e:
            return TurnResult(accepted=False, state=self.state, error=e)

        if feedback.solved:
            self._solved_by_guess = feedback.guess
        return TurnResult(accepted=True, state=self.state, removed=removed)
