from .feedback import (
    Clue,
    Feedback,
    FeedbackError,
    ParseError,
    FeedbackLengthError,
    ConflictError,
    parse_feedback,
    consistent,
)
from .scoring import score
from .constraints import filter_candidates, find_conflict
from .ranking import rank, letter_frequencies
from .candidates import CandidateEngine, SessionState

__all__ = [
    "Clue", "Feedback", "FeedbackError", "ParseError", "FeedbackLengthError", "ConflictError",
    "parse_feedback", "consistent", "score", "filter_candidates", "find_conflict",
    "rank", "letter_frequencies", "CandidateEngine", "SessionState",
]
