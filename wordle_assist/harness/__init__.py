from .core import SimulationResult, guess_word, check_all_words, summarize
from .display import format_words, format_ranking
from .io import write_csv
from .session import Session, TurnResult

__all__ = [
    "SimulationResult", "guess_word", "check_all_words", "summarize",
    "format_words", "format_ranking", "write_csv", "Session", "TurnResult",
]
