"""Console formatting for candidate lists and rankings (truncated)."""

from __future__ import annotations

from typing import Iterable, List

from wordle_assist.engine.ranking import Ranking

DEFAULT_LIMIT = 10


def format_words(label: str, items: Iterable[str], limit: int = DEFAULT_LIMIT) -> str:
    """
    "label: a, b, c" with at most `limit` items, then ", and N more".

    Example:
        format_words("candidates", ["crate", "orate", "irate"], limit=2)
        -> "candidates: crate, orate, and 1 more"
    """
    items = list(items)
    shown: List[str] = items[:limit]
    out = f"{label}: " + ", ".join(shown)
    extra = len(items) - len(shown)
    if extra > 0:
        out += f", and {extra} more"
    return out


def format_ranking(ranking: Ranking, limit: int = DEFAULT_LIMIT) -> str:
    return format_words(
        "By letter frequency",
        (f"\n\t{w} ({s:.3f})" for w, s in ranking),
        limit=limit,
    )
