"""
Letter-frequency ranking (distinct-letter coverage).

Idea:
  - For each letter, its frequency is the fraction of CURRENT candidates that
    contain it at least once. Score each word as the sum of its DISTINCT
    letters' frequencies, so a repeated letter never counts twice.
  - Sort by score, highest first; equal scores keep dictionary order.

The table is rebuilt from the live candidate set on every call; it is not a
static English-letter table.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Tuple

Ranking = List[Tuple[str, float]]


def _coverage(candidates: Sequence[str]) -> Counter:
    """letter -> number of candidates containing it at least once"""
    counts: Counter = Counter()
    for w in candidates:
        counts.update(set(w))
    return counts


def letter_frequencies(candidates: Sequence[str]) -> Dict[str, float]:
    n = len(candidates)
    if n == 0:
        return {}
    return {ch: c / n for ch, c in sorted(_coverage(candidates).items())}


def rank(candidates: Sequence[str]) -> Ranking:
    """
    Rank candidates by distinct-letter frequency.

    Scores are summed as integer coverage counts and divided once by the set
    size, so words with the same letter set tie exactly regardless of letter
    order ("arise" vs "raise").

    Returns:
      List of (word, score), descending score, stable on ties.
    """
    n = len(candidates)
    if n == 0:
        return []
    counts = _coverage(candidates)
    scored = [(w, sum(counts[ch] for ch in set(w)) / n) for w in candidates]
    # sorted() is stable: ties stay in input order
    return sorted(scored, key=lambda ws: -ws[1])
