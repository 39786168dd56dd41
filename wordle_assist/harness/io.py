"""
I/O utilities for self-play runs.

- write_csv: flatten per-answer results into a tidy CSV (one row per answer).
"""

from __future__ import annotations

from pathlib import Path
from typing import List
import csv

from .core import SimulationResult


def write_csv(results: List[SimulationResult], path: str) -> str:
    """
    Serialize a batch of simulation results to CSV.

    Schema (columns):
      answer, success, guesses, dictionary_size,
      guess_1, remaining_1, ..., guess_K, remaining_K
    where K is the longest game in the batch.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    width = max((r.guesses for r in results), default=0)
    fields = ["answer", "success", "guesses", "dictionary_size"]
    for i in range(1, width + 1):
        fields += [f"guess_{i}", f"remaining_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "answer": r.answer,
                "success": r.success,
                "guesses": r.guesses,
                "dictionary_size": r.dictionary_size,
            }
            # Shorter games leave the trailing columns blank
            for i in range(1, width + 1):
                if i <= r.guesses:
                    g, n = r.steps[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"remaining_{i}"] = n
                else:
                    row[f"guess_{i}"] = ""
                    row[f"remaining_{i}"] = ""

            w.writerow(row)

    return str(p)
