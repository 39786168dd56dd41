"""
Self-play primitives.

- guess_word:      auto-play one hidden answer, always guessing the top-ranked
                   candidate, until it is found.
- check_all_words: run guess_word for every word of the dictionary.
- summarize:       aggregate stats over a batch.

There is no turn limit: the top candidate is removed on every miss, so a
game always ends once the answer is guessed or the set runs dry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from wordle_assist.engine import CandidateEngine, score

log = logging.getLogger(__name__)

# (guess, candidates remaining after it); ("", 0) marks an unreachable answer
Step = Tuple[str, int]


@dataclass
class SimulationResult:
    answer: str
    dictionary_size: int
    steps: List[Step] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return bool(self.steps) and self.steps[-1][0] == self.answer

    @property
    def guesses(self) -> int:
        return len(self.steps)

    def line(self) -> str:
        """<guesses> <answer> (<dictionary size>) <guess> (<remaining>)..."""
        parts = [f"{self.guesses} {self.answer} ({self.dictionary_size})"]
        parts += [f"{g} ({n})" for g, n in self.steps]
        return " ".join(parts)


def guess_word(answer: str, dictionary: Sequence[str]) -> List[Step]:
    """
    Play one game against `answer` and return the guesses made.

    Each step is (guess, remaining candidates). The last step is
    (answer, 1) on success, or ("", 0) if the answer isn't reachable
    (e.g., it's not in the dictionary).
    """
    engine = CandidateEngine(dictionary)
    steps: List[Step] = []

    while True:
        ranking = engine.rank()
        if not ranking:
            steps.append(("", 0))
            return steps

        guess = ranking[0][0]
        if guess == answer:
            steps.append((guess, 1))
            return steps

        feedback = score(guess, answer)
        engine.apply_feedback(feedback)
        log.debug("%s: guessed %s -> %s, %d left", answer, guess, feedback.pattern, len(engine))
        steps.append((guess, len(engine)))


def check_all_words(dictionary: Sequence[str],
                    answers: Optional[Iterable[str]] = None) -> Iterator[SimulationResult]:
    """
    Simulate every answer (default: the whole dictionary), lazily so a
    caller can wrap it in a progress bar.
    """
    dictionary = list(dictionary)
    for ans in (dictionary if answers is None else answers):
        yield SimulationResult(ans, len(dictionary), guess_word(ans, dictionary))


def summarize(results: Iterable[SimulationResult]) -> Dict:
    results = list(results)
    solved = [r.guesses for r in results if r.success]
    return {
        "count": len(results),
        "solved": len(solved),
        "mean_guesses": (sum(solved) / len(solved)) if solved else 0.0,
        "max_guesses": max(solved) if solved else 0,
    }
