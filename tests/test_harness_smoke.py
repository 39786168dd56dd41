import csv
from pathlib import Path

from wordle_assist.engine import CandidateEngine, ConflictError, ParseError, SessionState
from wordle_assist.harness import (
    Session, check_all_words, format_ranking, format_words, guess_word, summarize, write_csv,
)

import pytest

DICT = ["irate", "orate", "crate"]


def test_guess_word_smoke():
    steps = guess_word("crate", DICT)
    assert steps == [("irate", 2), ("orate", 1), ("crate", 1)]


def test_guess_word_unreachable():
    steps = guess_word("grate", DICT)
    assert steps[-1] == ("", 0)
    assert len(steps) == 4


def test_check_all_words_and_summary():
    results = list(check_all_words(DICT))
    assert [r.answer for r in results] == DICT
    assert all(r.success for r in results)
    assert [r.guesses for r in results] == [1, 2, 3]
    assert results[2].line() == "3 crate (3) irate (2) orate (1) crate (1)"

    stats = summarize(results)
    assert stats == {"count": 3, "solved": 3, "mean_guesses": 2.0, "max_guesses": 3}


def test_write_csv(tmp_path: Path):
    results = list(check_all_words(DICT))
    out = write_csv(results, str(tmp_path / "out" / "all.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["guess_1"] == "irate" and rows[0]["guess_2"] == ""
    assert rows[2]["guess_3"] == "crate" and rows[2]["remaining_3"] == "1"


def test_session_flow():
    s = Session(CandidateEngine(DICT))
    r = s.submit("not feedback")
    assert not r.accepted and isinstance(r.error, ParseError)
    assert len(s.engine) == 3 and s.state is SessionState.AWAITING_FEEDBACK

    r = s.submit("!i*r*a*t*e")
    assert r.accepted and r.removed == 1
    assert s.state is SessionState.AWAITING_FEEDBACK

    # contradicts the green 'r' from the first round
    r = s.submit("!o*x*a*t*e")
    assert not r.accepted and isinstance(r.error, ConflictError)
    assert s.engine.candidates == ["orate", "crate"]

    r = s.submit("!o*r*a*t*e")
    assert r.accepted and r.state is SessionState.SOLVED
    assert s.answer == "crate" and s.finished

    with pytest.raises(RuntimeError):
        s.submit("!o*r*a*t*e")


def test_session_all_green_and_exhausted():
    s = Session(CandidateEngine(DICT))
    assert s.submit("*o*r*a*t*e").state is SessionState.SOLVED
    assert s.answer == "orate"

    s = Session(CandidateEngine(DICT))
    assert s.submit("!i!r!a!t!e").state is SessionState.EXHAUSTED
    assert s.answer is None


def test_session_all_green_outside_dictionary_is_exhausted():
    s = Session(CandidateEngine(DICT))
    r = s.submit("*g*r*a*t*e")
    assert r.accepted and r.state is SessionState.EXHAUSTED
    assert s.answer is None and s.finished


def test_session_wrong_length_line():
    s = Session(CandidateEngine(DICT))
    r = s.submit("!i*r*a*t")
    assert not r.accepted and "expected 5" in str(r.error)


def test_format_words():
    assert format_words("candidates", ["crate", "orate", "irate"], limit=2) == \
        "candidates: crate, orate, and 1 more"
    assert format_words("candidates", ["crate", "orate"]) == "candidates: crate, orate"
    assert format_ranking([("orate", 4.5)]) == "By letter frequency: \n\torate (4.500)"


def test_session_module_compiles_without_warnings():
    import warnings
    from wordle_assist.harness import session

    src = Path(session.__file__).read_text(encoding="utf-8")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(src, session.__file__, "exec")
