import pytest
from wordle_assist.engine import (
    Clue, Feedback, FeedbackLengthError, ParseError, consistent, parse_feedback,
)

G, Y, X = Clue.GREEN, Clue.YELLOW, Clue.GRAY


def test_parse_eleven_letters():
    fb = parse_feedback("!u?l*c?e?r?a!t!i*o!n!s", 11)
    assert fb.guess == "ulcerations"
    assert fb.clues == (X, Y, G, Y, Y, Y, X, X, G, X, X)
    assert str(fb) == "!u?l*c?e?r?a!t!i*o!n!s"


def test_parse_case_and_whitespace():
    fb = parse_feedback(" ?I *R !a !T !e ", 5)
    assert fb.guess == "irate"
    assert fb.pattern == "YG---"


@pytest.mark.parametrize("raw,err", [
    ("*c?r!a!n", FeedbackLengthError),        # too few
    ("*c?r!a!n!e!s", FeedbackLengthError),    # too many
    ("#c?r!a!n!e", ParseError),               # unknown marker
    ("c*r?a!n!e", ParseError),                # letter without a marker
    ("*c?r!a!n!", ParseError),                # dangling marker
    ("*c?r!a!n!1", ParseError),               # not a letter
    ("*c?r!a!n**", ParseError),               # marker where a letter belongs
    ("", FeedbackLengthError),
])
def test_parse_errors(raw, err):
    with pytest.raises(err):
        parse_feedback(raw, 5)


def test_length_error_is_a_parse_error():
    assert issubclass(FeedbackLengthError, ParseError)


def test_feedback_validates_shape():
    with pytest.raises(FeedbackLengthError):
        Feedback("crane", (G, G))
    with pytest.raises(ParseError):
        Feedback("Crane", (G,) * 5)
    with pytest.raises(TypeError):
        Feedback("crane", ("*",) * 5)
    assert Feedback("crane", [G] * 5).solved


def test_clue_markers():
    assert [Clue.from_marker(m) for m in "*?!"] == [G, Y, X]
    assert [c.pattern_char for c in (G, Y, X)] == ["G", "Y", "-"]


def test_five_letter_rounds():
    rounds = ["!a!d!i!e!u", "?t!h?o?r!n", "!s*o?r?t!s", "!p!a!l!m!y"]
    history = [parse_feedback(r, 5) for r in rounds]

    assert consistent("thorn", history[0])
    assert all(consistent("sorts", fb) for fb in history[:2])
    assert not all(consistent("palmy", fb) for fb in history[:3])
    assert all(consistent("robot", fb) for fb in history)
    assert not all(consistent("motor", fb) for fb in history)


def test_eleven_letter_rounds():
    assert consistent("archaeology", parse_feedback("!u?l*c?e?r?a!t!i*o!n!s", 11))
    assert consistent("incongruous", parse_feedback("?u!l*c!e?r!a!t?i*o?n*s", 11))

    first = parse_feedback("!u!l?c!e!r?a?t?i?o!n?s", 11)
    assert consistent("symptomatic", first) and consistent("masochistic", first)

    # symptomatic / masochistic: a gray second 'm' (or 't') pins the count
    fb = parse_feedback("?s!y?m!p!t?o!m?a*t*i*c", 11)
    assert not consistent("symptomatic", fb)
    assert consistent("masochistic", fb)

    fb = parse_feedback("?m?a?s?o!c!h!i!s*t*i*c", 11)
    assert consistent("symptomatic", fb)
    assert not consistent("masochistic", fb)
