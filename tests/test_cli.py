from pathlib import Path

from apps.cli import assist


def _dict(tmp_path: Path) -> str:
    p = tmp_path / "words_5.txt"
    p.write_text("irate\norate\ncrate\n", encoding="utf-8")
    return str(p)


def test_cli_word_mode(tmp_path: Path, capsys):
    assert assist.main([_dict(tmp_path), "--word", "crate"]) == 0
    out = capsys.readouterr().out
    assert "3 words in dictionary" in out
    assert "  3: guessing crate" in out
    assert "3 guesses required" in out


def test_cli_check_all_words(tmp_path: Path, capsys):
    csv_path = tmp_path / "all.csv"
    rc = assist.main([_dict(tmp_path), "--check-all-words", "--progress", "off", "--out", str(csv_path)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "2 orate (3) irate (2) orate (1)" in out
    assert "solved 3/3" in out
    assert csv_path.exists()


def test_cli_interactive(tmp_path: Path, capsys, monkeypatch):
    answers = iter(["?x", "!i*r*a*t*e", "!o*r*a*t*e"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert assist.main([_dict(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "3 candidates." in out
    assert "Input error:" in out
    assert "the answer is: crate" in out


def test_cli_rejects_mixed_dictionary(tmp_path: Path):
    p = tmp_path / "mixed.txt"
    p.write_text("crane\ncranes\n", encoding="utf-8")
    assert assist.main([str(p)]) == 1


def test_cli_rejects_non_utf8_dictionary(tmp_path: Path):
    p = tmp_path / "latin1.txt"
    p.write_bytes(b"crane\ncaf\xe9s\n")
    assert assist.main([str(p)]) == 1


def test_cli_all_green_outside_dictionary(tmp_path: Path, capsys, monkeypatch):
    answers = iter(["*g*r*a*t*e"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert assist.main([_dict(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "no candidates left! 'grate' isn't in the dictionary" in out
    assert "the answer is" not in out
