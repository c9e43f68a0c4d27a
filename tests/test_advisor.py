import sys

import pytest

import entropy_advisor
from wordle_engine.openers import has_starting_words, starting_words
from wordle_engine.words import load_dictionary


WORD_FILE = """crane
slate

trace
cranes
cr4ne
Slate
erase
"""


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(WORD_FILE)
    return path


def run_main(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["entropy_advisor.py", *argv])
    entropy_advisor.main()


def test_load_dictionary_skips_bad_lines(word_file):
    assert load_dictionary(word_file, 5) == ["CRANE", "SLATE", "TRACE", "ERASE"]
    assert load_dictionary(word_file, 6) == ["CRANES"]


def test_parse_helpers():
    assert entropy_advisor.parse_green(["0:c", "4:E"]) == {0: "C", 4: "E"}
    assert entropy_advisor.parse_yellow(["a:1,3", "A:2", "s"]) == {"A": [1, 3, 2], "S": []}
    with pytest.raises(ValueError):
        entropy_advisor.parse_green(["C"])
    with pytest.raises(ValueError):
        entropy_advisor.parse_feedback([("CRANE", "GGG")], 5)


def test_pattern_mode_output(monkeypatch, capsys):
    run_main(monkeypatch, "-pattern", "speed", "erase")
    assert capsys.readouterr().out.strip() == "SPEED vs ERASE: YBYYB (code 93)"


def test_pattern_mode_rejects_mismatch(monkeypatch):
    with pytest.raises(SystemExit):
        run_main(monkeypatch, "-pattern", "crane", "cranes")


def test_openers_mode(monkeypatch, capsys):
    run_main(monkeypatch, "-openers", "-length", "4")
    out = capsys.readouterr().out
    assert "TEAR" in out


def test_feedback_narrows_candidates(monkeypatch, capsys, word_file):
    run_main(monkeypatch, "-dictionary", str(word_file), "-feedback", "CRANE", "BBGBG")
    out = capsys.readouterr().out
    assert "1 candidate(s) remain." in out
    assert "Solved: SLATE" in out


def test_advice_lists_guesses(monkeypatch, capsys, word_file):
    run_main(monkeypatch, "-dictionary", str(word_file), "-top", "2")
    out = capsys.readouterr().out
    assert "Top 2 strategic guesses:" in out
    assert "Top 4 possible answers:" in out


def test_entropy_mode(monkeypatch, capsys, word_file):
    run_main(monkeypatch, "-dictionary", str(word_file), "-gray", "D", "-entropy", "crane")
    out = capsys.readouterr().out
    assert "CRANE: 2.0000 bits" in out


def test_dictionary_required(monkeypatch):
    with pytest.raises(SystemExit):
        run_main(monkeypatch)


def test_starting_words_fallback():
    assert has_starting_words(5)
    assert not has_starting_words(20)
    assert starting_words(20) == starting_words(5)
    assert starting_words()[0] == "CRANE"


def test_entropy_mode_checks_guess_length(monkeypatch, word_file):
    with pytest.raises(SystemExit, match="CRANES"):
        run_main(
            monkeypatch,
            "-dictionary", str(word_file),
            "-feedback", "CRANE", "BBGBG",
            "-entropy", "cranes",
        )
