import builtins

import pytest

from apps.cli import main as cli
from apps.cli import run as bench


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_check_bundled_lists(capsys):
    assert cli.main(["check"]) == 0
    assert capsys.readouterr().out.strip().endswith("OK")


def test_solve_ends_on_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, ["C!r!a!n!e"])
    assert cli.main(["solve"]) == 1
    captured = capsys.readouterr()
    assert "Suggestions, in ascending order of score:" in captured.out
    assert "Error: end of input" in captured.err


def test_play_seeded_game_loses(monkeypatch, capsys):
    _feed(monkeypatch, ["aaaaa"] * 6)
    assert cli.main(["play", "--seed", "1", "--no-color"]) == 0
    assert "Out of guesses. The word was" in capsys.readouterr().out


def test_bench_sample(capsys):
    assert bench.main(["--sample", "5", "--progress", "off"]) == 0
    out = capsys.readouterr().out
    assert "games=5" in out and "solved=" in out


def test_solve_help_mentions_limits(capsys):
    with pytest.raises(SystemExit):
        cli.main(["solve", "--help"])
    out = " ".join(capsys.readouterr().out.split())
    assert "At most 5 letters per line, negated letters included." in out
    assert "bundled word lists are small samples" in out
