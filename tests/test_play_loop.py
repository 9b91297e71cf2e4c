import random

import pytest
from wordhint.engine import Word
from wordhint.harness import PlayGame, PlayStatus, ScriptedReader, InputStreamError, run_play


def test_six_misses_lose_and_reveal(capsys):
    game = PlayGame(answer=Word.parse("zebra"))
    guesses = ["crane", "blast", "oops", "child", "cloud", "chess", "music"]
    run_play(game, ScriptedReader(guesses), color=False)

    assert game.status is PlayStatus.LOST
    assert game.round == 6
    assert len(game.results) == 6
    captured = capsys.readouterr()
    assert "Invalid guess" in captured.err
    assert "The word was zebra." in captured.out


def test_win_reports_round(capsys):
    game = PlayGame(answer=Word.parse("zebra"))
    reader = ScriptedReader(["crane", "  ZEBRA  "])
    run_play(game, reader, color=False)

    assert game.status is PlayStatus.WON
    assert game.round == 2
    assert len(game.results) == 1
    assert "got it in 2" in capsys.readouterr().out
    assert reader.prompts == ["Guess 1/6: ", "Guess 2/6: "]


def test_board_redisplays_all_rounds(capsys):
    game = PlayGame(answer=Word.parse("zebra"))
    run_play(game, ScriptedReader(["crane", "blast", "zebra"]), color=False)
    out = capsys.readouterr().out
    assert out.count("1: c r a n e") == 2
    assert out.count("2: b l a s t") == 1


def test_colour_board_uses_ansi(capsys):
    game = PlayGame(answer=Word.parse("zebra"))
    with pytest.raises(InputStreamError):
        run_play(game, ScriptedReader(["crane"]), color=True)
    assert game.results[0].pattern() == "-YY-Y"
    out = capsys.readouterr().out
    assert "\033[30;43m R \033[0m" in out       # present -> yellow
    assert "\033[97;100m C \033[0m" in out      # incorrect -> grey
    assert "\033[30;42m" not in out             # nothing correct


def test_end_of_input_is_fatal():
    game = PlayGame(answer=Word.parse("zebra"))
    with pytest.raises(InputStreamError):
        run_play(game, ScriptedReader(["crane"]))
    assert game.status is PlayStatus.AWAIT_GUESS
    assert game.round == 2


def test_submit_after_game_over():
    game = PlayGame(answer=Word.parse("zebra"))
    assert game.submit(Word.parse("zebra")) is PlayStatus.WON
    with pytest.raises(ValueError):
        game.submit(Word.parse("crane"))


def test_draw_is_seeded():
    answers = ["crane", "blast", "zebra"]
    a = PlayGame.draw(answers, random.Random(7)).answer
    b = PlayGame.draw(answers, random.Random(7)).answer
    assert a == b and str(a) in answers
    with pytest.raises(ValueError):
        PlayGame.draw([], random.Random(7))


def test_colour_board_marks_correct_green(capsys):
    game = PlayGame(answer=Word.parse("zebra"))
    with pytest.raises(InputStreamError):
        run_play(game, ScriptedReader(["zonal"]), color=True)
    assert game.results[0].pattern() == "G--Y-"
    out = capsys.readouterr().out
    assert "\033[30;42m Z \033[0m" in out     # correct -> green
