import pytest
from wordhint.engine import InvalidFeedbackSyntax
from wordhint.harness import SolveSession, ScriptedReader, InputStreamError, run_solve
from wordhint.harness.display import format_suggestions
from wordhint.engine import Word


POOL = ["crane", "blast", "child", "cloud", "chess", "music"]


def test_correct_first_letter_and_absent_rest(capsys):
    session = SolveSession.from_strings(POOL)
    reader = ScriptedReader(["C!r!a!n!e"])
    with pytest.raises(InputStreamError):
        run_solve(session, reader)

    assert [str(w) for w in session.pool] == ["child", "cloud"]
    assert reader.prompts == ["Result: ", "Result: "]
    out = capsys.readouterr().out
    assert out.count("Suggestions, in ascending order of score:") == 2


def test_invalid_line_is_reprompted_and_leaves_hint(capsys):
    session = SolveSession.from_strings(POOL)
    reader = ScriptedReader(["cr@ne", "C!r!a!n!e"])
    with pytest.raises(InputStreamError):
        run_solve(session, reader)

    assert "Invalid entry" in capsys.readouterr().err
    assert session.hint.omit_letters == list("rane")
    assert session.rounds == 2


def test_apply_feedback_is_all_or_nothing():
    session = SolveSession.from_strings(POOL)
    with pytest.raises(InvalidFeedbackSyntax):
        session.apply_feedback("Cr!a?")
    assert session.hint.is_empty()


def test_pool_only_shrinks():
    session = SolveSession.from_strings(POOL)
    session.suggest()
    sizes = [len(session.pool)]
    for line in ["!b", "c", "!m"]:
        session.apply_feedback(line)
        session.suggest()
        sizes.append(len(session.pool))
    assert sizes == sorted(sizes, reverse=True)
    assert session.pool == []


def test_suggestion_table_shows_top_ten_best_last():
    groups = {s: [Word.parse("abcde")] for s in range(12, 0, -1)}
    lines = format_suggestions(groups)
    assert len(lines) == 11
    assert lines[1].startswith("    3 -> ")
    assert lines[-1] == "   12 -> [abcde]"
