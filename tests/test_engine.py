import pytest
from wordhint.engine import (Word, ParseError, evaluate, score, Verdict, GuessResult, Hint, FoundLetter,
                             is_candidate, filter_pool, parse_feedback, feedback_line,
                             InvalidFeedbackSyntax)


def W(s):
    return Word.parse(s)


# --- Word ---
@pytest.mark.parametrize("raw", ["crane", "CRANE", "CrAnE", "ab1de", "     "])
def test_parse_displays_lowercase(raw):
    assert str(W(raw)) == raw.lower()


@pytest.mark.parametrize("raw", ["", "cran", "cranes", " crane", "crane\n"])
def test_parse_rejects_wrong_length(raw):
    with pytest.raises(ParseError):
        W(raw)


def test_parse_lowercases_ascii_only():
    w = W("\u0130ABcd")
    assert len(str(w)) == 5
    assert list(w) == ["\u0130", "a", "b", "c", "d"]


def test_word_equality_and_hash():
    assert W("Crane") == W("crANE")
    assert W("crane") != W("crank")
    assert len({W("crane"), W("CRANE"), W("crank")}) == 2


# --- Evaluator: single-pass goldens ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("abcde", "abcde", "GGGGG"),
    ("aabbc", "ddaee", "YY---"),
    ("crane", "zebra", "-YY-Y"),
    ("belle", "level", "-GYYY"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    # a two-pass evaluator would give "--Y-Y" here
    ("speed", "abide", "--YYY"),
])
def test_evaluate_golden(guess, answer, expected):
    assert evaluate(W(guess), W(answer)).pattern() == expected
    assert score(guess, answer) == expected


def test_evaluate_keeps_guess_chars():
    r = evaluate(W("aabbc"), W("ddaee"))
    assert [gl.char for gl in r] == list("aabbc")
    assert r[0].verdict is Verdict.PRESENT and r[1].verdict is Verdict.PRESENT
    assert r[4].verdict is Verdict.INCORRECT
    assert not r.is_win()
    assert evaluate(W("abcde"), W("abcde")).is_win()


# --- Candidate filter ---
POOL = [W(s) for s in ["crane", "blast", "child", "cloud", "chess", "music"]]


def test_filter_correct_plus_absent():
    h = Hint(omit_letters=list("rane"), req_letters=["c"],
             cand_letters=[FoundLetter("c", 0, True)])
    assert [str(w) for w in filter_pool(POOL, h)] == ["child", "cloud"]


def test_present_letter_excludes_that_position():
    h = Hint(req_letters=["s"], cand_letters=[FoundLetter("s", 0, False)])
    assert [str(w) for w in filter_pool(POOL, h)] == ["blast", "chess", "music"]


def test_required_letter_is_presence_not_count():
    h = Hint(req_letters=["s", "s", "s"])
    assert is_candidate(W("music"), h)


def test_empty_hint_keeps_everything():
    assert filter_pool(POOL, Hint()) == POOL


def test_filter_is_idempotent():
    h = parse_feedback("c!r!a!n!e")
    once = filter_pool(POOL, h)
    assert filter_pool(once, h) == once


def test_more_hints_never_readmit():
    h = parse_feedback("!b")
    before = set(filter_pool(POOL, h))
    h.extend(parse_feedback("c"))
    after = set(filter_pool(POOL, h))
    assert after <= before


# --- Feedback grammar ---
def test_parse_feedback_correct_and_absent():
    h = parse_feedback("C!r!a!n!e")
    assert h.omit_letters == list("rane")
    assert h.req_letters == ["c"]
    assert h.cand_letters == [FoundLetter("c", 0, True)]


def test_parse_feedback_positions_advance_on_every_letter():
    h = parse_feedback("!cRa`ne")
    assert h.omit_letters == ["c", "n"]
    assert h.cand_letters == [
        FoundLetter("r", 1, True),
        FoundLetter("a", 2, False),
        FoundLetter("e", 4, False),
    ]


def test_negation_skips_uppercase():
    h = parse_feedback("!Ab")
    assert h.cand_letters == [FoundLetter("a", 0, True)]
    assert h.omit_letters == ["b"]


@pytest.mark.parametrize("line", ["cr@ne", "cr ne", "crane!x", "abcdef", "!a!b!c!d!e!f", "12345"])
def test_parse_feedback_rejects(line):
    with pytest.raises(InvalidFeedbackSyntax):
        parse_feedback(line)


def test_empty_feedback_is_no_information():
    assert parse_feedback("").is_empty()


def test_feedback_line_reports_result():
    line = feedback_line(evaluate(W("crane"), W("zebra")))
    assert line == "!cra!ne"
    h = parse_feedback(line)
    assert is_candidate(W("zebra"), h)
    assert not is_candidate(W("crane"), h)


def test_blank_result_cannot_be_reported():
    blank = GuessResult.blank()
    assert blank.pattern() == "....."
    assert all(gl.verdict is Verdict.EMPTY for gl in blank)
    with pytest.raises(ValueError):
        feedback_line(blank)


def test_result_needs_five_letters():
    with pytest.raises(ValueError):
        GuessResult(())
