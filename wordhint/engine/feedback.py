"""
Feedback-line grammar for solve mode.

One line reports the result of the previous guess, read left to right with a
position counter starting at 0:

  a-z       letter is in the word but not here       (advances position)
  A-Z       letter is confirmed here                 (advances position)
  ! ` '     the NEXT lowercase letter is absent      (does not advance)
  !x        x is absent from the word                (advances position)

Example: "C!r!a!n!e" -> c at 0, r/a/n/e absent.

A negation marker stays armed across uppercase letters until a lowercase
letter consumes it. Anything else rejects the whole line, and so does a line
naming more than WORD_LEN letters, negated ones included ("!a!b!c!d!e!f"
is rejected, not read as six absent letters).
"""

from __future__ import annotations

from .constraints import FoundLetter, Hint
from .scoring import GuessResult, Verdict
from .word import WORD_LEN

NEGATION_MARKERS = "!`'"


class InvalidFeedbackSyntax(ValueError):
    """Raised for a feedback line the grammar does not accept."""


def parse_feedback(line: str) -> Hint:
    """
    Parse one feedback line into the Hint increment it reports.

    The caller extends its session Hint with the result only after this
    returns, so a rejected line leaves the session untouched.

    Raises:
      InvalidFeedbackSyntax on a character outside a-z, A-Z and the
      negation markers, or when the line names more than WORD_LEN letters.
    """
    inc = Hint()
    position = 0
    negate_next = False

    for c in line:
        if c in NEGATION_MARKERS:
            negate_next = True
            continue
        if not ("a" <= c <= "z" or "A" <= c <= "Z"):
            raise InvalidFeedbackSyntax(f"invalid character {c!r} in {line!r}")
        if position >= WORD_LEN:
            raise InvalidFeedbackSyntax(f"more than {WORD_LEN} letters in {line!r}")

        if "a" <= c <= "z":
            if negate_next:
                inc.omit_letters.append(c)
                negate_next = False
            else:
                inc.req_letters.append(c)
                inc.cand_letters.append(FoundLetter(c, position, False))
        else:
            low = c.lower()
            inc.req_letters.append(low)
            inc.cand_letters.append(FoundLetter(low, position, True))
        position += 1

    return inc


def feedback_line(result: GuessResult) -> str:
    """
    Write the feedback line that reports `result`.

    CORRECT -> uppercase, PRESENT -> lowercase, INCORRECT -> '!' + lowercase.
    EMPTY positions cannot be reported.
    """
    parts = []
    for gl in result:
        if gl.verdict is Verdict.CORRECT:
            parts.append(gl.char.upper())
        elif gl.verdict is Verdict.PRESENT:
            parts.append(gl.char)
        elif gl.verdict is Verdict.INCORRECT:
            parts.append("!" + gl.char)
        else:
            raise ValueError("cannot report a result with EMPTY positions")
    return "".join(parts)
