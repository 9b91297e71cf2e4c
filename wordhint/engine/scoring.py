"""
Guess evaluation (feedback) for a single (guess, answer) pair.

Verdicts per position:
  - CORRECT   : green  = guess letter equals the answer letter at that position
  - PRESENT   : yellow = letter occurs somewhere else in the answer
  - INCORRECT : gray   = letter does not occur in the answer at all
  - EMPTY     : placeholder, no verdict yet (blank board rows)

This is a SINGLE-PASS check against the whole answer. It does not track
letter multiplicities: guessing "aabbc" against "ddaee" marks both 'a's
PRESENT even though the answer holds only one 'a'. The canonical two-pass
algorithm would downgrade the extra 'a' to INCORRECT; we keep the simpler
behaviour on purpose so boards match the solver's feedback grammar.

Pattern string convention (for logs and CSV reports):
  'G' correct, 'Y' present, '-' incorrect, '.' empty
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Tuple

from .word import WORD_LEN, Word


class Verdict(enum.Enum):
    EMPTY = "."
    CORRECT = "G"
    PRESENT = "Y"
    INCORRECT = "-"


@dataclass(frozen=True)
class GuessLetter:
    """One classified guess character. `char` is '' for EMPTY."""
    verdict: Verdict
    char: str = ""

    @classmethod
    def empty(cls) -> "GuessLetter":
        return cls(Verdict.EMPTY)


@dataclass(frozen=True)
class GuessResult:
    """Exactly WORD_LEN verdicts, one per guess position."""
    letters: Tuple[GuessLetter, ...]

    def __post_init__(self):
        if len(self.letters) != WORD_LEN:
            raise ValueError(f"GuessResult needs {WORD_LEN} letters, got {len(self.letters)}")

    def __iter__(self) -> Iterator[GuessLetter]:
        return iter(self.letters)

    def __getitem__(self, i: int) -> GuessLetter:
        return self.letters[i]

    def pattern(self) -> str:
        """Compact pattern string, e.g. 'GY--G'."""
        return "".join(gl.verdict.value for gl in self.letters)

    def is_win(self) -> bool:
        return all(gl.verdict is Verdict.CORRECT for gl in self.letters)

    @classmethod
    def blank(cls) -> "GuessResult":
        return cls(tuple(GuessLetter.empty() for _ in range(WORD_LEN)))


def evaluate(guess: Word, answer: Word) -> GuessResult:
    """
    Classify every guess letter against `answer`.

    Examples:
      evaluate(abcde, abcde) -> GGGGG
      evaluate(aabbc, ddaee) -> YY---   (both 'a's present, see module doc)
    """
    out = []
    for i, g in enumerate(guess):
        if g == answer[i]:
            out.append(GuessLetter(Verdict.CORRECT, g))
        elif g in answer:
            out.append(GuessLetter(Verdict.PRESENT, g))
        else:
            out.append(GuessLetter(Verdict.INCORRECT, g))
    return GuessResult(tuple(out))


def score(guess: str, answer: str) -> str:
    """String convenience: evaluate two raw strings and return the pattern."""
    return evaluate(Word.parse(guess), Word.parse(answer)).pattern()
