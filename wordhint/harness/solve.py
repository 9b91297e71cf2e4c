"""
Interactive solve loop.

Each round:
  1) filter the working pool by the hint, rank the survivors, print the top
     suggestion groups and keep the filtered pool
  2) read one feedback line for the guess the operator made
  3) extend the hint with it (rejected lines are re-prompted, hint untouched)

There is no win condition; the loop ends when the reader raises
InputStreamError (end of input), which propagates to the caller.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from wordhint.engine import Hint, InvalidFeedbackSyntax, Word, parse_feedback
from wordhint.solvers import suggest
from .display import format_suggestions
from .reader import LineReader

PROMPT = "Result: "


@dataclass
class SolveSession:
    pool: List[Word]
    hint: Hint = field(default_factory=Hint)
    rounds: int = 0

    @classmethod
    def from_strings(cls, words: Iterable[str]) -> "SolveSession":
        return cls(pool=[Word.parse(w) for w in words])

    def suggest(self) -> Dict[int, List[Word]]:
        """Narrow the pool with the current hint; return the score groups."""
        self.pool, groups = suggest(self.pool, self.hint)
        self.rounds += 1
        return groups

    def apply_feedback(self, line: str) -> None:
        """Parse a feedback line and extend the hint. Raises InvalidFeedbackSyntax."""
        self.hint.extend(parse_feedback(line))


def read_feedback(session: SolveSession, reader: LineReader) -> None:
    """Prompt until a line parses, then apply it."""
    while True:
        line = reader.read_line(PROMPT)
        try:
            session.apply_feedback(line)
            return
        except InvalidFeedbackSyntax as e:
            print(f"Invalid entry: {e}", file=sys.stderr)


def run_solve(session: SolveSession, reader: LineReader) -> None:
    """Run the solve loop until the reader signals end of input."""
    while True:
        groups = session.suggest()
        for line in format_suggestions(groups):
            print(line)
        read_feedback(session, reader)
