"""
Terminal rendering: suggestion tables and coloured guess boards.

Colour mapping (foreground/background pairs):
  CORRECT   -> black on green
  PRESENT   -> black on yellow
  INCORRECT -> white on grey
  EMPTY     -> uncoloured blank cell
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from wordhint.engine import GuessResult, Verdict, Word

TOP_GROUPS = 10

_COLOURS = {
    Verdict.CORRECT: "\033[30;42m",
    Verdict.PRESENT: "\033[30;43m",
    Verdict.INCORRECT: "\033[97;100m",
}
_RESET = "\033[0m"


def format_suggestions(groups: Dict[int, List[Word]], top: int = TOP_GROUPS) -> List[str]:
    """
    Lines for the suggestion table. `groups` is best-first; the best `top`
    groups are printed lowest score first so the strongest picks end up on
    the last line.
    """
    best = list(groups.items())[:top]
    lines = ["Suggestions, in ascending order of score:"]
    for s, words in reversed(best):
        lines.append(f"{s:5} -> [{', '.join(str(w) for w in words)}]")
    return lines


def colourise(result: GuessResult, color: bool = True) -> str:
    """One board row. Without colour, the pattern letters are printed under the word."""
    if not color:
        word = " ".join(gl.char or "_" for gl in result)
        patt = " ".join(result.pattern())
        return f"{word}\n{patt}"
    out = []
    for gl in result:
        if gl.verdict is Verdict.EMPTY:
            out.append("   ")
        else:
            out.append(f"{_COLOURS[gl.verdict]} {gl.char.upper()} {_RESET}")
    return "".join(out)


def format_board(results: Sequence[GuessResult], color: bool = True) -> List[str]:
    """Every round so far, in order, numbered from 1."""
    return [f"{i}: {colourise(r, color)}" for i, r in enumerate(results, start=1)]
