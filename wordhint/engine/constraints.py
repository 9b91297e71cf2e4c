"""
Candidate filtering given accumulated hints.

Given:
  - a pool of Words (e.g., the used list, optionally plus the extra list)
  - a Hint: letters known absent, letters known present, and per-position
    observations gathered from every feedback line so far

Return:
  - the Words consistent with ALL of it, in pool order.

This is the step that turns feedback into a shrinking candidate pool. The
Hint only ever grows (extend), so re-filtering can never admit a word back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .word import Word


@dataclass(frozen=True)
class FoundLetter:
    """
    One reported observation.

    correct_location=True  -> `letter` is at `position`
    correct_location=False -> `letter` is in the word but NOT at `position`
    """
    letter: str
    position: int
    correct_location: bool


@dataclass
class Hint:
    omit_letters: List[str] = field(default_factory=list)
    req_letters: List[str] = field(default_factory=list)
    cand_letters: List[FoundLetter] = field(default_factory=list)

    def extend(self, other: "Hint") -> None:
        """Append everything reported in `other`. Nothing is ever removed."""
        self.omit_letters.extend(other.omit_letters)
        self.req_letters.extend(other.req_letters)
        self.cand_letters.extend(other.cand_letters)

    def is_empty(self) -> bool:
        return not (self.omit_letters or self.req_letters or self.cand_letters)


def is_candidate(word: Word, hint: Hint) -> bool:
    """
    True iff `word` is consistent with `hint`:
      1) holds none of omit_letters
      2) holds every req_letter at least once (presence, not count)
      3) matches every positional observation
    """
    if hint.omit_letters and any(c in hint.omit_letters for c in word):
        return False
    if hint.req_letters and not all(c in word for c in hint.req_letters):
        return False
    for cand in hint.cand_letters:
        if cand.correct_location:
            if word[cand.position] != cand.letter:
                return False
        elif word[cand.position] == cand.letter:
            return False
    return True


def filter_pool(pool: Iterable[Word], hint: Hint) -> List[Word]:
    """Keep the words of `pool` that pass is_candidate (order preserved)."""
    return [w for w in pool if is_candidate(w, hint)]
