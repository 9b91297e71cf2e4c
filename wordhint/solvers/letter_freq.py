"""
Letter-Frequency scorer (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidate pool (already
    filtered by the hint). Every occurrence counts, so "sheet" adds 2 to 'e'.
  - Score each word as the sum of its DISTINCT letters' counts; a repeated
    letter is rewarded once.
  - Group words by score. Groups come out highest score first; inside a group
    words keep pool order, nothing else breaks ties.

The solve loop prints the top groups lowest-first so the best suggestions end
up at the bottom of the terminal; that is display only (see
harness.display.format_suggestions).
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Tuple

import numpy as np

from wordhint.engine import Hint, Word, filter_pool
from .base import BaseSolver, register

_A = ord("a")


def letter_histogram(pool: Iterable[Word]) -> Counter[str]:
    """
    Count every letter occurrence across the pool.

    a-z goes through a numpy bincount; anything else a word may carry
    (Word.parse does not restrict the alphabet) is tallied separately.
    """
    codes = np.fromiter((ord(c) for w in pool for c in w), dtype=np.int64)
    in_az = (codes >= _A) & (codes < _A + 26)
    counts = np.bincount(codes[in_az] - _A, minlength=26)

    hist: Counter[str] = Counter(
        {chr(_A + i): int(n) for i, n in enumerate(counts) if n}
    )
    hist.update(chr(c) for c in codes[~in_az])
    return hist


def score_word(word: Word, hist: Counter[str]) -> int:
    return sum(hist[c] for c in set(word))


def score_groups(pool: List[Word]) -> Dict[int, List[Word]]:
    """
    Map score -> words, keys in DESCENDING score order, each list in pool
    order. Dicts keep insertion order, so iteration is best-first.
    """
    hist = letter_histogram(pool)
    scored = [(score_word(w, hist), w) for w in pool]
    # sorted() is stable: equal scores keep pool order
    scored.sort(key=lambda t: -t[0])

    groups: Dict[int, List[Word]] = {}
    for s, w in scored:
        groups.setdefault(s, []).append(w)
    return groups


def suggest(pool: Iterable[Word], hint: Hint) -> Tuple[List[Word], Dict[int, List[Word]]]:
    """
    Filter `pool` by `hint` and rank the survivors.

    Returns:
      (filtered_pool, score_groups). The pool is what the solve loop keeps
      narrowing, the groups are what it shows.
    """
    filtered = filter_pool(pool, hint)
    return filtered, score_groups(filtered)


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "2.0.0"

    def next_guess(self, state: dict) -> Word:
        """
        Take the first word of the best group. Candidates are already
        hint-consistent, so the guess is always a possible answer.
        """
        candidates: List[Word] = state["candidates"]
        if not candidates:
            raise ValueError("no candidates left to guess from")
        groups = score_groups(candidates)
        best = next(iter(groups.values()))
        return best[0]
