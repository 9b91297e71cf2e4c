"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (words still
    consistent with the hint so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - A baseline for the bench harness; it ignores letter frequencies.
"""

from __future__ import annotations

from typing import List

from wordhint.engine import Word
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "2.0.0"

    def next_guess(self, state: dict) -> Word:
        candidates: List[Word] = state["candidates"]
        if not candidates:
            raise ValueError("no candidates left to guess from")
        i = self.rng.randrange(len(candidates))
        return candidates[i]
