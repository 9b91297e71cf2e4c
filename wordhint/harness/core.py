"""
Self-play harness.

- run_case:  one hidden answer, one solver, up to MAX_TURNS guesses.
- run_batch: many answers in sequence (optionally a sample prefix).

The solver sees the same pipeline an operator drives in solve mode: each
evaluated guess is written as a feedback line, parsed into the hint and the
pool is re-filtered. Evaluator verdicts never contradict the answer, so the
answer always stays in the pool.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence, Tuple

from wordhint.engine import Hint, Word, evaluate, feedback_line, filter_pool, parse_feedback
from .play import MAX_TURNS


def run_case(
        solver,
        answer: str,
        *,
        pool: Sequence[str],
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver (next_guess(state) -> Word)
        answer:    the hidden word for this case
        pool:      words the solver may narrow and guess from
        seed:      RNG seed for solvers with random tie-breaks

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str)
    """
    words = [Word.parse(w) for w in pool]
    solver.reset(seed=seed)
    target = Word.parse(answer)

    hint = Hint()
    candidates = list(words)
    history: List[Tuple[str, str]] = []

    t0 = time.perf_counter()
    for turn in range(1, MAX_TURNS + 1):
        state = {"turn": turn, "candidates": candidates, "hint": hint}
        guess = solver.next_guess(state)

        result = evaluate(guess, target)
        history.append((str(guess), result.pattern()))

        if guess == target:
            return {
                "success": True, "guesses": turn,
                "time_ms": (time.perf_counter() - t0) * 1000.0,
                "history": history, "answer": answer,
            }

        hint.extend(parse_feedback(feedback_line(result)))
        candidates = filter_pool(candidates, hint)

    return {
        "success": False, "guesses": MAX_TURNS,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history, "answer": answer,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        pool: Sequence[str],
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used.

    Each case's seed is derived from the base seed (seed + index).
    """
    cases = answers[:sample] if sample is not None else answers
    out: List[Dict] = []
    for idx, ans in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, ans, pool=pool, seed=case_seed))
    return out
