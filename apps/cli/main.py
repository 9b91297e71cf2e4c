# apps/cli/main.py
"""
CLI entry point for the interactive modes.

  wordhint solve [--more-words]   suggest words from reported feedback
  wordhint play                   guess a hidden word in 6 tries
  wordhint check                  validate the word lists

Feedback lines in solve mode (one per guess):
  UPPER = right letter, right spot; lower = in the word, wrong spot;
  !lower = not in the word. e.g. "C!r!a!n!e"
  At most 5 letters per line, negated letters included.

The bundled word lists are small samples (about 500 answers, 300 extra
guesses). Point --used / --extra at full lists for real puzzles.
"""

from __future__ import annotations

import argparse
import random
import sys

from wordhint.datasets import (EXTRA_PATH, USED_PATH, load_word_lists, pretty_summary,
                               validate_wordlists)
from wordhint.harness import (ConsoleReader, InputStreamError, PlayGame, SolveSession,
                              run_play, run_solve)


LISTS_NOTE = ("The bundled word lists are small samples (about 500 answers, 300 extra "
              "guesses); pass --used/--extra to use full lists.")
FEEDBACK_NOTE = ("Feedback: UPPER = right spot, lower = wrong spot, !lower = absent. "
                 "At most 5 letters per line, negated letters included.")


def _add_list_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--used", default=str(USED_PATH),
                    help="possible answers, one word per line (default: bundled sample list)")
    ap.add_argument("--extra", default=str(EXTRA_PATH),
                    help="accepted guesses that are never answers (default: bundled sample list)")


def _cmd_solve(args) -> int:
    _, pool = load_word_lists(more_words=args.more_words,
                              used_path=args.used, extra_path=args.extra)
    session = SolveSession.from_strings(pool)
    run_solve(session, ConsoleReader())
    return 0


def _cmd_play(args) -> int:
    used, _ = load_word_lists(used_path=args.used, extra_path=args.extra)
    game = PlayGame.draw(used, random.Random(args.seed))
    run_play(game, ConsoleReader(), color=not args.no_color and sys.stdout.isatty())
    return 0


def _cmd_check(args) -> int:
    rep = validate_wordlists(args.used, args.extra)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    return 0 if rep["passed"] else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordhint", description="wordhint: 5-letter word puzzles",
                                 epilog=LISTS_NOTE)
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("solve", help="interactive solver", epilog=f"{FEEDBACK_NOTE} {LISTS_NOTE}")
    sp.add_argument(
        "--more-words", action="store_true",
        help="also suggest words that are accepted but can't be an answer "
             "(closer to what the game allows)")
    _add_list_args(sp)
    sp.set_defaults(func=_cmd_solve)

    pp = sub.add_parser("play", help="interactive game", epilog=LISTS_NOTE)
    pp.add_argument("--seed", type=int, help="RNG seed for the answer draw")
    pp.add_argument("--no-color", action="store_true", help="plain pattern letters instead of ANSI colours")
    _add_list_args(pp)
    pp.set_defaults(func=_cmd_play)

    cp = sub.add_parser("check", help="validate the word lists")
    _add_list_args(cp)
    cp.set_defaults(func=_cmd_check)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except InputStreamError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
