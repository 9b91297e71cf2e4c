"""
Interactive play loop (state machine).

  AWAIT_GUESS(round) --guess == answer--> WON   (score = round)
  AWAIT_GUESS(round) --miss, round < 6--> AWAIT_GUESS(round + 1)
  AWAIT_GUESS(6)     --miss-----------> LOST  (answer revealed)

A guess line that is not a valid Word is re-prompted and does not use up a
round. Every miss is evaluated, logged, and the whole board is reprinted.
"""

from __future__ import annotations

import enum
import random
import sys
from dataclasses import dataclass, field
from typing import List, Sequence

from wordhint.engine import GuessResult, ParseError, Word, evaluate
from .display import format_board
from .reader import LineReader

MAX_TURNS = 6


class PlayStatus(enum.Enum):
    AWAIT_GUESS = "await_guess"
    WON = "won"
    LOST = "lost"


@dataclass
class PlayGame:
    answer: Word
    round: int = 1
    status: PlayStatus = PlayStatus.AWAIT_GUESS
    results: List[GuessResult] = field(default_factory=list)

    @classmethod
    def draw(cls, answers: Sequence[str], rng: random.Random) -> "PlayGame":
        """Start a game with an answer drawn uniformly from `answers`."""
        if not answers:
            raise ValueError("cannot draw an answer from an empty word list")
        return cls(answer=Word.parse(rng.choice(answers)))

    @property
    def finished(self) -> bool:
        return self.status is not PlayStatus.AWAIT_GUESS

    def submit(self, guess: Word) -> PlayStatus:
        """Play one round with an already-parsed guess."""
        if self.finished:
            raise ValueError(f"game is over ({self.status.value})")

        if guess == self.answer:
            self.status = PlayStatus.WON
            return self.status

        self.results.append(evaluate(guess, self.answer))
        if self.round >= MAX_TURNS:
            self.status = PlayStatus.LOST
        else:
            self.round += 1
        return self.status


def run_play(game: PlayGame, reader: LineReader, *, color: bool = True) -> PlayGame:
    """Drive `game` to WON or LOST, reading guesses from `reader`."""
    while not game.finished:
        line = reader.read_line(f"Guess {game.round}/{MAX_TURNS}: ").strip()
        try:
            guess = Word.parse(line)
        except ParseError as e:
            print(f"Invalid guess: {e}", file=sys.stderr)
            continue

        if game.submit(guess) is PlayStatus.WON:
            break
        for row in format_board(game.results, color):
            print(row)

    if game.status is PlayStatus.WON:
        print(f"Correct! You got it in {game.round}.")
    else:
        print(f"Out of guesses. The word was {game.answer}.")
    return game
