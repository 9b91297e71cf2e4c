"""
Fixed-length word value type.

A Word is exactly WORD_LEN characters. ASCII A-Z is lowercased on construction;
other characters are kept as they are, so every position stays one character.
Equality and hashing are structural over the character tuple, so Words can
live in sets and dict keys. Display is the characters verbatim.

The parse performs NO trimming and NO alphabet check; callers strip input
lines themselves. The only failure is a length mismatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

WORD_LEN = 5


class ParseError(ValueError):
    """Raised when a string cannot become a Word (wrong length)."""


@dataclass(frozen=True)
class Word:
    letters: Tuple[str, ...]

    @classmethod
    def parse(cls, s: str) -> "Word":
        """
        Build a Word from a WORD_LEN-character string, lowercasing A-Z.

        Raises:
          ParseError if len(s) != WORD_LEN.
        """
        if len(s) != WORD_LEN:
            raise ParseError(f"expected {WORD_LEN} characters, got {len(s)}: {s!r}")
        return cls(tuple(c.lower() if "A" <= c <= "Z" else c for c in s))

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __getitem__(self, i: int) -> str:
        return self.letters[i]

    def __len__(self) -> int:
        return len(self.letters)

    def __contains__(self, ch: object) -> bool:
        return ch in self.letters

    def __str__(self) -> str:
        return "".join(self.letters)

    def __repr__(self) -> str:
        return str(self)
