"""
Line-input capability for the interactive loops.

Loops never call input() themselves; they get a reader with
read_line(prompt) -> str. End of input raises InputStreamError, which is
fatal and unwinds to the CLI.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol


class InputStreamError(RuntimeError):
    """The line source failed or hit end-of-input."""


class LineReader(Protocol):
    def read_line(self, prompt: str) -> str: ...


class ConsoleReader:
    """Reads from the terminal, with readline editing where available."""

    def __init__(self):
        try:
            import readline  # noqa: F401  (line editing + history for input())
        except ImportError:
            pass  # not shipped on Windows; plain input() still works

    def read_line(self, prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError as e:
            raise InputStreamError("end of input") from e
        except OSError as e:
            raise InputStreamError(str(e)) from e


class ScriptedReader:
    """Feeds a fixed sequence of lines; exhausting it counts as end-of-input."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise InputStreamError("end of input") from None
