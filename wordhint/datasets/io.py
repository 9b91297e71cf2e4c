from __future__ import annotations
from pathlib import Path
from typing import List, Tuple

DATA_DIR = Path(__file__).resolve().parent / "data"
USED_PATH = DATA_DIR / "words-used.txt"
EXTRA_PATH = DATA_DIR / "words-extra.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def load_word_lists(
        *,
        more_words: bool = False,
        used_path: Path | str = USED_PATH,
        extra_path: Path | str = EXTRA_PATH,
) -> Tuple[List[str], List[str]]:
    """
    Return (used, pool).

    `used` holds possible answers. `pool` is what the solver narrows: the used
    list, plus the extra (guess-only) list when `more_words` is set.
    """
    used = load_words(used_path)
    pool = list(used)
    if more_words:
        pool += load_words(extra_path)
    return used, pool
