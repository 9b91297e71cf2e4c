from .validator import validate_wordlists, pretty_summary
from .io import read_lines, load_words, load_word_lists, USED_PATH, EXTRA_PATH

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "load_words",
           "load_word_lists", "USED_PATH", "EXTRA_PATH"]
