from .word import Word, ParseError, WORD_LEN
from .scoring import evaluate, score, Verdict, GuessLetter, GuessResult
from .constraints import Hint, FoundLetter, is_candidate, filter_pool
from .feedback import parse_feedback, feedback_line, InvalidFeedbackSyntax

__all__ = [
    "Word", "ParseError", "WORD_LEN",
    "evaluate", "score", "Verdict", "GuessLetter", "GuessResult",
    "Hint", "FoundLetter", "is_candidate", "filter_pool",
    "parse_feedback", "feedback_line", "InvalidFeedbackSyntax",
]
