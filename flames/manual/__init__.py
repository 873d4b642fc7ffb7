from .tracker import (
    CrossedLetters, LetterKey, Paired, Unpaired, is_maximal, remaining_count, toggle,
)
from .session import ManualSession, ResultHint

__all__ = [
    "CrossedLetters", "LetterKey", "Paired", "Unpaired",
    "toggle", "remaining_count", "is_maximal",
    "ManualSession", "ResultHint",
]
