"""
One user's manual-mode session.

Holds the two names, the crossed name letters and the FLAMES letters the
user has struck by hand. Each toggle swaps in a new CrossedLetters value
in a single assignment, so a pair is never half-applied. Sessions are not
shared between users.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set

from flames.engine import FLAMES, compute_flames, effective_count
from .tracker import CrossedLetters, LetterKey, is_maximal, remaining_count, toggle


@dataclass(frozen=True)
class ResultHint:
    show: bool
    is_correct: bool
    correct_result: str


class ManualSession:
    def __init__(self, name1: str = "", name2: str = ""):
        self.name1 = name1
        self.name2 = name2
        self.crossed = CrossedLetters()
        self.flames_crossed: Set[str] = set()

    def set_names(self, name1: str, name2: str) -> None:
        """Editing either name throws away everything crossed so far."""
        if (name1, name2) != (self.name1, self.name2):
            self.name1, self.name2 = name1, name2
            self.clear()

    def clear(self) -> None:
        self.crossed = CrossedLetters()
        self.flames_crossed = set()

    def reset(self) -> None:
        self.name1 = self.name2 = ""
        self.clear()

    def toggle_letter(self, key: LetterKey | str) -> CrossedLetters:
        if isinstance(key, str):
            key = LetterKey.parse(key)
        self.crossed = toggle(key, self.name1, self.name2, self.crossed)
        return self.crossed

    def toggle_flames_letter(self, letter: str) -> None:
        letter = letter.upper()
        if letter not in FLAMES:
            return
        if letter in self.flames_crossed:
            self.flames_crossed.discard(letter)
        else:
            self.flames_crossed.add(letter)

    def remaining_flames_letters(self) -> List[str]:
        return [ch for ch in FLAMES if ch not in self.flames_crossed]

    def remaining_count(self) -> int:
        return remaining_count(self.name1, self.name2, self.crossed)

    def counting_number(self) -> int:
        """The number the user should count by on the FLAMES row."""
        return effective_count(self.remaining_count())

    def is_complete(self) -> bool:
        return is_maximal(self.name1, self.name2, self.crossed)

    def check_answer(self) -> ResultHint:
        """Once one FLAMES letter is left, compare it with the computed result."""
        left = self.remaining_flames_letters()
        if len(left) != 1:
            return ResultHint(show=False, is_correct=False, correct_result="")
        correct = compute_flames(self.name1, self.name2).result
        return ResultHint(show=True, is_correct=left[0] == correct, correct_result=correct)
