"""
Static lookup from the surviving FLAMES letter to what it stands for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ResultMeaning:
    letter: str
    label: str
    meaning: str


MEANINGS: Dict[str, ResultMeaning] = {
    "F": ResultMeaning("F", "Friends", "Friendship"),
    "L": ResultMeaning("L", "Love", "Love"),
    "A": ResultMeaning("A", "Affection", "Affection"),
    "M": ResultMeaning("M", "Marriage", "Marriage"),
    "E": ResultMeaning("E", "Enemy", "Enmity"),
    "S": ResultMeaning("S", "Siblings", "Sibling bond"),
}


def resolve(letter: str) -> ResultMeaning:
    """Case-insensitive lookup; ValueError for anything outside F/L/A/M/E/S."""
    try:
        return MEANINGS[letter.upper()]
    except (KeyError, AttributeError) as e:
        raise ValueError(
            f"Unknown FLAMES letter: {letter!r}. Available: {list(MEANINGS)}") from e
