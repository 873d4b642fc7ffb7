"""
Manual cross-out tracking.

A user strikes letters of the two names by hand. Every strike has to be
one-to-one: crossing a letter in one name also crosses the first uncrossed
occurrence of the same letter in the other name, and un-crossing either
member removes the whole pair.

Each slot (name_index, position) is either:
  - Unpaired        : not crossed
  - Paired(partner) : crossed, linked to exactly one slot in the other name

`CrossedLetters` stores the partner links, so a crossed letter without a
partner cannot be represented. Positions index the normalized names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Tuple, Union

from flames.engine import normalize

Slot = Tuple[int, int]  # (name_index in {1, 2}, position)


@dataclass(frozen=True)
class LetterKey:
    name_index: int
    position: int
    letter: str

    @property
    def slot(self) -> Slot:
        return (self.name_index, self.position)

    @classmethod
    def parse(cls, key: str) -> "LetterKey":
        """Parse the "<name_index>-<position>-<letter>" form used by UI widgets."""
        try:
            idx, pos, letter = key.split("-", 2)
            return cls(int(idx), int(pos), letter)
        except ValueError as e:
            raise ValueError(f"Malformed letter key: {key!r}") from e

    def __str__(self) -> str:
        return f"{self.name_index}-{self.position}-{self.letter}"


@dataclass(frozen=True)
class Unpaired:
    pass


@dataclass(frozen=True)
class Paired:
    partner: Slot


SlotState = Union[Unpaired, Paired]


class CrossedLetters:
    """
    Immutable, symmetric slot -> partner mapping.

    len() is the number of crossed letters (twice the number of pairs).
    """

    __slots__ = ("_links", "_letters")

    def __init__(self, links: Mapping[Slot, Slot] | None = None,
                 letters: Mapping[Slot, str] | None = None):
        self._links: Dict[Slot, Slot] = dict(links or {})
        self._letters: Dict[Slot, str] = dict(letters or {})

    def __contains__(self, key: object) -> bool:
        if isinstance(key, LetterKey):
            return self._letters.get(key.slot) == key.letter.lower()
        return key in self._links

    def __len__(self) -> int:
        return len(self._links)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossedLetters):
            return NotImplemented
        return self._links == other._links

    def __repr__(self) -> str:
        return f"CrossedLetters({sorted(str(k) for k in self.keys())})"

    def state_of(self, slot: Slot) -> SlotState:
        partner = self._links.get(slot)
        return Unpaired() if partner is None else Paired(partner)

    def keys(self) -> Iterator[LetterKey]:
        for (idx, pos) in sorted(self._links):
            yield LetterKey(idx, pos, self._letters[(idx, pos)])

    def pairs(self) -> List[Tuple[LetterKey, LetterKey]]:
        """Each pair once, name1 side first, ordered by name1 position."""
        out = []
        for key in self.keys():
            if key.name_index == 1:
                p = self._links[key.slot]
                out.append((key, LetterKey(p[0], p[1], self._letters[p])))
        return out

    def _with_pair(self, a: Slot, b: Slot, letter: str) -> "CrossedLetters":
        links = dict(self._links)
        letters = dict(self._letters)
        links[a], links[b] = b, a
        letters[a] = letters[b] = letter
        return CrossedLetters(links, letters)

    def _without_pair(self, a: Slot) -> "CrossedLetters":
        links = dict(self._links)
        letters = dict(self._letters)
        b = links.pop(a)
        del links[b]
        del letters[a], letters[b]
        return CrossedLetters(links, letters)


def _names(name1: str, name2: str) -> Dict[int, str]:
    return {1: normalize(name1), 2: normalize(name2)}


def toggle(key: LetterKey, name1: str, name2: str,
           crossed: CrossedLetters) -> CrossedLetters:
    """
    Cross or un-cross one letter and its partner; return the new set.

    - crossed key   -> remove it together with its partner
    - uncrossed key -> pair with the first uncrossed equal letter of the
                       other name (index order); no partner -> unchanged
    Keys that don't point at that letter in that name are ignored.
    """
    names = _names(name1, name2)
    own = names.get(key.name_index)
    if own is None or not 0 <= key.position < len(own):
        return crossed
    letter = key.letter.lower()
    if own[key.position] != letter:
        return crossed

    if isinstance(crossed.state_of(key.slot), Paired):
        return crossed._without_pair(key.slot)

    other_index = 2 if key.name_index == 1 else 1
    for pos, ch in enumerate(names[other_index]):
        slot = (other_index, pos)
        if ch == letter and isinstance(crossed.state_of(slot), Unpaired):
            return crossed._with_pair(key.slot, slot, letter)
    return crossed


def remaining_count(name1: str, name2: str, crossed: CrossedLetters) -> int:
    names = _names(name1, name2)
    return len(names[1]) + len(names[2]) - len(crossed)


def is_maximal(name1: str, name2: str, crossed: CrossedLetters) -> bool:
    """True when no uncrossed letter has an uncrossed twin in the other name."""
    names = _names(name1, name2)
    left = {ch for i, ch in enumerate(names[1]) if (1, i) not in crossed}
    right = {ch for j, ch in enumerate(names[2]) if (2, j) not in crossed}
    return not (left & right)
