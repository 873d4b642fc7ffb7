"""
Greedy one-to-one letter matching between two names.

Algorithm (stable, left to right):
  1) Normalize both names.
  2) Walk name1 by index i. For each i, take the FIRST index j in name2 with
     the same letter that has not been consumed yet.
  3) If found, consume both positions and record (i, j) under the letter.

The scan order matters: it decides which letter positions get struck out,
and the manual cross-out path has to agree with it position by position.
This is not a multiset intersection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from .normalize import normalize

Pair = Tuple[int, int]  # (index in name1, index in name2)


@dataclass
class LetterBucket:
    """All pairs consumed for one letter value, in scan order."""
    letter: str
    positions1: List[int] = field(default_factory=list)
    positions2: List[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.positions1)


@dataclass
class MatchSet:
    """Result of `match`: buckets keyed by letter, in first-match order."""
    buckets: Dict[str, LetterBucket]
    pairs: List[Pair]

    @property
    def total(self) -> int:
        return sum(b.count for b in self.buckets.values())

    @property
    def letters(self) -> List[str]:
        return list(self.buckets)

    @property
    def consumed1(self) -> Set[int]:
        return {i for i, _ in self.pairs}

    @property
    def consumed2(self) -> Set[int]:
        return {j for _, j in self.pairs}

    def to_list(self) -> List[Dict]:
        return [
            {
                "letter": b.letter,
                "positions1": list(b.positions1),
                "positions2": list(b.positions2),
                "count": b.count,
            }
            for b in self.buckets.values()
        ]


def match(name1: str, name2: str) -> MatchSet:
    """
    Pair up equal letters of `name1` and `name2` one-to-one.

    Returns:
      MatchSet whose `pairs` lists (i, j) in the order they were found.
      Indices refer to the normalized names.

    Examples:
      match("Naren", "Priya").pairs -> [(1, 4), (2, 1)]
      match("anna", "nan").pairs    -> [(0, 1), (1, 0), (2, 2)]
    """
    n1 = normalize(name1)
    n2 = normalize(name2)

    used1 = [False] * len(n1)
    used2 = [False] * len(n2)
    buckets: Dict[str, LetterBucket] = {}
    pairs: List[Pair] = []

    for i, ch in enumerate(n1):
        if used1[i]:
            continue
        for j, other in enumerate(n2):
            if used2[j] or other != ch:
                continue
            used1[i] = True
            used2[j] = True
            bucket = buckets.setdefault(ch, LetterBucket(ch))
            bucket.positions1.append(i)
            bucket.positions2.append(j)
            pairs.append((i, j))
            break  # next letter of name1

    return MatchSet(buckets=buckets, pairs=pairs)


def remainder(name1: str, name2: str, match_set: MatchSet | None = None) -> int:
    """
    Number of letters left once the matched pairs are struck from both names.

    len(n1) + len(n2) - 2 * pairs; never negative since every pair consumes
    one letter from each side.
    """
    if match_set is None:
        match_set = match(name1, name2)
    return len(normalize(name1)) + len(normalize(name2)) - 2 * match_set.total
