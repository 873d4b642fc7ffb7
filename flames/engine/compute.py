"""
One-call FLAMES evaluation: names in, structured result out.

Pipeline:
  normalize -> match -> remainder -> eliminate -> resolve

Total for every pair of strings, including empty and identical names;
rejecting those is the validation layer's job (see flames.service).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .elimination import run_to_completion
from .matching import MatchSet, match, remainder
from .results import ResultMeaning, resolve


@dataclass(frozen=True)
class FlamesResult:
    name1: str                  # display values, exactly as given
    name2: str
    result: str                 # surviving letter
    common_letters: List[str]   # distinct matched letters, first-match order
    remainder_count: int        # raw count; 0 is played as 1
    matches: MatchSet
    eliminated: Tuple[str, ...]

    @property
    def meaning(self) -> ResultMeaning:
        return resolve(self.result)

    def to_dict(self) -> Dict:
        return {
            "name1": self.name1,
            "name2": self.name2,
            "result": self.result,
            "label": self.meaning.label,
            "common_letters": list(self.common_letters),
            "matches": self.matches.to_list(),
            "remainder_count": self.remainder_count,
            "eliminated": list(self.eliminated),
        }


def compute_flames(name1: str, name2: str) -> FlamesResult:
    ms = match(name1, name2)
    count = remainder(name1, name2, ms)
    run = run_to_completion(count)
    return FlamesResult(
        name1=name1,
        name2=name2,
        result=run.survivor,
        common_letters=ms.letters,
        remainder_count=count,
        matches=ms,
        eliminated=run.eliminated,
    )
