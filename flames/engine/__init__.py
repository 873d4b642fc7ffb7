from .normalize import normalize
from .matching import MatchSet, match, remainder
from .elimination import (
    FLAMES, EliminationRun, EliminationState, effective_count, eliminate, run_to_completion, step,
)
from .results import ResultMeaning, resolve
from .compute import FlamesResult, compute_flames

__all__ = [
    "normalize", "MatchSet", "match", "remainder",
    "FLAMES", "EliminationRun", "EliminationState", "effective_count", "step",
    "run_to_completion", "eliminate",
    "ResultMeaning", "resolve", "FlamesResult", "compute_flames",
]
