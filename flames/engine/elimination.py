"""
FLAMES elimination as an explicit state machine.

State:
  remaining : letters still in play, in order (starts as F L A M E S)
  cursor    : index where counting starts for the next round

One round with count c over L letters:
  idx    = (cursor + c - 1) % L     # land on the c-th letter from cursor
  remove remaining[idx]
  cursor = idx % (L - 1)            # slid-in letter, or wrap to 0 if idx was last

A count of 0 (both names fully crossed out) is played as 1.
Six letters always take exactly five rounds to reach a single survivor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

FLAMES: Tuple[str, ...] = ("F", "L", "A", "M", "E", "S")
ROUNDS = len(FLAMES) - 1


@dataclass(frozen=True)
class EliminationState:
    remaining: Tuple[str, ...] = FLAMES
    cursor: int = 0

    @property
    def done(self) -> bool:
        return len(self.remaining) == 1

    @property
    def survivor(self) -> str | None:
        return self.remaining[0] if self.done else None


@dataclass(frozen=True)
class EliminationRun:
    """Full trace of one elimination: every intermediate state and removal."""
    count: int
    states: Tuple[EliminationState, ...]
    eliminated: Tuple[str, ...]

    @property
    def survivor(self) -> str:
        return self.states[-1].remaining[0]


def effective_count(count: int) -> int:
    """Degenerate policy: anything below 1 counts as 1."""
    return count if count > 0 else 1


def step(state: EliminationState, count: int) -> Tuple[EliminationState, str]:
    """
    Apply one elimination round and return (next_state, removed_letter).

    Raises ValueError on a terminal state (nothing left to eliminate).
    """
    if state.done:
        raise ValueError(f"elimination already finished with {state.survivor!r}")

    c = effective_count(count)
    n = len(state.remaining)
    idx = (state.cursor + c - 1) % n
    removed = state.remaining[idx]
    remaining = state.remaining[:idx] + state.remaining[idx + 1:]
    return EliminationState(remaining, idx % len(remaining)), removed


def run_to_completion(count: int, start: EliminationState | None = None) -> EliminationRun:
    """Step from `start` (default: full FLAMES, cursor 0) until one letter remains."""
    state = start if start is not None else EliminationState()
    states: List[EliminationState] = [state]
    eliminated: List[str] = []
    while not state.done:
        state, removed = step(state, count)
        states.append(state)
        eliminated.append(removed)
    return EliminationRun(count=count, states=tuple(states), eliminated=tuple(eliminated))


def eliminate(count: int) -> str:
    """Survivor letter for a remainder count."""
    return run_to_completion(count).survivor
