"""
Sliding-window rate limiter, keyed by client id.

Construct one per service instance and pass it in; there is no module-level
limiter. `clock` is injectable so tests can drive time.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, List

DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_WINDOW_SECONDS = 60.0


class RateLimiter:
    def __init__(self, max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                 window_seconds: float = DEFAULT_WINDOW_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")
        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be > 0; got {window_seconds}")
        self.max_attempts = int(max_attempts)
        self.window_seconds = float(window_seconds)
        self.clock = clock
        self._attempts: Dict[str, List[float]] = {}

    def _recent(self, identifier: str, now: float) -> List[float]:
        return [t for t in self._attempts.get(identifier, []) if now - t < self.window_seconds]

    def is_allowed(self, identifier: str) -> bool:
        """Record an attempt and say whether it fits in the window."""
        now = self.clock()
        recent = self._recent(identifier, now)
        if len(recent) >= self.max_attempts:
            self._attempts[identifier] = recent
            return False
        recent.append(now)
        self._attempts[identifier] = recent
        return True

    def remaining_attempts(self, identifier: str) -> int:
        return max(0, self.max_attempts - len(self._recent(identifier, self.clock())))

    def time_until_reset(self, identifier: str) -> float:
        """Seconds until the oldest attempt in the window expires (0 if none)."""
        now = self.clock()
        recent = self._recent(identifier, now)
        if not recent:
            return 0.0
        return max(0.0, self.window_seconds - (now - min(recent)))

    def reset(self, identifier: str) -> None:
        self._attempts.pop(identifier, None)
