"""
Request envelope around the engine.

flames_api(name1, name2) validates, rate-limits (when a limiter is passed),
computes, and returns a plain dict:

  success:  {"success": True,  "data": {...}}
  failure:  {"success": False, "error": {"code": ..., "message": ..., ...}}

Only ValidationError and RateLimitError are folded into the envelope;
anything else propagates to the caller.
"""

from __future__ import annotations

import math
from typing import Dict

from flames.engine import FLAMES, compute_flames
from .ratelimit import RateLimiter
from .validation import validate_flames_input

ANONYMOUS = "anonymous"
MASK = "***"


class ValidationError(Exception):
    def __init__(self, message: str, field: str | None = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message)
        self.message = message
        self.field = field
        self.code = code


class RateLimitError(Exception):
    def __init__(self, message: str, retry_after: int):
        super().__init__(message)
        self.message = message
        self.retry_after = retry_after


def _checked_names(name1, name2) -> tuple:
    rep = validate_flames_input(name1, name2)
    if not rep.is_valid:
        for field in ("name1", "name2", "general"):
            if field in rep.errors:
                raise ValidationError(rep.errors[field][0],
                                      field=None if field == "general" else field)
    if rep.sanitized is None:
        raise ValidationError("Failed to process names")
    return rep.sanitized


def _data(name1: str, name2: str, anon: bool) -> Dict:
    res = compute_flames(name1, name2)
    return {
        "name1": MASK if anon else name1,
        "name2": MASK if anon else name2,
        "common_letters": res.matches.to_list(),
        "flames_letters": list(FLAMES),
        "final_count": res.remainder_count,
        "result": res.result,
        "result_meaning": res.meaning.label,
        "anonymous": anon,
    }


def flames_api(name1, name2, *, anon: bool = False, client_id: str | None = None,
               limiter: RateLimiter | None = None) -> Dict:
    try:
        if limiter is not None:
            ident = client_id or ANONYMOUS
            if not limiter.is_allowed(ident):
                wait = math.ceil(limiter.time_until_reset(ident))
                raise RateLimitError("Too many requests. Please try again later.", wait)
        n1, n2 = _checked_names(name1, name2)
        return {"success": True, "data": _data(n1, n2, anon)}
    except ValidationError as e:
        return {"success": False,
                "error": {"code": e.code, "message": e.message, "field": e.field}}
    except RateLimitError as e:
        return {"success": False,
                "error": {"code": "RATE_LIMIT_EXCEEDED", "message": e.message,
                          "retry_after": e.retry_after}}
