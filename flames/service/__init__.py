from .validation import (
    NameValidation, PairValidation, sanitize_name, similarity, validate_flames_input, validate_name,
)
from .ratelimit import RateLimiter
from .api import RateLimitError, ValidationError, flames_api

__all__ = [
    "NameValidation", "PairValidation", "validate_name", "validate_flames_input",
    "sanitize_name", "similarity", "RateLimiter", "ValidationError", "RateLimitError",
    "flames_api",
]
