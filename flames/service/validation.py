"""
Input validation for names, kept outside the engine.

Answers "may these two names be evaluated?". A name is valid iff:
  - it is a string that is non-empty after trimming
  - it has at most MAX_NAME_LENGTH characters (trimmed)
  - it only contains letters, digits, whitespace, apostrophes, dots, hyphens

Warnings never block evaluation; they flag odd-but-allowed input
(excessive whitespace, repeated punctuation, non-NFC text, invisible
characters). A pair is rejected when both names are the same ignoring case.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, List

MAX_NAME_LENGTH = 50
SIMILARITY_WARNING_THRESHOLD = 0.8

_PUNCT = "'.-"
_INVISIBLE = re.compile("[\u200b-\u200f\u202a-\u202e\u2060-\u206f]")


@dataclass
class NameValidation:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    sanitized: str | None = None


@dataclass
class PairValidation:
    is_valid: bool = True
    errors: Dict[str, List[str]] = field(default_factory=dict)  # name1 / name2 / general
    warnings: List[str] = field(default_factory=list)
    sanitized: tuple | None = None


def _allowed_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdigit() or ch.isspace() or ch in _PUNCT


def validate_name(name) -> NameValidation:
    rep = NameValidation()

    if not isinstance(name, str) or not name:
        rep.is_valid = False
        rep.errors.append("Name is required")
        return rep

    trimmed = name.strip()
    if not trimmed:
        rep.is_valid = False
        rep.errors.append("Name cannot be empty")
        return rep

    if len(trimmed) > MAX_NAME_LENGTH:
        rep.is_valid = False
        rep.errors.append(f"Name must be {MAX_NAME_LENGTH} characters or less")

    nfc = unicodedata.normalize("NFC", trimmed)
    if not all(_allowed_char(ch) for ch in nfc):
        rep.is_valid = False
        rep.errors.append(
            "Name contains invalid characters. Only letters, numbers, spaces, "
            "hyphens, apostrophes, and dots are allowed."
        )

    if re.search(r"\s{3,}", trimmed):
        rep.warnings.append("Name contains excessive whitespace")
    if re.search(r"['.\-]{2,}", trimmed):
        rep.warnings.append("Name contains repeated special characters")
    if name != trimmed:
        rep.warnings.append("Name has leading or trailing whitespace")
    if _INVISIBLE.search(trimmed):
        rep.warnings.append("Name contains invisible or control characters")

    if nfc != trimmed:
        rep.warnings.append("Name contains unnormalized Unicode characters")
    rep.sanitized = nfc
    return rep


def levenshtein(a: str, b: str) -> int:
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        cur = [i]
        for j, cb in enumerate(b, 1):
            cur.append(min(cur[j - 1] + 1, prev[j] + 1, prev[j - 1] + (ca != cb)))
        prev = cur
    return prev[-1]


def similarity(a: str, b: str) -> float:
    """1.0 for identical strings, falling toward 0.0 with edit distance."""
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    if not longer:
        return 1.0
    return (len(longer) - levenshtein(longer, shorter)) / len(longer)


def validate_flames_input(name1, name2) -> PairValidation:
    rep = PairValidation()
    v1 = validate_name(name1)
    v2 = validate_name(name2)

    if not v1.is_valid:
        rep.errors["name1"] = v1.errors
        rep.is_valid = False
    if not v2.is_valid:
        rep.errors["name2"] = v2.errors
        rep.is_valid = False
    rep.warnings = v1.warnings + v2.warnings

    if v1.sanitized and v2.sanitized:
        s1 = v1.sanitized.lower()
        s2 = v2.sanitized.lower()
        if s1 == s2:
            rep.errors["general"] = ["Names cannot be identical"]
            rep.is_valid = False
        elif similarity(s1, s2) > SIMILARITY_WARNING_THRESHOLD:
            rep.warnings.append("Names are very similar")

        if rep.is_valid:
            rep.sanitized = (v1.sanitized, v2.sanitized)

    return rep


def sanitize_name(name) -> str:
    """Trim, NFC-normalize, drop invisible characters, collapse whitespace, truncate."""
    if not isinstance(name, str) or not name:
        return ""
    s = unicodedata.normalize("NFC", name.strip())
    s = _INVISIBLE.sub("", s)
    s = re.sub(r"\s+", " ", s)
    return s[:MAX_NAME_LENGTH]
