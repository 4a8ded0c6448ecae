"""
Course code normalization.

Portal codes carry a Greek letter in the credit position for some units
(e.g., "MAT313β", "CSC113α"). The handbook, the portal and hand-typed input
do not agree on case, spacing or whether the Greek letter is used, so every
lookup goes through normalize_code().
"""

import re
from typing import Optional

# One Greek credit character <-> one Latin letter. Fixed table, never inferred.
GREEK_CREDIT_SUFFIXES = {
    "α": "a",  # α
    "β": "b",  # β
    "δ": "d",  # δ
    "ε": "e",  # ε
}

_GREEK_TABLE = str.maketrans(GREEK_CREDIT_SUFFIXES)
_WHITESPACE = re.compile(r"\s+")
_DIGIT = re.compile(r"\d")


def normalize_code(code: str) -> str:
    """
    Canonical form of a course code: lowercase, no whitespace, Greek credit
    letters replaced by their Latin equivalents.

    Examples:
        "MAT313β"  -> "mat313b"
        "csc 113α" -> "csc113a"
        ""         -> ""
    """
    if not code:
        return ""
    lowered = _WHITESPACE.sub("", code).lower()
    return lowered.translate(_GREEK_TABLE)


def year_digit(code: str) -> Optional[str]:
    """
    First numeric digit of a code, which is the year level.

    "ENG1b10" -> "1", "MAT4b6β" -> "4", "CLC" -> None
    """
    match = _DIGIT.search(code or "")
    return match.group(0) if match else None


def has_prefix(code: str, prefixes) -> bool:
    """Case-insensitive check that a code starts with any of the prefixes."""
    up = (code or "").strip().upper()
    return any(up.startswith(p.upper()) for p in prefixes)
