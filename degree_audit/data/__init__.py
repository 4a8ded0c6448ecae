"""
Data loading and parsing module.

This package handles the handbook registry, code normalization, file I/O
and transcript parsing.
"""

from .codes import normalize_code, year_digit, has_prefix
from .registry import CourseRegistry
from .loader import DataLoader
from .parser import TranscriptParser

__all__ = [
    "normalize_code",
    "year_digit",
    "has_prefix",
    "CourseRegistry",
    "DataLoader",
    "TranscriptParser",
]
