"""
Aggregation helpers shared by the partitioner, the requirement evaluator
and the honours classifier.

All functions are pure and total: empty inputs give 0, False or None, never
an exception.
"""

import math
from typing import Iterable, Optional

from ..config import ENGLISH_PREFIX, PASS_GRADE_SCALE
from ..data.codes import normalize_code, year_digit
from ..models import SubjectRecord


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (percentages are never negative)."""
    return int(math.floor(value + 0.5))


def credit_bearing(subjects: Iterable[SubjectRecord], excluded_codes=frozenset()) -> list:
    """
    Subjects that take part in degree arithmetic.

    Drops audit entries (credit <= 0) and codes registered outside the degree
    structure. `excluded_codes` is compared on normalized codes.
    """
    excluded = {normalize_code(c) for c in excluded_codes}
    return [
        s for s in subjects
        if s.credit > 0 and normalize_code(s.code) not in excluded
    ]


def total_credits(subjects: Iterable[SubjectRecord]) -> float:
    """Sum of credits over the subjects (non-positive credits count as 0)."""
    return sum(s.credit for s in subjects if s.credit > 0)


def credits_at_or_above(subjects: Iterable[SubjectRecord], threshold: float) -> float:
    """Sum of credits over subjects graded at or above the grade-scale threshold."""
    return sum(s.credit for s in subjects if s.credit > 0 and s.grade_scale >= threshold)


def percent_at_or_above(subjects: Iterable[SubjectRecord], threshold: float) -> int:
    """
    Whole-number percentage of credits at or above the threshold.

    A bucket with no credits gives 0: zero progress toward a percentage
    target, reported as unmet rather than unavailable.
    """
    subjects = list(subjects)
    total = total_credits(subjects)
    if total == 0:
        return 0
    return round_half_up(credits_at_or_above(subjects, threshold) * 100 / total)


def english_level_passed(subjects: Iterable[SubjectRecord], level: int) -> bool:
    """True iff an English unit of the given level was passed with C or better."""
    prefix = f"{ENGLISH_PREFIX}{level}"
    return any(
        normalize_code(s.code).startswith(prefix) and s.grade_scale >= PASS_GRADE_SCALE
        for s in subjects
    )


def year_level_subjects(subjects: Iterable[SubjectRecord], year) -> list:
    """Subjects whose code's first digit is the given year level ("ENG1b10" is level 1)."""
    wanted = str(year)
    return [s for s in subjects if year_digit(s.code) == wanted]


def find_by_keyword(subjects: Iterable[SubjectRecord], keywords) -> Optional[SubjectRecord]:
    """
    First subject whose name or code contains any keyword (case-insensitive).

    Used for units whose code is not stable across catalogue years, such as
    the industry placement or the research project.
    """
    kw = [k.lower() for k in keywords]
    for s in subjects:
        name = s.name.lower()
        code = s.code.lower()
        if any(k in name or k in code for k in kw):
            return s
    return None
