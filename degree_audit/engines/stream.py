"""
Stream Detection Engine.

This module decides which degree family (BSc or BCS) a student most likely
belongs to, so the dashboard can pre-select a sensible program.
"""

import logging
from typing import Optional

from ..config import (
    BCS_CREDIT_SHARE_THRESHOLD,
    BCS_DEPARTMENT_KEYWORDS,
    COMPUTING_PREFIXES,
)
from ..data.codes import has_prefix
from ..models import DegreeProgram, Family, default_program
from .aggregation import credit_bearing, total_credits

logger = logging.getLogger(__name__)


class StreamDetector:
    """
    Heuristic BSc / BCS classifier.

    DETECTION ORDER:
    ----------------
    1. Declared departments: any tag containing "BCS" or "COMPUTER SCIENCE"
       means BCS.
    2. Credit share: if more than 40% of the credit-bearing, non-excluded
       credits carry a computing prefix (CSC, COM), the student is BCS.
    3. Otherwise BSc.

    This is NOT authoritative. It only chooses the default program; the
    caller can always audit against a program of the other family.
    """

    def __init__(self, threshold: float = BCS_CREDIT_SHARE_THRESHOLD):
        self.threshold = threshold

    def detect(self, departments, subjects, excluded_codes=frozenset()) -> Family:
        """
        Classify a student into a degree family.

        Args:
            departments: Declared department tags from course registration
            subjects: Transcript SubjectRecords
            excluded_codes: Codes outside the degree structure

        Returns:
            Family.BCS or Family.BSC
        """
        for dept in departments or []:
            up = dept.upper()
            if any(keyword in up for keyword in BCS_DEPARTMENT_KEYWORDS):
                logger.debug("Department tag '%s' selects BCS", dept)
                return Family.BCS

        share = self.computing_share(subjects, excluded_codes)
        family = Family.BCS if share > self.threshold else Family.BSC
        logger.debug("Computing credit share %.2f -> %s", share, family.label)
        return family

    @staticmethod
    def computing_share(subjects, excluded_codes=frozenset()) -> float:
        """Fraction of credit-bearing credits with a computing prefix, 0.0 when there are none."""
        eligible = credit_bearing(subjects, excluded_codes)
        total = total_credits(eligible)
        if total == 0:
            return 0.0
        computing = total_credits(s for s in eligible if has_prefix(s.code, COMPUTING_PREFIXES))
        return computing / total

    @staticmethod
    def resolve_program(family: Family, requested: Optional[DegreeProgram] = None) -> DegreeProgram:
        """
        Pick the program to show for a family.

        A previously selected program is kept when it belongs to the family;
        otherwise the family's general track is used.
        """
        if requested is not None and requested.family == family:
            return requested
        return default_program(family)
