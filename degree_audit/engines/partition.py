"""
Subject Partitioning Engine.

This module splits a transcript into the buckets the degree rules are
written against: core theory, core practical, optional, and unknown.
"""

import logging

from ..config import (
    COMPUTING_PREFIXES,
    GROUP_COMPUTING,
    GROUP_MATHEMATICS,
    GROUP_OTHER,
    MATHEMATICS_PREFIXES,
)
from ..data import CourseRegistry
from ..data.codes import has_prefix
from ..models import Family, SubjectPartition
from .aggregation import credit_bearing

logger = logging.getLogger(__name__)

GROUPS = (GROUP_COMPUTING, GROUP_MATHEMATICS, GROUP_OTHER)


def department_group(code: str) -> str:
    """Department prefix group of a code: computing, mathematics or other."""
    if has_prefix(code, COMPUTING_PREFIXES):
        return GROUP_COMPUTING
    if has_prefix(code, MATHEMATICS_PREFIXES):
        return GROUP_MATHEMATICS
    return GROUP_OTHER


class SubjectPartitioner:
    """
    Splits credit-bearing subjects using the handbook registry.

    BUCKET RULES:
    -------------
    - Unknown code           -> unknown (never dropped, never counted as optional)
    - Core, theory component -> core_theory
    - Core, practical comp.  -> core_practical
    - Not core               -> optional

    Combined and project units have both components, so a core combined unit
    is in core_theory AND core_practical. Nothing else appears twice.

    Core and optional subjects are also grouped by department prefix
    (computing: CSC/COM, mathematics: MAT/AMT/IMT, other) for rules that
    set department-specific percentages.
    """

    def __init__(self, registry: CourseRegistry):
        self.registry = registry

    def partition(self, subjects, excluded_codes=frozenset(), family: Family = None) -> SubjectPartition:
        """
        Partition a transcript for one degree family.

        Args:
            subjects: Transcript SubjectRecords
            excluded_codes: Codes outside the degree structure
            family: Family whose overrides apply to the lookup

        Returns:
            SubjectPartition
        """
        result = SubjectPartition(
            core_groups={g: [] for g in GROUPS},
            optional_groups={g: [] for g in GROUPS},
        )

        for subject in credit_bearing(subjects, excluded_codes):
            cls = self.registry.lookup(subject.code, family)
            if cls is None:
                logger.debug("Unknown course code %s routed to unknown bucket", subject.code)
                result.unknown.append(subject)
                continue

            group = department_group(subject.code)
            if cls.is_core:
                if cls.nature.has_theory:
                    result.core_theory.append(subject)
                if cls.nature.has_practical:
                    result.core_practical.append(subject)
                result.core_groups[group].append(subject)
            else:
                result.optional.append(subject)
                result.optional_groups[group].append(subject)

        logger.debug(
            "Partition (%s): %d core theory, %d core practical, %d optional, %d unknown",
            family.label if family else "global",
            len(result.core_theory),
            len(result.core_practical),
            len(result.optional),
            len(result.unknown),
        )
        return result
