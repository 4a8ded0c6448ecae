"""
Data models for the degree audit system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import (
    CourseType,
    CourseNature,
    CourseClassification,
    SubjectRecord,
)
from .program import (
    Family,
    DegreeProgram,
    DEGREE_PROGRAMS,
    get_program,
    programs_for,
    default_program,
)
from .requirement import Computable, Unavailable, Requirement, HonoursTier
from .audit import Transcript, SubjectPartition, DegreeAudit

__all__ = [
    # Course models
    "CourseType",
    "CourseNature",
    "CourseClassification",
    "SubjectRecord",
    # Programs
    "Family",
    "DegreeProgram",
    "DEGREE_PROGRAMS",
    "get_program",
    "programs_for",
    "default_program",
    # Requirement results
    "Computable",
    "Unavailable",
    "Requirement",
    "HonoursTier",
    # Audit
    "Transcript",
    "SubjectPartition",
    "DegreeAudit",
]
