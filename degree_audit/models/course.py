"""
Course data models.

Contains the classification of a course unit from the curriculum handbook and
the SubjectRecord dataclass that represents one line of a student's transcript.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CourseType(Enum):
    """
    Whether a course unit is compulsory or elective.

    CORE: Compulsory for the degree family
    OPTIONAL: Elective
    """
    CORE = "core"
    OPTIONAL = "optional"


class CourseNature(Enum):
    """
    The pedagogical form of a course unit.

    COMBINED and PROJECT units carry both a theory and a practical component,
    so they take part in theory rules AND "all practicals must pass" rules.
    """
    THEORY = "theory"
    PRACTICAL = "practical"
    COMBINED = "combined"
    PROJECT = "project"

    @property
    def has_theory(self) -> bool:
        return self in (CourseNature.THEORY, CourseNature.COMBINED, CourseNature.PROJECT)

    @property
    def has_practical(self) -> bool:
        return self in (CourseNature.PRACTICAL, CourseNature.COMBINED, CourseNature.PROJECT)


@dataclass(frozen=True)
class CourseClassification:
    """
    Handbook classification of a single course code.

    Attributes:
        code: Normalized course code (e.g., "mat313b")
        type: CourseType.CORE or CourseType.OPTIONAL
        nature: CourseNature of the unit
    """
    code: str
    type: CourseType
    nature: CourseNature

    @property
    def is_core(self) -> bool:
        return self.type == CourseType.CORE


@dataclass(frozen=True)
class SubjectRecord:
    """
    Represents a single subject from the student's transcript.

    This is the core data unit that flows through the engines. Records are
    supplied fresh for every evaluation and never modified.

    Attributes:
        code: Course code as it appears on the portal (e.g., "MAT313β")
        name: Human-readable subject name
        grade: Letter grade (e.g., "B+")
        credit: Credit value; <= 0 marks an audit or non-credit entry
        grade_scale: Numeric grade value, 0.0 - 4.0
        year: Academic year the subject was taken
        semester: Semester label as reported by the portal
    """
    code: str
    name: str
    grade: str
    credit: float
    grade_scale: float
    year: int = 0
    semester: str = ""

    @property
    def is_credit_bearing(self) -> bool:
        return self.credit > 0

    def describe(self, with_name: bool = False) -> str:
        """Short "CODE: GRADE" label used in requirement details."""
        if with_name and self.name:
            return f"{self.code} ({self.name}): {self.grade}"
        return f"{self.code}: {self.grade}"


def parse_course_type(value: str) -> Optional[CourseType]:
    """Map a handbook string ("core"/"optional") to a CourseType, None if unrecognised."""
    try:
        return CourseType(value.strip().lower())
    except ValueError:
        return None


def parse_course_nature(value: str) -> Optional[CourseNature]:
    """Map a handbook string ("theory", "practical", ...) to a CourseNature."""
    try:
        return CourseNature(value.strip().lower())
    except ValueError:
        return None
