"""
Audit data models.

Contains the parsed transcript, the subject partition produced for a degree
family, and the complete audit result handed to the presentation layer.
"""

from dataclasses import dataclass, field
from typing import Optional

from .program import DegreeProgram, Family
from .requirement import Computable, Unavailable


@dataclass
class Transcript:
    """
    Everything the engine consumes from the upstream collaborators.

    Attributes:
        student: Identification fields passed through for display
        subjects: List of SubjectRecord in portal order
        gpa: Overall GPA as reported by the portal
        confirmed_credits: Confirmed registered credits
        excluded_codes: Codes registered outside the degree structure
        departments: Declared department tags from course registration
    """
    student: dict
    subjects: list
    gpa: float = 0.0
    confirmed_credits: float = 0.0
    excluded_codes: frozenset = frozenset()
    departments: list = field(default_factory=list)


@dataclass
class SubjectPartition:
    """
    Credit-bearing, non-excluded subjects split by handbook classification.

    Combined and project units appear in both core_theory and core_practical.
    Every other subject lands in exactly one of core_theory, core_practical,
    optional or unknown.

    Group dicts are keyed by "computing", "mathematics" and "other".
    """
    core_theory: list = field(default_factory=list)
    core_practical: list = field(default_factory=list)
    optional: list = field(default_factory=list)
    unknown: list = field(default_factory=list)
    core_groups: dict = field(default_factory=dict)
    optional_groups: dict = field(default_factory=dict)

    @property
    def core(self) -> list:
        """Core subjects without duplicates, in transcript order."""
        seen = set()
        core = []
        for s in self.core_theory + self.core_practical:
            if id(s) not in seen:
                seen.add(id(s))
                core.append(s)
        return core

    def core_group(self, name: str) -> list:
        return self.core_groups.get(name, [])

    def optional_group(self, name: str) -> list:
        return self.optional_groups.get(name, [])


@dataclass
class DegreeAudit:
    """
    Result of auditing one transcript against one degree program.

    `requirements` holds the program's ordered base rules; `honours` holds the
    three classification tiers, which are reported alongside and never mixed
    into the base list.
    """
    program: DegreeProgram
    family: Family
    detected_family: Family
    requirements: list
    honours: list
    partition: Optional[SubjectPartition] = None

    @property
    def computable(self) -> list:
        return [r for r in self.requirements if isinstance(r, Computable)]

    @property
    def unavailable(self) -> list:
        return [r for r in self.requirements if isinstance(r, Unavailable)]

    @property
    def met_count(self) -> int:
        return sum(1 for r in self.computable if r.met)

    @property
    def overall_percentage(self) -> int:
        """Share of computable base requirements that are met, 0 when none are computable."""
        total = len(self.computable)
        if total == 0:
            return 0
        return int(self.met_count * 100 / total + 0.5)

    @property
    def is_override(self) -> bool:
        """True when the audited program belongs to the other family than the detected one."""
        return self.family != self.detected_family
