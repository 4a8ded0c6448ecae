"""
Requirement result data models.

A requirement outcome is one of two distinct types:

- Computable: the rule could be evaluated; it is either met or not met.
- Unavailable: the rule cannot be evaluated from the data the portal exposes.

"Not met" and "unavailable" are different answers. A bucket with zero credits
gives a Computable result at 0%, while a rule that needs the student's
specialization subject gives Unavailable.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .course import SubjectRecord


@dataclass(frozen=True)
class Computable:
    """
    A requirement evaluated from available data.

    `met` is derived from `current` and `target` and never stored, so the
    displayed numbers and the pass/fail flag cannot disagree.

    Units:
        "credits", "%", "GPA", "levels", "passed", "pass"

    Example for BCS General:
        label: "CS Core with C grade (≥ 60%)"
        current: 75
        target: 60
        unit: "%"
        detail: "30 of 40 CS core credits"
        threshold_grade_scale: 2.0
    """
    label: str
    current: float
    target: float
    unit: str
    detail: Optional[str] = None
    related_subjects: Tuple[SubjectRecord, ...] = field(default_factory=tuple)
    threshold_grade_scale: Optional[float] = None

    @property
    def met(self) -> bool:
        return self.current >= self.target


@dataclass(frozen=True)
class Unavailable:
    """A requirement that cannot be computed, with the reason shown to the student."""
    label: str
    reason: str


Requirement = Union[Computable, Unavailable]


@dataclass(frozen=True)
class HonoursTier:
    """
    One honours classification band.

    A tier depends on two measures (overall GPA and credits at a grade
    cutoff), so it has its own type rather than a Computable.
    """
    label: str
    gpa: float
    gpa_target: float
    credits: float
    credits_target: float
    threshold_grade_scale: float
    detail: str = ""

    @property
    def met(self) -> bool:
        return self.gpa >= self.gpa_target and self.credits >= self.credits_target
