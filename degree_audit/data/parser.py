"""
Transcript parsing.

This module converts the raw transcript payload produced by the portal
scraper into a Transcript with SubjectRecord objects.
"""

import logging

from ..config import GRADE_SCALE
from ..models import SubjectRecord, Transcript
from .codes import normalize_code

logger = logging.getLogger(__name__)


def _to_float(value, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_int(value, default: int = 0) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


class TranscriptParser:
    """
    Parses a student transcript payload.

    KEY RESPONSIBILITY: turn loosely-typed scraper output into SubjectRecord
    objects the engines can trust to have numeric fields.

    MALFORMED INPUT:
    The scraper is where transcript integrity is validated, so the parser
    never rejects a readable row. Unparseable numbers become 0 and negative
    credits become 0, which takes the row out of every credit computation.
    Rows that are not objects are skipped, and null lists read as empty.

    GRADE SCALE:
    The portal normally sends "gradeScale" next to the letter grade. When it
    is missing, the value is derived from the letter grade; unknown letters
    map to 0.0.

    Expected payload:
        {
            "student": {"name": ..., "registrationNumber": ...},
            "gpa": "3.12",
            "confirmedCredits": 96,
            "nonDegreeSubjects": ["FSC115α"],
            "departments": ["Computer Science"],
            "subjects": [
                {"subjectCode": "CSC1113", "subjectName": "...", "grade": "A",
                 "credit": 3, "gradeScale": 4.0, "year": 2021, "semester": "1"},
                ...
            ]
        }
    """

    def __init__(self, grade_scale: dict = None):
        self.grade_scale = grade_scale if grade_scale is not None else GRADE_SCALE

    def parse(self, payload: dict) -> Transcript:
        """
        Parse a transcript payload into a Transcript.

        Args:
            payload: Decoded transcript JSON

        Returns:
            Transcript with subjects in portal order
        """
        subjects = []
        for row in payload.get("subjects") or []:
            if not isinstance(row, dict):
                logger.warning("Skipping unreadable subject row: %r", row)
                continue
            subjects.append(self._parse_subject(row))

        excluded = frozenset(
            normalize_code(code) for code in payload.get("nonDegreeSubjects") or [] if code
        )

        transcript = Transcript(
            student=payload.get("student") or {},
            subjects=subjects,
            gpa=_to_float(payload.get("gpa")),
            confirmed_credits=max(_to_float(payload.get("confirmedCredits")), 0.0),
            excluded_codes=excluded,
            departments=[d for d in payload.get("departments") or [] if d],
        )
        logger.debug(
            "Parsed transcript: %d subjects, %d excluded codes, GPA %.2f",
            len(subjects), len(excluded), transcript.gpa,
        )
        return transcript

    def _parse_subject(self, row: dict) -> SubjectRecord:
        """Parse a single subject row."""
        code = str(row.get("subjectCode", "")).strip()
        grade = str(row.get("grade", "") or "").strip()

        credit = _to_float(row.get("credit"))
        if credit < 0:
            logger.warning("Negative credit %.1f for %s treated as 0", credit, code or "<no code>")
            credit = 0.0

        raw_scale = row.get("gradeScale")
        if raw_scale is None or raw_scale == "":
            grade_scale = self.grade_to_scale(grade)
        else:
            grade_scale = _to_float(raw_scale, default=-1.0)
            if grade_scale < 0:
                logger.warning("Unreadable grade scale %r for %s, using letter grade", raw_scale, code)
                grade_scale = self.grade_to_scale(grade)

        if not code:
            logger.warning("Subject row without a code: %r", row)

        return SubjectRecord(
            code=code,
            name=str(row.get("subjectName", "") or ""),
            grade=grade,
            credit=credit,
            grade_scale=min(grade_scale, 4.0),
            year=_to_int(row.get("year")),
            semester=str(row.get("semester", "") or ""),
        )

    def grade_to_scale(self, grade: str) -> float:
        """Grade scale value of a letter grade, 0.0 if the letter is unknown."""
        return self.grade_scale.get(grade.strip().upper(), 0.0)
