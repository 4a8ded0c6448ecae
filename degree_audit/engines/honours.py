"""
Honours Classification Engine.

Computes the three honours bands. They are evaluated for every program
variant and reported next to, not inside, the base requirement list.
"""

from ..config import (
    FIRST_CLASS_GPA,
    GRADE_A_MINUS,
    GRADE_B_MINUS,
    HONOURS_MIN_CREDITS,
    SECOND_LOWER_GPA,
    SECOND_UPPER_GPA,
)
from ..models import HonoursTier
from .aggregation import credit_bearing, credits_at_or_above


class HonoursClassifier:
    """
    Evaluates the honours tiers.

    TIERS:
    ------
    First Class:   GPA >= 3.70 and 40+ credits at A- or above (3.7)
    Second Upper:  GPA >= 3.30 and 40+ credits at B- or above (2.7)
    Second Lower:  GPA >= 3.00 and 40+ credits at B- or above (2.7)

    Tiers are independent: a transcript can meet none, one, or several.
    """

    def __init__(self, min_credits: float = HONOURS_MIN_CREDITS):
        self.min_credits = min_credits

    def classify(self, gpa: float, subjects, excluded_codes=frozenset()) -> list:
        """
        Evaluate all three tiers.

        Args:
            gpa: Overall GPA
            subjects: Transcript SubjectRecords
            excluded_codes: Codes outside the degree structure

        Returns:
            [first_class, second_upper, second_lower] as HonoursTier
        """
        eligible = credit_bearing(subjects, excluded_codes)
        credits_a = credits_at_or_above(eligible, GRADE_A_MINUS)
        credits_b = credits_at_or_above(eligible, GRADE_B_MINUS)

        return [
            self._tier("1st Class", gpa, FIRST_CLASS_GPA, credits_a, GRADE_A_MINUS, "A-/A/A+"),
            self._tier("2nd Upper", gpa, SECOND_UPPER_GPA, credits_b, GRADE_B_MINUS, "B- or above"),
            self._tier("2nd Lower", gpa, SECOND_LOWER_GPA, credits_b, GRADE_B_MINUS, "B- or above"),
        ]

    def _tier(self, name: str, gpa: float, gpa_target: float, credits: float,
              threshold: float, grade_text: str) -> HonoursTier:
        grade_letter = "A" if threshold == GRADE_A_MINUS else "B"
        return HonoursTier(
            label=f"{name}: GPA ≥ {gpa_target:.2f} & {self.min_credits:g}+ credits {grade_letter}",
            gpa=gpa,
            gpa_target=gpa_target,
            credits=credits,
            credits_target=self.min_credits,
            threshold_grade_scale=threshold,
            detail=f"GPA: {gpa:.2f} (need {gpa_target:.2f}) · {credits:g} credits with {grade_text}",
        )
