"""
Requirement Evaluation Engine.

This module evaluates a transcript against the graduation rules of one of the
six degree-program variants. Each variant is a plain function registered in
RULE_SETS; all of them take the same RuleContext and return an ordered list
of Requirement results.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..config import (
    CLC_KEYWORDS,
    COMPUTING_PREFIXES,
    GRADE_B_MINUS,
    GRADE_C,
    GRADE_C_MINUS,
    GRADE_D_PLUS,
    GROUP_COMPUTING,
    GROUP_MATHEMATICS,
    INDUSTRY_PLACEMENT_KEYWORDS,
    RESEARCH_PROJECT_KEYWORDS,
)
from ..data import CourseRegistry
from ..data.codes import has_prefix
from ..models import (
    Computable,
    DegreeProgram,
    SubjectPartition,
    Unavailable,
    get_program,
)
from .aggregation import (
    credit_bearing,
    credits_at_or_above,
    english_level_passed,
    find_by_keyword,
    percent_at_or_above,
    total_credits,
    year_level_subjects,
)
from .partition import SubjectPartitioner

logger = logging.getLogger(__name__)


# =============================================================================
# UNAVAILABLE REASONS
# =============================================================================

SPECIALIZATION_REASON = (
    "Cannot be calculated — we cannot determine which subject you are "
    "specializing in from the available data."
)
SPECIALIZATION_PRACTICALS_REASON = (
    SPECIALIZATION_REASON + " Practical units can only be checked once the "
    "specializing subject is known."
)
OTHER_PRACTICALS_REASON = (
    "Cannot be calculated — telling the other practicals apart from those of "
    "your specializing subject needs data the portal does not provide."
)

ROMAN = {1: "I", 2: "II", 3: "III"}


@dataclass
class RuleContext:
    """
    Inputs shared by every rule set.

    Attributes:
        gpa: Overall GPA reported by the portal
        confirmed_credits: Confirmed registered credits
        partition: Subjects bucketed under the program's family
        credit_subjects: Credit-bearing, non-excluded subjects
        all_subjects: Every transcript subject (English and CLC checks look
                      at non-credit units too)
    """
    gpa: float
    confirmed_credits: float
    partition: SubjectPartition
    credit_subjects: list
    all_subjects: list


def _num(value: float) -> str:
    """Credits print as whole numbers when they are whole."""
    return f"{value:g}"


# =============================================================================
# RULE BUILDERS
# =============================================================================

def credits_registered(ctx: RuleContext, target: int) -> Computable:
    return Computable(
        label=f"Credits Registered (≥ {target})",
        current=ctx.confirmed_credits,
        target=target,
        unit="credits",
    )


def overall_gpa(ctx: RuleContext, target: float) -> Computable:
    return Computable(
        label=f"Overall GPA (≥ {target:.2f})",
        current=ctx.gpa,
        target=target,
        unit="GPA",
    )


def percentage_rule(label: str, subjects: list, threshold: float, target: int,
                    noun: str) -> Computable:
    """
    Percentage of a bucket's credits at a grade cutoff.

    An empty bucket is 0% and therefore unmet.
    """
    pct = percent_at_or_above(subjects, threshold)
    return Computable(
        label=label,
        current=pct,
        target=target,
        unit="%",
        detail=f"{_num(credits_at_or_above(subjects, threshold))} of "
               f"{_num(total_credits(subjects))} {noun} credits",
        related_subjects=tuple(subjects),
        threshold_grade_scale=threshold,
    )


def all_pass_rule(label: str, subjects: list, threshold: float, noun: str) -> Computable:
    """
    Every subject in the bucket must reach the cutoff.

    current/target are passed/total units, so an empty bucket is 0 of 0 and
    vacuously met.
    """
    passed = [s for s in subjects if s.grade_scale >= threshold]
    failing = [s.code for s in subjects if s.grade_scale < threshold]
    detail = f"{len(passed)} of {len(subjects)} {noun} passed"
    if failing:
        detail += f" · below cutoff: {', '.join(failing)}"
    return Computable(
        label=label,
        current=len(passed),
        target=len(subjects),
        unit="passed",
        detail=detail,
        related_subjects=tuple(subjects),
        threshold_grade_scale=threshold,
    )


def named_course_rule(label: str, subjects: list, keywords, threshold: float = GRADE_C) -> Computable:
    """A named unit located by keyword must reach the cutoff."""
    found = find_by_keyword(subjects, keywords)
    return Computable(
        label=label,
        current=found.grade_scale if found else 0.0,
        target=threshold,
        unit="GPA",
        detail=found.describe(with_name=True) if found else "Not found in results yet",
        related_subjects=(found,) if found else (),
        threshold_grade_scale=threshold,
    )


def english_rule(ctx: RuleContext, levels: int) -> Computable:
    """English Levels I..N passed with C or better; current counts passed levels."""
    passed = {lvl: english_level_passed(ctx.all_subjects, lvl) for lvl in range(1, levels + 1)}
    names = [ROMAN[lvl] for lvl in passed]
    if levels == 2:
        label = "English Level I & II"
    else:
        label = f"English Level {', '.join(names[:-1])} & {names[-1]}"
    detail = ", ".join(
        f"Level {ROMAN[lvl]}: {'Passed' if ok else 'Pending'}" for lvl, ok in passed.items()
    )
    return Computable(
        label=label,
        current=sum(1 for ok in passed.values() if ok),
        target=levels,
        unit="levels",
        detail=detail,
        threshold_grade_scale=GRADE_C,
    )


def clc_rule(ctx: RuleContext) -> Optional[Computable]:
    """
    Computer Literacy Certificate, only for students with no computing units.

    Returns None when the student has computing credits.
    """
    if any(has_prefix(s.code, COMPUTING_PREFIXES) for s in ctx.credit_subjects):
        return None
    clc = find_by_keyword(ctx.all_subjects, CLC_KEYWORDS)
    passed = clc is not None and clc.grade_scale > 0
    return Computable(
        label="CLC (Computer Literacy Certificate)",
        current=1 if passed else 0,
        target=1,
        unit="pass",
        detail=clc.describe() if clc else "Not found in results",
        related_subjects=(clc,) if clc else (),
    )


def level_four_percentage(ctx: RuleContext) -> Computable:
    y4 = year_level_subjects(ctx.credit_subjects, 4)
    req = percentage_rule("4th Year Courses with C (≥ 70%)", y4, GRADE_C, 70, "level-4")
    if not y4:
        return replace(req, detail="No level-4 subjects found yet")
    return req


def _with_optional(reqs: list, extra: Optional[Computable]) -> list:
    if extra is not None:
        reqs.append(extra)
    return reqs


# =============================================================================
# RULE SETS
# =============================================================================

def bsc_general(ctx: RuleContext) -> list:
    p = ctx.partition
    reqs = [
        credits_registered(ctx, 90),
        percentage_rule("60% of Core Courses (Theory) with C grade",
                        p.core_theory, GRADE_C, 60, "core theory"),
        percentage_rule("60% of Optional Course Units with D+ grade",
                        p.optional, GRADE_D_PLUS, 60, "optional"),
        all_pass_rule("All Core Course Unit Practicals with C-",
                      p.core_practical, GRADE_C_MINUS, "core practical units"),
        overall_gpa(ctx, 2.0),
        english_rule(ctx, 2),
    ]
    return _with_optional(reqs, clc_rule(ctx))


def bsc_special_selection(ctx: RuleContext) -> list:
    return [
        credits_registered(ctx, 60),
        Unavailable("60% of Credits in the specializing subject with C (Theory)",
                    SPECIALIZATION_REASON),
        Unavailable("All Practical Course Units of specializing subject with C-",
                    SPECIALIZATION_PRACTICALS_REASON),
        Unavailable("Other Practicals: D+ (Optional), C- (Core)",
                    OTHER_PRACTICALS_REASON),
        overall_gpa(ctx, 2.0),
        Unavailable("80% of specializing subject with B-", SPECIALIZATION_REASON),
        english_rule(ctx, 2),
    ]


def bsc_special_completion(ctx: RuleContext) -> list:
    reqs = [
        overall_gpa(ctx, 2.0),
        Unavailable("52 Credits in specializing subject", SPECIALIZATION_REASON),
        Unavailable("60% of specialization Theory credits with C", SPECIALIZATION_REASON),
        Unavailable("All Practicals of specialization with C-", SPECIALIZATION_PRACTICALS_REASON),
        named_course_rule("Research Project with C", ctx.credit_subjects, RESEARCH_PROJECT_KEYWORDS),
        level_four_percentage(ctx),
        english_rule(ctx, 3),
    ]
    return _with_optional(reqs, clc_rule(ctx))


def bcs_general(ctx: RuleContext) -> list:
    p = ctx.partition
    return [
        credits_registered(ctx, 90),
        percentage_rule("CS Core with C grade (≥ 60%)",
                        p.core_group(GROUP_COMPUTING), GRADE_C, 60, "CS core"),
        percentage_rule("Maths Core with C grade (≥ 60%)",
                        p.core_group(GROUP_MATHEMATICS), GRADE_C, 60, "Maths core"),
        percentage_rule("Optional with C grade (≥ 60%)",
                        p.optional, GRADE_C, 60, "optional"),
        named_course_rule("Industry Placement with C", ctx.credit_subjects,
                          INDUSTRY_PLACEMENT_KEYWORDS),
        english_rule(ctx, 2),
    ]


def bcs_special_selection(ctx: RuleContext) -> list:
    p = ctx.partition
    all_cs = p.core_group(GROUP_COMPUTING) + p.optional_group(GROUP_COMPUTING)
    all_maths = p.core_group(GROUP_MATHEMATICS) + p.optional_group(GROUP_MATHEMATICS)
    return [
        credits_registered(ctx, 90),
        percentage_rule("CS Courses with B- (≥ 80%)", all_cs, GRADE_B_MINUS, 80, "CS"),
        percentage_rule("Maths Courses with C (≥ 60%)", all_maths, GRADE_C, 60, "Maths"),
        named_course_rule("Industry Placement with C", ctx.credit_subjects,
                          INDUSTRY_PLACEMENT_KEYWORDS),
        overall_gpa(ctx, 2.0),
        english_rule(ctx, 2),
    ]


def bcs_special_completion(ctx: RuleContext) -> list:
    y4 = year_level_subjects(ctx.credit_subjects, 4)
    return [
        Computable(
            label="Credits Registered (≥ 120)",
            current=ctx.confirmed_credits,
            target=120,
            unit="credits",
            detail=f"Total: {_num(ctx.confirmed_credits)} credits · "
                   f"4th year: {_num(total_credits(y4))} credits (need 30)",
        ),
        Computable(
            label="4th Year Credits (≥ 30)",
            current=total_credits(y4),
            target=30,
            unit="credits",
            related_subjects=tuple(y4),
        ),
        overall_gpa(ctx, 2.5),
        named_course_rule("Research Project with C", ctx.credit_subjects, RESEARCH_PROJECT_KEYWORDS),
        level_four_percentage(ctx),
        english_rule(ctx, 3),
    ]


RULE_SETS = {
    "bsc-general": bsc_general,
    "bsc-special-selection": bsc_special_selection,
    "bsc-special-completion": bsc_special_completion,
    "bcs-general": bcs_general,
    "bcs-special-selection": bcs_special_selection,
    "bcs-special-completion": bcs_special_completion,
}


class RequirementEvaluator:
    """
    Evaluates a transcript against one degree-program variant.

    THREE-VALUED RESULTS:
    ---------------------
    - Computable, met:     the rule holds on the available data
    - Computable, not met: the rule fails, including empty buckets (0%)
    - Unavailable:         the rule needs data the portal does not expose
                           (the student's specialization subject)

    The evaluator never raises on transcript content; every rule produces a
    result so the caller always gets the full list.
    """

    def __init__(self, registry: CourseRegistry):
        self.registry = registry
        self.partitioner = SubjectPartitioner(registry)

    def evaluate(self, program, gpa: float, confirmed_credits: float, subjects,
                 excluded_codes=frozenset()) -> list:
        """
        Evaluate the base requirements of a degree program.

        Args:
            program: DegreeProgram or program id
            gpa: Overall GPA
            confirmed_credits: Confirmed registered credits
            subjects: Transcript SubjectRecords
            excluded_codes: Codes outside the degree structure

        Returns:
            Ordered list of Computable / Unavailable results
        """
        if not isinstance(program, DegreeProgram):
            program = get_program(program)
        ctx = self.build_context(program, gpa, confirmed_credits, subjects, excluded_codes)
        return self.evaluate_context(program, ctx)

    def build_context(self, program, gpa: float, confirmed_credits: float, subjects,
                      excluded_codes=frozenset()) -> RuleContext:
        if not isinstance(program, DegreeProgram):
            program = get_program(program)
        subjects = list(subjects)
        return RuleContext(
            gpa=gpa,
            confirmed_credits=max(confirmed_credits, 0),
            partition=self.partitioner.partition(subjects, excluded_codes, program.family),
            credit_subjects=credit_bearing(subjects, excluded_codes),
            all_subjects=subjects,
        )

    @staticmethod
    def evaluate_context(program: DegreeProgram, ctx: RuleContext) -> list:
        rules = RULE_SETS[program.id]
        requirements = rules(ctx)
        logger.debug(
            "%s: %d requirements (%d unavailable)",
            program.id,
            len(requirements),
            sum(1 for r in requirements if isinstance(r, Unavailable)),
        )
        return requirements
