from dataclasses import FrozenInstanceError

import pytest

from degree_audit.models import (
    Computable,
    DegreeAudit,
    Family,
    HonoursTier,
    SubjectPartition,
    Unavailable,
    default_program,
    get_program,
    programs_for,
)


def test_met_follows_current_and_target():
    assert Computable("GPA", 2.0, 2.0, "GPA").met
    assert not Computable("GPA", 1.99, 2.0, "GPA").met
    assert Computable("Practicals", 0, 0, "passed").met


def test_requirements_are_frozen():
    req = Computable("Credits", 8, 90, "credits")
    with pytest.raises(FrozenInstanceError):
        req.current = 95


def test_honours_tier_needs_both_measures():
    tier = HonoursTier("t", gpa=3.8, gpa_target=3.7, credits=39, credits_target=40,
                       threshold_grade_scale=3.7)
    assert not tier.met
    assert HonoursTier("t", 3.7, 3.7, 40, 40, 3.7).met


def test_get_program():
    assert get_program(" BCS-General ").id == "bcs-general"
    with pytest.raises(ValueError, match="Unknown degree program"):
        get_program("bsc-honours")


def test_programs_for_family():
    ids = [p.id for p in programs_for(Family.BCS)]
    assert ids == ["bcs-general", "bcs-special-selection", "bcs-special-completion"]
    assert default_program(Family.BSC).id == "bsc-general"
    assert Family.BSC.label == "BSC"


def test_partition_core_is_deduplicated(subject):
    combined = subject("CSC1113", 3.0)
    p = SubjectPartition(core_theory=[combined], core_practical=[combined])
    assert p.core == [combined]
    assert p.core_group("computing") == []


def _audit(requirements, family=Family.BSC, detected=Family.BSC):
    return DegreeAudit(
        program=default_program(family),
        family=family,
        detected_family=detected,
        requirements=requirements,
        honours=[],
    )


def test_overall_percentage_rounds_half_up():
    met = Computable("a", 1, 1, "pass")
    unmet = Computable("b", 0, 1, "pass")
    assert _audit([met, unmet, unmet]).overall_percentage == 33
    assert _audit([met, met, unmet]).overall_percentage == 67
    assert _audit([met, unmet]).overall_percentage == 50


def test_unavailable_is_left_out_of_the_summary():
    audit = _audit([Computable("a", 1, 1, "pass"), Unavailable("b", "needs data")])
    assert audit.met_count == 1
    assert audit.overall_percentage == 100
    assert len(audit.unavailable) == 1


def test_no_computable_requirements():
    assert _audit([Unavailable("b", "needs data")]).overall_percentage == 0


def test_is_override():
    assert _audit([], Family.BCS, Family.BSC).is_override
    assert not _audit([]).is_override
