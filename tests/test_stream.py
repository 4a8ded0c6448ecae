import pytest

from degree_audit.engines import StreamDetector
from degree_audit.models import Family, default_program, get_program


@pytest.fixture
def detector():
    return StreamDetector()


@pytest.mark.parametrize("department", ["Computer Science", "Dept. of BCS", "bcs"])
def test_department_tag_selects_bcs(detector, department):
    assert detector.detect([department], []) == Family.BCS


def test_department_tag_wins_over_credits(detector, subject):
    subjects = [subject("BOT1112", 3.0, 10)]
    assert detector.detect(["Computer Science"], subjects) == Family.BCS


def test_computing_share_above_threshold(detector, subject):
    subjects = [subject("CSC1113", 3.0, 5), subject("MAT111β", 3.0, 5)]
    assert detector.detect([], subjects) == Family.BCS


def test_computing_share_at_threshold_is_bsc(detector, subject):
    subjects = [subject("CSC1113", 3.0, 4), subject("MAT111β", 3.0, 6)]
    assert StreamDetector.computing_share(subjects) == pytest.approx(0.4)
    assert detector.detect(["Botany"], subjects) == Family.BSC


def test_excluded_codes_do_not_count(detector, subject):
    subjects = [subject("COM1012", 3.0, 6), subject("MAT111β", 3.0, 4)]
    assert detector.detect([], subjects) == Family.BCS
    assert detector.detect([], subjects, frozenset({"com1012"})) == Family.BSC


def test_empty_transcript_is_bsc(detector):
    assert StreamDetector.computing_share([]) == 0.0
    assert detector.detect(None, []) == Family.BSC


def test_resolve_program_keeps_matching_choice():
    chosen = get_program("bcs-special-completion")
    assert StreamDetector.resolve_program(Family.BCS, chosen) is chosen
    assert StreamDetector.resolve_program(Family.BSC, chosen) == default_program(Family.BSC)
    assert StreamDetector.resolve_program(Family.BCS).id == "bcs-general"
