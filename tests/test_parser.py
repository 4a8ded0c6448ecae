import pytest

from degree_audit.data import TranscriptParser


@pytest.fixture
def parser():
    return TranscriptParser()


def row(**overrides):
    data = {
        "subjectCode": "CSC1113",
        "subjectName": "Introduction to Computer Science",
        "grade": "B+",
        "credit": 3,
        "gradeScale": 3.3,
        "year": 2021,
        "semester": "1",
    }
    data.update(overrides)
    return data


def test_parse_payload(parser):
    transcript = parser.parse({
        "student": {"name": "A. Student"},
        "gpa": "3.12",
        "confirmedCredits": "96",
        "nonDegreeSubjects": ["FSC115α", ""],
        "departments": ["Computer Science", None],
        "subjects": [row()],
    })
    assert transcript.gpa == pytest.approx(3.12)
    assert transcript.confirmed_credits == 96
    assert transcript.excluded_codes == frozenset({"fsc115a"})
    assert transcript.departments == ["Computer Science"]
    s = transcript.subjects[0]
    assert (s.code, s.credit, s.grade_scale, s.year) == ("CSC1113", 3, 3.3, 2021)


def test_empty_payload(parser):
    transcript = parser.parse({})
    assert transcript.subjects == []
    assert transcript.gpa == 0.0
    assert transcript.confirmed_credits == 0.0


def test_negative_credit_becomes_zero(parser, caplog):
    transcript = parser.parse({"subjects": [row(credit=-2)]})
    assert transcript.subjects[0].credit == 0
    assert "Negative credit" in caplog.text


def test_negative_confirmed_credits_clamped(parser):
    assert parser.parse({"confirmedCredits": -5}).confirmed_credits == 0


def test_missing_grade_scale_uses_letter(parser):
    s = parser.parse({"subjects": [row(gradeScale=None, grade="B-")]}).subjects[0]
    assert s.grade_scale == 2.7


def test_unreadable_grade_scale_uses_letter(parser, caplog):
    s = parser.parse({"subjects": [row(gradeScale="n/a", grade="A-")]}).subjects[0]
    assert s.grade_scale == 3.7
    assert "Unreadable grade scale" in caplog.text


def test_grade_scale_capped(parser):
    s = parser.parse({"subjects": [row(gradeScale=4.3)]}).subjects[0]
    assert s.grade_scale == 4.0


def test_unknown_letter_is_zero(parser):
    assert parser.grade_to_scale("Z") == 0.0
    assert parser.grade_to_scale(" a+ ") == 4.0


def test_null_subject_row_skipped(parser, caplog):
    transcript = parser.parse({"subjects": [None, row(subjectCode="CSC1122"), "junk"]})
    assert [s.code for s in transcript.subjects] == ["CSC1122"]
    assert "Skipping unreadable subject row" in caplog.text


def test_null_lists_read_as_empty(parser):
    transcript = parser.parse({
        "student": None,
        "subjects": None,
        "nonDegreeSubjects": None,
        "departments": None,
    })
    assert transcript.subjects == []
    assert transcript.excluded_codes == frozenset()
    assert transcript.departments == []
    assert transcript.student == {}
