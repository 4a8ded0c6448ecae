import pytest

from degree_audit import DegreeAuditor
from degree_audit.config import EXAMPLE_TRANSCRIPT_FILE
from degree_audit.models import Computable, Unavailable
from degree_audit.ui import TerminalDisplay, card_status, progress_percentage


@pytest.mark.parametrize("req, expected", [
    (Computable("GPA", 3.0, 2.0, "GPA"), 75),
    (Computable("GPA", 4.0, 2.5, "GPA"), 100),
    (Computable("CLC", 1, 1, "pass"), 100),
    (Computable("CLC", 0, 1, "pass"), 0),
    (Computable("Practicals", 0, 0, "passed"), 100),
    (Computable("Credits", 45, 90, "credits"), 50),
    (Computable("Credits", 120, 90, "credits"), 100),
])
def test_progress_percentage(req, expected):
    assert progress_percentage(req) == pytest.approx(expected)


def test_card_status():
    assert card_status(Computable("Credits", 90, 90, "credits")) == "met"
    assert card_status(Computable("Credits", 65, 90, "credits")) == "close"
    assert card_status(Computable("Credits", 50, 90, "credits")) == "behind"
    assert card_status(Computable("GPA", 2.9, 3.0, "GPA")) == "close"


def test_format_value():
    assert TerminalDisplay.format_value(3.456, "GPA") == "3.46"
    assert TerminalDisplay.format_value(62, "%") == "62%"
    assert TerminalDisplay.format_value(8.0, "credits") == "8"


def test_unavailable_card_shows_reason(capsys):
    TerminalDisplay._print_unavailable(1, Unavailable("Specialization", "needs the subject"))
    out = capsys.readouterr().out
    assert "NOT AVAILABLE" in out
    assert "needs the subject" in out


def test_computable_card_lists_low_subjects(capsys, subject):
    low = subject("BOT1141", 1.0, 1)
    req = Computable("Practicals", 0, 1, "passed", related_subjects=(low,),
                     threshold_grade_scale=1.7)
    TerminalDisplay._print_computable(1, req)
    out = capsys.readouterr().out
    assert "BOT1141: D" in out
    assert "BEHIND" in out


def test_print_report_prints_every_section(loader, capsys):
    auditor = DegreeAuditor(loader)
    transcript = auditor.load_transcript(EXAMPLE_TRANSCRIPT_FILE)
    TerminalDisplay.print_report(transcript, auditor.audit(transcript, "bsc-general"))
    out = capsys.readouterr().out
    sections = ["STUDENT INFORMATION", "DEGREE AUDIT: BSC GENERAL DEGREE",
                "HONOURS CLASSIFICATION", "SUMMARY"]
    positions = [out.index(title) for title in sections]
    assert positions == sorted(positions)
