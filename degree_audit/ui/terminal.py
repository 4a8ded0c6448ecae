"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the degree_audit package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import CLOSE_PROGRESS_PERCENT, MAX_GPA
from ..models import Computable, DegreeAudit, HonoursTier, Transcript, Unavailable

STATUS_MET = "met"
STATUS_CLOSE = "close"
STATUS_BEHIND = "behind"


def progress_percentage(req: Computable) -> float:
    """
    Progress bar fill for a computable requirement, 0-100.

    GPA rules fill against the 4.0 scale, pass/fail rules are all or nothing,
    everything else fills against its own target.
    """
    if req.unit == "GPA":
        return min(req.current / MAX_GPA * 100, 100)
    if req.unit == "pass":
        return 100 if req.met else 0
    if req.target == 0:
        return 100
    return min(req.current / req.target * 100, 100)


def card_status(req: Computable) -> str:
    """met, close (not met but at least 70% of the way) or behind."""
    if req.met:
        return STATUS_MET
    if progress_percentage(req) >= CLOSE_PROGRESS_PERCENT:
        return STATUS_CLOSE
    return STATUS_BEHIND


class TerminalDisplay:
    """
    Pretty terminal output for audit results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures and render
       the requirement cards with progress_percentage() and card_status().

    2. FOR API RESPONSE:
       Create an APIFormatter class that converts the dataclasses to JSON.
       Computable and Unavailable must stay distinguishable in the output.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, status: str) -> str:
        """Return a colored status badge for a card status."""
        if status == STATUS_MET:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ MET {cls.RESET}"
        elif status == STATUS_CLOSE:
            return f"{cls.BG_YELLOW}{cls.WHITE} ◐ CLOSE {cls.RESET}"
        else:
            return f"{cls.BG_RED}{cls.WHITE} ✗ BEHIND {cls.RESET}"

    @classmethod
    def progress_bar(cls, pct: float, status: str) -> str:
        filled = int(pct / 10)
        color = {STATUS_MET: cls.GREEN, STATUS_CLOSE: cls.YELLOW}.get(status, cls.RED)
        return f"{color}{'█' * filled}{'░' * (10 - filled)}{cls.RESET}"

    @staticmethod
    def format_value(value: float, unit: str) -> str:
        """Render a current/target value in its unit."""
        if unit == "GPA":
            return f"{value:.2f}"
        if unit == "%":
            return f"{value:g}%"
        return f"{value:g}"

    @classmethod
    def print_student_info(cls, transcript: Transcript):
        """Print student identification information."""
        student = transcript.student
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.get('name', 'Unknown')}")
        print(f"  {cls.BOLD}Registration No:{cls.RESET} {student.get('registrationNumber', 'Unknown')}")
        print(f"  {cls.BOLD}GPA:{cls.RESET} {transcript.gpa:.2f}")
        print(f"  {cls.BOLD}Confirmed Credits:{cls.RESET} {transcript.confirmed_credits:g}")
        if transcript.excluded_codes:
            excluded = ", ".join(sorted(transcript.excluded_codes))
            print(f"  {cls.BOLD}Non-degree units:{cls.RESET} {cls.DIM}{excluded}{cls.RESET}")

    @classmethod
    def print_audit(cls, audit: DegreeAudit):
        """Print the base requirements of a degree audit as cards."""
        cls.print_header(f"DEGREE AUDIT: {audit.program.label.upper()}")

        detected = audit.detected_family.label
        if audit.is_override:
            print(f"  {cls.BOLD}Detected stream:{cls.RESET} {detected} "
                  f"{cls.YELLOW}(overridden to {audit.family.label}){cls.RESET}")
        else:
            print(f"  {cls.BOLD}Detected stream:{cls.RESET} {detected}")

        cls.print_subheader("Requirements")
        for i, req in enumerate(audit.requirements, 1):
            if isinstance(req, Unavailable):
                cls._print_unavailable(i, req)
            else:
                cls._print_computable(i, req)

    @classmethod
    def _print_computable(cls, num: int, req: Computable):
        status = card_status(req)
        pct = progress_percentage(req)
        current = cls.format_value(req.current, req.unit)
        target = cls.format_value(req.target, req.unit)

        print(f"\n  {cls.BOLD}{num:2}. {req.label}{cls.RESET}  {cls.status_badge(status)}")
        print(f"      {cls.progress_bar(pct, status)} {current} / {target} "
              f"{cls.DIM}{req.unit}{cls.RESET}")
        if req.detail:
            print(f"      {cls.DIM}{req.detail}{cls.RESET}")

        # Show which subjects are pulling the rule down
        if not req.met and req.threshold_grade_scale is not None:
            below = [s for s in req.related_subjects if s.grade_scale < req.threshold_grade_scale]
            for subject in below[:5]:
                print(f"      {cls.RED}✗{cls.RESET} {subject.describe()}")
            if len(below) > 5:
                print(f"      {cls.DIM}... and {len(below) - 5} more{cls.RESET}")

    @classmethod
    def _print_unavailable(cls, num: int, req: Unavailable):
        print(f"\n  {cls.BOLD}{num:2}. {req.label}{cls.RESET}  "
              f"{cls.DIM}? NOT AVAILABLE{cls.RESET}")
        print(f"      {cls.DIM}{req.reason}{cls.RESET}")

    @classmethod
    def print_honours(cls, tiers: list):
        """Print the honours tiers, reported apart from the base requirements."""
        cls.print_header("HONOURS CLASSIFICATION")
        for tier in tiers:
            cls._print_tier(tier)

    @classmethod
    def _print_tier(cls, tier: HonoursTier):
        icon = f"{cls.GREEN}✓{cls.RESET}" if tier.met else f"{cls.DIM}○{cls.RESET}"
        print(f"\n  {icon} {cls.BOLD}{tier.label}{cls.RESET}")
        if tier.detail:
            print(f"      {cls.DIM}{tier.detail}{cls.RESET}")

    @classmethod
    def print_summary(cls, audit: DegreeAudit):
        """Print a final summary of the computable requirements."""
        cls.print_header("SUMMARY")

        total = len(audit.computable)
        print(f"\n  {cls.BOLD}Requirements met:{cls.RESET} {audit.met_count}/{total} "
              f"({audit.overall_percentage}%)")
        if audit.unavailable:
            print(f"  {cls.BOLD}Not computable:{cls.RESET} {len(audit.unavailable)} "
                  f"{cls.DIM}(need your specialization subject){cls.RESET}")

        best = next((t for t in audit.honours if t.met), None)
        if best is not None:
            print(f"  {cls.BOLD}Honours:{cls.RESET} {cls.GREEN}{best.label.split(':')[0]}{cls.RESET}")

        if total and audit.met_count == total:
            print(f"\n  {cls.GREEN}{cls.BOLD}🎉 All computable requirements are met!{cls.RESET}")
        else:
            print(f"\n  {cls.YELLOW}Keep going! Review the requirements marked behind.{cls.RESET}")

        print()

    @classmethod
    def print_report(cls, transcript: Transcript, audit: DegreeAudit):
        """Print the full report: student info, requirement cards, honours and summary."""
        cls.print_student_info(transcript)
        cls.print_audit(audit)
        cls.print_honours(audit.honours)
        cls.print_summary(audit)

    @classmethod
    def print_program_menu(cls, programs: list, detected_label: str):
        """Print the numbered program choices used by the CLI."""
        print(f"\n{cls.BOLD}Detected stream: {cls.CYAN}{detected_label}{cls.RESET}")
        print(f"{cls.BOLD}Select the program to audit:{cls.RESET}")
        for i, program in enumerate(programs, 1):
            print(f"    {i}. {program.label}")
