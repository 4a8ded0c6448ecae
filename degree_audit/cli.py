"""
Command-Line Interface for the Degree Audit System.

This module provides the interactive CLI. It handles user input and
orchestrates the display of results.

USAGE:
------
    degree-audit [transcript.json]
    python -m degree_audit [transcript.json]

Without a path the bundled example transcript is audited.
"""

import logging
import sys

from .auditor import DegreeAuditor
from .config import EXAMPLE_TRANSCRIPT_FILE, LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL
from .models import DEGREE_PROGRAMS, DegreeProgram, Family
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def _select_program(auditor: DegreeAuditor, detected: Family) -> DegreeProgram:
    """
    Ask which program to audit.

    The detected family's three programs come first; the last option lists
    all six so the student can override the detection.

    Returns:
        The chosen DegreeProgram, or the detected family's default
    """
    programs = auditor.list_programs(detected)
    TerminalDisplay.print_program_menu(programs, detected.label)
    other = Family.BSC if detected == Family.BCS else Family.BCS
    print(f"    {len(programs) + 1}. {TerminalDisplay.DIM}Other ({other.label} programs)...{TerminalDisplay.RESET}")

    default = auditor.detector.resolve_program(detected)
    try:
        choice = input(f"\n  Enter number (1-{len(programs) + 1}): ").strip()
        index = int(choice) - 1
        if index < 0:
            raise IndexError(choice)
        if index == len(programs):
            return _select_any_program(default)
        return programs[index]
    except (ValueError, IndexError, EOFError):
        print(f"  → Using default: {default.label}")
        return default


def _select_any_program(default: DegreeProgram) -> DegreeProgram:
    print(f"\n{TerminalDisplay.BOLD}All programs:{TerminalDisplay.RESET}")
    for i, program in enumerate(DEGREE_PROGRAMS, 1):
        print(f"    {i}. {program.label}")
    try:
        choice = input(f"\n  Enter number (1-{len(DEGREE_PROGRAMS)}): ").strip()
        index = int(choice) - 1
        if index < 0:
            raise IndexError(choice)
        return DEGREE_PROGRAMS[index]
    except (ValueError, IndexError, EOFError):
        print(f"  → Using default: {default.label}")
        return default


def main(argv=None):
    """
    Command-line interface for the degree audit.

    ═══════════════════════════════════════════════════════════════════════════
    FLOW
    ═══════════════════════════════════════════════════════════════════════════

    1. Load and parse the transcript
    2. Detect the BSc / BCS stream
    3. Let the student pick a program (or override the detected stream)
    4. Print the requirement cards, honours tiers and summary

    ═══════════════════════════════════════════════════════════════════════════

    Returns:
        Process exit code
    """
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    args = sys.argv[1:] if argv is None else argv
    transcript_path = args[0] if args else str(EXAMPLE_TRANSCRIPT_FILE)
    program_id = args[1] if len(args) > 1 else None

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║              FACULTY OF SCIENCE DEGREE AUDIT                     ║")
    print("║        BSc / BCS General and Special Degree Requirements         ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    auditor = DegreeAuditor(display=TerminalDisplay)

    try:
        transcript = auditor.load_transcript(transcript_path)
        if program_id is None:
            detected = auditor.detect_family(transcript)
            program_id = _select_program(auditor, detected).id

        print(f"\n{TerminalDisplay.DIM}Running audit...{TerminalDisplay.RESET}")
        result = auditor.audit(transcript, program_id)
    except (ValueError, FileNotFoundError) as e:
        logger.error("Audit failed: %s", e)
        print(f"\n  {TerminalDisplay.RED}Error: {e}{TerminalDisplay.RESET}")
        return 1

    auditor.display.print_report(transcript, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
