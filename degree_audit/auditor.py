"""
Degree Auditor - Main Orchestrator.

This module contains the DegreeAuditor class that connects the engines to
the presentation layer.
"""

import logging
from typing import Optional

from .data import DataLoader, TranscriptParser
from .engines import (
    HonoursClassifier,
    RequirementEvaluator,
    StreamDetector,
)
from .models import DegreeAudit, DegreeProgram, Family, Transcript, get_program, programs_for

logger = logging.getLogger(__name__)


class DegreeAuditor:
    """
    Main interface for the degree audit system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Detects the student's degree family (BSc or BCS)
    2. Resolves the program to audit (explicit choice or the family default)
    3. Partitions and evaluates the transcript under that program
    4. Classifies honours tiers
    5. Optionally hands the result to a display

    audit() is pure: it reads the shared immutable registry and returns a
    DegreeAudit. Only run() touches files and the display.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        auditor = DegreeAuditor()

        transcript = auditor.load_transcript("transcript.json")
        result = auditor.audit(transcript)                    # detected default
        result = auditor.audit(transcript, "bcs-special-completion")

        # Terminal output
        auditor.run("transcript.json", "bsc-general")
    """

    def __init__(self, loader: Optional[DataLoader] = None, display=None):
        # All engines share the registry built by the loader
        self.loader = loader or DataLoader()
        self.parser = TranscriptParser()
        self.detector = StreamDetector()
        self.evaluator = RequirementEvaluator(self.loader.registry)
        self.honours = HonoursClassifier()
        self.display = display

    def load_transcript(self, transcript_path) -> Transcript:
        """Load and parse a transcript JSON file."""
        payload = self.loader.load_transcript(transcript_path)
        return self.parser.parse(payload)

    def detect_family(self, transcript: Transcript) -> Family:
        return self.detector.detect(
            transcript.departments, transcript.subjects, transcript.excluded_codes
        )

    def list_programs(self, family: Family) -> list:
        """Programs offered for a family, e.g. for an override picker."""
        return programs_for(family)

    def audit(self, transcript: Transcript, program=None) -> DegreeAudit:
        """
        Audit a transcript against a degree program.

        Args:
            transcript: Parsed Transcript
            program: DegreeProgram, program id, or None for the detected
                     family's default. A program of the other family is
                     honoured as an explicit override.

        Returns:
            DegreeAudit with base requirements and honours tiers
        """
        detected = self.detect_family(transcript)
        if program is None:
            selected = self.detector.resolve_program(detected)
        elif isinstance(program, DegreeProgram):
            selected = program
        else:
            selected = get_program(program)

        if selected.family != detected:
            logger.info("Auditing %s as an override of detected family %s",
                        selected.id, detected.label)
        else:
            logger.info("Auditing %s", selected.id)

        ctx = self.evaluator.build_context(
            selected,
            transcript.gpa,
            transcript.confirmed_credits,
            transcript.subjects,
            transcript.excluded_codes,
        )
        requirements = self.evaluator.evaluate_context(selected, ctx)
        honours = self.honours.classify(
            transcript.gpa, transcript.subjects, transcript.excluded_codes
        )

        return DegreeAudit(
            program=selected,
            family=selected.family,
            detected_family=detected,
            requirements=requirements,
            honours=honours,
            partition=ctx.partition,
        )

    def run(self, transcript_path, program_id: Optional[str] = None) -> DegreeAudit:
        """
        Load a transcript, audit it and display the result.

        Args:
            transcript_path: Path to the transcript JSON file
            program_id: Program to audit, or None for the detected default

        Returns:
            The DegreeAudit that was displayed
        """
        transcript = self.load_transcript(transcript_path)
        result = self.audit(transcript, program_id)

        if self.display is not None:
            self.display.print_report(transcript, result)

        return result
