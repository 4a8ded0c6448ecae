"""
Configuration constants for the degree audit system.

This module contains all regulatory thresholds and constants used throughout
the evaluation engine. Centralizing these makes it easy to adjust behavior
when the Faculty handbook changes.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Data files ship inside the package so an installed copy can find them
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
CURRICULUM_FILE = DATA_DIR / "curriculum.json"
EXAMPLE_TRANSCRIPT_FILE = DATA_DIR / "example_transcript.json"


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("DEGREE_AUDIT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Letter grade -> grade scale value (0.0 - 4.0).
# The portal usually sends the numeric value alongside the letter; this table
# is only used when it does not.
GRADE_SCALE = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "E": 0.0,
    "E*": 0.0,
    "E+": 0.0,
    "E-": 0.0,
    "F": 0.0,
    "MC": 0.0,
}

# Grade-scale cutoffs referred to by the regulations
GRADE_A_MINUS = 3.7
GRADE_B_MINUS = 2.7
GRADE_C = 2.0
GRADE_C_MINUS = 1.7
GRADE_D_PLUS = 1.3

# Institutional "C or better" pass bar (English levels)
PASS_GRADE_SCALE = GRADE_C


# =============================================================================
# SUBJECT CODE GROUPS
# =============================================================================

# Department prefix groups used for department-specific percentages
COMPUTING_PREFIXES = ("CSC", "COM")
MATHEMATICS_PREFIXES = ("MAT", "AMT", "IMT")

GROUP_COMPUTING = "computing"
GROUP_MATHEMATICS = "mathematics"
GROUP_OTHER = "other"

# English course prefix per level, matched against normalized codes
ENGLISH_PREFIX = "eng"


# =============================================================================
# STREAM DETECTION
# =============================================================================

# Declared department tags that mark a BCS student
BCS_DEPARTMENT_KEYWORDS = ("BCS", "COMPUTER SCIENCE")

# Share of credits in computing prefixes above which a student is treated as
# BCS when no department tag decides it. Practical default, not a policy.
BCS_CREDIT_SHARE_THRESHOLD = 0.4


# =============================================================================
# KEYWORD LOOKUPS
# =============================================================================

# Courses whose codes are not stable across catalogue years
CLC_KEYWORDS = ("clc", "computer literacy")
INDUSTRY_PLACEMENT_KEYWORDS = ("industry", "placement", "industrial")
RESEARCH_PROJECT_KEYWORDS = ("research project", "individual project")


# =============================================================================
# HONOURS CLASSIFICATION
# =============================================================================

HONOURS_MIN_CREDITS = 40
FIRST_CLASS_GPA = 3.70
SECOND_UPPER_GPA = 3.30
SECOND_LOWER_GPA = 3.00


# =============================================================================
# PRESENTATION
# =============================================================================

# A requirement that is not met but at least this far along is shown as close
CLOSE_PROGRESS_PERCENT = 70
MAX_GPA = 4.0
