"""
Degree Audit Package
====================

The rules core of a Faculty of Science student dashboard. Given a transcript,
it reports how far the student is from graduating under each BSc / BCS
degree program, and which honours tier they currently qualify for.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │TranscriptParser │  │ CourseRegistry              │  │
│  │  (I/O)      │  │ (parsing)       │  │ (handbook classifications)  │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌────────────────┐ ┌───────────────────┐ ┌──────────────────────────┐  │
│  │ StreamDetector │ │ SubjectPartitioner│ │ RequirementEvaluator     │  │
│  │ (BSc / BCS)    │ │ (core / optional) │ │ HonoursClassifier        │  │
│  └────────────────┘ └───────────────────┘ └──────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Prints requirement cards, honours tiers and a summary        │   │
│  │  • progress_percentage() / card_status() drive the cards        │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        DegreeAuditor                                     │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

degree_audit/
├── __init__.py          # This file - main exports
├── config.py            # Thresholds and constants
├── auditor.py           # DegreeAuditor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # CourseType, CourseNature, SubjectRecord
│   ├── program.py       # Family, DegreeProgram, the six variants
│   ├── requirement.py   # Computable, Unavailable, HonoursTier
│   └── audit.py         # Transcript, SubjectPartition, DegreeAudit
│
├── data/                # Handbook data, loading and parsing
│   ├── codes.py         # Course code normalization
│   ├── registry.py      # CourseRegistry
│   ├── loader.py        # DataLoader
│   └── parser.py        # TranscriptParser
│
├── engines/             # Evaluation engines
│   ├── aggregation.py   # Credit and percentage helpers
│   ├── stream.py        # StreamDetector
│   ├── partition.py     # SubjectPartitioner
│   ├── requirements.py  # RequirementEvaluator and the six rule sets
│   └── honours.py       # HonoursClassifier
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

Basic usage:

    from degree_audit import DegreeAuditor

    auditor = DegreeAuditor()
    transcript = auditor.load_transcript("transcript.json")

    result = auditor.audit(transcript)                  # detected stream default
    result = auditor.audit(transcript, "bsc-special-completion")

    for req in result.requirements:
        print(req.label, getattr(req, "met", None))

Running from command line:

    python -m degree_audit transcript.json

"""

# Version
__version__ = "1.0.0"

# Main exports
from .auditor import DegreeAuditor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    CourseType,
    CourseNature,
    CourseClassification,
    SubjectRecord,
    Family,
    DegreeProgram,
    DEGREE_PROGRAMS,
    get_program,
    programs_for,
    Computable,
    Unavailable,
    HonoursTier,
    Transcript,
    SubjectPartition,
    DegreeAudit,
)

# Engine exports (for advanced use)
from .engines import (
    StreamDetector,
    SubjectPartitioner,
    RequirementEvaluator,
    HonoursClassifier,
)

# Data exports
from .data import CourseRegistry, DataLoader, TranscriptParser, normalize_code

# UI exports
from .ui import TerminalDisplay, card_status, progress_percentage

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "DegreeAuditor",
    "main",
    # Models
    "CourseType",
    "CourseNature",
    "CourseClassification",
    "SubjectRecord",
    "Family",
    "DegreeProgram",
    "DEGREE_PROGRAMS",
    "get_program",
    "programs_for",
    "Computable",
    "Unavailable",
    "HonoursTier",
    "Transcript",
    "SubjectPartition",
    "DegreeAudit",
    # Engines
    "StreamDetector",
    "SubjectPartitioner",
    "RequirementEvaluator",
    "HonoursClassifier",
    # Data
    "CourseRegistry",
    "DataLoader",
    "TranscriptParser",
    "normalize_code",
    # UI
    "TerminalDisplay",
    "card_status",
    "progress_percentage",
]
