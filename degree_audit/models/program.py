"""
Degree program models.

The Faculty awards two families of degree (BSc and BCS), each with a general
track and a special track. The special track is evaluated twice: once at
selection (end of year 3) and once at completion (end of year 4).
"""

from dataclasses import dataclass
from enum import Enum


class Family(Enum):
    """
    The two degree pathways with different compulsory curricula.

    BSC: Bachelor of Science (physical and biological streams)
    BCS: Bachelor of Computer Science
    """
    BSC = "bsc"
    BCS = "bcs"

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class DegreeProgram:
    """
    One of the six fixed degree-program variants.

    Attributes:
        id: Stable identifier (e.g., "bcs-general"), used as the rule set key
        label: Full name shown in the program picker
        short_label: Compact name for headers
        family: Family the variant belongs to
    """
    id: str
    label: str
    short_label: str
    family: Family


BSC_GENERAL = DegreeProgram("bsc-general", "BSc General Degree", "BSc General", Family.BSC)
BSC_SPECIAL_SELECTION = DegreeProgram(
    "bsc-special-selection", "BSc Special Degree – Selection", "BSc Special (Sel.)", Family.BSC
)
BSC_SPECIAL_COMPLETION = DegreeProgram(
    "bsc-special-completion", "BSc Special Degree – Completion", "BSc Special (Comp.)", Family.BSC
)
BCS_GENERAL = DegreeProgram("bcs-general", "BCS General Degree", "BCS General", Family.BCS)
BCS_SPECIAL_SELECTION = DegreeProgram(
    "bcs-special-selection", "BCS Special Degree – Selection", "BCS Special (Sel.)", Family.BCS
)
BCS_SPECIAL_COMPLETION = DegreeProgram(
    "bcs-special-completion", "BCS Special Degree – Completion", "BCS Special (Comp.)", Family.BCS
)

DEGREE_PROGRAMS = (
    BSC_GENERAL,
    BSC_SPECIAL_SELECTION,
    BSC_SPECIAL_COMPLETION,
    BCS_GENERAL,
    BCS_SPECIAL_SELECTION,
    BCS_SPECIAL_COMPLETION,
)

_PROGRAMS_BY_ID = {p.id: p for p in DEGREE_PROGRAMS}


def get_program(program_id: str) -> DegreeProgram:
    """
    Look up a program by id (case-insensitive).

    Raises:
        ValueError: if the id is not one of the six variants
    """
    program = _PROGRAMS_BY_ID.get(program_id.strip().lower())
    if program is None:
        raise ValueError(
            f"Unknown degree program '{program_id}'. "
            f"Expected one of: {', '.join(_PROGRAMS_BY_ID)}"
        )
    return program


def programs_for(family: Family) -> list:
    """List the three variants of a family in display order."""
    return [p for p in DEGREE_PROGRAMS if p.family == family]


def default_program(family: Family) -> DegreeProgram:
    """The general track is the default for each family."""
    return BCS_GENERAL if family == Family.BCS else BSC_GENERAL
