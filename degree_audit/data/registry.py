"""
Course Classification Registry.

Immutable lookup from normalized course code to its handbook classification,
with per-family overrides for the few codes whose compulsory/elective status
differs between BSc and BCS.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Optional

from ..models import CourseClassification, Family
from ..models.course import parse_course_nature, parse_course_type
from .codes import normalize_code

logger = logging.getLogger(__name__)


class CourseRegistry:
    """
    Read-only course classification table.

    WHY STATIC DATA: curricula change by catalogue year and are published per
    department. Keeping them as an immutable value (instead of a service call)
    keeps the evaluator deterministic and testable offline.

    FAMILY OVERRIDES:
    -----------------
    A lookup may pass the student's family. A family-specific entry wins over
    the global entry for the same code; without one, the global entry applies.
      - MAT313β: core under BSc (global), optional under BCS (override)
      - MAT225β: core under both (global only)

    UNKNOWN CODES:
    --------------
    Predicates return False for codes the handbook does not list. False from
    is_optional() does NOT mean the code is core; use is_known() to tell
    "not optional" from "not in the handbook".

    Usage:
        registry = CourseRegistry.from_entries(
            [("MAT313β", "core", "theory")],
            overrides={Family.BCS: [("MAT313β", "optional", "combined")]},
        )
        registry.is_core("mat313b", Family.BSC)   # True
        registry.is_core("MAT313β", Family.BCS)   # False
    """

    def __init__(self, classifications: Iterable[CourseClassification],
                 overrides: Optional[dict] = None):
        table = {}
        for cls in classifications:
            table[normalize_code(cls.code)] = cls
        self._global = MappingProxyType(table)

        family_tables = {}
        for family, entries in (overrides or {}).items():
            family_tables[family] = MappingProxyType(
                {normalize_code(cls.code): cls for cls in entries}
            )
        self._overrides = MappingProxyType(family_tables)

        logger.debug(
            "Registry built: %d global codes, overrides %s",
            len(self._global),
            {f.value: len(t) for f, t in self._overrides.items()},
        )

    @classmethod
    def from_entries(cls, entries: Iterable, overrides: Optional[dict] = None) -> "CourseRegistry":
        """
        Build a registry from (code, type, nature) tuples.

        Later entries for the same code replace earlier ones, matching how the
        handbook lists shared units once per department. Rows with an
        unrecognised type or nature are skipped with a warning.
        """
        def build(rows):
            built = []
            for code, course_type, nature in rows:
                parsed_type = parse_course_type(course_type)
                parsed_nature = parse_course_nature(nature)
                if parsed_type is None or parsed_nature is None:
                    logger.warning("Skipping handbook row %s: bad type/nature %r/%r",
                                   code, course_type, nature)
                    continue
                built.append(CourseClassification(
                    code=normalize_code(code),
                    type=parsed_type,
                    nature=parsed_nature,
                ))
            return built

        return cls(
            build(entries),
            {family: build(rows) for family, rows in (overrides or {}).items()},
        )

    def __len__(self) -> int:
        return len(self._global)

    def __contains__(self, code: str) -> bool:
        return self.is_known(code)

    def lookup(self, code: str, family: Optional[Family] = None) -> Optional[CourseClassification]:
        """
        Classification of a code, or None if the handbook does not list it.

        Args:
            code: Course code in any formatting (case, spaces, Greek letters)
            family: Optional degree family; its overrides take precedence
        """
        key = normalize_code(code)
        if family is not None:
            family_table = self._overrides.get(family)
            if family_table is not None and key in family_table:
                return family_table[key]
        return self._global.get(key)

    def is_known(self, code: str, family: Optional[Family] = None) -> bool:
        return self.lookup(code, family) is not None

    def is_core(self, code: str, family: Optional[Family] = None) -> bool:
        cls = self.lookup(code, family)
        return cls is not None and cls.is_core

    def is_optional(self, code: str, family: Optional[Family] = None) -> bool:
        cls = self.lookup(code, family)
        return cls is not None and not cls.is_core

    def has_theory_component(self, code: str, family: Optional[Family] = None) -> bool:
        cls = self.lookup(code, family)
        return cls is not None and cls.nature.has_theory

    def has_practical_component(self, code: str, family: Optional[Family] = None) -> bool:
        cls = self.lookup(code, family)
        return cls is not None and cls.nature.has_practical

    def codes(self, family: Optional[Family] = None) -> frozenset:
        """All normalized codes visible under a family (global plus its overrides)."""
        codes = set(self._global)
        if family is not None and family in self._overrides:
            codes.update(self._overrides[family])
        return frozenset(codes)
