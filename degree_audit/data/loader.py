"""
Data loading and caching.

This module handles loading the curriculum handbook table and transcript
files. The handbook is read once and turned into an immutable registry.
"""

import json
import logging
from pathlib import Path

from ..config import CURRICULUM_FILE
from ..models import Family
from .registry import CourseRegistry

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the curriculum handbook.

    WHY LAZY LOADING: the registry is only built the first time it is
    accessed, and the same instance is handed to every engine afterwards.

    DATA SOURCES:
    - curriculum.json: the Faculty handbook classification table
      - global: sections of [code, type, nature] rows, one per department track
      - families: per-family override sections ("bsc", "bcs")

    Usage:
        loader = DataLoader()
        registry = loader.registry
        payload = loader.load_transcript("transcript.json")
    """

    def __init__(self, curriculum_path=None):
        self.curriculum_path = Path(curriculum_path) if curriculum_path else CURRICULUM_FILE
        # Private cache variables - None means "not loaded yet"
        self._curriculum = None
        self._registry = None

    @property
    def curriculum(self) -> dict:
        """Raw handbook table as stored on disk."""
        if self._curriculum is None:
            if not self.curriculum_path.exists():
                raise FileNotFoundError(f"Curriculum file not found: {self.curriculum_path}")
            with open(self.curriculum_path, "r", encoding="utf-8") as f:
                self._curriculum = json.load(f)
        return self._curriculum

    @property
    def registry(self) -> CourseRegistry:
        """
        The course classification registry, built once from the handbook.

        Duplicate codes inside the global table resolve to the last row,
        so a department section listed later wins.
        """
        if self._registry is None:
            data = self.curriculum
            entries = self._collect_rows(data.get("global", []))

            overrides = {}
            for family_key, sections in data.get("families", {}).items():
                try:
                    family = Family(family_key.lower())
                except ValueError:
                    logger.warning("Ignoring overrides for unknown family '%s'", family_key)
                    continue
                overrides[family] = self._collect_rows(sections)

            self._registry = CourseRegistry.from_entries(entries, overrides)
            logger.info("Loaded %d handbook course codes from %s",
                        len(self._registry), self.curriculum_path.name)
        return self._registry

    @staticmethod
    def _collect_rows(sections: list) -> list:
        """Flatten handbook sections into (code, type, nature) tuples."""
        rows = []
        for section in sections:
            for row in section.get("courses", []):
                code, course_type, nature = row
                rows.append((code, course_type, nature))
        return rows

    def list_sections(self) -> list:
        """Names of the handbook sections in the global table."""
        return [s.get("name", "") for s in self.curriculum.get("global", [])]

    def load_transcript(self, transcript_path) -> dict:
        """
        Load a raw transcript JSON payload.

        Args:
            transcript_path: Path to a transcript export

        Returns:
            The decoded JSON payload, to be handed to TranscriptParser
        """
        path = Path(transcript_path)
        if not path.exists():
            raise FileNotFoundError(f"Transcript file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
