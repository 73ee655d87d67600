from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from cvgen.models.schemas import Language

logger = logging.getLogger(__name__)

RESUME_FILENAMES = {
    Language.ENGLISH: "cv-en.md",
    Language.FRENCH: "cv-fr.md",
}


class ResumeNotFoundError(FileNotFoundError):
    pass


class ResumeStore:
    """
    Loads the candidate's base resume, one Markdown file per language.

    Files are read on first use, or all at once through ``warm()`` at
    startup, and kept in memory afterwards.
    """

    def __init__(self, resume_dir: Path):
        self.resume_dir = Path(resume_dir)
        self._cache: Dict[Language, str] = {}

    def path_for(self, language: Language) -> Path:
        return self.resume_dir / RESUME_FILENAMES[language]

    def load(self, language: Language) -> str:
        if language in self._cache:
            return self._cache[language]

        path = self.path_for(language)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ResumeNotFoundError(f"Base resume not found: {path}") from e

        logger.info(f"Loaded base resume {path.name} ({len(text)} chars)")
        self._cache[language] = text
        return text

    def warm(self) -> None:
        """Read every base resume up front so requests never hit the disk."""
        for language in Language:
            try:
                self.load(language)
            except ResumeNotFoundError as e:
                logger.warning(f"{e}. {language.value} generation will fail until it is added.")
