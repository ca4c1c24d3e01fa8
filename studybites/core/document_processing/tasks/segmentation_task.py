"""
Section segmentation task.

Detects a document title and splits normalized text into heading/content
sections using a pluggable heading classifier.

Dependencies: re
System role: Outline extraction stage of document processing pipeline
"""

import re
from typing import Protocol

from ..models import Section, SegmentedDocument

DEFAULT_SECTION_HEADING = "Introduction"
TITLE_SCAN_LINES = 5
MAX_HEADING_LENGTH = 100
MAX_HEADING_WORDS = 10

_HEADING_PATTERN = re.compile(
    r"^(?:(?:\d+\.)+\s+|\b(?i:chapter|section|part|module)\s+\d+:?\s+)?"
    r"([A-Z][A-Za-z0-9\s:,\-_]+)$"
)


class HeadingClassifier(Protocol):
    """Decides whether a single stripped line is a section heading."""

    def is_heading(self, line: str) -> bool: ...


class PatternHeadingClassifier:
    """Structural heading heuristic: short, capitalized, unpunctuated lines."""

    def __init__(self, pattern: re.Pattern = _HEADING_PATTERN) -> None:
        self._pattern = pattern

    def is_heading(self, line: str) -> bool:
        return (
            self._pattern.match(line) is not None
            and len(line) < MAX_HEADING_LENGTH
            and len(line.split()) < MAX_HEADING_WORDS
            and not line.endswith(".")
            and line[:1].isupper()
        )


class SegmentationTask:
    """Split text into a title and ordered sections."""

    def __init__(self, classifier: HeadingClassifier | None = None) -> None:
        """
        Initialize segmentation task.

        Args:
            classifier: Heading classifier (PatternHeadingClassifier if None)
        """
        self._classifier = classifier or PatternHeadingClassifier()

    def segment(self, text: str | None) -> SegmentedDocument:
        """
        Detect title and sections.

        Every non-blank line lands in exactly one section. Content before the
        first heading goes to an implicit "Introduction" section.

        Args:
            text: Normalized document text

        Returns:
            SegmentedDocument: Title (or None) and sections in document order
        """
        if not text:
            return SegmentedDocument()

        lines = [line.strip() for line in text.split("\n")]
        non_empty = [line for line in lines if line]

        sections: list[Section] = []
        current: Section | None = None

        for line in non_empty:
            if self._classifier.is_heading(line):
                if current is not None:
                    sections.append(current)
                current = Section(heading=line)
            elif current is not None:
                current.content = f"{current.content}\n{line}" if current.content else line
            else:
                current = Section(heading=DEFAULT_SECTION_HEADING, content=line)

        if current is not None:
            sections.append(current)

        return SegmentedDocument(title=self._detect_title(non_empty), sections=sections)

    @staticmethod
    def _detect_title(lines: list[str]) -> str | None:
        for line in lines[:TITLE_SCAN_LINES]:
            if len(line) < MAX_HEADING_LENGTH and not line.endswith("."):
                return line
        return None
