"""
Key term extraction task.

Finds "Term: definition" and "Term - definition" pairs in normalized text.

Dependencies: re
System role: Glossary extraction stage of document processing pipeline
"""

import re
from collections.abc import Iterator, Sequence
from typing import Protocol

from ..models import TermPair

MAX_TERM_LENGTH = 50
MIN_DEFINITION_LENGTH = 20
MAX_DEFINITION_LENGTH = 500

# Definition ends at a blank line, a new capitalized line or end of text
_DEFINITION_END = r"(?=\n\n|\n[A-Z]|\Z)"

DEFAULT_TERM_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b([A-Z][a-zA-Z\s]{1,50}):\s+([^:]+?)" + _DEFINITION_END),
    re.compile(r"\b([A-Z][a-zA-Z\s]{1,50})\s+-\s+([^-]+?)" + _DEFINITION_END),
)


class TermPatternStrategy(Protocol):
    """Yields candidate term/definition pairs from a text."""

    def extract_pairs(self, text: str) -> Iterator[TermPair]: ...


class RegexTermStrategy:
    """Applies each pattern independently over the whole text."""

    def __init__(self, patterns: Sequence[re.Pattern] = DEFAULT_TERM_PATTERNS) -> None:
        self._patterns = tuple(patterns)

    def extract_pairs(self, text: str) -> Iterator[TermPair]:
        for pattern in self._patterns:
            for match in pattern.finditer(text):
                yield TermPair(term=match.group(1).strip(), definition=match.group(2).strip())


class TermExtractionTask:
    """Extract term/definition pairs with substance."""

    def __init__(self, strategy: TermPatternStrategy | None = None) -> None:
        """
        Initialize term extraction task.

        Args:
            strategy: Pair extraction strategy (RegexTermStrategy if None)
        """
        self._strategy = strategy or RegexTermStrategy()

    def extract_terms(self, text: str | None) -> list[TermPair]:
        """
        Extract key terms.

        Pairs matched by more than one pattern are returned once per match.

        Args:
            text: Normalized document text

        Returns:
            list[TermPair]: Pairs in pattern order, then match order
        """
        if not text:
            return []

        return [pair for pair in self._strategy.extract_pairs(text) if self._is_substantive(pair)]

    @staticmethod
    def _is_substantive(pair: TermPair) -> bool:
        return (
            len(pair.term) < MAX_TERM_LENGTH
            and MIN_DEFINITION_LENGTH < len(pair.definition) < MAX_DEFINITION_LENGTH
        )
