"""
Text normalization task.

Removes boilerplate lines and page-number tokens from extracted text and
standardizes line breaks so paragraphs survive for chunking.

Dependencies: re
System role: First stage after text extraction
"""

import re
from dataclasses import dataclass, field

# Any whitespace except the newline itself
_HSPACE = r"[^\S\n]"

DEFAULT_BOILERPLATE_PATTERNS: tuple[str, ...] = (
    r"confidential",
    r"all\s+rights\s+reserved",
    r"copyright",
    r"university\s+of",
    r"department\s+of",
    r"course\s*:",
    r"instructor\s*:",
)

_PAGE_RANGE_PATTERN = re.compile(rf"\b(?:[Pp]age{_HSPACE}*)?\d+{_HSPACE}*(?:of|/){_HSPACE}*\d+\b")
_PAGE_LABEL_PATTERN = re.compile(rf"\b[Pp]age{_HSPACE}*\d+\b")
_BARE_PAGE_LINE_PATTERN = re.compile(rf"^{_HSPACE}*\d+{_HSPACE}*$", re.MULTILINE)
_HSPACE_RUN_PATTERN = re.compile(rf"{_HSPACE}+")
_EXCESS_BREAKS_PATTERN = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class BoilerplatePatterns:
    """Immutable set of case-insensitive line patterns treated as boilerplate."""

    patterns: tuple[str, ...] = DEFAULT_BOILERPLATE_PATTERNS
    _compiled: tuple[re.Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = tuple(re.compile(p, re.IGNORECASE) for p in self.patterns)
        object.__setattr__(self, "_compiled", compiled)

    def matches(self, line: str) -> bool:
        """Return True when any pattern occurs anywhere on the line."""
        return any(p.search(line) for p in self._compiled)


DEFAULT_BOILERPLATE = BoilerplatePatterns()


class NormalizationTask:
    """Clean raw extracted text before chunking and segmentation."""

    def __init__(self, boilerplate: BoilerplatePatterns = DEFAULT_BOILERPLATE) -> None:
        """
        Initialize normalization task.

        Args:
            boilerplate: Line patterns to strip (shared default if omitted)
        """
        self._boilerplate = boilerplate

    def normalize(self, raw_text: str | None) -> str:
        """
        Normalize raw document text.

        Steps: unify line breaks, strip boilerplate lines, strip page-number
        tokens, re-normalize line breaks, trim. Never raises.

        Args:
            raw_text: Text produced by the file extractor (may be None)

        Returns:
            str: Normalized text, empty string for empty input
        """
        if not raw_text:
            return ""

        text = raw_text
        # Removing a page token can expose a new boilerplate match, so the
        # passes repeat until stable. Each pass only shortens the text.
        while True:
            cleaned = self._clean_once(text)
            if cleaned == text:
                return cleaned
            text = cleaned

    def _clean_once(self, text: str) -> str:
        text = self._unify_line_breaks(text)
        text = self._strip_boilerplate(text)
        text = self._strip_page_numbers(text)
        text = self._normalize_line_breaks(text)
        return text.strip()

    @staticmethod
    def _unify_line_breaks(text: str) -> str:
        return text.replace("\r\n", "\n").replace("\r", "\n")

    def _strip_boilerplate(self, text: str) -> str:
        lines = text.split("\n")
        return "\n".join("" if self._boilerplate.matches(line) else line for line in lines)

    @staticmethod
    def _strip_page_numbers(text: str) -> str:
        text = _PAGE_RANGE_PATTERN.sub("", text)
        text = _PAGE_LABEL_PATTERN.sub("", text)
        # A number alone on its line is a page footer
        return _BARE_PAGE_LINE_PATTERN.sub("", text)

    @staticmethod
    def _normalize_line_breaks(text: str) -> str:
        lines = [_HSPACE_RUN_PATTERN.sub(" ", line).strip() for line in text.split("\n")]
        return _EXCESS_BREAKS_PATTERN.sub("\n\n", "\n".join(lines))


_default_normalizer = NormalizationTask()


def clean_text(text: str | None) -> str:
    """Normalize text with the default boilerplate patterns."""
    return _default_normalizer.normalize(text)
