"""
Outline models: sections, document title and key terms.

Dependencies: pydantic
System role: Output of segmentation and term extraction
"""

from pydantic import BaseModel, Field


class Section(BaseModel):
    """Heading plus its accumulated body text."""

    heading: str
    content: str = ""


class SegmentedDocument(BaseModel):
    """Title and ordered sections of one document."""

    title: str | None = Field(default=None, description="Detected title, None if no line qualifies")
    sections: list[Section] = Field(default_factory=list)


class TermPair(BaseModel):
    """Term and its definition as found in the text."""

    term: str
    definition: str
