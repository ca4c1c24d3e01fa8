"""
Processed document model.

Everything derived from one uploaded material before summarization.

Dependencies: pydantic
System role: Return type for DocumentPipeline.process_text()
"""

from pydantic import BaseModel, Field

from .chunk import Chunk
from .outline import Section, TermPair

PREVIEW_SECTIONS = 3
PREVIEW_TERMS = 5


class ProcessedDocument(BaseModel):
    """Chunks, outline and key terms of one material."""

    material_id: str = Field(description="Material the artifacts are keyed under")
    original_name: str = Field(default="", description="Uploaded filename, if any")
    title: str | None = None
    sections: list[Section] = Field(default_factory=list)
    key_terms: list[TermPair] = Field(default_factory=list)
    chunks: list[Chunk] = Field(default_factory=list)

    def preview(self) -> dict:
        """
        Summarize the document for display after upload.

        Returns:
            dict: Counts plus the first sections and key terms
        """
        return {
            "id": self.material_id,
            "originalName": self.original_name,
            "title": self.title,
            "sectionCount": len(self.sections),
            "keyTermCount": len(self.key_terms),
            "chunkCount": len(self.chunks),
            "sections": [s.model_dump() for s in self.sections[:PREVIEW_SECTIONS]],
            "keyTerms": [t.model_dump() for t in self.key_terms[:PREVIEW_TERMS]],
        }
