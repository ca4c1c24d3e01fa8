"""
Chunk domain model for document processing pipeline.

Represents one bounded slice of a material with a deterministic ID.

Dependencies: pydantic
System role: Unit of work handed to the summarization service
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Ordered document chunk."""

    id: str = Field(description="Deterministic chunk identifier (content hash)")
    content: str = Field(description="Chunk text content")
    index: int = Field(default=0, ge=0, description="Position in the material's chunk sequence")
    metadata: dict = Field(
        default_factory=dict,
        description="Chunk metadata (document title when one was detected)",
    )
