"""
Pipeline result model for chunk summarization.

Dependencies: pydantic
System role: Return type for DocumentPipeline.summarize()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Outcome of summarizing one material's chunks."""

    material_id: str = Field(description="Material identifier")
    chunk_count: int = Field(description="Number of chunks dispatched")
    processed_chunk_ids: list[str] = Field(
        default_factory=list,
        description="Successfully summarized and stored chunk IDs, in dispatch order",
    )
    processing_time_ms: float = Field(description="Total processing time in milliseconds")

    @property
    def failed_chunk_count(self) -> int:
        """Chunks that were dispatched but not stored."""
        return self.chunk_count - len(self.processed_chunk_ids)
