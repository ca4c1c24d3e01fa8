"""
Summarization result model.

Dependencies: pydantic
System role: Record persisted per (material, chunk) by the result store
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class SummaryResult(BaseModel):
    """LLM output for a single chunk."""

    model_config = ConfigDict(frozen=True)

    chunk_id: str = Field(description="ID of the summarized chunk")
    summary: str = Field(description="Summary text returned by the model")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the summary was produced (UTC)",
    )
    embeddings: list[float] | None = Field(default=None, description="Optional embedding vector")
