"""
Document processing pipeline for course materials.

Parses uploads, normalizes text, builds chunks, outline and key terms, and
dispatches chunks to the summarization service in rate-limited batches.

Dependencies: langchain_community, langchain_google_genai, pydantic
System role: Material processing pipeline entrypoint
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .entrypoint import DocumentPipeline
from .models import Chunk, PipelineResult, ProcessedDocument

__all__ = [
    "DocumentPipeline",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "Chunk",
    "PipelineResult",
    "ProcessedDocument",
]
