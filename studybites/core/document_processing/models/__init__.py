"""
Models for document processing pipeline.

Exports: Chunk, Section, SegmentedDocument, TermPair, SummaryResult,
ProcessedDocument, PipelineResult
"""

from .chunk import Chunk
from .outline import Section, SegmentedDocument, TermPair
from .pipeline_result import PipelineResult
from .processed_document import ProcessedDocument
from .summary_result import SummaryResult

__all__ = [
    "Chunk",
    "Section",
    "SegmentedDocument",
    "TermPair",
    "SummaryResult",
    "ProcessedDocument",
    "PipelineResult",
]
