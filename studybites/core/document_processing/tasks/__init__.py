"""
Task modules for document processing pipeline.

Exports: ParsingTask, NormalizationTask, ChunkingTask, SegmentationTask,
TermExtractionTask, SummarizationTask, LocalResultStore,
BatchSummarizationTask
"""

from .batch_task import BatchSummarizationTask
from .chunking_task import ChunkingTask, split_into_chunks
from .normalization_task import BoilerplatePatterns, NormalizationTask, clean_text
from .parsing_task import ParsingTask
from .saving_task import LocalResultStore, ResultStore
from .segmentation_task import HeadingClassifier, PatternHeadingClassifier, SegmentationTask
from .summarization_task import SummarizationTask, Summarizer, estimate_token_count
from .term_extraction_task import RegexTermStrategy, TermExtractionTask, TermPatternStrategy

__all__ = [
    "ParsingTask",
    "NormalizationTask",
    "BoilerplatePatterns",
    "clean_text",
    "ChunkingTask",
    "split_into_chunks",
    "SegmentationTask",
    "HeadingClassifier",
    "PatternHeadingClassifier",
    "TermExtractionTask",
    "TermPatternStrategy",
    "RegexTermStrategy",
    "SummarizationTask",
    "Summarizer",
    "estimate_token_count",
    "LocalResultStore",
    "ResultStore",
    "BatchSummarizationTask",
]
