"""
Core business logic module.

Contains the exception hierarchy and the document processing pipeline.
"""

from studybites.core.exceptions import (
    DocumentProcessingError,
    EmptyDocumentError,
    ParsingError,
    StorageError,
    StudyBitesError,
    SummarizationError,
)
from studybites.core.document_processing import DocumentPipeline

__all__ = [
    # Exceptions
    "StudyBitesError",
    "DocumentProcessingError",
    "ParsingError",
    "EmptyDocumentError",
    "SummarizationError",
    "StorageError",
    # Business logic
    "DocumentPipeline",
]
