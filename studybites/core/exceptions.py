"""
Exception hierarchy for the StudyBites document pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the pipeline
"""

from typing import Any


class StudyBitesError(Exception):
    """Base exception for all StudyBites errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DocumentProcessingError(StudyBitesError):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        material_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            material_id: ID of the material being processed
            details: Additional context
        """
        details = details or {}
        if material_id:
            details["material_id"] = material_id
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when text cannot be extracted from an uploaded file."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            file_path: Path of the file that failed
            file_type: Extension of the file that failed
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        self.file_path = file_path
        super().__init__(message, details=details)


class EmptyDocumentError(DocumentProcessingError):
    """Raised when a document has no usable text after normalization."""

    pass


class SummarizationError(DocumentProcessingError):
    """Raised when the summarization service fails for a single chunk."""

    def __init__(
        self,
        message: str,
        chunk_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize summarization error.

        Args:
            message: Error message
            chunk_id: ID of the chunk that failed
            details: Additional context
        """
        details = details or {}
        if chunk_id:
            details["chunk_id"] = chunk_id
        super().__init__(message, details=details)


class StorageError(StudyBitesError):
    """Raised when persisting or loading a processed result fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (put, get, list)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
