"""
Document parsing task using LangChain document loaders.

Converts uploaded PDF, DOCX and TXT files into plain text.

Dependencies: langchain_community.document_loaders
System role: File-to-text extraction before normalization
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import Docx2txtLoader, PyPDFLoader

from studybites.core.exceptions import ParsingError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")
PAGE_SEPARATOR = "\n\n"


class ParsingTask:
    """Extract raw text from uploaded course material."""

    def parse(self, file_path: str) -> str:
        """
        Extract text from a file based on its extension.

        Args:
            file_path: Path to PDF, DOCX or TXT file

        Returns:
            str: Extracted raw text

        Raises:
            ParsingError: When the file is missing, unsupported or unreadable
        """
        path = Path(file_path)
        extension = path.suffix.lower()

        if extension == ".doc":
            raise ParsingError(
                "DOC format is not supported directly. Please convert to DOCX or PDF.",
                file_path=file_path,
                file_type=extension,
            )
        if extension not in SUPPORTED_EXTENSIONS:
            raise ParsingError(
                f"Unsupported file format: {extension}",
                file_path=file_path,
                file_type=extension,
            )
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", file_path=file_path)

        try:
            if extension == ".txt":
                text = path.read_text(encoding="utf-8")
            else:
                loader = PyPDFLoader(str(path)) if extension == ".pdf" else Docx2txtLoader(str(path))
                text = PAGE_SEPARATOR.join(doc.page_content for doc in loader.load())
        except Exception as e:
            raise ParsingError(
                f"Failed to extract text from {extension[1:].upper()}: {e}",
                file_path=file_path,
                file_type=extension,
            ) from e

        logger.info(f"{__name__}:parse - Extracted {len(text)} chars from {path.name}")
        return text
