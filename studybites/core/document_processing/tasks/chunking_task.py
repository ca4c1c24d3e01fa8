"""
Text chunking task with cascading granularity.

Packs paragraphs into chunks bounded by a maximum character size. Paragraphs
that do not fit on their own are split into sentences, and sentences that do
not fit are split into words. A single word longer than the limit becomes
its own oversized chunk.

Dependencies: re, hashlib
System role: Second stage of document processing pipeline
"""

import hashlib
import re
from collections.abc import Callable, Iterable

from ..models import Chunk

DEFAULT_CHUNK_SIZE = 4000

_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")

PARAGRAPH_JOINER = "\n\n"
SENTENCE_JOINER = " "
WORD_JOINER = " "


class ChunkingTask:
    """Split normalized text into ordered, size-bounded chunks."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """
        Initialize chunking task.

        Args:
            chunk_size: Maximum chunk size in characters

        Raises:
            ValueError: When chunk_size is less than 1
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def chunk(self, text: str | None) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Normalized document text

        Returns:
            list[str]: Non-empty, stripped chunks in document order
        """
        if not text:
            return []

        paragraphs = [p.strip() for p in _PARAGRAPH_SPLIT.split(text)]
        return self._pack(
            [p for p in paragraphs if p],
            PARAGRAPH_JOINER,
            self._split_paragraph,
        )

    def build_chunks(
        self,
        material_id: str,
        text: str | None,
        metadata: dict | None = None,
    ) -> list[Chunk]:
        """
        Split text and wrap each piece in a Chunk model.

        Args:
            material_id: Material the chunks belong to (part of the ID hash)
            text: Normalized document text
            metadata: Metadata copied onto every chunk

        Returns:
            list[Chunk]: Chunks with deterministic IDs
        """
        return [
            Chunk(
                id=self._generate_chunk_id(material_id, index, content),
                content=content,
                index=index,
                metadata=dict(metadata or {}),
            )
            for index, content in enumerate(self.chunk(text))
        ]

    def _split_paragraph(self, paragraph: str) -> list[str]:
        sentences = [s for s in _SENTENCE_SPLIT.split(paragraph) if s]
        return self._pack(sentences, SENTENCE_JOINER, self._split_sentence)

    def _split_sentence(self, sentence: str) -> list[str]:
        return self._pack(sentence.split(), WORD_JOINER, None)

    def _pack(
        self,
        units: Iterable[str],
        joiner: str,
        split_oversized: Callable[[str], list[str]] | None,
    ) -> list[str]:
        """
        Greedily accumulate units into chunks no larger than chunk_size.

        Args:
            units: Text units at the current granularity
            joiner: Separator placed between units within a chunk
            split_oversized: Splitter for units larger than chunk_size,
                None at the terminal (word) level

        Returns:
            list[str]: Packed chunks
        """
        chunks: list[str] = []
        current = ""

        for unit in units:
            if split_oversized is not None and len(unit) > self._chunk_size:
                if current:
                    chunks.append(current.strip())
                    current = ""
                chunks.extend(split_oversized(unit))
                continue

            candidate = f"{current}{joiner}{unit}" if current else unit
            if current and len(candidate) > self._chunk_size:
                chunks.append(current.strip())
                current = unit
            else:
                current = candidate

        if current.strip():
            chunks.append(current.strip())

        return [c for c in chunks if c]

    @staticmethod
    def _generate_chunk_id(material_id: str, index: int, content: str) -> str:
        """
        Generate deterministic chunk ID.

        Args:
            material_id: Owning material
            index: Position in the chunk sequence
            content: Chunk text

        Returns:
            str: SHA-256 hash of material + index + content, 16 hex chars
        """
        hash_input = f"{material_id}:{index}:{content}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:16]


def split_into_chunks(text: str | None, max_chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Functional form of ChunkingTask.chunk()."""
    return ChunkingTask(max_chunk_size).chunk(text)
