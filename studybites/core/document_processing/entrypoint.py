"""
Document pipeline orchestrator.

Coordinates parsing, normalization, chunking, segmentation, term extraction
and batched summarization of one uploaded material.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import argparse
import asyncio
import json
import logging
import time
import uuid
from pathlib import Path

from studybites.configs import get_settings
from studybites.core.exceptions import EmptyDocumentError
from studybites.observability import configure_logging, get_logger, log_with_context

from .configs import DocumentPipelineSettings, get_pipeline_settings
from .models import PipelineResult, ProcessedDocument
from .tasks import (
    BatchSummarizationTask,
    ChunkingTask,
    LocalResultStore,
    NormalizationTask,
    ParsingTask,
    ResultStore,
    SegmentationTask,
    SummarizationTask,
    Summarizer,
    TermExtractionTask,
)

logger = get_logger(__name__)


class DocumentPipeline:
    """Orchestrate material processing: parse -> normalize -> chunk/segment/terms -> summarize."""

    def __init__(
        self,
        settings: DocumentPipelineSettings | None = None,
        summarizer: Summarizer | None = None,
        store: ResultStore | None = None,
        normalization_task: NormalizationTask | None = None,
        segmentation_task: SegmentationTask | None = None,
        term_extraction_task: TermExtractionTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            settings: Pipeline settings (uses defaults if None)
            summarizer: Summarization service (Gemini built on first use if None)
            store: Result store (local JSON store built on first use if None)
            normalization_task: Custom normalizer (default boilerplate if None)
            segmentation_task: Custom segmenter (pattern headings if None)
            term_extraction_task: Custom term extractor (regex patterns if None)
        """
        self._settings = settings or get_pipeline_settings()
        self._summarizer = summarizer
        self._store = store

        self._parsing_task = ParsingTask()
        self._normalization_task = normalization_task or NormalizationTask()
        self._chunking_task = ChunkingTask(chunk_size=self._settings.chunk_size)
        self._segmentation_task = segmentation_task or SegmentationTask()
        self._term_extraction_task = term_extraction_task or TermExtractionTask()

    def process_file(self, file_path: str, material_id: str | None = None) -> ProcessedDocument:
        """
        Extract and process an uploaded file.

        Args:
            file_path: Path to PDF, DOCX or TXT file
            material_id: Optional material ID (generated if None)

        Returns:
            ProcessedDocument: Chunks, outline and key terms

        Raises:
            ParsingError: Unsupported or unreadable file
            EmptyDocumentError: No text left after normalization
        """
        raw_text = self._parsing_task.parse(file_path)
        return self.process_text(
            raw_text,
            material_id=material_id,
            original_name=Path(file_path).name,
        )

    def process_text(
        self,
        raw_text: str,
        material_id: str | None = None,
        original_name: str = "",
    ) -> ProcessedDocument:
        """
        Process already-extracted text.

        Args:
            raw_text: Raw document text
            material_id: Optional material ID (generated if None)
            original_name: Original filename for display

        Returns:
            ProcessedDocument: Chunks, outline and key terms

        Raises:
            EmptyDocumentError: No text left after normalization
        """
        mat_id = material_id or str(uuid.uuid4())
        text = self._normalization_task.normalize(raw_text)
        if not text:
            raise EmptyDocumentError("Document contains no usable text", material_id=mat_id)

        outline = self._segmentation_task.segment(text)
        key_terms = self._term_extraction_task.extract_terms(text)
        chunk_metadata = {"title": outline.title} if outline.title else {}
        chunks = self._chunking_task.build_chunks(mat_id, text, metadata=chunk_metadata)

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:process_text - material_id={mat_id}, chunks={len(chunks)}",
            material_id=mat_id,
            original_name=original_name,
            title=outline.title,
            section_count=len(outline.sections),
            key_term_count=len(key_terms),
        )
        return ProcessedDocument(
            material_id=mat_id,
            original_name=original_name,
            title=outline.title,
            sections=outline.sections,
            key_terms=key_terms,
            chunks=chunks,
        )

    async def summarize(self, document: ProcessedDocument) -> PipelineResult:
        """
        Summarize and store every chunk of a processed document.

        Args:
            document: Output of process_text() or process_file()

        Returns:
            PipelineResult: Stored chunk IDs and timing
        """
        start_time = time.perf_counter()
        batch_task = BatchSummarizationTask(
            summarizer=self._get_summarizer(),
            store=self._get_store(),
            batch_size=self._settings.batch_size,
            batch_delay_ms=self._settings.batch_delay_ms,
        )
        processed_ids = await batch_task.process_all(document.material_id, document.chunks)

        return PipelineResult(
            material_id=document.material_id,
            chunk_count=len(document.chunks),
            processed_chunk_ids=processed_ids,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def _get_summarizer(self) -> Summarizer:
        if self._summarizer is None:
            llm = get_settings().llm
            self._summarizer = SummarizationTask(
                model_id=llm.model,
                temperature=llm.temperature,
                max_tokens=llm.max_tokens,
                api_key=llm.api_key,
            )
        return self._summarizer

    def _get_store(self) -> ResultStore:
        if self._store is None:
            self._store = LocalResultStore(get_settings().storage.output_directory)
        return self._store


def main(argv: list[str] | None = None) -> None:
    """Process a single file from the command line and print its preview."""
    parser = argparse.ArgumentParser(description="Process a course material file.")
    parser.add_argument("file_path", help="PDF, DOCX or TXT file")
    parser.add_argument("--material-id", default=None)
    parser.add_argument("--summarize", action="store_true", help="Send chunks to the LLM")
    args = parser.parse_args(argv)

    configure_logging(get_settings().effective_log_level)
    pipeline = DocumentPipeline()
    document = pipeline.process_file(args.file_path, material_id=args.material_id)
    output = {"document": document.preview()}

    if args.summarize:
        result = asyncio.run(pipeline.summarize(document))
        output["summaries"] = result.model_dump()

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
