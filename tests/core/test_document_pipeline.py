"""
Tests for the document pipeline orchestrator.

Exercises the full text path (normalize, segment, extract terms, chunk)
and the summarization path with fakes in place of Gemini.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from studybites.configs import get_settings
from studybites.core.document_processing import (
    DocumentPipeline,
    DocumentPipelineSettings,
    ProcessedDocument,
)
from studybites.core.document_processing.entrypoint import main
from studybites.core.document_processing.models import Section, TermPair
from studybites.core.exceptions import EmptyDocumentError, ParsingError

LECTURE = (
    "Introduction to Biology\n"
    "University of Somewhere\n"
    "Page 1 of 3\n"
    "\n"
    "Cells are the basic units of life.\n"
    "\n"
    "Osmosis: The movement of water across a semipermeable membrane.\n"
    "\n"
    "METHODS\n"
    "We observed cells under a microscope."
)


@pytest.fixture
def fast_settings() -> DocumentPipelineSettings:
    """Provide settings without inter-batch delay."""
    return DocumentPipelineSettings(chunk_size=4000, batch_size=3, batch_delay_ms=0)


class TestProcessText:
    """Test synchronous processing of extracted text."""

    def test_builds_outline_terms_and_chunks(self, fast_settings: DocumentPipelineSettings) -> None:
        """Should derive title, sections, key terms and one chunk."""
        document = DocumentPipeline(settings=fast_settings).process_text(LECTURE, material_id="m-1")

        assert document.material_id == "m-1"
        assert document.title == "Introduction to Biology"
        assert document.sections == [
            Section(
                heading="Introduction to Biology",
                content=(
                    "Cells are the basic units of life.\n"
                    "Osmosis: The movement of water across a semipermeable membrane."
                ),
            ),
            Section(heading="METHODS", content="We observed cells under a microscope."),
        ]
        assert document.key_terms == [
            TermPair(term="Osmosis", definition="The movement of water across a semipermeable membrane.")
        ]
        assert len(document.chunks) == 1
        assert document.chunks[0].metadata == {"title": "Introduction to Biology"}

    def test_boilerplate_never_reaches_chunks(self, fast_settings: DocumentPipelineSettings) -> None:
        """Should strip boilerplate and page markers before chunking."""
        document = DocumentPipeline(settings=fast_settings).process_text(LECTURE, material_id="m-1")

        content = document.chunks[0].content
        assert "University" not in content
        assert "Page 1" not in content

    def test_material_id_is_generated(self, fast_settings: DocumentPipelineSettings) -> None:
        """Should assign a fresh ID when none is given."""
        pipeline = DocumentPipeline(settings=fast_settings)

        first = pipeline.process_text(LECTURE)
        second = pipeline.process_text(LECTURE)

        assert first.material_id
        assert first.material_id != second.material_id

    def test_chunk_ids_are_deterministic(self, fast_settings: DocumentPipelineSettings) -> None:
        """Should give identical chunk IDs for identical input."""
        pipeline = DocumentPipeline(settings=fast_settings)

        first = pipeline.process_text(LECTURE, material_id="m-1")
        second = pipeline.process_text(LECTURE, material_id="m-1")

        assert [c.id for c in first.chunks] == [c.id for c in second.chunks]

    def test_chunk_size_comes_from_settings(self) -> None:
        """Should split into several chunks under a small size limit."""
        settings = DocumentPipelineSettings(chunk_size=60, batch_delay_ms=0)

        document = DocumentPipeline(settings=settings).process_text(LECTURE, material_id="m-1")

        assert len(document.chunks) > 1
        assert all(len(c.content) <= 60 for c in document.chunks)
        assert [c.index for c in document.chunks] == list(range(len(document.chunks)))

    @pytest.mark.parametrize("text", ["", "   \n\n", "Confidential\nPage 3 of 9\n12"])
    def test_empty_after_normalization_raises(
        self, text: str, fast_settings: DocumentPipelineSettings
    ) -> None:
        """Should reject documents with no usable text."""
        with pytest.raises(EmptyDocumentError) as exc_info:
            DocumentPipeline(settings=fast_settings).process_text(text, material_id="m-empty")

        assert exc_info.value.details["material_id"] == "m-empty"


class TestProcessFile:
    """Test file-based processing."""

    def test_txt_upload(self, tmp_path: Path, fast_settings: DocumentPipelineSettings) -> None:
        """Should record the original filename."""
        path = tmp_path / "bio101.txt"
        path.write_text(LECTURE, encoding="utf-8")

        document = DocumentPipeline(settings=fast_settings).process_file(str(path))

        assert document.original_name == "bio101.txt"
        assert document.title == "Introduction to Biology"

    def test_unsupported_file_propagates(
        self, tmp_path: Path, fast_settings: DocumentPipelineSettings
    ) -> None:
        """Should surface ParsingError to the caller."""
        with pytest.raises(ParsingError):
            DocumentPipeline(settings=fast_settings).process_file(str(tmp_path / "deck.pptx"))


class TestSummarize:
    """Test the asynchronous summarization path."""

    @pytest.mark.asyncio
    async def test_summarize_stores_every_chunk(
        self, fake_summarizer, result_store
    ) -> None:
        """Should report all chunks as processed and persist them."""
        settings = DocumentPipelineSettings(chunk_size=60, batch_delay_ms=0)
        pipeline = DocumentPipeline(settings=settings, summarizer=fake_summarizer, store=result_store)
        document = pipeline.process_text(LECTURE, material_id="m-1")

        result = await pipeline.summarize(document)

        assert result.material_id == "m-1"
        assert result.chunk_count == len(document.chunks)
        assert sorted(result.processed_chunk_ids) == sorted(c.id for c in document.chunks)
        assert result.failed_chunk_count == 0
        assert result.processing_time_ms >= 0
        assert len(result_store.list_for_material("m-1")) == len(document.chunks)

    @pytest.mark.asyncio
    async def test_failed_chunk_is_counted(
        self, summarizer_factory, mock_store: MagicMock, fast_settings: DocumentPipelineSettings
    ) -> None:
        """Should count chunks the summarizer rejected."""
        document = DocumentPipeline(settings=fast_settings).process_text(LECTURE, material_id="m-1")
        summarizer = summarizer_factory(failing_ids={document.chunks[0].id})
        pipeline = DocumentPipeline(settings=fast_settings, summarizer=summarizer, store=mock_store)

        result = await pipeline.summarize(document)

        assert result.processed_chunk_ids == []
        assert result.failed_chunk_count == 1
        mock_store.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_document_without_chunks(
        self, fake_summarizer, mock_store: MagicMock, fast_settings: DocumentPipelineSettings
    ) -> None:
        """Should return an empty result for a document with no chunks."""
        pipeline = DocumentPipeline(settings=fast_settings, summarizer=fake_summarizer, store=mock_store)

        result = await pipeline.summarize(ProcessedDocument(material_id="m-0"))

        assert result.chunk_count == 0
        assert result.processed_chunk_ids == []


class TestPreview:
    """Test the upload preview."""

    def test_preview_truncates_sections_and_terms(self) -> None:
        """Should show counts plus the first three sections and five terms."""
        document = ProcessedDocument(
            material_id="m-1",
            original_name="notes.txt",
            title="Notes",
            sections=[Section(heading=f"Part {i}", content="x") for i in range(5)],
            key_terms=[TermPair(term=f"Term{i}", definition="d" * 30) for i in range(8)],
        )

        preview = document.preview()

        assert preview["id"] == "m-1"
        assert preview["originalName"] == "notes.txt"
        assert preview["sectionCount"] == 5
        assert preview["keyTermCount"] == 8
        assert preview["chunkCount"] == 0
        assert [s["heading"] for s in preview["sections"]] == ["Part 0", "Part 1", "Part 2"]
        assert len(preview["keyTerms"]) == 5


class TestCommandLine:
    """Test the command-line entrypoint."""

    def test_main_prints_preview(
        self, tmp_path: Path, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should print the preview JSON without contacting the LLM."""
        monkeypatch.setattr(
            "studybites.core.document_processing.entrypoint.configure_logging", lambda level: None
        )
        path = tmp_path / "bio101.txt"
        path.write_text(LECTURE, encoding="utf-8")

        main([str(path), "--material-id", "m-cli"])

        output = json.loads(capsys.readouterr().out)
        assert output["document"]["id"] == "m-cli"
        assert output["document"]["keyTermCount"] == 1
        assert "summaries" not in output

    def test_debug_setting_raises_log_level(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Should configure DEBUG logging when DEBUG=true."""
        levels: list[str] = []
        monkeypatch.setattr(
            "studybites.core.document_processing.entrypoint.configure_logging", levels.append
        )
        monkeypatch.setenv("DEBUG", "true")
        get_settings.cache_clear()
        path = tmp_path / "bio101.txt"
        path.write_text(LECTURE, encoding="utf-8")

        try:
            main([str(path)])
        finally:
            get_settings.cache_clear()

        assert levels == ["DEBUG"]
        assert json.loads(capsys.readouterr().out)["document"]["originalName"] == "bio101.txt"
