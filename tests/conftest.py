"""
Shared test fixtures and configuration for entire test suite.

Provides: chunk factories, summarizer and store fakes, temp result store
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest

from studybites.core.document_processing.models import Chunk, SummaryResult
from studybites.core.document_processing.tasks import LocalResultStore
from studybites.core.exceptions import SummarizationError


class FakeSummarizer:
    """Records calls in order and fails for selected chunk IDs."""

    def __init__(self, failing_ids: set[str] | None = None, events: list | None = None) -> None:
        self.failing_ids = failing_ids or set()
        self.events = events if events is not None else []
        self.calls: list[str] = []

    async def summarize(self, chunk: Chunk) -> SummaryResult:
        self.calls.append(chunk.id)
        self.events.append(f"summarize:{chunk.id}")
        if chunk.id in self.failing_ids:
            raise SummarizationError("service unavailable", chunk_id=chunk.id)
        return SummaryResult(chunk_id=chunk.id, summary=f"Summary of {chunk.content}")


@pytest.fixture
def make_chunks():
    """
    Build ordered chunks with readable IDs.

    Returns:
        Callable[[int], list[Chunk]]: Factory producing chunk-0 .. chunk-(n-1)
    """

    def _make(count: int) -> list[Chunk]:
        return [
            Chunk(id=f"chunk-{i}", content=f"Content of chunk {i}.", index=i)
            for i in range(count)
        ]

    return _make


@pytest.fixture
def fake_summarizer() -> FakeSummarizer:
    """Provide summarizer that succeeds for every chunk."""
    return FakeSummarizer()


@pytest.fixture
def mock_store() -> MagicMock:
    """Provide mock result store with synchronous put/get."""
    store = MagicMock()
    store.put = MagicMock(return_value=None)
    store.get = MagicMock(return_value=None)
    return store


@pytest.fixture
def result_store(tmp_path) -> LocalResultStore:
    """Provide LocalResultStore rooted in a temp directory."""
    return LocalResultStore(str(tmp_path / "llm-responses"))


@pytest.fixture
def summarizer_factory():
    """Provide the FakeSummarizer class for tests that configure failures."""
    return FakeSummarizer
