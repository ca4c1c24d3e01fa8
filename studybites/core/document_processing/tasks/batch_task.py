"""
Batched chunk summarization with per-chunk failure isolation.

Chunks are dispatched in fixed-size batches. All chunks of a batch run
concurrently; the next batch starts only after every dispatch of the current
one has settled, and after a fixed pause to respect the service's rate
limits. A failed summary or failed write drops that chunk only.

Dependencies: asyncio, studybites.observability
System role: Final stage of material processing
"""

import asyncio
import logging
from collections.abc import Sequence

from studybites.observability.log_utils import log_exception_with_context

from ..models import Chunk
from .saving_task import ResultStore
from .summarization_task import Summarizer

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 3
DEFAULT_BATCH_DELAY_MS = 1000


class BatchSummarizationTask:
    """Summarize and persist chunks under a concurrency cap."""

    def __init__(
        self,
        summarizer: Summarizer,
        store: ResultStore,
        batch_size: int = DEFAULT_BATCH_SIZE,
        batch_delay_ms: int = DEFAULT_BATCH_DELAY_MS,
    ) -> None:
        """
        Initialize batch task.

        Args:
            summarizer: Summarization service adapter
            store: Storage collaborator for successful results
            batch_size: Chunks dispatched concurrently per batch
            batch_delay_ms: Pause between batches in milliseconds

        Raises:
            ValueError: When batch_size < 1 or batch_delay_ms < 0
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        if batch_delay_ms < 0:
            raise ValueError(f"batch_delay_ms cannot be negative, got {batch_delay_ms}")

        self._summarizer = summarizer
        self._store = store
        self._batch_size = batch_size
        self._batch_delay_ms = batch_delay_ms

    async def process_all(self, material_id: str, chunks: Sequence[Chunk]) -> list[str]:
        """
        Summarize and store every chunk of a material.

        Args:
            material_id: Material the results are keyed under
            chunks: Chunks in document order

        Returns:
            list[str]: IDs of chunks summarized and stored successfully,
                in dispatch order
        """
        batches = [
            chunks[start:start + self._batch_size]
            for start in range(0, len(chunks), self._batch_size)
        ]
        logger.info(
            f"{__name__}:process_all - START material_id={material_id}, "
            f"chunks={len(chunks)}, batches={len(batches)}"
        )

        processed: list[str] = []
        for batch_number, batch in enumerate(batches, start=1):
            results = await asyncio.gather(
                *(self._process_chunk(material_id, chunk) for chunk in batch)
            )
            processed.extend(chunk_id for chunk_id in results if chunk_id is not None)
            logger.debug(
                f"{__name__}:process_all - batch {batch_number}/{len(batches)} settled, "
                f"succeeded={sum(r is not None for r in results)}/{len(batch)}"
            )

            if batch_number < len(batches):
                await asyncio.sleep(self._batch_delay_ms / 1000)

        logger.info(
            f"{__name__}:process_all - END material_id={material_id}, "
            f"processed={len(processed)}, failed={len(chunks) - len(processed)}"
        )
        return processed

    async def _process_chunk(self, material_id: str, chunk: Chunk) -> str | None:
        """Summarize and persist one chunk; None on any failure."""
        try:
            result = await self._summarizer.summarize(chunk)
            await asyncio.to_thread(self._store.put, material_id, chunk.id, result)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_process_chunk - chunk {chunk.index} failed",
                e,
                material_id=material_id,
                chunk_id=chunk.id,
            )
            return None
        return chunk.id
