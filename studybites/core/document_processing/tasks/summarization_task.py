"""
Chunk summarization task using Google Gemini via LangChain.

Sends one chunk per call to the chat model and wraps the reply in a
SummaryResult. Retries are left to the model client.

Dependencies: langchain_core, langchain_google_genai, python-dotenv
System role: Summarization service adapter for the batch dispatcher
"""

import logging
import math
from typing import Protocol

from dotenv import load_dotenv
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from studybites.core.exceptions import SummarizationError

from ..models import Chunk, SummaryResult

load_dotenv()

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an educational assistant that creates concise, accurate summaries "
    "of academic content."
)
USER_PROMPT_TEMPLATE = (
    "Summarize the following text in a concise but comprehensive way, "
    "preserving key concepts and terminology: {content}"
)

CHARS_PER_TOKEN = 4


class Summarizer(Protocol):
    """Summarization service contract used by the batch dispatcher."""

    async def summarize(self, chunk: Chunk) -> SummaryResult: ...


def estimate_token_count(text: str) -> int:
    """
    Rough token estimate for rate planning.

    Args:
        text: Text to estimate

    Returns:
        int: ceil(len(text) / 4)
    """
    return math.ceil(len(text) / CHARS_PER_TOKEN)


class SummarizationTask:
    """Summarize chunks with a LangChain chat model."""

    def __init__(
        self,
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.3,
        max_tokens: int = 1024,
        api_key: str | None = None,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize summarization task.

        Args:
            model_id: Gemini model identifier
            temperature: Sampling temperature
            max_tokens: Maximum output tokens per summary
            api_key: Google API key (GOOGLE_API_KEY env var if None)
            chat_model: Prebuilt chat model; skips Gemini construction
        """
        if chat_model is None:
            model_kwargs = {
                "model": model_id,
                "temperature": temperature,
                "max_output_tokens": max_tokens,
            }
            if api_key:
                model_kwargs["google_api_key"] = api_key
            chat_model = ChatGoogleGenerativeAI(**model_kwargs)

        self._model = chat_model

    async def summarize(self, chunk: Chunk) -> SummaryResult:
        """
        Summarize a single chunk.

        Args:
            chunk: Chunk to summarize

        Returns:
            SummaryResult: Summary keyed by the chunk ID

        Raises:
            SummarizationError: When the model call fails
        """
        logger.debug(
            f"{__name__}:summarize - START chunk_id={chunk.id}, "
            f"est_tokens={estimate_token_count(chunk.content)}"
        )
        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=USER_PROMPT_TEMPLATE.format(content=chunk.content)),
        ]

        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            raise SummarizationError(
                f"Summarization request failed: {e}", chunk_id=chunk.id
            ) from e

        summary = self._message_text(response.content)
        logger.debug(f"{__name__}:summarize - END chunk_id={chunk.id}, summary_len={len(summary)}")
        return SummaryResult(chunk_id=chunk.id, summary=summary)

    @staticmethod
    def _message_text(content: str | list) -> str:
        """Flatten string or content-block message content to text."""
        if isinstance(content, str):
            return content
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
