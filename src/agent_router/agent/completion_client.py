"""
Completion client adapter.

Thin contract over an external text-generation capability: prompt in, raw text
out. Every provider failure surfaces as GenerationError.
"""
import logging
from typing import Any, Protocol

from ..exceptions import GenerationError
from .callbacks import LLMLatencyCallback

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Anything that can turn a prompt into raw reply text."""

    def generate(self, prompt: str) -> str:
        ...


class LangChainCompletionClient:
    """
    Completion client backed by a LangChain chat model.

    Timeouts and retries are configured on the model itself (see llm_factory),
    so a single call is bounded and a failure is reported immediately.
    """

    def __init__(self, llm: Any):
        """
        :param llm: LangChain chat model or runnable exposing invoke()
        """
        self._llm = llm

    def generate(self, prompt: str) -> str:
        """
        Send a prompt to the model and return its reply text.

        :param prompt: Prompt text
        :return: Raw reply text (may be empty or malformed)
        :raises GenerationError: On any transport/provider failure or a reply without text
        """
        callback = LLMLatencyCallback()
        try:
            response = self._llm.invoke(prompt, config={"callbacks": [callback]})
        except Exception as e:
            raise GenerationError(f"Completion service call failed: {e}") from e

        text = self._extract_text(response)
        logger.debug(f"Completion received in {callback.total_latency_ms}ms ({len(text)} chars)")
        return text

    @staticmethod
    def _extract_text(response: Any) -> str:
        """Pull reply text out of a message, a plain string or content blocks."""
        if isinstance(response, str):
            return response

        content = getattr(response, "content", None)
        if isinstance(content, str):
            return content

        # Some providers return a list of content blocks
        if isinstance(content, list):
            parts = []
            for block in content:
                if isinstance(block, str):
                    parts.append(block)
                elif isinstance(block, dict) and isinstance(block.get("text"), str):
                    parts.append(block["text"])
            if parts:
                return "".join(parts)

        raise GenerationError(
            f"Completion service returned no text content: {type(response).__name__}"
        )
