"""
LangChain callbacks for LLM latency tracking.
"""
from typing import Any, Dict, List, Optional
from time import time
from uuid import UUID

from langchain_core.callbacks import BaseCallbackHandler


class LLMLatencyCallback(BaseCallbackHandler):
    """
    Callback handler that tracks LLM call latency.

    Accumulates wall time of every LLM run observed during one completion.
    A fresh instance is created per call, so no state is shared between threads.
    """

    def __init__(self):
        super().__init__()
        self._start_times: Dict[UUID, float] = {}
        self._total_time: float = 0.0
        self.error_count: int = 0

    def on_llm_start(
        self,
        serialized: Dict[str, Any],
        prompts: List[str],
        *,
        run_id: UUID,
        parent_run_id: Optional[UUID] = None,
        **kwargs: Any,
    ) -> None:
        """Record LLM start time."""
        self._start_times[run_id] = time()

    def on_chat_model_start(
        self,
        serialized: Dict[str, Any],
        messages: List[List[Any]],
        *,
        run_id: UUID,
        parent_run_id: Optional[UUID] = None,
        **kwargs: Any,
    ) -> None:
        """Record chat model start time."""
        self._start_times[run_id] = time()

    def on_llm_end(
        self,
        response: Any,
        *,
        run_id: UUID,
        parent_run_id: Optional[UUID] = None,
        **kwargs: Any,
    ) -> None:
        """Record end time and accumulate latency."""
        self._stop(run_id)

    def on_llm_error(
        self,
        error: BaseException,
        *,
        run_id: UUID,
        parent_run_id: Optional[UUID] = None,
        **kwargs: Any,
    ) -> None:
        """Failed calls still count towards latency."""
        self.error_count += 1
        self._stop(run_id)

    def _stop(self, run_id: UUID) -> None:
        start_time = self._start_times.pop(run_id, None)
        if start_time is not None:
            self._total_time += time() - start_time

    @property
    def total_latency_ms(self) -> int:
        return int(self._total_time * 1000)
