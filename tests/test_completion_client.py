"""
Tests for the LangChain completion client adapter.
"""
from unittest.mock import Mock

import pytest
from langchain_core.language_models import FakeListChatModel
from langchain_core.messages import AIMessage

from agent_router.agent import LangChainCompletionClient
from agent_router.exceptions import GenerationError


class TestLangChainCompletionClient:
    """Tests for LangChainCompletionClient."""

    def test_returns_chat_model_text(self):
        llm = FakeListChatModel(responses=['{"agentType": "KNOWLEDGE_QA"}'])
        client = LangChainCompletionClient(llm)

        assert client.generate("prompt") == '{"agentType": "KNOWLEDGE_QA"}'

    def test_passes_prompt_and_callbacks(self):
        llm = Mock()
        llm.invoke.return_value = AIMessage(content="DATA_ANALYSIS")
        client = LangChainCompletionClient(llm)

        client.generate("classify this")

        args, kwargs = llm.invoke.call_args
        assert args[0] == "classify this"
        assert len(kwargs["config"]["callbacks"]) == 1

    def test_plain_string_response(self):
        llm = Mock()
        llm.invoke.return_value = "GENERAL_CHAT"

        assert LangChainCompletionClient(llm).generate("p") == "GENERAL_CHAT"

    def test_content_blocks_response(self):
        llm = Mock()
        llm.invoke.return_value = AIMessage(content=[{"type": "text", "text": "KNOWLEDGE"}, "_QA"])

        assert LangChainCompletionClient(llm).generate("p") == "KNOWLEDGE_QA"

    @pytest.mark.parametrize("error", [
        TimeoutError("request timed out"),
        ConnectionError("network unreachable"),
        PermissionError("invalid api key"),
        RuntimeError("rate limit exceeded"),
    ])
    def test_provider_failures_become_generation_error(self, error):
        llm = Mock()
        llm.invoke.side_effect = error
        client = LangChainCompletionClient(llm)

        with pytest.raises(GenerationError) as exc_info:
            client.generate("p")

        assert exc_info.value.__cause__ is error

    def test_malformed_provider_response(self):
        llm = Mock()
        llm.invoke.return_value = Mock(content=None)

        with pytest.raises(GenerationError, match="no text content"):
            LangChainCompletionClient(llm).generate("p")
