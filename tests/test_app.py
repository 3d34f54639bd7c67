"""
Tests for the public application facade.
"""
from unittest.mock import patch

import pytest
from langchain_core.language_models import FakeListChatModel

from agent_router import AgentRouterApp, AgentType, RouteMethod, RouterConfig
from agent_router.agent import LangChainCompletionClient
from agent_router.exceptions import RouterNotInitializedError

from conftest import CountingCompletionClient


class TestAgentRouterApp:
    """Tests for AgentRouterApp."""

    def test_requires_initialize(self):
        app = AgentRouterApp(RouterConfig())

        with pytest.raises(RouterNotInitializedError):
            app.route("你好")
        with pytest.raises(RouterNotInitializedError):
            app.cache_stats_summary()

    def test_injected_completion_client(self):
        client = CountingCompletionClient(reply='{"agentType": "KNOWLEDGE_QA", "confidence": 77}')
        app = AgentRouterApp(RouterConfig())
        app.set_completion_client(client)
        app.initialize()

        result = app.route("Where is the onboarding checklist?")

        assert result.agent_type == AgentType.KNOWLEDGE_QA
        assert result.method == RouteMethod.LLM_BASED
        assert result.confidence == 77
        assert client.call_count == 1

    def test_initialize_builds_llm_from_config(self):
        config = RouterConfig(llm_provider="openai", llm_model="gpt-4o-mini", llm_timeout_seconds=5)
        llm = FakeListChatModel(responses=["DATA_ANALYSIS"])

        with patch("agent_router.app.get_llm_instance", return_value=llm) as factory:
            app = AgentRouterApp(config)
            app.initialize()
            app.initialize()

        factory.assert_called_once_with(provider="openai", model="gpt-4o-mini", timeout_seconds=5)
        assert app.route("What did the east region sell?").agent_type == AgentType.DATA_ANALYSIS

    def test_cache_configuration_is_applied(self):
        client = CountingCompletionClient(reply="GENERAL_CHAT")
        app = AgentRouterApp(RouterConfig(cache_enabled=False))
        app.set_completion_client(client)
        app.initialize()

        app.route("The weather is lovely")
        app.route("The weather is lovely")

        assert client.call_count == 2
        assert app.cache_stats_summary() == "Cache disabled"
        assert app.cache_statistics().to_dict()["enabled"] is False

    def test_cache_statistics(self):
        app = AgentRouterApp(RouterConfig(cache_max_size=3, cache_expire_minutes=5))
        app.set_completion_client(CountingCompletionClient())
        app.initialize()

        app.route("年假怎么申请")
        app.route("年假怎么申请")

        stats = app.cache_statistics()
        assert stats.hit_count == 1
        assert stats.max_size == 3
        assert stats.ttl_minutes == 5

    def test_completion_client_locked_after_initialize(self):
        app = AgentRouterApp(RouterConfig())
        app.set_completion_client(CountingCompletionClient())
        app.initialize()

        with pytest.raises(RuntimeError):
            app.set_completion_client(LangChainCompletionClient(FakeListChatModel(responses=["x"])))
