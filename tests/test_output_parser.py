"""
Tests for the tolerant LLM reply parser.
"""
import pytest
from agent_router.agent.output_parser import IntentOutputParser
from agent_router.interaction import AgentType, RouteMethod
from agent_router.schemas import FALLBACK_RESULT


MESSAGE = "Where is the VPN guide?"


class TestIntentOutputParser:
    """Tests for IntentOutputParser."""

    def test_strict_json(self):
        raw = '{"agentType": "KNOWLEDGE_QA", "confidence": 82, "reason": "docs", "keywords": ["VPN"]}'

        result = IntentOutputParser.parse(raw, MESSAGE)

        assert result.agent_type == AgentType.KNOWLEDGE_QA
        assert result.method == RouteMethod.LLM_BASED
        assert result.confidence == 82
        assert result.keywords == (MESSAGE,)

    def test_code_fenced_json(self):
        raw = '```json\n{\n  "agentType": "DATA_ANALYSIS",\n  "confidence": 91,\n  "reason": "x"\n}\n```'

        result = IntentOutputParser.parse(raw, MESSAGE)

        assert result.agent_type == AgentType.DATA_ANALYSIS
        assert result.confidence == 91

    def test_prose_around_category(self):
        """Category is found by substring search, not JSON parsing."""
        raw = "I think this is KNOWLEDGE_QA because it asks about documentation."

        result = IntentOutputParser.parse(raw, MESSAGE)

        assert result.agent_type == AgentType.KNOWLEDGE_QA
        assert result.confidence == 75

    def test_data_analysis_has_priority(self):
        raw = "Either KNOWLEDGE_QA or DATA_ANALYSIS, leaning DATA"

        assert IntentOutputParser.parse(raw, MESSAGE).agent_type == AgentType.DATA_ANALYSIS

    def test_unknown_category_defaults_to_general_chat(self):
        raw = '{"agentType": "WEATHER", "confidence": 99}'

        result = IntentOutputParser.parse(raw, MESSAGE)

        assert result.agent_type == AgentType.GENERAL_CHAT
        assert result.confidence == 99

    @pytest.mark.parametrize("raw", [
        '{"agentType": "KNOWLEDGE_QA", "confidence": "high"}',
        '{"agentType": "KNOWLEDGE_QA", "confidence": }',
        '{"agentType": "KNOWLEDGE_QA", "confidence": 8 0}',
        '{"agentType": "KNOWLEDGE_QA"}',
    ])
    def test_bad_confidence_keeps_default(self, raw):
        assert IntentOutputParser.parse(raw, MESSAGE).confidence == 75

    @pytest.mark.parametrize("raw, expected", [
        ('{"confidence": 85.7, "agentType": "KNOWLEDGE_QA"}', 85),
        ('{"confidence": "64", "agentType": "KNOWLEDGE_QA"}', 64),
        ("confidence: 40\nagentType: KNOWLEDGE_QA", 40),
        ('{"agentType": "KNOWLEDGE_QA", "confidence": 150}', 100),
        ('{"agentType": "KNOWLEDGE_QA", "confidence": -20}', 0),
    ])
    def test_confidence_variants(self, raw, expected):
        """Confidence is tolerant of formatting and clamped into [0, 100]."""
        assert IntentOutputParser.parse(raw, MESSAGE).confidence == expected

    def test_empty_reply(self):
        result = IntentOutputParser.parse("", MESSAGE)

        assert result.agent_type == AgentType.GENERAL_CHAT
        assert result.confidence == 75
        assert result.keywords == (MESSAGE,)

    def test_non_string_reply_returns_fallback(self):
        """Unexpected failures inside the parser resolve to the fallback result."""
        assert IntentOutputParser.parse(None, MESSAGE) == FALLBACK_RESULT
        assert IntentOutputParser.parse(12345, MESSAGE) == FALLBACK_RESULT
