"""
Intent types for message routing.

Defines the agents a chat message can be routed to and how the decision was made.
"""
from enum import Enum


class AgentType(str, Enum):
    """Downstream agents a message can be routed to."""
    KNOWLEDGE_QA = "KNOWLEDGE_QA"
    DATA_ANALYSIS = "DATA_ANALYSIS"
    GENERAL_CHAT = "GENERAL_CHAT"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


class RouteMethod(str, Enum):
    """Provenance of a routing decision."""
    RULE_BASED = "RULE_BASED"
    LLM_BASED = "LLM_BASED"


_DESCRIPTIONS = {
    AgentType.KNOWLEDGE_QA: (
        "Knowledge Q&A. Company policies, product documentation, technical "
        "standards, internal rules and processes."
    ),
    AgentType.DATA_ANALYSIS: (
        "Data analysis. Sales statistics, business analysis, data queries, "
        "report generation, trend analysis."
    ),
    AgentType.GENERAL_CHAT: (
        "General chat. Greetings, small talk, questions that fit no other module."
    ),
}
