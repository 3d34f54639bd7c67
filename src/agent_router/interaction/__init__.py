"""
Interaction layer for intent routing.

Sits between the controller layer and the downstream agents, deciding which
agent handles a chat message.
"""
from .intent_types import AgentType, RouteMethod
from .pattern_matcher import DEFAULT_RULES, PatternMatcher, RoutingRules, normalize_message
from .intent_router import IntentRouter

__all__ = [
    "AgentType",
    "RouteMethod",
    "DEFAULT_RULES",
    "PatternMatcher",
    "RoutingRules",
    "normalize_message",
    "IntentRouter",
]
