"""
Agent Router: hybrid (rules + LLM) intent routing for multi-agent chat.
"""
from .interaction import AgentType, IntentRouter, PatternMatcher, RouteMethod
from .schemas import CacheStatistics, ClassificationResult, FALLBACK_RESULT
from .exceptions import (
    AgentRouterError,
    ConfigurationError,
    GenerationError,
    RouterNotInitializedError,
)
from .config import RouterConfig
from .app import AgentRouterApp

__all__ = [
    "AgentRouterApp",
    "AgentType",
    "AgentRouterError",
    "CacheStatistics",
    "ClassificationResult",
    "ConfigurationError",
    "FALLBACK_RESULT",
    "GenerationError",
    "IntentRouter",
    "PatternMatcher",
    "RouteMethod",
    "RouterConfig",
    "RouterNotInitializedError",
]
