class AgentRouterError(Exception):
    """Base exception for agent router service."""


class ConfigurationError(AgentRouterError):
    """Raised when configuration is missing or invalid."""


class GenerationError(AgentRouterError):
    """Raised when the completion service cannot produce a reply."""


class RouterNotInitializedError(AgentRouterError):
    """Raised when the router is used before initialization."""
