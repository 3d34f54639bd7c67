"""
Public application facade for Agent Router.

This is the single stable entry point for the controller layer.
All internal structure can change freely, but this API remains stable.
"""
import logging
from typing import Optional
from .config import RouterConfig
from .exceptions import RouterNotInitializedError
from .interaction import IntentRouter
from .agent import CompletionClient, LangChainCompletionClient
from .llm_factory import get_llm_instance
from .schemas import CacheStatistics, ClassificationResult

logger = logging.getLogger(__name__)


class AgentRouterApp:
    """
    Public application facade for Agent Router.
    
    All dependency wiring and factory usage is encapsulated here.
    
    Usage:
        config = RouterConfig(...)
        app = AgentRouterApp(config)
        app.initialize()
        result = app.route("这个月销售额多少")
    """
    
    def __init__(self, config: RouterConfig):
        """
        :param config: RouterConfig instance
        """
        self._config = config
        self._completion_client: Optional[CompletionClient] = None
        self._router: Optional[IntentRouter] = None
    
    @property
    def config(self) -> RouterConfig:
        return self._config
    
    def initialize(self) -> None:
        """
        Wire the completion client and build the router.
        
        Creates the LLM from config unless a completion client was injected.
        Call this once before using route().
        """
        if self._router:
            return
        
        if self._completion_client is None:
            llm = get_llm_instance(
                provider=self._config.llm_provider,
                model=self._config.llm_model,
                timeout_seconds=self._config.llm_timeout_seconds,
            )
            self._completion_client = LangChainCompletionClient(llm)
        
        self._router = IntentRouter(
            completion_client=self._completion_client,
            cache_enabled=self._config.cache_enabled,
            cache_max_size=self._config.cache_max_size,
            cache_expire_minutes=self._config.cache_expire_minutes,
        )
        logger.info(
            f"Agent router initialized (provider={self._config.llm_provider}, "
            f"model={self._config.llm_model})"
        )
    
    def route(self, message: str) -> ClassificationResult:
        """
        Decide which agent should handle a chat message.
        
        :param message: User message
        :return: ClassificationResult
        :raises: RouterNotInitializedError if initialize() has not been called
        """
        return self._require_router().route(message)
    
    def cache_stats_summary(self) -> str:
        """Human-readable cache statistics."""
        return self._require_router().cache_stats_summary()
    
    def cache_statistics(self) -> CacheStatistics:
        """Structured cache statistics."""
        return self._require_router().cache_statistics()
    
    def set_completion_client(self, completion_client: CompletionClient) -> None:
        """Inject a completion client (must be called before initialize())."""
        if self._router:
            raise RuntimeError("Completion client must be set before initialize().")
        self._completion_client = completion_client
    
    def _require_router(self) -> IntentRouter:
        if not self._router:
            raise RouterNotInitializedError("Router not initialized. Call initialize() first.")
        return self._router
