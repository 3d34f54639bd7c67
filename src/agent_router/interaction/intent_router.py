"""
Hybrid intent router.

Routes chat messages to a downstream agent through a fixed cascade:
result cache, rule-based pattern matcher, then an LLM completion whose reply is
parsed defensively. route() is total: it never raises to its caller.
"""
import logging
from typing import Any, Optional

from ..agent.completion_client import CompletionClient
from ..agent.output_parser import IntentOutputParser
from ..agent.prompts import build_intent_prompt
from ..cache import ResultCache
from ..schemas import CacheStatistics, ClassificationResult, FALLBACK_RESULT
from ..security import InputValidator
from .pattern_matcher import PatternMatcher, normalize_message

logger = logging.getLogger(__name__)


class IntentRouter:
    """
    Hybrid (rules + LLM) intent router.

    The cache configuration is fixed at construction. No per-key locking or
    request coalescing: two concurrent calls for the same uncached message may
    both reach the completion service.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        cache_enabled: bool = True,
        cache_max_size: int = 500,
        cache_expire_minutes: int = 60,
        pattern_matcher: Optional[PatternMatcher] = None,
        result_cache: Optional[ResultCache] = None,
    ):
        """
        :param completion_client: Completion service adapter used when no rule matches
        :param cache_enabled: Whether routing results are cached
        :param cache_max_size: Maximum number of cached messages
        :param cache_expire_minutes: Time-to-live of a cached result after write
        :param pattern_matcher: Rule matcher (defaults to the built-in rules)
        :param result_cache: Prebuilt cache, used instead of building one when caching is enabled
        """
        self._completion_client = completion_client
        self._pattern_matcher = pattern_matcher if pattern_matcher is not None else PatternMatcher()

        if cache_enabled:
            if result_cache is None:
                result_cache = ResultCache(
                    max_size=cache_max_size,
                    ttl_minutes=cache_expire_minutes,
                )
            self._cache: Optional[ResultCache] = result_cache
            logger.info(
                f"Intent cache enabled: max_size={getattr(result_cache, 'max_size', cache_max_size)}, "
                f"expire_minutes={getattr(result_cache, 'ttl_minutes', cache_expire_minutes)}"
            )
        else:
            self._cache = None
            logger.info("Intent cache disabled")

    @property
    def cache_enabled(self) -> bool:
        return self._cache is not None

    def route(self, message: str) -> ClassificationResult:
        """
        Route a message to an agent type.

        :param message: Raw user message
        :return: ClassificationResult (never raises)
        """
        if not isinstance(message, str):
            message = "" if message is None else str(message)

        logger.debug(f"Routing message: {message!r}")

        cached = self._cache_get(message)
        if cached is not None:
            logger.debug(f"Cache hit: {cached.agent_type.value}")
            return cached

        result = self._pattern_matcher.match(normalize_message(message))
        if result is not None:
            logger.info(f"Rule match: {message!r} -> {result.agent_type.value}")
            self._cache_put(message, result)
            return result

        logger.debug("No rule matched, falling back to LLM classification")
        result = self._recognize_by_llm(message)
        logger.info(f"LLM classification: {message!r} -> {result.agent_type.value}")
        self._cache_put(message, result)
        return result

    def _recognize_by_llm(self, message: str) -> ClassificationResult:
        if InputValidator.looks_like_injection(message):
            logger.warning(f"Message looks like a prompt injection attempt: {message!r}")

        try:
            raw_text = self._completion_client.generate(build_intent_prompt(message))
        except Exception:
            # Not only GenerationError: no client exception may escape route()
            logger.error("LLM classification failed, falling back to general chat", exc_info=True)
            return FALLBACK_RESULT

        return IntentOutputParser.parse(raw_text, message)

    def _cache_get(self, message: str) -> Optional[ClassificationResult]:
        if self._cache is None:
            return None
        try:
            return self._cache.get(message)
        except Exception:
            logger.warning("Cache lookup failed, continuing without cache", exc_info=True)
            return None

    def _cache_put(self, message: str, result: ClassificationResult) -> None:
        if self._cache is None:
            return
        try:
            self._cache.put(message, result)
        except Exception:
            logger.warning("Cache write failed, result not cached", exc_info=True)

    def cache_statistics(self) -> CacheStatistics:
        """
        Structured cache statistics.

        :return: CacheStatistics (enabled=False when caching is off)
        """
        if self._cache is None:
            return CacheStatistics.disabled()
        return self._cache.stats()

    def cache_stats_summary(self) -> str:
        """
        Human-readable cache statistics.

        :return: Hit rate with total/hit/miss counts, or "Cache disabled"
        """
        return self.cache_statistics().summary()
