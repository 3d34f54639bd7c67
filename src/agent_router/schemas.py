from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .interaction.intent_types import AgentType, RouteMethod


MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100


def clamp_confidence(value: int) -> int:
    """Clamp a confidence score into [0, 100]."""
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, int(value)))


@dataclass(frozen=True)
class ClassificationResult:
    """
    Routing decision for a single message.

    Immutable: cached instances are shared between concurrent callers.
    """
    agent_type: AgentType
    method: RouteMethod
    confidence: int
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "confidence", clamp_confidence(self.confidence))
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "agent_type": self.agent_type.value,
            "method": self.method.value,
            "confidence": self.confidence,
            "keywords": list(self.keywords),
        }


# Returned whenever the completion service fails.
FALLBACK_RESULT = ClassificationResult(
    agent_type=AgentType.GENERAL_CHAT,
    method=RouteMethod.LLM_BASED,
    confidence=50,
    keywords=(),
)

CACHE_DISABLED_SUMMARY = "Cache disabled"


@dataclass
class CacheStatistics:
    """Cumulative statistics of the routing result cache."""
    enabled: bool
    request_count: int = 0
    hit_count: int = 0
    miss_count: int = 0
    hit_rate: float = 0.0
    size: int = 0
    max_size: int = 0
    ttl_minutes: int = 0

    @classmethod
    def disabled(cls) -> "CacheStatistics":
        return cls(enabled=False)

    def summary(self) -> str:
        """
        Human-readable summary for the controller layer.

        :return: Hit rate and counters, or a fixed marker when caching is off
        """
        if not self.enabled:
            return CACHE_DISABLED_SUMMARY
        return (
            f"Cache hit rate: {self.hit_rate * 100:.2f}%, "
            f"total requests: {self.request_count}, "
            f"hits: {self.hit_count}, "
            f"misses: {self.miss_count}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "request_count": self.request_count,
            "hit_count": self.hit_count,
            "miss_count": self.miss_count,
            "hit_rate": self.hit_rate,
            "size": self.size,
            "max_size": self.max_size,
            "ttl_minutes": self.ttl_minutes,
        }
