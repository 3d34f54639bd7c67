import logging
import re

from ..interaction.intent_types import AgentType, RouteMethod
from ..schemas import ClassificationResult, FALLBACK_RESULT

logger = logging.getLogger(__name__)


DEFAULT_LLM_CONFIDENCE = 75

# "confidence": 85,   confidence = '85'   'confidence': 85.5}
_CONFIDENCE_PATTERN = re.compile(
    r"""["']?confidence["']?\s*[:=]\s*["']?([^,}\]\n"']*)""",
    re.IGNORECASE,
)
_NUMBER_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")


class IntentOutputParser:
    """
    Tolerant parser for the completion service's classification reply.

    The reply is untrusted: it may be wrapped in code fences, surrounded by
    prose or not be JSON at all. Substring search is used instead of strict
    deserialization and every deviation resolves to a default.
    """

    @staticmethod
    def parse(raw_text: str, original_message: str) -> ClassificationResult:
        """
        Parse a model reply into a ClassificationResult. Never raises.

        :param raw_text: Raw text returned by the completion service
        :param original_message: Message being classified
        :return: LLM_BASED ClassificationResult
        """
        try:
            cleaned = IntentOutputParser._strip_fences(raw_text)

            if AgentType.DATA_ANALYSIS.value in cleaned:
                agent_type = AgentType.DATA_ANALYSIS
            elif AgentType.KNOWLEDGE_QA.value in cleaned:
                agent_type = AgentType.KNOWLEDGE_QA
            else:
                agent_type = AgentType.GENERAL_CHAT

            return ClassificationResult(
                agent_type=agent_type,
                method=RouteMethod.LLM_BASED,
                confidence=IntentOutputParser._parse_confidence(cleaned),
                keywords=(original_message,),
            )
        except Exception:
            logger.warning(f"Failed to parse LLM response: {raw_text!r}", exc_info=True)
            return FALLBACK_RESULT

    @staticmethod
    def _strip_fences(text: str) -> str:
        return text.strip().replace("```json", "").replace("```", "").strip()

    @staticmethod
    def _parse_confidence(cleaned: str) -> int:
        """First numeric token after the confidence marker, else the default."""
        match = _CONFIDENCE_PATTERN.search(cleaned)
        if not match:
            return DEFAULT_LLM_CONFIDENCE

        token = match.group(1).strip()
        if not _NUMBER_PATTERN.match(token):
            return DEFAULT_LLM_CONFIDENCE

        try:
            return int(float(token))
        except (ValueError, OverflowError):
            return DEFAULT_LLM_CONFIDENCE
