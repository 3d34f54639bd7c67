"""
LLM side of the router: prompt, completion client and reply parser.
"""
from .completion_client import CompletionClient, LangChainCompletionClient
from .output_parser import IntentOutputParser
from .prompts import INTENT_PROMPT, build_intent_prompt

__all__ = [
    "CompletionClient",
    "LangChainCompletionClient",
    "IntentOutputParser",
    "INTENT_PROMPT",
    "build_intent_prompt",
]
