import logging
from typing import Any

from .config_validator import get_required_env

# Example: Groq LLM and OpenAI LLM
try:
    from langchain_groq import ChatGroq
except ImportError:
    ChatGroq = None

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    ChatOpenAI = None

logger = logging.getLogger(__name__)

KNOWN_GROQ_MODELS = [
    "llama-3.1-8b-instant",
    "llama-3.3-70b-versatile",
    "gemma2-9b-it",
    "mixtral-8x7b-32768",
]


def get_llm_instance(provider: str, model: str, timeout_seconds: float = 30.0) -> Any:
    """
    Factory to return a ready-to-use chat model based on provider name.

    The model gets a bounded request timeout and no client-side retries.

    :param provider: 'groq' or 'openai'
    :param model: LLM model name
    :param timeout_seconds: Per-request timeout
    :return: LangChain chat model
    """
    provider = provider.lower()
    
    if provider == "groq":
        if ChatGroq is None:
            raise ImportError("langchain_groq not installed")
        
        api_key = get_required_env(
            "GROQ_API_KEY",
            description="Groq API key for LLM (get from https://console.groq.com/keys)"
        )
        
        if model not in KNOWN_GROQ_MODELS:
            # Warn but don't fail - Groq might add new models
            logger.warning(f"Model '{model}' not in known Groq models. "
                           f"Known models: {KNOWN_GROQ_MODELS}")
        
        return ChatGroq(
            model=model,
            api_key=api_key,
            temperature=0,
            timeout=timeout_seconds,
            max_retries=0,
        )
    
    elif provider == "openai":
        if ChatOpenAI is None:
            raise ImportError("langchain_openai not installed")
        api_key = get_required_env(
            "OPENAI_API_KEY",
            description="OpenAI API key for LLM (get from https://platform.openai.com/api-keys)"
        )
        return ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=0,
            timeout=timeout_seconds,
            max_retries=0,
        )

    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
