from dataclasses import dataclass


@dataclass
class RouterConfig:
    # LLM
    llm_provider: str = 'groq'
    llm_model: str = 'llama-3.1-8b-instant'
    llm_timeout_seconds: float = 30.0

    # Intent cache
    cache_enabled: bool = True
    cache_max_size: int = 500
    cache_expire_minutes: int = 60

    # Logging
    verbose: bool = False
