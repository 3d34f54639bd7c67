"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import RouterConfig
from .config_validator import (
    get_optional_env,
    parse_bool,
    validate_non_negative_int,
    validate_positive_number,
)


def load_config_from_env(load_env_file: bool = True) -> RouterConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = AgentRouterApp(config)
        app.initialize()
    
    :param load_env_file: Whether to load a .env file first (local development)
    :return: Validated RouterConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    if load_env_file:
        load_dotenv()
    
    defaults = RouterConfig()
    
    return RouterConfig(
        llm_provider=get_optional_env("LLM_PROVIDER", default=defaults.llm_provider).lower(),
        llm_model=get_optional_env("LLM_MODEL", default=defaults.llm_model),
        llm_timeout_seconds=validate_positive_number(
            get_optional_env("LLM_TIMEOUT_SECONDS", str(defaults.llm_timeout_seconds)),
            "LLM_TIMEOUT_SECONDS",
        ),
        cache_enabled=parse_bool(
            get_optional_env("ROUTER_CACHE_ENABLED", "true"),
            "ROUTER_CACHE_ENABLED",
        ),
        cache_max_size=validate_non_negative_int(
            get_optional_env("ROUTER_CACHE_MAX_SIZE", str(defaults.cache_max_size)),
            "ROUTER_CACHE_MAX_SIZE",
        ),
        cache_expire_minutes=validate_non_negative_int(
            get_optional_env("ROUTER_CACHE_EXPIRE_MINUTES", str(defaults.cache_expire_minutes)),
            "ROUTER_CACHE_EXPIRE_MINUTES",
        ),
        verbose=parse_bool(get_optional_env("VERBOSE", "false"), "VERBOSE"),
    )
