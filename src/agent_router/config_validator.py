"""
Configuration validation utilities.

Environment lookups with placeholder detection and typed parsing.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.
    
    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or a placeholder
    """
    value = os.getenv(key)
    
    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Please set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in project root with {key}=your-value\n"
            f"  3. See .env.example for template\n\n"
            f"Description: {desc}"
        )
    
    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {_mask_secret(value)}\n"
            f"See .env.example for the correct format."
        )
    
    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)
    
    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default
    
    return value


def parse_bool(value: str, key: str) -> bool:
    """
    Parse a boolean flag.
    
    :param value: Raw value ("true"/"false", "1"/"0", "yes"/"no", "on"/"off")
    :param key: Setting name (for error messages)
    :return: Parsed boolean
    :raises: ConfigurationError if the value is not a recognised flag
    """
    normalized = (value or "").strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{key} must be true or false, got {value!r}")


def validate_non_negative_int(value: str, key: str) -> int:
    """
    Parse a non-negative integer setting.
    
    :raises: ConfigurationError if not an integer or negative
    """
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")
    
    if parsed < 0:
        raise ConfigurationError(f"{key} must be >= 0, got {parsed}")
    
    return parsed


def validate_positive_number(value: str, key: str) -> float:
    """
    Parse a strictly positive number setting.
    
    :raises: ConfigurationError if not a number or not positive
    """
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {value!r}")
    
    if parsed <= 0:
        raise ConfigurationError(f"{key} must be > 0, got {parsed}")
    
    return parsed


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "example",
        "xxx",
        "sk-0000",
        "gsk_0000",
        "replace",
        "todo",
    ]
    
    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """
    Mask secret for safe display in error messages.
    
    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"
    
    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
