"""
Configuration validation utilities.

Environment values arrive as strings; these helpers convert them and turn
malformed values into ConfigurationError with the variable name attached.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


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


def get_int_env(key: str, default: int, minimum: Optional[int] = None) -> int:
    """
    Read an integer environment variable.
    
    :param key: Environment variable name
    :param default: Value used when the variable is unset or empty
    :param minimum: Smallest accepted value, if any
    :return: Parsed integer
    :raises: ConfigurationError if the value is not an integer or below minimum
    """
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default
    
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
    
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}")
    
    return value


def get_float_env(key: str, default: float, minimum: Optional[float] = None) -> float:
    """
    Read a float environment variable.
    
    :param key: Environment variable name
    :param default: Value used when the variable is unset or empty
    :param minimum: Smallest accepted value, if any
    :return: Parsed float
    :raises: ConfigurationError if the value is not a number or below minimum
    """
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default
    
    try:
        value = float(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}")
    
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}")
    
    return value


def get_bool_env(key: str, default: bool) -> bool:
    """Read a true/false environment variable."""
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default
    
    value = raw.strip().lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    raise ConfigurationError(f"{key} must be true or false, got {raw!r}")


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "replace",
        "changeme",
    ]
    
    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)
