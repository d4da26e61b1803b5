"""Configuration-related exceptions."""

from typing import Any

from .base import GoComplexityError


class ConfigurationError(GoComplexityError):
    """Base class for configuration errors."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{key}': {reason}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
