"""Custom exceptions for config loading, overriding and binding."""

from typing import Optional


class ConfigError(Exception):
    """Base exception for config-related errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class BootConfigError(ConfigError):
    """Raised when the boot config file can't be located, read or parsed."""
    pass


class OverrideParseError(ConfigError, ValueError):
    """Raised when a command-line override expression is malformed."""
    pass


class BindingError(ConfigError):
    """Raised when a config tree can't be decoded into the target type."""
    pass
