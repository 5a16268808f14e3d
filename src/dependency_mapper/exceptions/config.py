"""Configuration and input exceptions: settings files, input documents."""

from pathlib import Path
from typing import Any, Optional

from .base import DependencyMapperError


class ConfigurationError(DependencyMapperError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InputFormatError(ConfigurationError):
    """Raised when an input document cannot be read as edges or type counts."""

    def __init__(self, reason: str, filepath: Optional[Path] = None):
        details = {"reason": reason}
        if filepath:
            details["filepath"] = str(filepath)

        super().__init__(f"Malformed input: {reason}", details=details)
        self.reason = reason
        self.filepath = filepath
