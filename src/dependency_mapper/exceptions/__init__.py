"""Exception hierarchy for Dependency Mapper."""

from .analysis import (
    AnalysisError,
    DataIntegrityError,
    UnknownModuleError,
)
from .base import DependencyMapperError
from .config import (
    ConfigurationError,
    InputFormatError,
    InvalidConfigError,
)

__all__ = [
    "DependencyMapperError",
    "AnalysisError",
    "DataIntegrityError",
    "UnknownModuleError",
    "ConfigurationError",
    "InvalidConfigError",
    "InputFormatError",
]
