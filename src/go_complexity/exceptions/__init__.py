"""Exception hierarchy for go-complexity."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    FileTooLargeError,
    NoFunctionsFoundError,
    ParsingError,
    UnsupportedFileError,
)
from .base import GoComplexityError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "GoComplexityError",
    "AnalysisError",
    "ParsingError",
    "FileAccessError",
    "UnsupportedFileError",
    "FileTooLargeError",
    "NoFunctionsFoundError",
    "ConfigurationError",
    "InvalidConfigError",
]
