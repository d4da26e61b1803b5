"""Analysis-related exceptions: file access, parsing, empty results."""

from pathlib import Path
from typing import Dict, List, Optional, Union

from .base import GoComplexityError


class AnalysisError(GoComplexityError):
    """Base class for analysis-related errors."""
    pass


class ParsingError(AnalysisError):
    """Raised when source text is not valid Go.

    No partial results are produced when this is raised.
    """

    def __init__(self, file_name: str, reason: str, line: Optional[int] = None):
        details: Dict[str, str] = {"file": file_name}
        if line is not None:
            details["line"] = str(line)
        super().__init__(f"Failed to parse {file_name}: {reason}", details=details)
        self.file_name = file_name
        self.reason = reason
        self.line = line


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class UnsupportedFileError(AnalysisError):
    """Raised when a file does not carry an accepted extension."""

    def __init__(self, filepath: Union[str, Path], allowed_extensions: List[str]):
        allowed = ", ".join(allowed_extensions)
        super().__init__(
            f"Only {allowed} files are supported",
            details={"filepath": str(filepath)},
        )
        self.filepath = filepath
        self.allowed_extensions = allowed_extensions


class FileTooLargeError(AnalysisError):
    """Raised when a file exceeds the configured size limit."""

    def __init__(self, filepath: Union[str, Path], size_bytes: int, limit_bytes: int):
        limit_mb = limit_bytes / (1024 * 1024)
        super().__init__(
            f"File size exceeds maximum limit of {limit_mb:g} MB",
            details={"filepath": str(filepath), "size": str(size_bytes)},
        )
        self.filepath = filepath
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes


class NoFunctionsFoundError(AnalysisError):
    """Raised by callers that treat an empty analysis as a reportable condition."""

    def __init__(self, file_name: str):
        super().__init__("No functions found in file", details={"file": file_name})
        self.file_name = file_name
