"""Tests for the go-complexity exception hierarchy."""

from go_complexity.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    FileTooLargeError,
    GoComplexityError,
    InvalidConfigError,
    NoFunctionsFoundError,
    ParsingError,
    UnsupportedFileError,
)


class TestHierarchy:
    def test_analysis_errors(self):
        for cls in (
            ParsingError,
            FileAccessError,
            UnsupportedFileError,
            FileTooLargeError,
            NoFunctionsFoundError,
        ):
            assert issubclass(cls, AnalysisError)
            assert issubclass(cls, GoComplexityError)

    def test_config_errors(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(ConfigurationError, GoComplexityError)


class TestMessages:
    def test_details_appended(self):
        err = GoComplexityError("boom", details={"file": "a.go"})
        assert str(err) == "boom (file=a.go)"

    def test_no_details(self):
        assert str(GoComplexityError("boom")) == "boom"

    def test_parsing_error(self):
        err = ParsingError("main.go", "syntax error", line=7)
        assert err.message == "Failed to parse main.go: syntax error"
        assert err.details == {"file": "main.go", "line": "7"}
        assert err.line == 7

    def test_parsing_error_without_line(self):
        err = ParsingError("main.go", "Empty code provided")
        assert "line" not in err.details

    def test_unsupported_file(self):
        err = UnsupportedFileError("main.rs", [".go"])
        assert err.message == "Only .go files are supported"

    def test_file_too_large(self):
        err = FileTooLargeError("big.go", 6 * 1024 * 1024, 5 * 1024 * 1024)
        assert err.message == "File size exceeds maximum limit of 5 MB"
        assert err.size_bytes == 6 * 1024 * 1024

    def test_no_functions(self):
        assert NoFunctionsFoundError("x.go").message == "No functions found in file"

    def test_invalid_config(self):
        err = InvalidConfigError("sort_by", "colour", "unknown metric field")
        assert err.key == "sort_by"
        assert "unknown metric field" in str(err)
