"""Configuration loading and management for go-complexity.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.go-complexity.toml)
    3. Project config (./go-complexity.toml)
    4. Explicit config file
    5. Environment variables (GOCOMPLEXITY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, output_format="json")
    >>> config.verbosity
    'verbose'
    >>> config.output_format
    'json'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

if TYPE_CHECKING:
    from .metrics.models import MetricsResult

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["rich", "json", "csv", "quiet"]

OUTPUT_FORMATS = ("rich", "json", "csv", "quiet")
VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

# Fields a report can be ordered by, besides "source" (declaration order)
SORTABLE_FIELDS = (
    "name",
    "cyclomatic_complexity",
    "cognitive_complexity",
    "lines_of_code",
    "halstead_volume",
    "halstead_difficulty",
    "halstead_effort",
    "maintainability_index",
    "nested_depth",
    "comment_density",
    "function_parameters",
    "return_statements",
)

ENV_PREFIX = "GOCOMPLEXITY_"


@dataclass(frozen=True)
class ThresholdConfig:
    """Per-function limits used to flag functions in reports.

    Attributes:
        cyclomatic_high: Cyclomatic complexity above this is flagged
        cognitive_high: Cognitive complexity above this is flagged
        nesting_high: Nesting depth above this is flagged
        maintainability_low: Maintainability index below this is flagged
    """

    # McCabe's original recommendation
    cyclomatic_high: int = 10
    # SonarSource default for functions
    cognitive_high: int = 15
    nesting_high: int = 4
    # Visual Studio marks 0-9 red, 10-19 yellow
    maintainability_low: float = 20.0

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        for field_name in ("cyclomatic_high", "cognitive_high", "nesting_high"):
            value = getattr(self, field_name)
            if value < 0:
                raise InvalidConfigError(field_name, value, "must be non-negative")
        if not 0.0 <= self.maintainability_low <= 100.0:
            raise InvalidConfigError(
                "maintainability_low", self.maintainability_low, "must be between 0 and 100"
            )

    def breaches(self, result: MetricsResult) -> list[str]:
        """Names of the result fields that cross a threshold."""
        flagged = []
        if result.cyclomatic_complexity > self.cyclomatic_high:
            flagged.append("cyclomatic_complexity")
        if result.cognitive_complexity > self.cognitive_high:
            flagged.append("cognitive_complexity")
        if result.nested_depth > self.nesting_high:
            flagged.append("nested_depth")
        if result.maintainability_index < self.maintainability_low:
            flagged.append("maintainability_index")
        return flagged


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a single-file analysis run.

    Attributes:
        File validation:
            max_file_size_mb: Largest accepted input file (MB)
            allowed_extensions: Accepted file extensions (with leading dot)

        Output control:
            output_format: One of rich, json, csv, quiet
            sort_by: "source" for declaration order, or a metric field name
            verbosity: Logging verbosity level

        thresholds: Limits used to flag functions
    """

    # File validation
    max_file_size_mb: float = 5.0
    allowed_extensions: list[str] = field(default_factory=lambda: [".go"])

    # Output control
    output_format: OutputFormat = "rich"
    sort_by: str = "source"
    verbosity: Verbosity = "normal"

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if not self.allowed_extensions:
            raise InvalidConfigError(
                "allowed_extensions", self.allowed_extensions, "must not be empty"
            )
        for ext in self.allowed_extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("allowed_extensions", ext, "must start with '.'")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(VERBOSITY_LEVELS)}"
            )
        if self.sort_by != "source" and self.sort_by not in SORTABLE_FIELDS:
            raise InvalidConfigError("sort_by", self.sort_by, "unknown metric field")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".go-complexity.toml"
    if global_config.exists():
        merged.update(_load_toml_section(global_config))

    project_config = Path.cwd() / "go-complexity.toml"
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    thresholds = merged.pop("thresholds", None)
    if isinstance(thresholds, dict):
        try:
            merged["thresholds"] = ThresholdConfig(**thresholds)
        except TypeError as e:
            raise ConfigurationError(f"Invalid [thresholds] config: {e}")
    elif isinstance(thresholds, ThresholdConfig):
        merged["thresholds"] = thresholds

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GOCOMPLEXITY_* environment variables.

    Supported environment variables:
        GOCOMPLEXITY_MAX_FILE_SIZE_MB: float
        GOCOMPLEXITY_OUTPUT_FORMAT: rich/json/csv/quiet
        GOCOMPLEXITY_SORT_BY: source or a metric field
        GOCOMPLEXITY_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any GOCOMPLEXITY_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot be set from the environment
    (lists, nested configs).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_section(path: Path) -> dict:
    """Load a TOML config file, wrapping parse failures."""
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
