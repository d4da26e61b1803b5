"""Tests for configuration loading."""

import pytest

from go_complexity.config import (
    AnalysisConfig,
    OutputFormat,
    ThresholdConfig,
    _parse_env_value,
    load_config,
)
from go_complexity.exceptions import ConfigurationError, InvalidConfigError
from go_complexity.metrics.models import MetricsResult


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test without user/project config files or env overrides."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for key in ("MAX_FILE_SIZE_MB", "OUTPUT_FORMAT", "SORT_BY", "VERBOSITY"):
        monkeypatch.delenv(f"GOCOMPLEXITY_{key}", raising=False)


def _result(**overrides):
    values = dict(
        name="f",
        cyclomatic_complexity=1,
        cognitive_complexity=0,
        lines_of_code=3,
        halstead_volume=10.0,
        halstead_difficulty=1.0,
        halstead_effort=10.0,
        maintainability_index=90.0,
        nested_depth=0,
        comment_density=0.0,
        function_parameters=0,
        return_statements=0,
    )
    values.update(overrides)
    return MetricsResult(**values)


class TestDefaults:
    def test_defaults(self):
        config = load_config()
        assert config == AnalysisConfig()
        assert config.max_file_size_mb == 5.0
        assert config.allowed_extensions == [".go"]
        assert config.output_format == "rich"
        assert config.sort_by == "source"
        assert config.thresholds == ThresholdConfig()

    def test_max_file_size_bytes(self):
        assert AnalysisConfig(max_file_size_mb=2).max_file_size_bytes == 2 * 1024 * 1024


class TestValidation:
    def test_non_positive_size(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(max_file_size_mb=0)

    def test_extension_needs_dot(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(allowed_extensions=["go"])

    def test_unknown_output_format(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(output_format="xml")

    def test_unknown_sort_field(self):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(sort_by="popularity")

    def test_negative_threshold(self):
        with pytest.raises(InvalidConfigError):
            ThresholdConfig(cyclomatic_high=-1)

    def test_maintainability_threshold_range(self):
        with pytest.raises(InvalidConfigError):
            ThresholdConfig(maintainability_low=150.0)


class TestSources:
    def test_overrides(self):
        config = load_config(output_format="json", sort_by="halstead_effort")
        assert config.output_format == "json"
        assert config.sort_by == "halstead_effort"

    def test_none_overrides_ignored(self):
        assert load_config(output_format=None) == AnalysisConfig()

    def test_verbose_and_quiet_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_project_file(self, tmp_path):
        (tmp_path / "go-complexity.toml").write_text(
            'output_format = "csv"\n\n[thresholds]\ncyclomatic_high = 5\n'
        )
        config = load_config()
        assert config.output_format == "csv"
        assert config.thresholds.cyclomatic_high == 5
        assert config.thresholds.cognitive_high == 15

    def test_explicit_file_beats_project_file(self, tmp_path):
        (tmp_path / "go-complexity.toml").write_text('output_format = "csv"\n')
        explicit = tmp_path / "ci.toml"
        explicit.write_text('output_format = "json"\n')
        assert load_config(config_file=explicit).output_format == "json"

    def test_env_beats_files(self, tmp_path, monkeypatch):
        (tmp_path / "go-complexity.toml").write_text('output_format = "csv"\n')
        monkeypatch.setenv("GOCOMPLEXITY_OUTPUT_FORMAT", "quiet")
        monkeypatch.setenv("GOCOMPLEXITY_MAX_FILE_SIZE_MB", "1.5")
        config = load_config()
        assert config.output_format == "quiet"
        assert config.max_file_size_mb == 1.5

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("GOCOMPLEXITY_OUTPUT_FORMAT", "quiet")
        assert load_config(output_format="json").output_format == "json"

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("GOCOMPLEXITY_MAX_FILE_SIZE_MB", "lots")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_toml(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("output_format = \n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(config_file=bad)

    def test_unknown_key(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("colour = true\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(config_file=bad)

    def test_unknown_threshold_key(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[thresholds]\nhalstead_high = 3\n")
        with pytest.raises(ConfigurationError, match="thresholds"):
            load_config(config_file=bad)


class TestThresholdBreaches:
    def test_within_limits(self):
        assert ThresholdConfig().breaches(_result()) == []

    def test_each_limit(self):
        result = _result(
            cyclomatic_complexity=11,
            cognitive_complexity=16,
            nested_depth=5,
            maintainability_index=19.0,
        )
        assert ThresholdConfig().breaches(result) == [
            "cyclomatic_complexity",
            "cognitive_complexity",
            "nested_depth",
            "maintainability_index",
        ]

    def test_limits_are_inclusive(self):
        result = _result(cyclomatic_complexity=10, maintainability_index=20.0)
        assert ThresholdConfig().breaches(result) == []


class TestEnvValueParsing:
    def test_float(self):
        assert _parse_env_value("2.5", float) == 2.5

    def test_bad_float(self):
        with pytest.raises(ValueError):
            _parse_env_value("big", float)

    def test_literal_and_str_pass_through(self):
        assert _parse_env_value("json", OutputFormat) == "json"
        assert _parse_env_value("name", str) == "name"

    def test_unsettable_types_ignored(self):
        assert _parse_env_value(".go", list[str]) is None
        assert _parse_env_value("10", ThresholdConfig) is None

    def test_thresholds_env_var_ignored(self, monkeypatch):
        monkeypatch.setenv("GOCOMPLEXITY_THRESHOLDS", "5")
        assert load_config().thresholds == ThresholdConfig()
