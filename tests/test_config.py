"""
Unit tests for configuration loading and validation.

Tests strict validation and error handling for report configs.
"""

import os
import shutil
import tempfile

import pytest
import yaml

from usage_report.config.loader import DEFAULT_CONFIG, ReportConfig, load_report_config


class TestReportConfig:
    """Test ReportConfig validation."""

    def test_defaults(self):
        """Verify defaults match GitHub usage reports."""
        assert DEFAULT_CONFIG.currency_symbol == "$"
        assert DEFAULT_CONFIG.delimiter == ","
        assert DEFAULT_CONFIG.encoding == "utf-8-sig"

    def test_empty_symbol_raises_error(self):
        """Verify an empty currency symbol is rejected."""
        with pytest.raises(ValueError, match="currency_symbol must be a non-empty string"):
            ReportConfig(currency_symbol="")

    def test_numeric_symbol_raises_error(self):
        """Verify a symbol that could swallow digits is rejected."""
        with pytest.raises(ValueError, match="must not contain digits"):
            ReportConfig(currency_symbol="1")

    def test_long_delimiter_raises_error(self):
        """Verify delimiters are single characters."""
        with pytest.raises(ValueError, match="delimiter must be a single character"):
            ReportConfig(delimiter=";;")

    def test_unknown_encoding_raises_error(self):
        """Verify unknown codecs are rejected up front."""
        with pytest.raises(ValueError, match="Unknown encoding"):
            ReportConfig(encoding="not-a-codec")


class TestConfigLoading:
    """Test configuration loading and validation."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()

    def teardown_method(self):
        """Clean up test environment."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write_config(self, config_data, filename: str = "config.yaml") -> str:
        """Write configuration data to temporary file."""
        config_path = os.path.join(self.temp_dir, filename)
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_data, f)
        return config_path

    def test_valid_config_loads_correctly(self):
        """Test that a valid configuration loads correctly."""
        config_path = self._write_config({
            "currency_symbol": "US$",
            "delimiter": ";",
            "encoding": "latin-1",
        })
        config = load_report_config(config_path)

        assert config.currency_symbol == "US$"
        assert config.delimiter == ";"
        assert config.encoding == "latin-1"

    def test_partial_config_keeps_defaults(self):
        """Test that omitted keys keep their defaults."""
        config = load_report_config(self._write_config({"delimiter": "\t"}))

        assert config.delimiter == "\t"
        assert config.currency_symbol == "$"

    def test_missing_file_raises_error(self):
        """Test that a missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Report config file not found"):
            load_report_config(os.path.join(self.temp_dir, "missing.yaml"))

    def test_empty_file_raises_error(self):
        """Test that an empty config file is rejected."""
        config_path = os.path.join(self.temp_dir, "empty.yaml")
        open(config_path, 'w').close()

        with pytest.raises(ValueError, match="Configuration file is empty"):
            load_report_config(config_path)

    def test_invalid_yaml_raises_error(self):
        """Test that malformed YAML raises YAMLError."""
        config_path = os.path.join(self.temp_dir, "bad.yaml")
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write("currency_symbol: [unclosed\n")

        with pytest.raises(yaml.YAMLError, match="Invalid YAML"):
            load_report_config(config_path)

    def test_unknown_keys_raise_error(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            load_report_config(self._write_config({"currency": "$"}))

    def test_non_mapping_raises_error(self):
        """Test that a list document is rejected."""
        with pytest.raises(ValueError, match="Configuration must be a mapping"):
            load_report_config(self._write_config(["$", ","]))

    def test_non_string_value_raises_error(self):
        """Test that values must be strings."""
        with pytest.raises(ValueError, match="'delimiter' must be a string"):
            load_report_config(self._write_config({"delimiter": 1}))
