"""
Configuration management and loading.

Handles report parsing settings read from a YAML file.
"""

import codecs
from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass(frozen=True)
class ReportConfig:
    """Settings for reading and pricing a usage report."""
    currency_symbol: str = "$"
    delimiter: str = ","
    encoding: str = "utf-8-sig"

    def __post_init__(self):
        """Validate settings."""
        if not isinstance(self.currency_symbol, str) or not self.currency_symbol:
            raise ValueError("currency_symbol must be a non-empty string")
        if any(ch.isdigit() for ch in self.currency_symbol):
            raise ValueError("currency_symbol must not contain digits")
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        if not isinstance(self.encoding, str):
            raise ValueError("encoding must be a string")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")


DEFAULT_CONFIG = ReportConfig()


def load_report_config(path: str) -> ReportConfig:
    """Load and validate report configuration from a YAML file.

    Every key is optional; omitted keys keep their defaults. Unknown
    keys are rejected so a misspelled setting never goes unnoticed.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated ReportConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Report config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if not raw_config:
        raise ValueError("Configuration file is empty")

    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a mapping")

    allowed_keys = {'currency_symbol', 'delimiter', 'encoding'}
    unknown_keys = set(raw_config.keys()) - allowed_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    for key, value in raw_config.items():
        if not isinstance(value, str):
            raise ValueError(f"'{key}' must be a string")

    return ReportConfig(**raw_config)
