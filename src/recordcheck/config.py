"""Configuration management for recordcheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .checker import DEFAULT_SEQUENCE_LABEL

CONFIG_FILE_NAME = ".recordcheck.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class RecordCheckConfig(BaseModel):
    """Complete recordcheck configuration model."""
    tag: str = "validate"
    sequence_label: str = Field(alias="sequenceLabel", default=DEFAULT_SEQUENCE_LABEL)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("tag")
    @classmethod
    def validate_tag(cls, v):
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("tag must be a non-empty string without whitespace")
        return v

    @field_validator("sequence_label")
    @classmethod
    def validate_sequence_label(cls, v):
        for placeholder in ("{field}", "{index}"):
            if placeholder not in v:
                raise ValueError(f"sequence_label must contain {placeholder}, got: {v}")
        try:
            v.format(field="f", index=0)
        except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
            raise ValueError(f"sequence_label is not a valid format string: {e}")
        return v

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def load_config(config_path: str | Path | None = None) -> RecordCheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .recordcheck.json

    Returns:
        RecordCheckConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return RecordCheckConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .recordcheck.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> RecordCheckConfig:
    """Create default configuration."""
    return RecordCheckConfig()
