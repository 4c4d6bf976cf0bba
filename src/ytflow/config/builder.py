"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building YtflowConfig by composing
multiple configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from ytflow.config.env import EnvReader
from ytflow.config.models import (
    DisplayConfig,
    LoggingConfig,
    StorageConfig,
    YtflowConfig,
)


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources.
    """

    # Storage config
    index_path: Path | None = None
    manuscript_dir: Path | None = None

    # Display config
    far_future_months: int | None = None
    phase_green_threshold: int | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds YtflowConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._sources: dict[str, str] = {}

    def apply(self, source: ConfigSource, source_name: str = "unknown") -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
            source_name: Label recorded for every value this source sets
                (e.g. "file", "env", "cli").
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value
                self._sources[field_obj.name] = source_name

    def source_of(self, key: str) -> str:
        """Name of the source that set a value, or "default"."""
        return self._sources.get(key, "default")

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> YtflowConfig:
        """Build the final YtflowConfig with defaults for unset values.

        Raises:
            ValueError: If a layered value fails model validation.
        """
        storage = StorageConfig(
            index_path=self._get("index_path", Path("index.yaml")),
            manuscript_dir=self._get("manuscript_dir", Path("manuscript")),
        )

        display = DisplayConfig(
            far_future_months=self._get("far_future_months", 3),
            phase_green_threshold=self._get("phase_green_threshold", 3),
        )

        logging_config = LoggingConfig(
            level=self._get("logging_level", "warning"),
            file=self._get("logging_file", None),
            format=self._get("logging_format", "text"),
            include_stderr=self._get("logging_include_stderr", False),
            max_bytes=self._get("logging_max_bytes", 10_485_760),
            backup_count=self._get("logging_backup_count", 5),
        )

        return YtflowConfig(storage=storage, display=display, logging=logging_config)


def _optional_path(value: Any) -> Path | None:
    if value is None or value == "":
        return None
    return Path(str(value)).expanduser()


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create ConfigSource from a parsed TOML config file.

    Args:
        file_config: Parsed configuration dictionary from TOML file.

    Returns:
        ConfigSource with values from the config file.
    """
    storage = file_config.get("storage", {})
    display = file_config.get("display", {})
    logging_section = file_config.get("logging", {})

    return ConfigSource(
        index_path=_optional_path(storage.get("index_path")),
        manuscript_dir=_optional_path(storage.get("manuscript_dir")),
        far_future_months=display.get("far_future_months"),
        phase_green_threshold=display.get("phase_green_threshold"),
        logging_level=logging_section.get("level"),
        logging_file=_optional_path(logging_section.get("file")),
        logging_format=logging_section.get("format"),
        logging_include_stderr=logging_section.get("include_stderr"),
        logging_max_bytes=logging_section.get("max_bytes"),
        logging_backup_count=logging_section.get("backup_count"),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create ConfigSource from YTFLOW_* environment variables."""
    return ConfigSource(
        index_path=reader.get_path("YTFLOW_INDEX_PATH"),
        manuscript_dir=reader.get_path("YTFLOW_MANUSCRIPT_DIR"),
        far_future_months=reader.get_int("YTFLOW_FAR_FUTURE_MONTHS"),
        logging_level=reader.get_str("YTFLOW_LOG_LEVEL"),
        logging_file=reader.get_path("YTFLOW_LOG_FILE"),
        logging_format=reader.get_str("YTFLOW_LOG_FORMAT"),
        logging_include_stderr=reader.get_bool("YTFLOW_LOG_INCLUDE_STDERR"),
    )
