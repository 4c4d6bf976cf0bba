"""Configuration data models.

This module defines dataclasses for ytflow configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})


@dataclass
class StorageConfig:
    """Where video records and the index live."""

    # YAML list of {name, category} entries
    index_path: Path = Path("index.yaml")

    # Root directory with one sub-directory per category
    manuscript_dir: Path = Path("manuscript")


@dataclass
class DisplayConfig:
    """Presentation thresholds used by the CLI."""

    # Started videos scheduled further ahead than this are highlighted
    far_future_months: int = 3

    # Idea/started/material-done buckets turn green at this many videos
    phase_green_threshold: int = 3

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.far_future_months < 0:
            raise ValueError(
                f"far_future_months must be non-negative, got {self.far_future_months}"
            )
        if self.phase_green_threshold < 1:
            raise ValueError(
                "phase_green_threshold must be at least 1, "
                f"got {self.phase_green_threshold}"
            )


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.level.lower() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"level must be one of {sorted(VALID_LOG_LEVELS)}, got {self.level}"
            )
        if self.format.lower() not in VALID_LOG_FORMATS:
            raise ValueError(
                f"format must be one of {sorted(VALID_LOG_FORMATS)}, got {self.format}"
            )
        if self.max_bytes <= 0:
            raise ValueError(f"max_bytes must be positive, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(
                f"backup_count must be non-negative, got {self.backup_count}"
            )


@dataclass
class YtflowConfig:
    """Complete ytflow configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
