"""Apply the CLI's --log-* options on top of the configured logging."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from ytflow.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return a copy of base with every non-None override applied.

    Raises:
        ValueError: If an override fails LoggingConfig validation.
    """
    overrides = {
        "level": level,
        "file": file,
        "format": format,
        "include_stderr": include_stderr,
    }
    return replace(
        base, **{key: value for key, value in overrides.items() if value is not None}
    )


def configure_logging_from_cli(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    json_output: bool = False,
) -> LoggingConfig:
    """Configure logging for a CLI run and return the config in effect.

    ``json_output`` is the ``--log-json`` flag; when unset the configured
    format is kept.
    """
    from ytflow.logging import configure_logging

    config = build_logging_config(
        base, level=level, file=file, format="json" if json_output else None
    )
    configure_logging(config)
    return config
