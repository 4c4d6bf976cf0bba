"""Logging setup for the ytflow CLI.

configure_logging() replaces the root handlers with a rotating log file,
stderr, or both. Every handler tags records with the current video.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from ytflow.logging.context import VideoContextFilter
from ytflow.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from ytflow.config.models import LoggingConfig

logger = logging.getLogger(__name__)

# video_tag is "[category/name] " inside video_context and "" outside
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(video_tag)s%(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def _open_log_file(config: LoggingConfig) -> tuple[logging.Handler | None, str]:
    """Open the rotating log file; returns (handler, error message)."""
    path = config.file.expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        return None, str(e)
    return handler, ""


def configure_logging(config: LoggingConfig) -> None:
    """Install ytflow's log handlers on the root logger.

    Logs go to ``config.file`` when set, and to stderr when no file is set,
    when ``include_stderr`` is true, or when the file cannot be opened. In the
    last case a warning naming the file is logged once handlers are in place.

    Args:
        config: Logging configuration; its level and format are already
            validated by LoggingConfig.
    """
    level = logging.getLevelName(config.level.upper())
    formatter = _formatter(config)
    context_filter = VideoContextFilter()

    handlers: list[logging.Handler] = []
    file_error = ""
    if config.file is not None:
        file_handler, file_error = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)

    if file_error:
        logger.warning(
            "Could not open log file %s, logging to stderr: %s",
            config.file,
            file_error,
        )
