"""Helpers that load configuration and records for CLI commands.

Storage failures are turned into CLI errors here so the commands only deal
with successfully loaded data.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click

from ytflow.cli.exit_codes import ExitCode
from ytflow.cli.output import error_exit
from ytflow.config.models import YtflowConfig
from ytflow.domain.models import VideoRecord
from ytflow.logging import video_context
from ytflow.storage import (
    StorageError,
    VideoValidationError,
    iter_videos,
    load_video,
)

logger = logging.getLogger(__name__)


def get_cli_config(ctx: click.Context) -> YtflowConfig:
    """Configuration built by the main group, or defaults."""
    config = ctx.obj.get("config") if ctx.obj else None
    if config is None:
        return YtflowConfig()
    return config


def _storage_exit(error: StorageError, json_output: bool) -> NoReturn:
    if isinstance(error, VideoValidationError):
        error_exit(error.message, ExitCode.VIDEO_VALIDATION_ERROR, json_output)
    error_exit(error.message, ExitCode.STORAGE_ERROR, json_output)


def load_indexed_videos(
    config: YtflowConfig, json_output: bool = False
) -> list[VideoRecord]:
    """Load every indexed video, exiting with an error on storage failures.

    A missing index file means there are no videos yet.
    """
    index_path = config.storage.index_path
    try:
        records = list(iter_videos(index_path, config.storage.manuscript_dir))
    except StorageError as e:
        _storage_exit(e, json_output)
    logger.debug("Loaded %d videos from %s", len(records), index_path)
    return records


def load_single_video(path: Path, json_output: bool = False) -> VideoRecord:
    """Load one video file, exiting with an error on storage failures."""
    with video_context(path.stem):
        try:
            return load_video(path)
        except StorageError as e:
            _storage_exit(e, json_output)
