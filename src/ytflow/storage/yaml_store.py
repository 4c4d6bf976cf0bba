"""YAML record store.

Loads and saves video records and the video index as YAML documents.
Missing files read as an empty record or index; malformed or invalid
documents raise StorageError or VideoValidationError.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from ytflow.domain.models import VideoIndexEntry, VideoRecord
from ytflow.logging.context import video_context
from ytflow.storage.exceptions import StorageError, VideoValidationError
from ytflow.storage.models import IndexEntryModel, VideoModel

logger = logging.getLogger(__name__)

DEFAULT_MANUSCRIPT_DIR = Path("manuscript")

# Characters replaced with "-" or removed when building file names
_REPLACED_CHARS = (":", "/", "\\")
_REMOVED_CHARS = ("?", "*", "<", ">", "|", '"')


def sanitize_file_name(name: str) -> str:
    """Make a name safe to use as a file name.

    Example:
        >>> sanitize_file_name("what-is-k8s?:-part-1")
        'what-is-k8s-part-1'
    """
    for char in _REPLACED_CHARS:
        name = name.replace(char, "-")
    for char in _REMOVED_CHARS:
        name = name.replace(char, "")
    return re.sub(r"-{2,}", "-", name)


def get_video_path(
    name: str,
    category: str,
    manuscript_dir: Path = DEFAULT_MANUSCRIPT_DIR,
) -> Path:
    """Build the path of a video's YAML file.

    Args:
        name: Video name.
        category: Video category.
        manuscript_dir: Root directory holding one sub-directory per category.

    Returns:
        ``<manuscript_dir>/<category>/<name>.yaml`` with both parts
        lower-cased, spaces replaced by hyphens and the name sanitized.
    """
    category_part = category.lower().replace(" ", "-")
    name_part = sanitize_file_name(name.lower().replace(" ", "-"))
    return manuscript_dir / category_part / f"{name_part}.yaml"


def _read_yaml(path: Path) -> Any:
    """Read and decode a YAML file; None if it does not exist."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise StorageError(f"Cannot read {path}: {e}", path) from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise StorageError(f"Invalid YAML in {path}: {e}", path) from e


def _write_yaml(data: Any, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(data, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
    except OSError as e:
        raise StorageError(f"Cannot write {path}: {e}", path) from e


def _validation_error(error: ValidationError, path: Path) -> VideoValidationError:
    """Turn the first pydantic error into a user-friendly exception."""
    errors = error.errors()
    first = errors[0] if errors else {}
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", str(error))
    if loc:
        message = f"Invalid video data in {path}: {loc}: {msg}"
    else:
        message = f"Invalid video data in {path}: {msg}"
    return VideoValidationError(message, path, field=loc or None)


def _validate(model: type[BaseModel], data: Any, path: Path) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise _validation_error(e, path) from e


def load_video(path: Path | str) -> VideoRecord:
    """Load a video record.

    Args:
        path: Path to the video YAML file.

    Returns:
        The decoded VideoRecord. A missing or empty file yields an empty
        record whose ``path`` is set.

    Raises:
        StorageError: If the file cannot be read or is not valid YAML.
        VideoValidationError: If the document is not a valid video.
    """
    path = Path(path)
    data = _read_yaml(path)
    if data is None:
        logger.debug("Video file %s not found or empty", path)
        data = {}
    if not isinstance(data, dict):
        raise VideoValidationError(
            f"Invalid video data in {path}: expected a mapping", path
        )
    data.setdefault("path", str(path))
    return _validate(VideoModel, data, path).to_record()


def write_video(record: VideoRecord, path: Path | str) -> None:
    """Save a video record, creating parent directories as needed.

    Raises:
        StorageError: If the file cannot be written.
    """
    path = Path(path)
    data = VideoModel.from_record(record).model_dump(by_alias=True)
    _write_yaml(data, path)
    logger.debug("Wrote video %s", path)


def load_index(path: Path | str) -> list[VideoIndexEntry]:
    """Load the video index.

    Returns:
        Index entries in file order. A missing or empty file yields [].

    Raises:
        StorageError: If the file cannot be read or is not valid YAML.
        VideoValidationError: If an entry lacks a name or category.
    """
    path = Path(path)
    data = _read_yaml(path)
    if data is None:
        return []
    if not isinstance(data, list):
        raise VideoValidationError(
            f"Invalid index data in {path}: expected a list", path
        )
    return [_validate(IndexEntryModel, item, path).to_entry() for item in data]


def write_index(entries: list[VideoIndexEntry], path: Path | str) -> None:
    """Save the video index.

    Raises:
        StorageError: If the file cannot be written.
    """
    data = [{"name": entry.name, "category": entry.category} for entry in entries]
    _write_yaml(data, Path(path))


def iter_videos(
    index_path: Path | str,
    manuscript_dir: Path = DEFAULT_MANUSCRIPT_DIR,
) -> Iterator[VideoRecord]:
    """Yield the record of every indexed video that exists on disk.

    Index entries without a YAML file are skipped. A video file that cannot
    be read or validated is logged and skipped, so one broken document
    does not hide the rest of the listing.

    Raises:
        StorageError: If the index cannot be read.
        VideoValidationError: If the index is not a list of entries.
    """
    for entry in load_index(index_path):
        video_path = get_video_path(entry.name, entry.category, manuscript_dir)
        if not video_path.exists():
            logger.warning(
                "Skipping %s (%s): no file at %s",
                entry.name,
                entry.category,
                video_path,
            )
            continue
        with video_context(entry.name, entry.category):
            try:
                record = load_video(video_path)
            except StorageError as e:
                logger.error(
                    "Skipping unreadable video: %s",
                    e.message,
                    extra={"path": str(video_path)},
                )
                continue
        if not record.name or not record.category:
            # Index values win for identity fields the document leaves blank
            record = _with_identity(record, entry)
        yield record


def _with_identity(record: VideoRecord, entry: VideoIndexEntry) -> VideoRecord:
    return replace(
        record,
        name=record.name or entry.name,
        category=record.category or entry.category,
    )
