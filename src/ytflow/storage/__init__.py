"""YAML storage for video records and the video index."""

from ytflow.storage.exceptions import StorageError, VideoValidationError
from ytflow.storage.yaml_store import (
    DEFAULT_MANUSCRIPT_DIR,
    get_video_path,
    iter_videos,
    load_index,
    load_video,
    sanitize_file_name,
    write_index,
    write_video,
)

__all__ = [
    "DEFAULT_MANUSCRIPT_DIR",
    "StorageError",
    "VideoValidationError",
    "get_video_path",
    "iter_videos",
    "load_index",
    "load_video",
    "sanitize_file_name",
    "write_index",
    "write_video",
]
