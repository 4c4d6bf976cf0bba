"""Structured logging module for ytflow.

Provides configurable logging with JSON format support, file rotation and
per-video context tagging.
"""

from ytflow.logging.config import configure_logging
from ytflow.logging.context import (
    VideoContextFilter,
    get_video_context,
    video_context,
)
from ytflow.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "VideoContextFilter",
    "configure_logging",
    "get_video_context",
    "video_context",
]
