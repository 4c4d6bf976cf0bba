"""Video context for structured logging.

Uses contextvars to attach the video being loaded or classified to every
log record emitted while it is processed.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_video_name: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "video_name", default=None
)
_video_category: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "video_category", default=None
)


@contextmanager
def video_context(
    name: str, category: str | None = None
) -> Generator[None, None, None]:
    """Context manager tagging log records with the current video.

    Restores the previous context on exit, so contexts may nest.

    Example:
        with video_context("my-video", "kubernetes"):
            logger.warning("Skipping video")  # tagged [kubernetes/my-video]
    """
    name_token = _video_name.set(name)
    category_token = _video_category.set(category)
    try:
        yield
    finally:
        _video_name.reset(name_token)
        _video_category.reset(category_token)


def get_video_context() -> tuple[str | None, str | None]:
    """Get current (name, category), either may be None."""
    return _video_name.get(), _video_category.get()


class VideoContextFilter(logging.Filter):
    """Logging filter that injects the video context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        name, category = get_video_context()

        record.video_name = name
        record.video_category = category

        if name:
            if category:
                record.video_tag = f"[{category}/{name}] "
            else:
                record.video_tag = f"[{name}] "
        else:
            record.video_tag = ""

        return True
