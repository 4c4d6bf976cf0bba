"""JSON log formatting for ytflow.

One JSON object per line. The video being processed, if any, is reported as
``{"video": {"name": ..., "category": ...}}``, the same shape as an index
entry, so log lines can be matched back to the index.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from ytflow.logging.context import get_video_context

# Attributes every LogRecord carries, plus the ones VideoContextFilter adds
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "video_name", "video_category", "video_tag"}


def _video_of(record: logging.LogRecord) -> dict[str, str] | None:
    if hasattr(record, "video_name"):
        name, category = record.video_name, record.video_category
    else:
        name, category = get_video_context()
    if not name:
        return None
    video = {"name": name}
    if category:
        video["category"] = category
    return video


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON.

    Keys: ``timestamp`` (ISO-8601 UTC), ``level``, ``logger``, ``message``,
    then ``video`` when a video context is active, ``context`` for values
    passed through ``extra=`` and ``exception`` for tracebacks.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        video = _video_of(record)
        if video:
            entry["video"] = video

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
        }
        if extra:
            entry["context"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
