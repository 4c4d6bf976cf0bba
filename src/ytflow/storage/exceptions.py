"""Storage exception classes."""

from __future__ import annotations

from pathlib import Path


class StorageError(Exception):
    """Video or index file could not be read or written."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class VideoValidationError(StorageError):
    """Decoded document does not describe a valid video or index."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        field: str | None = None,
    ) -> None:
        self.field = field
        super().__init__(message, path)
