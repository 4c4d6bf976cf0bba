"""Domain models and enums for ytflow.

This package contains the core domain types that are independent of the
storage layer:

- Domain models: VideoRecord, Sponsorship, TitleVariant, ShortVideo,
  DubbingInfo, VideoIndexEntry
- Domain enums: PhaseTag, AspectKey, CompletionCriteria

Usage:
    from ytflow.domain import VideoRecord, PhaseTag
"""

from .enums import (
    ASPECT_TITLES,
    MENU_ORDER,
    PHASE_DISPLAY_NAMES,
    AspectKey,
    CompletionCriteria,
    PhaseTag,
)
from .models import (
    DubbingInfo,
    ShortVideo,
    Sponsorship,
    TitleVariant,
    VideoIndexEntry,
    VideoRecord,
)

__all__ = [
    # Models
    "VideoRecord",
    "Sponsorship",
    "TitleVariant",
    "ShortVideo",
    "DubbingInfo",
    "VideoIndexEntry",
    # Enums
    "PhaseTag",
    "AspectKey",
    "CompletionCriteria",
    # Lookup tables
    "ASPECT_TITLES",
    "MENU_ORDER",
    "PHASE_DISPLAY_NAMES",
]
