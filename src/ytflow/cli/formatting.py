"""Display utilities for phase and progress output.

Maps the plain enumerated results of the workflow engine to terminal
colors and decorated titles. These are CLI-specific; the workflow package
never deals with presentation.
"""

from __future__ import annotations

from datetime import datetime

from ytflow.core.datetime_utils import is_far_future
from ytflow.domain.enums import PhaseTag
from ytflow.domain.models import VideoRecord
from ytflow.workflow.progress import ProgressScore

COMPLETE_COLOR = "green"
INCOMPLETE_COLOR = "yellow"
FAR_FUTURE_COLOR = "cyan"

# Phases shown green as soon as they hold a single video
PHASES_GREEN_WHEN_ANY: frozenset[PhaseTag] = frozenset(
    {
        PhaseTag.PUBLISHED,
        PhaseTag.PUBLISH_PENDING,
        PhaseTag.EDIT_REQUESTED,
    }
)

# Phases shown green once they reach the configured threshold
PHASES_GREEN_AT_THRESHOLD: frozenset[PhaseTag] = frozenset(
    {
        PhaseTag.MATERIAL_DONE,
        PhaseTag.STARTED,
        PhaseTag.IDEAS,
    }
)

AMA_CATEGORY = "ama"


def get_phase_color(tag: PhaseTag, count: int, threshold: int = 3) -> str:
    """Get the terminal color for a phase bucket.

    Args:
        tag: Phase of the bucket.
        count: Number of videos in the bucket.
        threshold: Count at which threshold phases turn green.

    Returns:
        Color name suitable for click.style().
    """
    if tag in PHASES_GREEN_WHEN_ANY and count > 0:
        return COMPLETE_COLOR
    if tag in PHASES_GREEN_AT_THRESHOLD and count >= threshold:
        return COMPLETE_COLOR
    return INCOMPLETE_COLOR


def get_progress_color(score: ProgressScore) -> str:
    """Green when every task is done, yellow otherwise."""
    return COMPLETE_COLOR if score.is_complete else INCOMPLETE_COLOR


def format_progress_label(title: str, score: ProgressScore) -> str:
    """Render ``"<Aspect> (<completed>/<total>)"``."""
    return f"{title} ({score.completed}/{score.total})"


def format_video_title(record: VideoRecord) -> str:
    """Decorate a video name for the phase listing.

    Blocked videos show the blocked reason ("B" for placeholders). Other
    videos show their publish date and "(S)" when sponsored. AMA videos get
    an "(AMA)" suffix in both cases.
    """
    title = record.name
    sponsorship = record.sponsorship

    if sponsorship.is_blocked:
        title = f"{title} ({sponsorship.blocked_label})"
    else:
        if record.date:
            title = f"{title} ({record.date})"
        if sponsorship.is_active:
            title = f"{title} (S)"

    if record.category == AMA_CATEGORY:
        title = f"{title} (AMA)"

    return title


def get_video_title_color(
    record: VideoRecord,
    tag: PhaseTag,
    now: datetime,
    far_future_months: int = 3,
) -> str | None:
    """Get the color of a video title in the phase listing.

    Returns:
        FAR_FUTURE_COLOR for Started videos scheduled beyond the horizon,
        INCOMPLETE_COLOR for sponsored videos that are not blocked, or None
        for the default terminal color.
    """
    if tag is PhaseTag.STARTED and is_far_future(
        record.date, now, months=far_future_months
    ):
        return FAR_FUTURE_COLOR
    if record.sponsorship.is_active and not record.sponsorship.is_blocked:
        return INCOMPLETE_COLOR
    return None
