"""Domain models for ytflow.

This module contains the video record under classification and its
sub-records. All models are immutable snapshots: the workflow engine
borrows a record, computes, and returns without mutating it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ytflow.core.string_utils import BLOCKED_PLACEHOLDERS, is_amount_absent

# Valid A/B title variant indexes; index 1 is the uploaded title
TITLE_VARIANT_INDEXES = (1, 2, 3)


@dataclass(frozen=True)
class Sponsorship:
    """Sponsorship details for a video.

    Attributes:
        amount: Agreed amount; "", "-" and "N/A" mean "not sponsored".
        emails: Comma-separated sponsor contact emails.
        blocked: Reason the sponsored video is blocked. Any non-empty value,
            placeholders included, means the video is blocked.
    """

    amount: str = ""
    emails: str = ""
    blocked: str = ""

    @property
    def is_active(self) -> bool:
        """True if the amount indicates an actual sponsorship."""
        return not is_amount_absent(self.amount)

    @property
    def is_blocked(self) -> bool:
        """True if any blocked reason has been recorded."""
        return len(self.blocked) > 0

    @property
    def blocked_label(self) -> str:
        """Reason to display for a blocked video, without parentheses.

        Callers wrap the label, so the listing marker reads "(B)" or
        "(<reason>)"; see format_video_title.

        Returns:
            "B" for placeholder reasons ("-", "N/A"), the literal reason
            otherwise, or "" when the video is not blocked.
        """
        if not self.is_blocked:
            return ""
        if self.blocked in BLOCKED_PLACEHOLDERS:
            return "B"
        return self.blocked


@dataclass(frozen=True)
class TitleVariant:
    """One A/B test title.

    Attributes:
        index: Variant position (1-3). Variant 1 is the uploaded title.
        text: Title text.
        share: Watch-time share collected for the variant (percent).
    """

    index: int
    text: str = ""
    share: float = 0.0

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.index not in TITLE_VARIANT_INDEXES:
            raise ValueError(
                f"index must be one of {TITLE_VARIANT_INDEXES}, got {self.index}"
            )
        if self.share < 0.0:
            raise ValueError(f"share must be non-negative, got {self.share}")


@dataclass(frozen=True)
class ShortVideo:
    """A short clip cut from the main video."""

    title: str = ""
    text: str = ""
    file_path: str = ""
    youtube_id: str = ""
    scheduled_date: str = ""

    @property
    def is_uploaded(self) -> bool:
        return len(self.youtube_id.strip()) > 0


@dataclass(frozen=True)
class DubbingInfo:
    """Dubbed version of the video in another language."""

    language: str = ""
    video_path: str = ""
    title: str = ""
    description: str = ""
    video_id: str = ""


@dataclass(frozen=True)
class VideoIndexEntry:
    """Entry in the video index list."""

    name: str
    category: str


@dataclass(frozen=True)
class VideoRecord:
    """All data associated with a video project.

    Every attribute has a neutral default, so ``VideoRecord()`` describes a
    freshly created video with no work started.
    """

    # Identity
    name: str = ""
    category: str = ""
    path: str = ""

    # Initial details
    project_name: str = ""
    project_url: str = ""
    sponsorship: Sponsorship = Sponsorship()
    date: str = ""
    delayed: bool = False
    gist: str = ""

    # Work progress
    code: bool = False
    head: bool = False
    screen: bool = False
    related_videos: tuple[str, ...] = ()
    thumbnails: bool = False
    diagrams: bool = False
    screenshots: bool = False
    location: str = ""
    tagline: str = ""
    tagline_ideas: str = ""
    other_logos: str = ""

    # Definition
    titles: tuple[TitleVariant, ...] = ()
    description: str = ""
    highlight: str = ""
    tags: str = ""
    description_tags: str = ""
    tweet: str = ""
    animations: str = ""
    request_thumbnail: bool = False

    # Post-production
    thumbnail: str = ""
    thumbnail_variants: tuple[str, ...] = ()
    members: str = ""
    request_edit: bool = False
    timecodes: str = ""
    movie: bool = False
    slides: bool = False
    shorts: tuple[ShortVideo, ...] = ()

    # Publishing
    upload_video_path: str = ""
    video_id: str = ""
    hugo_post_path: str = ""

    # Dubbing
    dubbing: DubbingInfo = DubbingInfo()

    # Post-publish
    dot_posted: bool = False
    bluesky_posted: bool = False
    linkedin_posted: bool = False
    slack_posted: bool = False
    youtube_highlight: bool = False
    youtube_comment: bool = False
    youtube_comment_reply: bool = False
    gde_posted: bool = False
    repo: str = ""
    notified_sponsors: bool = False

    @property
    def uploaded_title(self) -> str:
        """Text of the title variant actually uploaded (index 1)."""
        for variant in self.titles:
            if variant.index == 1:
                return variant.text
        return self.titles[0].text if self.titles else ""

    @property
    def ordered_titles(self) -> tuple[TitleVariant, ...]:
        """Title variants sorted by index."""
        return tuple(sorted(self.titles, key=lambda variant: variant.index))
