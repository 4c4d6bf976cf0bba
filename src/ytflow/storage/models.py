"""Pydantic models for the on-disk video record format.

Video YAML files use lower-case keys without separators (``uploadvideo``,
``requestedit``, ``sponsorship.amount``). These models validate a decoded
document and convert it to the immutable domain VideoRecord, and back.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ytflow.domain.models import (
    DubbingInfo,
    ShortVideo,
    Sponsorship,
    TitleVariant,
    VideoIndexEntry,
    VideoRecord,
)


def _drop_nulls(data: Any) -> Any:
    """Remove explicit YAML nulls so field defaults apply."""
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


def _scalar_text(value: Any) -> Any:
    """Render a YAML scalar that PyYAML resolved to a non-string as text.

    Hand-written documents leave values such as ``yes``, ``3`` or
    ``2030-01-21`` unquoted; in a text field they mean the text itself.
    Mappings, lists and strings are returned unchanged.
    """
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, datetime):
        if value.second or value.microsecond:
            return value.isoformat()
        return value.isoformat(timespec="minutes")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _is_text_list(annotation: Any) -> bool:
    return get_origin(annotation) is list and get_args(annotation) == (str,)


def _split_list(value: Any) -> Any:
    """Accept a comma-separated string wherever a string list is expected."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class _RecordModel(BaseModel):
    """Base model for on-disk documents.

    Unknown keys are ignored, nulls fall back to defaults and scalars bound
    for text fields are read as text.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def normalize_scalars(cls, data: Any) -> Any:
        data = _drop_nulls(data)
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for name, field in cls.model_fields.items():
            for key in {field.alias or name, name}:
                if key not in data:
                    continue
                if field.annotation is str:
                    data[key] = _scalar_text(data[key])
                elif _is_text_list(field.annotation) and isinstance(data[key], list):
                    data[key] = [_scalar_text(item) for item in data[key]]
        return data


class SponsorshipModel(_RecordModel):
    """Pydantic model for the sponsorship sub-record."""

    amount: str = ""
    emails: str = ""
    blocked: str = ""


class TitleVariantModel(_RecordModel):
    """Pydantic model for an A/B title variant."""

    index: int = Field(ge=1, le=3)
    text: str = ""
    share: float = Field(default=0.0, ge=0.0)


class ShortModel(_RecordModel):
    """Pydantic model for a short clip."""

    title: str = ""
    text: str = ""
    file_path: str = Field(default="", alias="filepath")
    youtube_id: str = Field(default="", alias="youtubeid")
    scheduled_date: str = Field(default="", alias="scheduleddate")


class DubbingModel(_RecordModel):
    """Pydantic model for the dubbing sub-record."""

    language: str = ""
    video_path: str = Field(default="", alias="videopath")
    title: str = ""
    description: str = ""
    video_id: str = Field(default="", alias="videoid")


class VideoModel(_RecordModel):
    """Pydantic model for a complete video document."""

    name: str = ""
    category: str = ""
    path: str = ""

    project_name: str = Field(default="", alias="projectname")
    project_url: str = Field(default="", alias="projecturl")
    sponsorship: SponsorshipModel = Field(default_factory=SponsorshipModel)
    date: str = ""
    delayed: bool = False
    gist: str = ""

    code: bool = False
    head: bool = False
    screen: bool = False
    related_videos: list[str] = Field(default_factory=list, alias="relatedvideos")
    thumbnails: bool = False
    diagrams: bool = False
    screenshots: bool = False
    location: str = ""
    tagline: str = ""
    tagline_ideas: str = Field(default="", alias="taglineideas")
    other_logos: str = Field(default="", alias="otherlogos")

    title: str = ""
    titles: list[TitleVariantModel] = Field(default_factory=list)
    description: str = ""
    highlight: str = ""
    tags: str = ""
    description_tags: str = Field(default="", alias="descriptiontags")
    tweet: str = ""
    animations: str = ""
    request_thumbnail: bool = Field(default=False, alias="requestthumbnail")

    thumbnail: str = ""
    thumbnail_variants: list[str] = Field(
        default_factory=list, alias="thumbnailvariants"
    )
    members: str = ""
    request_edit: bool = Field(default=False, alias="requestedit")
    timecodes: str = ""
    movie: bool = False
    slides: bool = False
    shorts: list[ShortModel] = Field(default_factory=list)

    upload_video: str = Field(default="", alias="uploadvideo")
    video_id: str = Field(default="", alias="videoid")
    hugo_path: str = Field(default="", alias="hugopath")

    dubbing: DubbingModel = Field(default_factory=DubbingModel)

    dot_posted: bool = Field(default=False, alias="dotposted")
    bluesky_posted: bool = Field(default=False, alias="blueskyposted")
    linkedin_posted: bool = Field(default=False, alias="linkedinposted")
    slack_posted: bool = Field(default=False, alias="slackposted")
    youtube_highlight: bool = Field(default=False, alias="youtubehighlight")
    youtube_comment: bool = Field(default=False, alias="youtubecomment")
    youtube_comment_reply: bool = Field(default=False, alias="youtubecommentreply")
    gde: bool = False
    repo: str = ""
    notified_sponsors: bool = Field(default=False, alias="notifiedsponsors")

    @field_validator("related_videos", "thumbnail_variants", mode="before")
    @classmethod
    def split_comma_separated(cls, value: Any) -> Any:
        """Accept legacy comma-separated strings for list fields."""
        return _split_list(value)

    @field_validator("titles")
    @classmethod
    def validate_unique_indexes(
        cls, value: list[TitleVariantModel]
    ) -> list[TitleVariantModel]:
        """Reject duplicate title variant indexes."""
        indexes = [variant.index for variant in value]
        if len(indexes) != len(set(indexes)):
            raise ValueError(f"duplicate title variant index in {indexes}")
        return value

    def to_record(self) -> VideoRecord:
        """Convert to the immutable domain record."""
        titles = tuple(
            TitleVariant(index=t.index, text=t.text, share=t.share)
            for t in self.titles
        )
        # Older documents carry a single "title" string instead of variants
        if not titles and self.title:
            titles = (TitleVariant(index=1, text=self.title),)

        return VideoRecord(
            name=self.name,
            category=self.category,
            path=self.path,
            project_name=self.project_name,
            project_url=self.project_url,
            sponsorship=Sponsorship(
                amount=self.sponsorship.amount,
                emails=self.sponsorship.emails,
                blocked=self.sponsorship.blocked,
            ),
            date=self.date,
            delayed=self.delayed,
            gist=self.gist,
            code=self.code,
            head=self.head,
            screen=self.screen,
            related_videos=tuple(self.related_videos),
            thumbnails=self.thumbnails,
            diagrams=self.diagrams,
            screenshots=self.screenshots,
            location=self.location,
            tagline=self.tagline,
            tagline_ideas=self.tagline_ideas,
            other_logos=self.other_logos,
            titles=titles,
            description=self.description,
            highlight=self.highlight,
            tags=self.tags,
            description_tags=self.description_tags,
            tweet=self.tweet,
            animations=self.animations,
            request_thumbnail=self.request_thumbnail,
            thumbnail=self.thumbnail,
            thumbnail_variants=tuple(self.thumbnail_variants),
            members=self.members,
            request_edit=self.request_edit,
            timecodes=self.timecodes,
            movie=self.movie,
            slides=self.slides,
            shorts=tuple(
                ShortVideo(
                    title=s.title,
                    text=s.text,
                    file_path=s.file_path,
                    youtube_id=s.youtube_id,
                    scheduled_date=s.scheduled_date,
                )
                for s in self.shorts
            ),
            upload_video_path=self.upload_video,
            video_id=self.video_id,
            hugo_post_path=self.hugo_path,
            dubbing=DubbingInfo(
                language=self.dubbing.language,
                video_path=self.dubbing.video_path,
                title=self.dubbing.title,
                description=self.dubbing.description,
                video_id=self.dubbing.video_id,
            ),
            dot_posted=self.dot_posted,
            bluesky_posted=self.bluesky_posted,
            linkedin_posted=self.linkedin_posted,
            slack_posted=self.slack_posted,
            youtube_highlight=self.youtube_highlight,
            youtube_comment=self.youtube_comment,
            youtube_comment_reply=self.youtube_comment_reply,
            gde_posted=self.gde,
            repo=self.repo,
            notified_sponsors=self.notified_sponsors,
        )

    @classmethod
    def from_record(cls, record: VideoRecord) -> VideoModel:
        """Build a model from a domain record (used when writing)."""
        return cls(
            name=record.name,
            category=record.category,
            path=record.path,
            project_name=record.project_name,
            project_url=record.project_url,
            sponsorship=SponsorshipModel(
                amount=record.sponsorship.amount,
                emails=record.sponsorship.emails,
                blocked=record.sponsorship.blocked,
            ),
            date=record.date,
            delayed=record.delayed,
            gist=record.gist,
            code=record.code,
            head=record.head,
            screen=record.screen,
            related_videos=list(record.related_videos),
            thumbnails=record.thumbnails,
            diagrams=record.diagrams,
            screenshots=record.screenshots,
            location=record.location,
            tagline=record.tagline,
            tagline_ideas=record.tagline_ideas,
            other_logos=record.other_logos,
            title=record.uploaded_title,
            titles=[
                TitleVariantModel(index=t.index, text=t.text, share=t.share)
                for t in record.ordered_titles
            ],
            description=record.description,
            highlight=record.highlight,
            tags=record.tags,
            description_tags=record.description_tags,
            tweet=record.tweet,
            animations=record.animations,
            request_thumbnail=record.request_thumbnail,
            thumbnail=record.thumbnail,
            thumbnail_variants=list(record.thumbnail_variants),
            members=record.members,
            request_edit=record.request_edit,
            timecodes=record.timecodes,
            movie=record.movie,
            slides=record.slides,
            shorts=[
                ShortModel(
                    title=s.title,
                    text=s.text,
                    file_path=s.file_path,
                    youtube_id=s.youtube_id,
                    scheduled_date=s.scheduled_date,
                )
                for s in record.shorts
            ],
            upload_video=record.upload_video_path,
            video_id=record.video_id,
            hugo_path=record.hugo_post_path,
            dubbing=DubbingModel(
                language=record.dubbing.language,
                video_path=record.dubbing.video_path,
                title=record.dubbing.title,
                description=record.dubbing.description,
                video_id=record.dubbing.video_id,
            ),
            dot_posted=record.dot_posted,
            bluesky_posted=record.bluesky_posted,
            linkedin_posted=record.linkedin_posted,
            slack_posted=record.slack_posted,
            youtube_highlight=record.youtube_highlight,
            youtube_comment=record.youtube_comment,
            youtube_comment_reply=record.youtube_comment_reply,
            gde=record.gde_posted,
            repo=record.repo,
            notified_sponsors=record.notified_sponsors,
        )


class IndexEntryModel(_RecordModel):
    """Pydantic model for a video index entry."""

    name: str = Field(min_length=1)
    category: str = Field(min_length=1)

    def to_entry(self) -> VideoIndexEntry:
        return VideoIndexEntry(name=self.name, category=self.category)
