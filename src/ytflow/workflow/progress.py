"""Per-aspect progress scoring.

Each production aspect holds a fixed, ordered list of field references.
Every reference is resolved to its completion criteria and evaluated; the
results fold into a (completed, total) ProgressScore. Some aspects add bonus
task units: compound rules where one stored field fans out into several
independently gated checks (the sponsorship amount gates the emails and
blocked checks, for example).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ytflow.domain.enums import AspectKey, CompletionCriteria
from ytflow.domain.models import VideoRecord
from ytflow.workflow.criteria import criteria_for, is_complete
from ytflow.workflow.fields import (
    BoolValue,
    FieldRef,
    StringListValue,
    StringValue,
)


@dataclass(frozen=True)
class ProgressScore:
    """Completed and total task counts for one aspect."""

    completed: int
    total: int

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not 0 <= self.completed <= self.total:
            raise ValueError(
                f"completed must be between 0 and total ({self.total}), "
                f"got {self.completed}"
            )

    @property
    def is_complete(self) -> bool:
        """True when every task is done and there is at least one task."""
        return self.total > 0 and self.completed == self.total


@dataclass(frozen=True)
class FieldResult:
    """Evaluation outcome for a single field reference."""

    label: str
    criteria: CompletionCriteria
    complete: bool
    bonus: bool = False


def _initial_details_fields(record: VideoRecord) -> list[FieldRef]:
    return [
        FieldRef("projectName", StringValue(record.project_name)),
        FieldRef("projectURL", StringValue(record.project_url)),
        FieldRef("sponsorship.amount", StringValue(record.sponsorship.amount)),
        FieldRef("date", StringValue(record.date)),
        FieldRef("gist", StringValue(record.gist)),
    ]


def _initial_details_bonus(record: VideoRecord) -> list[FieldRef]:
    return [
        FieldRef("sponsorship.emails", StringValue(record.sponsorship.emails)),
        FieldRef("sponsorship.blocked", BoolValue(record.sponsorship.is_blocked)),
        FieldRef("delayed", BoolValue(record.delayed)),
    ]


def _work_progress_fields(record: VideoRecord) -> list[FieldRef]:
    return [
        FieldRef("codeDone", BoolValue(record.code)),
        FieldRef("talkingHeadDone", BoolValue(record.head)),
        FieldRef("screenRecordingDone", BoolValue(record.screen)),
        FieldRef("relatedVideos", StringListValue(record.related_videos)),
        FieldRef("thumbnailsDone", BoolValue(record.thumbnails)),
        FieldRef("diagramsDone", BoolValue(record.diagrams)),
        FieldRef("screenshotsDone", BoolValue(record.screenshots)),
        FieldRef("filesLocation", StringValue(record.location)),
        FieldRef("tagline", StringValue(record.tagline)),
        FieldRef("taglineIdeas", StringValue(record.tagline_ideas)),
        FieldRef("otherLogos", StringValue(record.other_logos)),
    ]


def _definition_fields(record: VideoRecord) -> list[FieldRef]:
    titles = tuple(v.text for v in record.ordered_titles if v.text.strip())
    return [
        FieldRef("titles", StringListValue(titles)),
        FieldRef("description", StringValue(record.description)),
        FieldRef("highlight", StringValue(record.highlight)),
        FieldRef("tags", StringValue(record.tags)),
        FieldRef("descriptionTags", StringValue(record.description_tags)),
        FieldRef("tweet", StringValue(record.tweet)),
        FieldRef("animationsScript", StringValue(record.animations)),
        FieldRef("requestThumbnail", BoolValue(record.request_thumbnail)),
        FieldRef("gist", StringValue(record.gist)),
    ]


def _post_production_fields(record: VideoRecord) -> list[FieldRef]:
    shorts = tuple(short.title for short in record.shorts)
    return [
        FieldRef("thumbnailPath", StringValue(record.thumbnail)),
        FieldRef("thumbnailVariants", StringListValue(record.thumbnail_variants)),
        FieldRef("members", StringValue(record.members)),
        FieldRef("requestEdit", BoolValue(record.request_edit)),
        FieldRef("timecodes", StringValue(record.timecodes)),
        FieldRef("movieDone", BoolValue(record.movie)),
        FieldRef("slidesDone", BoolValue(record.slides)),
        FieldRef("shorts", StringListValue(shorts)),
    ]


def _publishing_fields(record: VideoRecord) -> list[FieldRef]:
    # Vacuously true when the video has no shorts
    shorts_uploaded = all(short.is_uploaded for short in record.shorts)
    return [
        FieldRef("videoFilePath", StringValue(record.upload_video_path)),
        FieldRef("youTubeVideoId", StringValue(record.video_id)),
        FieldRef("hugoPostPath", StringValue(record.hugo_post_path)),
        FieldRef("shortsUploaded", BoolValue(shorts_uploaded)),
    ]


def _dubbing_fields(record: VideoRecord) -> list[FieldRef]:
    dubbing = record.dubbing
    return [
        FieldRef("dubbing.language", StringValue(dubbing.language)),
        FieldRef("dubbing.videoPath", StringValue(dubbing.video_path)),
        FieldRef("dubbing.title", StringValue(dubbing.title)),
        FieldRef("dubbing.description", StringValue(dubbing.description)),
        FieldRef("dubbing.videoId", StringValue(dubbing.video_id)),
    ]


def _post_publish_fields(record: VideoRecord) -> list[FieldRef]:
    return [
        FieldRef("dotPosted", BoolValue(record.dot_posted)),
        FieldRef("blueSkyPosted", BoolValue(record.bluesky_posted)),
        FieldRef("linkedInPosted", BoolValue(record.linkedin_posted)),
        FieldRef("slackPosted", BoolValue(record.slack_posted)),
        FieldRef("youTubeHighlight", BoolValue(record.youtube_highlight)),
        FieldRef("youTubeComment", BoolValue(record.youtube_comment)),
        FieldRef("youTubeCommentReply", BoolValue(record.youtube_comment_reply)),
        FieldRef("gdePosted", BoolValue(record.gde_posted)),
        FieldRef("codeRepository", StringValue(record.repo)),
    ]


def _post_publish_bonus(record: VideoRecord) -> list[FieldRef]:
    return [FieldRef("notifySponsors", BoolValue(record.notified_sponsors))]


def _analysis_fields(record: VideoRecord) -> list[FieldRef]:
    if not record.titles:
        return [FieldRef("titles", StringListValue(()))]
    return [
        FieldRef(
            "titles.share",
            BoolValue(variant.share > 0),
            label=f"titles[{variant.index}].share",
        )
        for variant in record.ordered_titles
    ]


def _no_bonus(record: VideoRecord) -> list[FieldRef]:
    return []


_FieldBuilder = Callable[[VideoRecord], list[FieldRef]]

# (regular fields, bonus task units) per aspect, in AspectKey order
ASPECT_FIELDS: dict[AspectKey, tuple[_FieldBuilder, _FieldBuilder]] = {
    AspectKey.INITIAL_DETAILS: (_initial_details_fields, _initial_details_bonus),
    AspectKey.WORK_PROGRESS: (_work_progress_fields, _no_bonus),
    AspectKey.DEFINITION: (_definition_fields, _no_bonus),
    AspectKey.POST_PRODUCTION: (_post_production_fields, _no_bonus),
    AspectKey.PUBLISHING: (_publishing_fields, _no_bonus),
    AspectKey.DUBBING: (_dubbing_fields, _no_bonus),
    AspectKey.POST_PUBLISH: (_post_publish_fields, _post_publish_bonus),
    AspectKey.ANALYSIS: (_analysis_fields, _no_bonus),
}


def evaluate_fields(aspect: AspectKey | str, record: VideoRecord) -> list[FieldResult]:
    """Evaluate every field reference of an aspect.

    Args:
        aspect: Aspect to evaluate.
        record: Video record snapshot.

    Returns:
        One FieldResult per field reference, regular fields first, then
        bonus task units, each group in declaration order.

    Raises:
        ValueError: If aspect is not a known AspectKey.
    """
    aspect_key = AspectKey(aspect)
    regular, bonus = ASPECT_FIELDS[aspect_key]
    amount = record.sponsorship.amount

    results: list[FieldResult] = []
    for refs, is_bonus in ((regular(record), False), (bonus(record), True)):
        for ref in refs:
            criteria = criteria_for(aspect_key, ref.key)
            results.append(
                FieldResult(
                    label=ref.display_label,
                    criteria=criteria,
                    complete=is_complete(
                        criteria, ref.value, sponsorship_amount=amount
                    ),
                    bonus=is_bonus,
                )
            )
    return results


def progress_for(aspect: AspectKey | str, record: VideoRecord) -> ProgressScore:
    """Compute the (completed, total) score of one aspect.

    Args:
        aspect: Aspect to score.
        record: Video record snapshot.

    Returns:
        ProgressScore where total counts every field reference and bonus
        unit, and completed counts those whose criteria are satisfied.
    """
    results = evaluate_fields(aspect, record)
    completed = sum(1 for result in results if result.complete)
    return ProgressScore(completed=completed, total=len(results))


def progress_all(record: VideoRecord) -> dict[AspectKey, ProgressScore]:
    """Score every aspect, in AspectKey order."""
    return {aspect: progress_for(aspect, record) for aspect in AspectKey}
