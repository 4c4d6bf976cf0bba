"""Completion criteria table and field evaluator.

Maps (aspect, field) pairs to a CompletionCriteria kind and decides whether
a single field value satisfies that kind. All functions are pure.
"""

from __future__ import annotations

import logging

from ytflow.core.string_utils import has_fixme, is_amount_absent, is_filled
from ytflow.domain.enums import AspectKey, CompletionCriteria
from ytflow.workflow.fields import BoolValue, StringListValue, StringValue

logger = logging.getLogger(__name__)

_FIELD_VALUE_TYPES = (StringValue, BoolValue, StringListValue)

_FILLED = CompletionCriteria.FILLED_ONLY
_TRUE = CompletionCriteria.TRUE_ONLY
_FALSE = CompletionCriteria.FALSE_ONLY

CRITERIA_TABLE: dict[AspectKey, dict[str, CompletionCriteria]] = {
    AspectKey.INITIAL_DETAILS: {
        "projectName": _FILLED,
        "projectURL": _FILLED,
        "sponsorship.amount": _FILLED,
        "sponsorship.emails": CompletionCriteria.CONDITIONAL_SPONSORSHIP,
        # Evaluated as the "is blocked" flag: done when nothing blocks
        "sponsorship.blocked": _FALSE,
        "date": _FILLED,
        "delayed": _FALSE,
        "gist": _FILLED,
    },
    AspectKey.WORK_PROGRESS: {
        "codeDone": _TRUE,
        "talkingHeadDone": _TRUE,
        "screenRecordingDone": _TRUE,
        "relatedVideos": _FILLED,
        "thumbnailsDone": _TRUE,
        "diagramsDone": _TRUE,
        "screenshotsDone": _TRUE,
        "filesLocation": _FILLED,
        "tagline": _FILLED,
        "taglineIdeas": _FILLED,
        "otherLogos": _FILLED,
    },
    AspectKey.DEFINITION: {
        "titles": _FILLED,
        "description": _FILLED,
        "highlight": _FILLED,
        "tags": _FILLED,
        "descriptionTags": _FILLED,
        "tweet": _FILLED,
        "animationsScript": _FILLED,
        "requestThumbnail": _TRUE,
        "gist": _FILLED,
    },
    AspectKey.POST_PRODUCTION: {
        "thumbnailPath": _FILLED,
        "thumbnailVariants": CompletionCriteria.EMPTY_OR_FILLED,
        "members": _FILLED,
        "requestEdit": _TRUE,
        "timecodes": CompletionCriteria.NO_FIXME,
        "movieDone": _TRUE,
        "slidesDone": _TRUE,
        "shorts": _FILLED,
    },
    AspectKey.PUBLISHING: {
        "videoFilePath": _FILLED,
        "youTubeVideoId": _FILLED,
        "hugoPostPath": _FILLED,
        "shortsUploaded": _TRUE,
    },
    AspectKey.DUBBING: {
        "dubbing.language": _FILLED,
        "dubbing.videoPath": _FILLED,
        "dubbing.title": _FILLED,
        "dubbing.description": _FILLED,
        "dubbing.videoId": _FILLED,
    },
    AspectKey.POST_PUBLISH: {
        "dotPosted": _TRUE,
        "blueSkyPosted": _TRUE,
        "linkedInPosted": _TRUE,
        "slackPosted": _TRUE,
        "youTubeHighlight": _TRUE,
        "youTubeComment": _TRUE,
        "youTubeCommentReply": _TRUE,
        "gdePosted": _TRUE,
        "codeRepository": _FILLED,
        "notifySponsors": CompletionCriteria.CONDITIONAL_SPONSORS,
    },
    AspectKey.ANALYSIS: {
        "titles": _FILLED,
        "titles.share": _TRUE,
    },
}


def criteria_for(aspect: AspectKey | str, field_key: str) -> CompletionCriteria:
    """Look up the completion criteria for a field.

    Unknown aspects or fields fail closed to FILLED_ONLY.

    Args:
        aspect: Aspect the field belongs to.
        field_key: Field key within the aspect.

    Returns:
        The CompletionCriteria kind for the field.
    """
    try:
        aspect_key = AspectKey(aspect)
    except ValueError:
        return CompletionCriteria.FILLED_ONLY
    return CRITERIA_TABLE[aspect_key].get(field_key, CompletionCriteria.FILLED_ONLY)


def is_complete(
    criteria: CompletionCriteria,
    value: object,
    *,
    sponsorship_amount: str = "",
) -> bool:
    """Decide whether a field value satisfies its completion criteria.

    List values are complete when non-empty, whatever their content (and
    always under EMPTY_OR_FILLED). Values that are not one of the field
    value variants never count as complete.

    Args:
        criteria: Completion criteria kind of the field.
        value: StringValue, BoolValue or StringListValue.
        sponsorship_amount: Sponsorship amount of the record, consulted by
            the conditional criteria only.

    Returns:
        True if the field's task is done.
    """
    if not isinstance(value, _FIELD_VALUE_TYPES):
        logger.debug(
            "Field value of type %s counted as incomplete", type(value).__name__
        )
        return False

    if criteria is CompletionCriteria.EMPTY_OR_FILLED:
        return True

    if isinstance(value, StringListValue):
        return len(value) > 0

    if criteria is CompletionCriteria.CONDITIONAL_SPONSORSHIP:
        if is_amount_absent(sponsorship_amount):
            return True
        return _is_filled_value(value)

    if criteria is CompletionCriteria.CONDITIONAL_SPONSORS:
        if is_amount_absent(sponsorship_amount):
            return True
        return isinstance(value, BoolValue) and value.flag

    if criteria in (
        CompletionCriteria.FILLED_ONLY,
        CompletionCriteria.FILLED_REQUIRED,
    ):
        return _is_filled_value(value)

    if criteria is CompletionCriteria.TRUE_ONLY:
        return isinstance(value, BoolValue) and value.flag

    if criteria is CompletionCriteria.FALSE_ONLY:
        return isinstance(value, BoolValue) and not value.flag

    if criteria is CompletionCriteria.NO_FIXME:
        return (
            isinstance(value, StringValue)
            and len(value.text.strip()) > 0
            and not has_fixme(value.text)
        )

    logger.debug("Unhandled completion criteria %s", criteria)
    return False


def _is_filled_value(value: object) -> bool:
    """Filled check shared by FILLED_* and the conditional criteria."""
    if isinstance(value, StringValue):
        return is_filled(value.text)
    if isinstance(value, BoolValue):
        return value.flag
    return isinstance(value, StringListValue) and len(value) > 0
