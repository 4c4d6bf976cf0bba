"""Lifecycle phase classification.

The phase of a video is derived from its current field values by an ordered
list of rules evaluated first-match-wins. Rule order encodes business
precedence: a blocked sponsorship outranks publication state, an edit
request outranks a delay, and so on. IDEAS is the unconditional fallback,
so every record classifies to exactly one phase.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ytflow.core.datetime_utils import parse_publish_date
from ytflow.core.string_utils import is_filled
from ytflow.domain.enums import PhaseTag
from ytflow.domain.models import VideoRecord

logger = logging.getLogger(__name__)

PhasePredicate = Callable[[VideoRecord, datetime], bool]


@dataclass(frozen=True)
class PhaseRule:
    """A named predicate that assigns a phase when it matches."""

    name: str
    tag: PhaseTag
    predicate: PhasePredicate


@dataclass(frozen=True)
class RuleEvaluation:
    """Outcome of evaluating one rule against a record."""

    rule_name: str
    tag: PhaseTag
    matched: bool


@dataclass(frozen=True)
class ClassificationResult:
    """Classified phase plus the trace of rules examined to reach it."""

    tag: PhaseTag
    trace: tuple[RuleEvaluation, ...]


def _material_flags(record: VideoRecord) -> tuple[bool, ...]:
    return (
        record.code,
        record.head,
        record.screen,
        record.thumbnails,
        record.diagrams,
        record.screenshots,
    )


def _is_sponsored_blocked(record: VideoRecord, now: datetime) -> bool:
    return record.sponsorship.is_active and record.sponsorship.is_blocked


def _is_published(record: VideoRecord, now: datetime) -> bool:
    return is_filled(record.video_id) and is_filled(record.upload_video_path)


def _is_publish_pending(record: VideoRecord, now: datetime) -> bool:
    if is_filled(record.video_id):
        return False
    if is_filled(record.upload_video_path):
        return True
    publish_date = parse_publish_date(record.date)
    return publish_date is not None and publish_date <= now


def _is_edit_requested(record: VideoRecord, now: datetime) -> bool:
    return record.request_edit


def _is_material_done(record: VideoRecord, now: datetime) -> bool:
    return all(_material_flags(record))


def _is_delayed(record: VideoRecord, now: datetime) -> bool:
    return record.delayed


def _is_started(record: VideoRecord, now: datetime) -> bool:
    if any(_material_flags(record)):
        return True
    if record.related_videos:
        return True
    text_fields = (
        record.location,
        record.tagline,
        record.tagline_ideas,
        record.other_logos,
        record.date,
    )
    return any(is_filled(value) for value in text_fields)


PHASE_RULES: tuple[PhaseRule, ...] = (
    PhaseRule("sponsored-blocked", PhaseTag.SPONSORED_BLOCKED, _is_sponsored_blocked),
    PhaseRule("published", PhaseTag.PUBLISHED, _is_published),
    PhaseRule("publish-pending", PhaseTag.PUBLISH_PENDING, _is_publish_pending),
    PhaseRule("edit-requested", PhaseTag.EDIT_REQUESTED, _is_edit_requested),
    PhaseRule("material-done", PhaseTag.MATERIAL_DONE, _is_material_done),
    PhaseRule("delayed", PhaseTag.DELAYED, _is_delayed),
    PhaseRule("started", PhaseTag.STARTED, _is_started),
)

FALLBACK_PHASE = PhaseTag.IDEAS


def explain(record: VideoRecord, now: datetime | None = None) -> ClassificationResult:
    """Classify a record and report which rules were examined.

    Rules are evaluated in PHASE_RULES order; evaluation stops at the first
    match. When nothing matches the record falls back to IDEAS.

    Args:
        record: Video record snapshot.
        now: Reference time for the publish-date check. Defaults to the
            current local time.

    Returns:
        ClassificationResult with the phase and one RuleEvaluation per rule
        examined.
    """
    if now is None:
        now = datetime.now()

    trace: list[RuleEvaluation] = []
    for rule in PHASE_RULES:
        matched = rule.predicate(record, now)
        trace.append(RuleEvaluation(rule_name=rule.name, tag=rule.tag, matched=matched))
        if matched:
            return ClassificationResult(tag=rule.tag, trace=tuple(trace))

    return ClassificationResult(tag=FALLBACK_PHASE, trace=tuple(trace))


def classify(record: VideoRecord, now: datetime | None = None) -> PhaseTag:
    """Determine the lifecycle phase a record currently occupies.

    Args:
        record: Video record snapshot.
        now: Reference time for the publish-date check.

    Returns:
        Exactly one PhaseTag.
    """
    return explain(record, now).tag
