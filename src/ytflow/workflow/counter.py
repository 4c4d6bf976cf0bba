"""Aggregate phase counting over collections of records."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ytflow.core.datetime_utils import parse_publish_date
from ytflow.domain.enums import MENU_ORDER, PhaseTag
from ytflow.domain.models import VideoRecord
from ytflow.workflow.classifier import classify


def count_by_phase(
    records: Iterable[VideoRecord],
    now: datetime | None = None,
) -> dict[PhaseTag, int]:
    """Tally records per lifecycle phase.

    Every phase is present in the result, so an empty collection yields a
    map of zeros. Keys follow the phase menu order.

    Args:
        records: Video records to classify.
        now: Reference time shared by every classification in the batch.

    Returns:
        Mapping of each PhaseTag to the number of records in it.
    """
    if now is None:
        now = datetime.now()
    counts = dict.fromkeys(MENU_ORDER, 0)
    for record in records:
        counts[classify(record, now)] += 1
    return counts


def _date_sort_key(record: VideoRecord) -> tuple[int, datetime]:
    parsed = parse_publish_date(record.date)
    if parsed is None:
        return (0, datetime.min)
    return (1, parsed)


def filter_by_phase(
    records: Iterable[VideoRecord],
    tag: PhaseTag,
    now: datetime | None = None,
) -> list[VideoRecord]:
    """Select the records in one phase, ordered by publish date.

    Records without a parsable date sort first; ties keep input order.
    """
    if now is None:
        now = datetime.now()
    selected = [record for record in records if classify(record, now) is tag]
    return sorted(selected, key=_date_sort_key)
