"""Publish-date parsing utilities.

Publish dates are stored as naive local times in a fixed
"YYYY-MM-DDTHH:MM" layout (e.g. "2030-01-21T16:00").
"""

from __future__ import annotations

import calendar
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

PUBLISH_DATE_FORMAT = "%Y-%m-%dT%H:%M"


def parse_publish_date(value: str) -> datetime | None:
    """Parse a publish date string.

    Args:
        value: Date in "YYYY-MM-DDTHH:MM" format.

    Returns:
        Parsed naive datetime, or None if the value is empty or unparsable.
        Unparsable values are logged at DEBUG level only.
    """
    value = value.strip()
    if not value:
        return None
    try:
        return datetime.strptime(value, PUBLISH_DATE_FORMAT)
    except ValueError:
        logger.debug("Ignoring unparsable publish date: %r", value)
        return None


def add_months(moment: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the target month's length.

    Example:
        >>> add_months(datetime(2025, 11, 30), 3)
        datetime.datetime(2026, 2, 28, 0, 0)
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def is_far_future(value: str, reference: datetime, months: int = 3) -> bool:
    """Check whether a publish date lies more than ``months`` ahead.

    Args:
        value: Publish date string.
        reference: Point in time to compare against.
        months: Calendar months that count as "far".

    Returns:
        True if the date parses and is strictly after reference + months.
        Dates in the past, empty or unparsable dates return False.
    """
    parsed = parse_publish_date(value)
    if parsed is None or parsed <= reference:
        return False
    return parsed > add_months(reference, months)
