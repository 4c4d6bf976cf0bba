"""Core utilities package.

Pure helper functions with no external dependencies, shared by the
workflow engine, the storage layer and the CLI.
"""

from ytflow.core.datetime_utils import (
    PUBLISH_DATE_FORMAT,
    add_months,
    is_far_future,
    parse_publish_date,
)
from ytflow.core.string_utils import (
    ABSENT_AMOUNT_VALUES,
    BLOCKED_PLACEHOLDERS,
    FIXME_MARKER,
    has_fixme,
    is_amount_absent,
    is_filled,
)

__all__ = [
    # Dates
    "PUBLISH_DATE_FORMAT",
    "add_months",
    "is_far_future",
    "parse_publish_date",
    # Strings
    "ABSENT_AMOUNT_VALUES",
    "BLOCKED_PLACEHOLDERS",
    "FIXME_MARKER",
    "has_fixme",
    "is_amount_absent",
    "is_filled",
]
