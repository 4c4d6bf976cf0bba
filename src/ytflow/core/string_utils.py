"""String helpers for placeholder-aware field checks.

Video records use "-" and "N/A" as hand-typed placeholders for "nothing
here". These helpers centralize how such values are recognized.
"""

from __future__ import annotations

# Values that mean "no sponsorship" in the sponsorship amount field
ABSENT_AMOUNT_VALUES: frozenset[str] = frozenset({"", "-", "N/A"})

# Blocked-reason values displayed as a generic marker instead of literally
BLOCKED_PLACEHOLDERS: frozenset[str] = frozenset({"-", "N/A"})

FIXME_MARKER = "FIXME:"


def is_filled(value: str) -> bool:
    """Check whether a text field carries real content.

    Args:
        value: Field text.

    Returns:
        True if the stripped value is non-empty and not "-".

    Example:
        >>> is_filled("  Kubernetes  ")
        True
        >>> is_filled("-")
        False
    """
    stripped = value.strip()
    return len(stripped) > 0 and stripped != "-"


def is_amount_absent(amount: str) -> bool:
    """Check whether a sponsorship amount means "not sponsored"."""
    return amount in ABSENT_AMOUNT_VALUES


def has_fixme(value: str) -> bool:
    """Check whether text still contains the FIXME: marker."""
    return FIXME_MARKER in value
