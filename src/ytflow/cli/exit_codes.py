"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (config, input)
    20-29: Storage errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for ytflow CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Validation errors (10-19)
    CONFIG_ERROR = 11
    VIDEO_VALIDATION_ERROR = 12

    # Storage errors (20-29)
    STORAGE_ERROR = 20
