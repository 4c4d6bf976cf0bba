"""Domain enums for ytflow.

This module contains the closed enumerations shared by the workflow engine,
the storage layer and the CLI: lifecycle phases, progress aspects and
completion criteria kinds.
"""

from enum import Enum


class PhaseTag(str, Enum):
    """Lifecycle phase a video currently occupies.

    Derived from the record's field values on every evaluation; never stored.
    """

    IDEAS = "ideas"
    STARTED = "started"
    MATERIAL_DONE = "material_done"
    EDIT_REQUESTED = "edit_requested"
    PUBLISH_PENDING = "publish_pending"
    PUBLISHED = "published"
    DELAYED = "delayed"
    SPONSORED_BLOCKED = "sponsored_blocked"

    @property
    def display_name(self) -> str:
        """Human-readable phase name used in menus."""
        return PHASE_DISPLAY_NAMES[self]


PHASE_DISPLAY_NAMES: dict[PhaseTag, str] = {
    PhaseTag.PUBLISHED: "Published",
    PhaseTag.PUBLISH_PENDING: "Publish Pending",
    PhaseTag.EDIT_REQUESTED: "Edit Requested",
    PhaseTag.MATERIAL_DONE: "Material Done",
    PhaseTag.STARTED: "Started",
    PhaseTag.DELAYED: "Delayed",
    PhaseTag.SPONSORED_BLOCKED: "Sponsored Blocked",
    PhaseTag.IDEAS: "Ideas",
}

# Order in which phase buckets are listed in the phase menu
MENU_ORDER: tuple[PhaseTag, ...] = tuple(PHASE_DISPLAY_NAMES)


class AspectKey(str, Enum):
    """Production phase a group of fields belongs to.

    Used to group fields for progress scoring and to disambiguate
    identically named fields when looking up completion criteria.
    """

    INITIAL_DETAILS = "initial-details"
    WORK_PROGRESS = "work-progress"
    DEFINITION = "definition"
    POST_PRODUCTION = "post-production"
    PUBLISHING = "publishing"
    DUBBING = "dubbing"
    POST_PUBLISH = "post-publish"
    ANALYSIS = "analysis"

    @property
    def display_title(self) -> str:
        """Display title for the aspect."""
        return ASPECT_TITLES[self]


ASPECT_TITLES: dict[AspectKey, str] = {
    AspectKey.INITIAL_DETAILS: "Initial Details",
    AspectKey.WORK_PROGRESS: "Work In Progress",
    AspectKey.DEFINITION: "Definition",
    AspectKey.POST_PRODUCTION: "Post-Production",
    AspectKey.PUBLISHING: "Publishing Details",
    AspectKey.DUBBING: "Dubbing",
    AspectKey.POST_PUBLISH: "Post-Publish Details",
    AspectKey.ANALYSIS: "Analysis",
}


class CompletionCriteria(str, Enum):
    """Rule deciding whether a single field counts as done."""

    FILLED_ONLY = "filled_only"  # non-empty, not "-"
    FILLED_REQUIRED = "filled_required"  # same check as FILLED_ONLY
    EMPTY_OR_FILLED = "empty_or_filled"  # optional, never blocks completion
    TRUE_ONLY = "true_only"
    FALSE_ONLY = "false_only"  # inverse flags such as "delayed"
    CONDITIONAL_SPONSORSHIP = "conditional_sponsorship"
    CONDITIONAL_SPONSORS = "conditional_sponsors"
    NO_FIXME = "no_fixme"
