"""Phase classification and completion scoring.

This package derives a video's lifecycle phase and per-aspect progress
from its current field values. All functions are pure: they never perform
I/O, never mutate the record and never raise for record content.
"""

from ytflow.workflow.classifier import (
    FALLBACK_PHASE,
    PHASE_RULES,
    ClassificationResult,
    PhaseRule,
    RuleEvaluation,
    classify,
    explain,
)
from ytflow.workflow.counter import count_by_phase, filter_by_phase
from ytflow.workflow.criteria import CRITERIA_TABLE, criteria_for, is_complete
from ytflow.workflow.fields import (
    BoolValue,
    FieldRef,
    FieldValue,
    StringListValue,
    StringValue,
)
from ytflow.workflow.progress import (
    ASPECT_FIELDS,
    FieldResult,
    ProgressScore,
    evaluate_fields,
    progress_all,
    progress_for,
)

__all__ = [
    # Field values
    "BoolValue",
    "FieldRef",
    "FieldValue",
    "StringListValue",
    "StringValue",
    # Criteria
    "CRITERIA_TABLE",
    "criteria_for",
    "is_complete",
    # Progress
    "ASPECT_FIELDS",
    "FieldResult",
    "ProgressScore",
    "evaluate_fields",
    "progress_all",
    "progress_for",
    # Classification
    "FALLBACK_PHASE",
    "PHASE_RULES",
    "ClassificationResult",
    "PhaseRule",
    "RuleEvaluation",
    "classify",
    "explain",
    # Aggregation
    "count_by_phase",
    "filter_by_phase",
]
