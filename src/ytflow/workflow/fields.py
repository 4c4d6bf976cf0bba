"""Tagged field values consumed by the completion evaluator.

Each field a progress calculator inspects is wrapped in exactly one of
these variants so the evaluator can dispatch on the kind of value instead
of inspecting arbitrary objects.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StringValue:
    """Free-text field value."""

    text: str


@dataclass(frozen=True)
class BoolValue:
    """Checkbox/toggle field value."""

    flag: bool


@dataclass(frozen=True)
class StringListValue:
    """List-typed field value (related videos, shorts, title variants)."""

    items: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.items)


FieldValue = StringValue | BoolValue | StringListValue


@dataclass(frozen=True)
class FieldRef:
    """A field key paired with the value read from a record.

    Attributes:
        key: Field key as used in the completion criteria table
            (e.g. "sponsorship.emails").
        value: The field's current value.
        label: Display label when several refs share one key
            (e.g. "titles[2].share"). Defaults to the key.
    """

    key: str
    value: FieldValue
    label: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.key
