"""Pydantic models describing a declarative multi-step form."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from stepforms.core.errors import StepIndexError

FormData = Mapping[str, Any]


class FieldType(StrEnum):
    """Field types the renderer knows how to draw."""

    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    TAGS = "tags"


KNOWN_FIELD_TYPES: frozenset[str] = frozenset(member.value for member in FieldType)


class FieldOption(BaseModel):
    """Single choice of a ``select`` field."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Value stored in the form data when chosen.")
    label: str = Field(description="Translation key shown for the option.")


class FormField(BaseModel):
    """Declarative description of one form input."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Key of the value in the form data; unique within its step.")
    # Kept as a plain string so consumer-defined types load and render as a no-op.
    type: str = Field(description="Rendering type, see :class:`FieldType`.")
    label: str = Field(description="Translation key of the field label.")
    placeholder: str | None = Field(default=None, description="Translation key of the placeholder.")
    description: str | None = Field(default=None, description="Translation key of the help text.")
    required: bool = False
    icon: str | None = Field(default=None, description="Decorative icon rendered next to the control.")
    rows: int | None = Field(default=None, ge=0, description="Visible rows for textarea fields.")
    options: tuple[FieldOption, ...] | None = None

    @property
    def is_known_type(self) -> bool:
        return self.type in KNOWN_FIELD_TYPES


class FormStep(BaseModel):
    """A titled group of fields shown together."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(description="Translation key of the step heading.")
    description: str = Field(default="", description="Translation key of the step intro.")
    fields: tuple[FormField, ...] = ()

    @property
    def required_fields(self) -> tuple[FormField, ...]:
        return tuple(field for field in self.fields if field.required)


class FormConfiguration(BaseModel):
    """The whole form: an ordered, non-empty sequence of steps."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    template_name: str = Field(alias="templateName")
    steps: tuple[FormStep, ...] = Field(min_length=1)

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def step_at(self, index: int) -> FormStep:
        """Return the step at ``index`` or raise :class:`StepIndexError`."""

        if not 0 <= index < len(self.steps):
            raise StepIndexError(index, len(self.steps))
        return self.steps[index]


@dataclass(frozen=True)
class ConfigurationIssue:
    """Non-fatal problem found while linting a configuration."""

    step_id: str
    field_name: str
    message: str


def lint_configuration(config: FormConfiguration) -> list[ConfigurationIssue]:
    """Return permissive configuration problems without raising.

    The renderer tolerates all of these, so the loader only logs them.
    """

    issues: list[ConfigurationIssue] = []
    for step in config.steps:
        counts = Counter(field.name for field in step.fields)
        for name, count in counts.items():
            if count > 1:
                issues.append(ConfigurationIssue(step.id, name, f"field name used {count} times in one step"))
        for field in step.fields:
            if not field.is_known_type:
                issues.append(ConfigurationIssue(step.id, field.name, f"unknown field type {field.type!r}"))
            elif field.type == FieldType.SELECT and not field.options:
                issues.append(ConfigurationIssue(step.id, field.name, "select field has no options"))
    return issues


__all__ = [
    "ConfigurationIssue",
    "FieldOption",
    "FieldType",
    "FormConfiguration",
    "FormData",
    "FormField",
    "FormStep",
    "KNOWN_FIELD_TYPES",
    "lint_configuration",
]
