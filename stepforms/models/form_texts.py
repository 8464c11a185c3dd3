"""Default, overridable texts used by the form engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ButtonTexts(BaseModel):
    """Navigation button captions (translation keys)."""

    model_config = ConfigDict(frozen=True)

    previous: str = "Previous"
    next: str = "Next"
    submit: str = "Submit"
    back: str = "Back"


class FieldLabels(BaseModel):
    """Secondary labels rendered by the field renderer (translation keys)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    optional: str = "Optional"
    please_select: str = Field(default="Please select...", alias="pleaseSelect")


class ErrorMessages(BaseModel):
    """Validation message templates (translation keys)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    required_fields_missing: str = Field(
        default="Please fill in all required fields: {fields}",
        alias="requiredFieldsMissing",
    )


class FormTexts(BaseModel):
    """Every caller-customisable text of a rendered form.

    Each value is passed through the translation adapter, so with the
    key-as-default policy the defaults double as display strings.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    button_texts: ButtonTexts = Field(default_factory=ButtonTexts, alias="buttonTexts")
    labels: FieldLabels = Field(default_factory=FieldLabels)
    error_messages: ErrorMessages = Field(default_factory=ErrorMessages, alias="errorMessages")


DEFAULT_TEXTS = FormTexts()

__all__ = ["ButtonTexts", "DEFAULT_TEXTS", "ErrorMessages", "FieldLabels", "FormTexts"]
