"""Data models for form configurations and texts."""

from .form_config import (
    ConfigurationIssue,
    FieldOption,
    FieldType,
    FormConfiguration,
    FormData,
    FormField,
    FormStep,
    KNOWN_FIELD_TYPES,
    lint_configuration,
)
from .form_texts import DEFAULT_TEXTS, ButtonTexts, ErrorMessages, FieldLabels, FormTexts

__all__ = [
    "ButtonTexts",
    "ConfigurationIssue",
    "DEFAULT_TEXTS",
    "ErrorMessages",
    "FieldLabels",
    "FieldOption",
    "FieldType",
    "FormConfiguration",
    "FormData",
    "FormField",
    "FormStep",
    "FormTexts",
    "KNOWN_FIELD_TYPES",
    "lint_configuration",
]
