"""Step-scoped required-field validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from stepforms.models.form_config import FormField, FormStep
from stepforms.models.form_texts import DEFAULT_TEXTS, FormTexts
from stepforms.utils.i18n import TranslationAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submit attempt on one step."""

    accepted: bool
    missing_fields: tuple[str, ...] = ()
    message: str | None = None


def is_value_missing(value: Any) -> bool:
    """Return ``True`` when ``value`` does not count as filled in.

    Falsy values (``None``, ``""``, ``False``, ``0``) and empty sequences are
    missing. Whitespace-only text is present: content is not validated.
    """

    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return not value


def find_missing_required_fields(step: FormStep, form_data: Mapping[str, Any]) -> list[FormField]:
    """Return required fields of ``step`` without a value, in declaration order."""

    return [field for field in step.required_fields if is_value_missing(form_data.get(field.name))]


def format_missing_fields_message(
    missing: list[FormField],
    translator: TranslationAdapter,
    texts: FormTexts = DEFAULT_TEXTS,
) -> str:
    """Build the translated error naming each missing field by its label."""

    field_names = ", ".join(translator.translate(field.label) for field in missing)
    return translator.translate(texts.error_messages.required_fields_missing, {"fields": field_names})


def submit_step(
    step: FormStep,
    form_data: Mapping[str, Any],
    translator: TranslationAdapter,
    *,
    on_next: Callable[[], Any],
    on_validation_error: Callable[[str], Any],
    texts: FormTexts = DEFAULT_TEXTS,
) -> SubmissionResult:
    """Validate ``step`` and advance through ``on_next`` when complete.

    All required fields are checked before any callback fires. On failure
    the translated message is handed to ``on_validation_error`` and
    ``on_next`` is not called.
    """

    missing = find_missing_required_fields(step, form_data)
    if missing:
        message = format_missing_fields_message(missing, translator, texts)
        names = tuple(field.name for field in missing)
        logger.info("Step %s blocked; missing required fields: %s", step.id, ", ".join(names))
        on_validation_error(message)
        return SubmissionResult(accepted=False, missing_fields=names, message=message)

    logger.debug("Step %s validated", step.id)
    on_next()
    return SubmissionResult(accepted=True)


__all__ = [
    "SubmissionResult",
    "find_missing_required_fields",
    "format_missing_fields_message",
    "is_value_missing",
    "submit_step",
]
