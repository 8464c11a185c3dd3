"""Compose a rendered step: progress, header, fields and navigation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from stepforms.components.field_renderer import render_field
from stepforms.components.nodes import RenderedNode, node
from stepforms.components.ui_adapter import UIComponents
from stepforms.models.form_config import FormConfiguration, FormStep
from stepforms.models.form_texts import DEFAULT_TEXTS, FormTexts
from stepforms.utils.i18n import TranslationAdapter
from stepforms.utils.logging_context import bind_form_context
from stepforms.wizard.navigation import (
    FormFlags,
    FormOverrides,
    render_next_button,
    render_previous_button,
    render_progress,
)
from stepforms.wizard.validation import SubmissionResult, submit_step

logger = logging.getLogger(__name__)

DataChangeCallback = Callable[[dict[str, Any]], Any]

_NO_OVERRIDES = FormOverrides()


@dataclass(frozen=True)
class FormCallbacks:
    """Host callbacks triggered by the rendered form.

    ``on_data_change`` receives a one-key partial patch; merging it into the
    stored form data is up to the host. ``on_validation_error`` receives the
    translated message when a submit attempt is blocked.
    """

    on_data_change: DataChangeCallback
    on_next: Callable[[], Any]
    on_previous: Callable[[], Any]
    on_validation_error: Callable[[str], Any]


def _field_change_handler(name: str, on_data_change: DataChangeCallback) -> Callable[[Any], None]:
    def _on_change(value: Any) -> None:
        on_data_change({name: value})

    return _on_change


def _render_fields(
    step: FormStep,
    form_data: Mapping[str, Any],
    callbacks: FormCallbacks,
    ui: UIComponents,
    translator: TranslationAdapter,
    texts: FormTexts,
) -> list[RenderedNode]:
    return [
        render_field(
            form_field,
            form_data.get(form_field.name),
            _field_change_handler(form_field.name, callbacks.on_data_change),
            ui,
            translator,
            labels=texts.labels,
        )
        for form_field in step.fields
    ]


def render_form(
    configuration: FormConfiguration,
    current_step_index: int,
    form_data: Mapping[str, Any],
    callbacks: FormCallbacks,
    flags: FormFlags,
    ui: UIComponents,
    translator: TranslationAdapter,
    overrides: FormOverrides | None = None,
    texts: FormTexts | None = None,
) -> RenderedNode:
    """Render the active step of ``configuration``.

    The result is a pure function of the arguments: the engine keeps no
    state between calls and never advances the step index itself. The
    ``form`` node carries a ``submit`` handler that validates the active
    step before calling ``callbacks.on_next``.

    Raises:
        StepIndexError: when ``current_step_index`` is outside the steps.
    """

    overrides = overrides or _NO_OVERRIDES
    texts = texts or DEFAULT_TEXTS
    step = configuration.step_at(current_step_index)

    with bind_form_context(configuration.id, step.id):
        logger.debug("Rendering step %d/%d", current_step_index + 1, configuration.total_steps)

        def _submit() -> SubmissionResult:
            with bind_form_context(configuration.id, step.id):
                return submit_step(
                    step,
                    form_data,
                    translator,
                    on_next=callbacks.on_next,
                    on_validation_error=callbacks.on_validation_error,
                    texts=texts,
                )

        progress = render_progress(current_step_index + 1, configuration.total_steps, ui, overrides)
        progress_region = node("progress_region", progress) if progress is not None else None

        header = node(
            "header",
            node("title", translator.translate(step.title)),
            node("description", translator.translate(step.description)),
        )
        buttons = node(
            "buttons",
            render_previous_button(callbacks.on_previous, flags, ui, translator, texts.button_texts, overrides),
            render_next_button(_submit, flags, ui, translator, texts.button_texts, overrides),
        )
        form = node(
            "form",
            *_render_fields(step, form_data, callbacks, ui, translator, texts),
            buttons,
            handlers={"submit": _submit},
            step_id=step.id,
        )
        return node(
            "form_container",
            progress_region,
            header,
            form,
            form_id=configuration.id,
            step_index=current_step_index,
        )


__all__ = ["FormCallbacks", "render_form"]
