"""Navigation buttons and progress indicator for a form step."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from stepforms.components.ui_adapter import UIComponents
from stepforms.models.form_texts import ButtonTexts
from stepforms.utils.i18n import TranslationAdapter

PreviousButtonRenderer = Callable[[Callable[[], Any], bool], Any]
NextButtonRenderer = Callable[[Callable[[], Any], bool], Any]
ProgressOverride = Callable[[int, int], Any]


class NavigationDirection(str, Enum):
    """Direction metadata for navigation controls."""

    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class FormFlags:
    """Position flags decided by the host, not computed by the engine."""

    is_first_step: bool
    is_last_step: bool


@dataclass(frozen=True)
class FormOverrides:
    """Caller-supplied renderers that replace the defaults entirely.

    ``render_previous_button(on_previous, is_first_step)``,
    ``render_next_button(on_submit, is_last_step)`` and
    ``render_progress(current_step, total_steps)`` with a 1-based step.
    """

    render_previous_button: PreviousButtonRenderer | None = field(default=None, compare=False)
    render_next_button: NextButtonRenderer | None = field(default=None, compare=False)
    render_progress: ProgressOverride | None = field(default=None, compare=False)


def button_label(direction: NavigationDirection, flags: FormFlags, texts: ButtonTexts) -> str:
    """Return the untranslated caption for ``direction`` given ``flags``."""

    if direction is NavigationDirection.PREVIOUS:
        return texts.back if flags.is_first_step else texts.previous
    return texts.submit if flags.is_last_step else texts.next


def render_previous_button(
    on_previous: Callable[[], Any],
    flags: FormFlags,
    ui: UIComponents,
    translator: TranslationAdapter,
    texts: ButtonTexts,
    overrides: FormOverrides,
) -> Any:
    if overrides.render_previous_button is not None:
        return overrides.render_previous_button(on_previous, flags.is_first_step)
    return ui.button(
        label=translator.translate(button_label(NavigationDirection.PREVIOUS, flags, texts)),
        on_click=on_previous,
        kind="button",
        variant="outline",
        disabled=flags.is_first_step,
    )


def render_next_button(
    on_submit: Callable[[], Any],
    flags: FormFlags,
    ui: UIComponents,
    translator: TranslationAdapter,
    texts: ButtonTexts,
    overrides: FormOverrides,
) -> Any:
    if overrides.render_next_button is not None:
        return overrides.render_next_button(on_submit, flags.is_last_step)
    return ui.button(
        label=translator.translate(button_label(NavigationDirection.NEXT, flags, texts)),
        on_click=on_submit,
        kind="submit",
        variant="default",
        disabled=False,
    )


def render_progress(current_step: int, total_steps: int, ui: UIComponents, overrides: FormOverrides) -> Any:
    """Return the progress node, or ``None`` when no progress is available."""

    if overrides.render_progress is not None:
        return overrides.render_progress(current_step, total_steps)
    if ui.progress_step is None:
        return None
    return ui.progress_step(current_step=current_step, total_steps=total_steps)


__all__ = [
    "FormFlags",
    "FormOverrides",
    "NavigationDirection",
    "button_label",
    "render_next_button",
    "render_previous_button",
    "render_progress",
]
