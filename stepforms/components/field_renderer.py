"""Render a single field descriptor through the UI adapter."""

from __future__ import annotations

import logging
from typing import Any, Callable

from stepforms.components.nodes import RenderedNode, node
from stepforms.components.ui_adapter import UIComponents
from stepforms.models.form_config import FieldType, FormField
from stepforms.models.form_texts import FieldLabels
from stepforms.utils.i18n import TranslationAdapter

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Any], None]
DEFAULT_TEXTAREA_ROWS = 4
TAG_SEPARATOR = ", "

__all__ = ["DEFAULT_TEXTAREA_ROWS", "join_tags", "render_field", "split_tags"]


def split_tags(raw: str) -> list[str]:
    """Split comma separated text into trimmed, non-empty tags."""

    return [segment.strip() for segment in (raw or "").split(",") if segment.strip()]


def join_tags(value: Any) -> str:
    """Return the display text for a tag list; non-sequences display empty."""

    if isinstance(value, (list, tuple)):
        return TAG_SEPARATOR.join(str(item) for item in value)
    return ""


def _placeholder(field: FormField, translator: TranslationAdapter) -> str:
    return translator.translate(field.placeholder) if field.placeholder else ""


def _render_select(
    field: FormField,
    value: Any,
    on_change: ChangeCallback,
    translator: TranslationAdapter,
    labels: FieldLabels,
) -> RenderedNode:
    current = value or ""
    prompt = translator.translate(field.placeholder or labels.please_select)
    options = [node("option", prompt, value="", disabled=True, selected=current == "")]
    for option in field.options or ():
        options.append(
            node(
                "option",
                translator.translate(option.label),
                value=option.value,
                disabled=False,
                selected=option.value == current,
            )
        )
    return node(
        "select",
        *options,
        handlers={"change": on_change},
        id=field.name,
        value=current,
        required=field.required,
    )


def _render_control(
    field: FormField,
    value: Any,
    on_change: ChangeCallback,
    ui: UIComponents,
    translator: TranslationAdapter,
    labels: FieldLabels,
) -> Any:
    if field.type == FieldType.INPUT:
        return ui.input(
            id=field.name,
            value=value or "",
            on_change=on_change,
            placeholder=_placeholder(field, translator),
            required=field.required,
        )
    if field.type == FieldType.TEXTAREA:
        return ui.textarea(
            id=field.name,
            value=value or "",
            on_change=on_change,
            placeholder=_placeholder(field, translator),
            required=field.required,
            rows=field.rows or DEFAULT_TEXTAREA_ROWS,
        )
    if field.type == FieldType.SELECT:
        return _render_select(field, value, on_change, translator, labels)
    if field.type == FieldType.TAGS:
        return ui.input(
            id=field.name,
            value=join_tags(value),
            on_change=lambda raw: on_change(split_tags(raw)),
            placeholder=_placeholder(field, translator),
            required=field.required,
        )
    if field.type == FieldType.CHECKBOX:
        return node(
            "checkbox",
            handlers={"change": lambda checked: on_change(bool(checked))},
            id=field.name,
            checked=bool(value),
        )
    logger.debug("Skipping control for field %r with unknown type %r", field.name, field.type)
    return None


def render_field(
    field: FormField,
    value: Any,
    on_change: ChangeCallback,
    ui: UIComponents,
    translator: TranslationAdapter,
    *,
    labels: FieldLabels | None = None,
) -> RenderedNode:
    """Render ``field`` with its label, control, icon and description.

    ``on_change`` receives the field's new value only; the renderer never
    touches the form data itself. Unknown field types render no control.
    """

    labels = labels or FieldLabels()
    if field.required:
        marker = node("required_marker", "*")
    else:
        marker = node("optional_marker", f"({translator.translate(labels.optional)})")
    label = ui.label(html_for=field.name, children=(translator.translate(field.label), marker))

    control = _render_control(field, value, on_change, ui, translator, labels)
    control_group = None
    if control is not None:
        icon = node("icon", field.icon) if field.icon else None
        control_group = node("control", control, icon)

    description = node("description", translator.translate(field.description)) if field.description else None
    return node("field", label, control_group, description, name=field.name, type=field.type)
