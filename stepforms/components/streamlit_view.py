"""Paint a rendered form tree with Streamlit widgets."""

from __future__ import annotations

import logging
from typing import Any, Callable

import streamlit as st
from streamlit.delta_generator import DeltaGenerator

from stepforms.components.nodes import RenderedNode
from stepforms.constants.keys import UIKeys

logger = logging.getLogger(__name__)

__all__ = ["paint", "widget_key"]


def widget_key(scope: str, field_id: str) -> str:
    """Return the session-state key of the widget for ``field_id``."""

    return f"{UIKeys.WIDGET_PREFIX}.{scope}.{field_id}"


def _ensure_widget_state(key: str, value: Any) -> None:
    """Keep ``st.session_state[key]`` synchronised with ``value``."""

    if key not in st.session_state or st.session_state.get(key) != value:
        st.session_state[key] = value


def _build_on_change(key: str, handler: Callable[[Any], Any] | None) -> Callable[[], None] | None:
    if handler is None:
        return None

    def _callback() -> None:
        handler(st.session_state.get(key))

    return _callback


def _field_label(field: RenderedNode) -> str:
    label = field.find("label")
    text = label.text() if label is not None else str(field.props.get("name", ""))
    icon = field.find("icon")
    if icon is not None:
        text = f"{icon.text()} {text}"
    return text


def _paint_control(control: RenderedNode, label: str, scope: str) -> None:
    key = widget_key(scope, str(control.props.get("id", "")))
    on_change = _build_on_change(key, control.handlers.get("change"))

    if control.kind == "input":
        _ensure_widget_state(key, control.props.get("value", ""))
        st.text_input(label, key=key, placeholder=control.props.get("placeholder") or None, on_change=on_change)
    elif control.kind == "textarea":
        _ensure_widget_state(key, control.props.get("value", ""))
        rows = int(control.props.get("rows", 4))
        st.text_area(
            label,
            key=key,
            placeholder=control.props.get("placeholder") or None,
            height=max(68, rows * 24),
            on_change=on_change,
        )
    elif control.kind == "select":
        prompt, *choices = control.find_all("option")
        labels = {option.props["value"]: option.text() for option in choices}
        _ensure_widget_state(key, control.props.get("value") or None)
        st.selectbox(
            label,
            list(labels),
            index=None,
            key=key,
            placeholder=prompt.text(),
            format_func=lambda value: labels.get(value, value),
            on_change=on_change,
        )
    elif control.kind == "checkbox":
        _ensure_widget_state(key, bool(control.props.get("checked")))
        st.checkbox(label, key=key, on_change=on_change)
    else:
        logger.debug("No Streamlit widget for node kind %r", control.kind)


def _paint_field(field: RenderedNode, scope: str) -> None:
    label = _field_label(field)
    group = field.find("control")
    control = next((child for child in group.children if isinstance(child, RenderedNode)), None) if group else None
    if control is None:
        st.markdown(label)
    else:
        _paint_control(control, label, scope)
    for child in field.children:
        if isinstance(child, RenderedNode) and child.kind == "description":
            st.caption(child.text())


def _paint_button(column: DeltaGenerator, button: RenderedNode, scope: str) -> None:
    on_click = button.handlers.get("click")
    column.button(
        button.text(),
        key=f"{UIKeys.WIDGET_PREFIX}.{scope}.{button.props.get('kind', 'button')}",
        type="primary" if button.props.get("kind") == "submit" else "secondary",
        disabled=bool(button.props.get("disabled")),
        on_click=on_click,
    )


def _paint_buttons(buttons: RenderedNode, scope: str) -> None:
    rendered = [child for child in buttons.children if isinstance(child, RenderedNode)]
    if not rendered:
        return
    columns = st.columns(len(rendered))
    for column, button in zip(columns, rendered):
        if button.kind == "button":
            _paint_button(column, button, scope)


def paint(tree: RenderedNode, *, scope: str | None = None) -> None:
    """Emit Streamlit widgets for ``tree`` and wire their callbacks.

    Widget keys are namespaced by ``scope`` (the step id by default) so that
    fields with the same name on different steps do not collide.
    """

    form = tree.find("form")
    scope = scope or str(form.props.get("step_id", "form") if form is not None else "form")

    progress = tree.find("progress")
    if progress is not None:
        current = int(progress.props.get("current_step", 0))
        total = max(int(progress.props.get("total_steps", 1)), 1)
        st.progress(current / total, text=f"{current} / {total}")

    title = tree.find("title")
    if title is not None:
        st.subheader(title.text())
    header = tree.find("header")
    description = header.find("description") if header is not None else None
    if description is not None and description.text():
        st.caption(description.text())

    if form is None:
        return
    for child in form.children:
        if not isinstance(child, RenderedNode):
            continue
        if child.kind == "field":
            _paint_field(child, scope)
        elif child.kind == "buttons":
            _paint_buttons(child, scope)
