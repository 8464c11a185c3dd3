from __future__ import annotations

from typing import Any

import pytest
import streamlit as st

from stepforms import create_basic_translation_adapter, create_node_ui_adapter, render_form
from stepforms.components import streamlit_view
from stepforms.components.streamlit_view import paint, widget_key
from stepforms.wizard import FormFlags


class _Column:
    def __init__(self, calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]]) -> None:
        self._calls = calls

    def button(self, *args: Any, **kwargs: Any) -> bool:
        self._calls.append(("button", args, kwargs))
        return False


@pytest.fixture
def st_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, tuple[Any, ...], dict[str, Any]]]:
    calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def _recorder(name: str):
        def _record(*args: Any, **kwargs: Any) -> None:
            calls.append((name, args, kwargs))

        return _record

    for name in ("progress", "subheader", "caption", "markdown", "text_input", "text_area", "selectbox", "checkbox"):
        monkeypatch.setattr(st, name, _recorder(name))
    monkeypatch.setattr(st, "columns", lambda count: [_Column(calls) for _ in range(count)])
    return calls


def _tree(sample_config, recorder, step: int, data: dict[str, Any]):
    return render_form(
        sample_config,
        step,
        data,
        recorder.callbacks(),
        FormFlags(is_first_step=step == 0, is_last_step=step == sample_config.total_steps - 1),
        create_node_ui_adapter(),
        create_basic_translation_adapter(),
    )


def _names(calls) -> list[str]:
    return [name for name, _, _ in calls]


def test_paint_emits_widgets_in_order(st_calls, sample_config, recorder) -> None:
    paint(_tree(sample_config, recorder, 0, {"email": "a@b.com"}))

    assert _names(st_calls) == ["progress", "subheader", "caption", "text_input", "selectbox", "button", "button"]
    assert st.session_state[widget_key("basics", "email")] == "a@b.com"

    _, args, kwargs = st_calls[3]
    assert args == ("@ Email *",)
    assert kwargs["key"] == widget_key("basics", "email")


def test_select_uses_placeholder_and_option_labels(st_calls, sample_config, recorder) -> None:
    paint(_tree(sample_config, recorder, 0, {}))

    _, args, kwargs = next(call for call in st_calls if call[0] == "selectbox")
    assert args[1] == ["web", "cli"]
    assert kwargs["index"] is None
    assert kwargs["placeholder"] == "Please select..."
    assert kwargs["format_func"]("cli") == "CLI"


def test_widget_change_forwards_session_value(st_calls, sample_config, recorder) -> None:
    paint(_tree(sample_config, recorder, 1, {}))

    text_area = next(call for call in st_calls if call[0] == "text_area")
    key = text_area[2]["key"]
    st.session_state[key] = "Short summary"
    text_area[2]["on_change"]()

    checkbox = next(call for call in st_calls if call[0] == "checkbox")
    st.session_state[checkbox[2]["key"]] = 1
    checkbox[2]["on_change"]()

    assert recorder.patches == [{"summary": "Short summary"}, {"public": True}]


def test_buttons_are_wired_to_engine_handlers(st_calls, sample_config, recorder) -> None:
    paint(_tree(sample_config, recorder, 0, {}))

    previous, submit = [kwargs for name, _, kwargs in st_calls if name == "button"]
    assert previous["disabled"] is True
    assert submit["type"] == "primary"

    submit["on_click"]()
    assert recorder.next_calls == 0
    assert recorder.errors == ["Please fill in all required fields: Email"]


def test_keys_are_scoped_per_step() -> None:
    assert widget_key("basics", "name") != widget_key("details", "name")
    assert widget_key("basics", "name").startswith(streamlit_view.UIKeys.WIDGET_PREFIX)
