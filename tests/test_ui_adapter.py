from __future__ import annotations

from types import SimpleNamespace

import pytest

from stepforms import UIComponents, create_node_ui_adapter
from stepforms.components.nodes import node
from stepforms.core.errors import AdapterConfigurationError


def _noop(**_: object) -> None:
    return None


def test_missing_required_capability_fails_fast() -> None:
    with pytest.raises(AdapterConfigurationError, match="textarea"):
        UIComponents(input=_noop, textarea=None, label=_noop, button=_noop)  # type: ignore[arg-type]


def test_non_callable_progress_is_rejected() -> None:
    with pytest.raises(AdapterConfigurationError, match="progress_step"):
        UIComponents(input=_noop, textarea=_noop, label=_noop, button=_noop, progress_step="bar")  # type: ignore[arg-type]


def test_from_object_collects_capabilities() -> None:
    source = SimpleNamespace(input=_noop, textarea=_noop, label=_noop, button=_noop)
    ui = UIComponents.from_object(source)
    assert ui.has_progress is False
    assert ui.button is _noop


def test_from_object_reports_every_missing_capability() -> None:
    with pytest.raises(AdapterConfigurationError) as excinfo:
        UIComponents.from_object(SimpleNamespace(input=_noop))
    assert "textarea, label, button" in str(excinfo.value)


def test_node_adapter_builds_nodes() -> None:
    ui = create_node_ui_adapter()
    clicks: list[str] = []

    button = ui.button(label="Go", on_click=lambda: clicks.append("go"), kind="submit", variant="default", disabled=False)
    button.handlers["click"]()

    assert button.kind == "button"
    assert button.props["kind"] == "submit"
    assert button.text() == "Go"
    assert clicks == ["go"]
    assert ui.progress_step(current_step=2, total_steps=3).props == {"current_step": 2, "total_steps": 3}


def test_node_adapter_without_progress() -> None:
    assert create_node_ui_adapter(with_progress=False).has_progress is False


def test_node_kind_is_independent_of_kind_prop() -> None:
    submit = node("button", "Send", kind="submit", variant="default")
    assert submit.kind == "button"
    assert submit.props == {"kind": "submit", "variant": "default"}
    assert submit.text() == "Send"
