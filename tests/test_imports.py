from __future__ import annotations

import importlib
import sys

import pytest

CORE_MODULES = (
    "stepforms",
    "stepforms.models",
    "stepforms.components.field_renderer",
    "stepforms.components.ui_adapter",
    "stepforms.utils.i18n",
    "stepforms.utils.logging_context",
    "stepforms.wizard",
)


def _stepforms_modules() -> list[str]:
    return [name for name in sys.modules if name == "stepforms" or name.startswith("stepforms.")]


def test_core_imports_without_streamlit(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _stepforms_modules():
        monkeypatch.delitem(sys.modules, name)
    monkeypatch.setitem(sys.modules, "streamlit", None)

    try:
        for name in CORE_MODULES:
            importlib.import_module(name)
        loaded = set(_stepforms_modules())
        assert "stepforms.config" not in loaded
        assert "stepforms.config_loader" not in loaded
        assert "stepforms.state" not in loaded
    finally:
        for name in _stepforms_modules():
            sys.modules.pop(name, None)


def test_streamlit_integration_still_importable() -> None:
    from stepforms.components.streamlit_view import paint
    from stepforms.state import FormSession, SessionCatalogProvider

    assert callable(paint)
    assert FormSession.for_streamlit is not None
    assert callable(SessionCatalogProvider({}))
