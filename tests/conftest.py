from dataclasses import dataclass

import pytest
import streamlit as st

from stepforms import FormConfiguration
from tests.utils import SAMPLE_CONFIG, CallbackRecorder


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture
def sample_config() -> FormConfiguration:
    return FormConfiguration.model_validate(SAMPLE_CONFIG)
