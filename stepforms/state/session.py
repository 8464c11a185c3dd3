"""Host-side session container that owns step index and form data."""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

import streamlit as st

from stepforms.constants.keys import StateKeys
from stepforms.models.form_config import FormConfiguration
from stepforms.wizard.navigation import FormFlags

logger = logging.getLogger(__name__)


class FormSession:
    """Host state for one form session, kept in a mutable ``store``.

    The store defaults to a private dict; :meth:`for_streamlit` binds it to
    ``st.session_state`` so the session survives reruns. ``merge`` updates
    the form data in place, so submit handlers created by a render observe
    values changed after that render.
    """

    def __init__(self, configuration: FormConfiguration, *, store: MutableMapping[str, Any] | None = None) -> None:
        self.configuration = configuration
        self._store: MutableMapping[str, Any] = store if store is not None else {}
        self._store.setdefault(StateKeys.STEP, 0)
        self._store.setdefault(StateKeys.COMPLETED, False)
        if not isinstance(self._store.get(StateKeys.FORM_DATA), dict):
            self._store[StateKeys.FORM_DATA] = {}

    @classmethod
    def for_streamlit(cls, configuration: FormConfiguration) -> "FormSession":
        return cls(configuration, store=st.session_state)

    @property
    def current_step_index(self) -> int:
        index = int(self._store.get(StateKeys.STEP, 0))
        return min(max(index, 0), self.configuration.total_steps - 1)

    @property
    def form_data(self) -> dict[str, Any]:
        return self._store[StateKeys.FORM_DATA]

    @property
    def completed(self) -> bool:
        return bool(self._store.get(StateKeys.COMPLETED, False))

    @property
    def is_first_step(self) -> bool:
        return self.current_step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self.current_step_index == self.configuration.total_steps - 1

    @property
    def validation_message(self) -> str | None:
        return self._store.get(StateKeys.VALIDATION_MESSAGE)

    def flags(self) -> FormFlags:
        return FormFlags(is_first_step=self.is_first_step, is_last_step=self.is_last_step)

    def merge(self, patch: Mapping[str, Any]) -> None:
        """Shallow-merge a partial update into the form data."""

        self.form_data.update(patch)

    def advance(self) -> None:
        """Move to the next step, or mark the session complete on the last one."""

        self._store.pop(StateKeys.VALIDATION_MESSAGE, None)
        if self.is_last_step:
            self._store[StateKeys.COMPLETED] = True
            logger.info("Form %s completed", self.configuration.id)
            return
        self._store[StateKeys.STEP] = self.current_step_index + 1

    def go_back(self) -> None:
        self._store.pop(StateKeys.VALIDATION_MESSAGE, None)
        if self.current_step_index > 0:
            self._store[StateKeys.STEP] = self.current_step_index - 1

    def report_validation_error(self, message: str) -> None:
        self._store[StateKeys.VALIDATION_MESSAGE] = message

    def reset(self) -> None:
        self._store[StateKeys.STEP] = 0
        self._store[StateKeys.FORM_DATA] = {}
        self._store[StateKeys.COMPLETED] = False
        self._store.pop(StateKeys.VALIDATION_MESSAGE, None)


__all__ = ["FormSession"]
