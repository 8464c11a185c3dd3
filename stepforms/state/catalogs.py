"""Per-language string tables keyed by the language in ``st.session_state``."""

from __future__ import annotations

from typing import Mapping

import streamlit as st

from stepforms.constants.keys import StateKeys


class SessionCatalogProvider:
    """Host translation provider that follows the session language.

    ``catalogs`` maps a language code to a ``key -> template`` mapping, the
    same shape as a per-language string table. Unknown languages use the
    ``default_lang`` catalog; unknown keys return ``None``.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]],
        *,
        default_lang: str = "en",
        state_key: str = StateKeys.LANG,
    ) -> None:
        self._catalogs = {lang: dict(entries) for lang, entries in catalogs.items()}
        self._default_lang = default_lang
        self._state_key = state_key

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._catalogs)

    def current_language(self) -> str:
        lang = st.session_state.get(self._state_key) or self._default_lang
        return str(lang)

    def __call__(self, key: str) -> str | None:
        catalog = self._catalogs.get(self.current_language())
        if catalog is None:
            catalog = self._catalogs.get(self._default_lang, {})
        return catalog.get(key)


__all__ = ["SessionCatalogProvider"]
