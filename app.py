# app.py: stepforms demo host (Streamlit entrypoint)
from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

import streamlit as st

from stepforms import (
    FormCallbacks,
    FormTexts,
    create_host_translation_adapter,
    create_node_ui_adapter,
    render_form,
)
from stepforms import config as settings
from stepforms.components.streamlit_view import paint
from stepforms.config_loader import load_json_config
from stepforms.constants.keys import StateKeys
from stepforms.state import FormSession, SessionCatalogProvider
from stepforms.utils.logging_context import configure_logging

APP_ROOT = Path(__file__).resolve().parent
CONFIG_PATH = APP_ROOT / "form_configs" / "new-project.json"

CATALOGS: Final[dict[str, dict[str, str]]] = {
    "de": {
        "form.basics.title": "Projektgrundlagen",
        "form.basics.description": "Erzähl uns kurz, worum es geht.",
        "form.details.title": "Details",
        "form.details.description": "Beschreibe Umfang und Technologie.",
        "form.fields.projectName.label": "Projektname",
        "form.fields.projectName.placeholder": "z. B. Wetter-Dashboard",
        "form.fields.email.label": "E-Mail",
        "form.fields.email.placeholder": "name@example.com",
        "form.fields.projectType.label": "Projekttyp",
        "form.fields.projectType.web": "Webanwendung",
        "form.fields.projectType.cli": "Kommandozeilen-Tool",
        "form.fields.projectType.library": "Bibliothek",
        "form.fields.summary.label": "Zusammenfassung",
        "form.fields.summary.description": "Zwei bis drei Sätze genügen.",
        "form.fields.techStack.label": "Technologien",
        "form.fields.techStack.placeholder": "python, streamlit, pydantic",
        "form.fields.openSource.label": "Open Source",
        "Previous": "Zurück",
        "Next": "Weiter",
        "Submit": "Absenden",
        "Back": "Zurück",
        "Optional": "optional",
        "Please select...": "Bitte auswählen…",
        "Please fill in all required fields: {fields}": "Bitte fülle alle Pflichtfelder aus: {fields}",
    },
    "en": {
        "form.basics.title": "Project basics",
        "form.basics.description": "Tell us briefly what this is about.",
        "form.details.title": "Details",
        "form.details.description": "Describe scope and technology.",
        "form.fields.projectName.label": "Project name",
        "form.fields.projectName.placeholder": "e.g. Weather dashboard",
        "form.fields.email.label": "Email",
        "form.fields.email.placeholder": "name@example.com",
        "form.fields.projectType.label": "Project type",
        "form.fields.projectType.web": "Web application",
        "form.fields.projectType.cli": "Command-line tool",
        "form.fields.projectType.library": "Library",
        "form.fields.summary.label": "Summary",
        "form.fields.summary.description": "Two or three sentences are enough.",
        "form.fields.techStack.label": "Tech stack",
        "form.fields.techStack.placeholder": "python, streamlit, pydantic",
        "form.fields.openSource.label": "Open source",
    },
}

configure_logging(level=settings.LOG_LEVEL)
logger = logging.getLogger("stepforms.app")

st.set_page_config(page_title="stepforms demo", page_icon="🧭", layout="centered")
st.session_state.setdefault(StateKeys.LANG, settings.DEFAULT_LANGUAGE)

with st.sidebar:
    st.radio("Language / Sprache", ("en", "de"), key=StateKeys.LANG, horizontal=True)

configuration = load_json_config(CONFIG_PATH)
session = FormSession.for_streamlit(configuration)
translator = create_host_translation_adapter(SessionCatalogProvider(CATALOGS, default_lang=settings.DEFAULT_LANGUAGE))

if session.completed:
    st.success(translator.translate("Submit") + " ✔")
    st.json(session.form_data)
    if st.button(translator.translate("Back")):
        session.reset()
        st.rerun()
    st.stop()

tree = render_form(
    configuration,
    session.current_step_index,
    session.form_data,
    FormCallbacks(
        on_data_change=session.merge,
        on_next=session.advance,
        on_previous=session.go_back,
        on_validation_error=session.report_validation_error,
    ),
    session.flags(),
    create_node_ui_adapter(),
    translator,
    texts=FormTexts(),
)
paint(tree)

if session.validation_message:
    st.warning(session.validation_message)
