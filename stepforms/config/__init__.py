"""Runtime settings for the form engine's collaborators.

Values come from environment variables (a ``.env`` file is honoured) and
fall back to Streamlit secrets, then to the defaults below. The core engine
itself never reads settings; only the config loaders and the demo host do.
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import Final

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_ENDPOINT: Final[str] = "http://localhost:3000/api/form-configs"
DEFAULT_REQUEST_TIMEOUT: Final[float] = 10.0
DEFAULT_TASK_TYPES: Final[tuple[str, ...]] = ("new-project", "add-feature", "generate-guide")


def _read_setting(name: str) -> str | None:
    """Return ``name`` from the environment or Streamlit secrets."""

    value = os.getenv(name)
    if value is not None and value.strip():
        return value.strip()
    try:
        secret = st.secrets[name]
    except Exception:  # secrets.toml is optional outside a Streamlit deployment
        logger.debug("Setting %s not found in Streamlit secrets", name)
        return None
    if secret is None:
        return None
    secret_str = str(secret).strip()
    return secret_str or None


def _normalise_timeout(value: str | None, *, default: float = DEFAULT_REQUEST_TIMEOUT) -> float:
    """Return a positive timeout value in seconds."""

    if value is None:
        return default
    try:
        timeout = float(value)
    except ValueError:
        warnings.warn(
            "Unsupported STEPFORMS_REQUEST_TIMEOUT '%s'; falling back to %.1f seconds." % (value, default),
            RuntimeWarning,
        )
        return default
    if timeout <= 0:
        return default
    return timeout


def _parse_task_types(value: str | None) -> tuple[str, ...]:
    if not value:
        return DEFAULT_TASK_TYPES
    parsed = tuple(dict.fromkeys(item.strip() for item in value.split(",") if item.strip()))
    return parsed or DEFAULT_TASK_TYPES


CONFIG_ENDPOINT = _read_setting("STEPFORMS_CONFIG_ENDPOINT") or DEFAULT_CONFIG_ENDPOINT
REQUEST_TIMEOUT = _normalise_timeout(_read_setting("STEPFORMS_REQUEST_TIMEOUT"))
DEFAULT_LANGUAGE = _read_setting("STEPFORMS_DEFAULT_LANGUAGE") or "en"
LOG_LEVEL = (_read_setting("STEPFORMS_LOG_LEVEL") or "INFO").upper()
TASK_TYPES = _parse_task_types(_read_setting("STEPFORMS_TASK_TYPES"))


__all__ = [
    "CONFIG_ENDPOINT",
    "DEFAULT_CONFIG_ENDPOINT",
    "DEFAULT_LANGUAGE",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_TASK_TYPES",
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
    "TASK_TYPES",
]
