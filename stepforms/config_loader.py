"""Resolve form configurations from static maps, callables, files or HTTP."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

import requests
from pydantic import ValidationError

from stepforms import config as settings
from stepforms.core.errors import ConfigLoadError, ConfigNotFoundError
from stepforms.models.form_config import FormConfiguration, lint_configuration

logger = logging.getLogger(__name__)

DEFAULT_TASK_TYPES: tuple[str, ...] = settings.DEFAULT_TASK_TYPES

ConfigPayload = FormConfiguration | Mapping[str, Any]
ConfigSource = Mapping[str, ConfigPayload] | Callable[[str], ConfigPayload]


def coerce_configuration(payload: ConfigPayload, *, source: str = "configuration") -> FormConfiguration:
    """Validate ``payload`` into a :class:`FormConfiguration` and log lint issues.

    Raises:
        ConfigLoadError: when the payload does not describe a valid form.
    """

    if isinstance(payload, FormConfiguration):
        configuration = payload
    else:
        try:
            configuration = FormConfiguration.model_validate(payload)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid form configuration from {source}: {exc}") from exc
    for issue in lint_configuration(configuration):
        logger.warning(
            "Form %s step %s field %s: %s",
            configuration.id,
            issue.step_id,
            issue.field_name,
            issue.message,
        )
    return configuration


@dataclass(frozen=True)
class ConfigLoader:
    """Resolves a configuration per task type."""

    source: ConfigSource = field(repr=False)
    task_types: tuple[str, ...] = DEFAULT_TASK_TYPES

    def load_config(self, task_type: str) -> FormConfiguration:
        if callable(self.source):
            payload = self.source(task_type)
        else:
            payload = self.source.get(task_type)
            if payload is None:
                raise ConfigNotFoundError(task_type)
        logger.info("Loaded form configuration for task type %s", task_type)
        return coerce_configuration(payload, source=f"task type {task_type!r}")

    def is_valid_task_type(self, task_type: str) -> bool:
        return task_type in self.task_types

    def available_task_types(self) -> list[str]:
        return list(self.task_types)


def create_config_loader(source: ConfigSource, *, task_types: Sequence[str] | None = None) -> ConfigLoader:
    """Return a loader reading from a mapping or a ``task_type -> config`` callable."""

    return ConfigLoader(source=source, task_types=tuple(task_types) if task_types else settings.TASK_TYPES)


def create_static_config_loader(
    configs: Mapping[str, ConfigPayload],
    *,
    task_types: Sequence[str] | None = None,
) -> ConfigLoader:
    return create_config_loader(dict(configs), task_types=task_types)


def create_api_config_loader(
    endpoint: str | None = None,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
    task_types: Sequence[str] | None = None,
) -> ConfigLoader:
    """Return a loader fetching ``<endpoint>?taskType=<task>`` over HTTP.

    Non-success responses raise :class:`ConfigLoadError`; transport errors
    from :mod:`requests` propagate unchanged.
    """

    url = endpoint or settings.CONFIG_ENDPOINT
    request_timeout = timeout or settings.REQUEST_TIMEOUT
    http = session or requests.Session()

    def _fetch(task_type: str) -> Mapping[str, Any]:
        logger.info("Fetching form configuration %s from %s", task_type, url)
        response = http.get(url, params={"taskType": task_type}, timeout=request_timeout)
        if not response.ok:
            raise ConfigLoadError(f"Failed to load form config: {response.reason}")
        try:
            return response.json()
        except ValueError as exc:
            raise ConfigLoadError(f"Failed to load form config: invalid JSON from {url}") from exc

    return create_config_loader(_fetch, task_types=task_types)


def load_json_config(path: str | Path) -> FormConfiguration:
    """Load a configuration from a JSON file.

    Raises:
        ConfigLoadError: when the file is missing, unreadable or invalid.
    """

    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigLoadError(f"Failed to load form config from {file_path}: {exc}") from exc
    return coerce_configuration(payload, source=str(file_path))


__all__ = [
    "ConfigLoader",
    "DEFAULT_TASK_TYPES",
    "coerce_configuration",
    "create_api_config_loader",
    "create_config_loader",
    "create_static_config_loader",
    "load_json_config",
]
