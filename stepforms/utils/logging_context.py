from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

_DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [form=%(form_id)s step=%(form_step)s] %(name)s: %(message)s"

_form_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("form_id", default="-")
_form_step_var: contextvars.ContextVar[str] = contextvars.ContextVar("form_step", default="-")
_DEFAULT_RECORD_FACTORY = logging.getLogRecordFactory()
_RECORD_FACTORY_INSTALLED = False


def _apply_context(record: logging.LogRecord) -> None:
    record.form_id = _form_id_var.get("-")
    record.form_step = _form_step_var.get("-")


class _ContextFilter(logging.Filter):
    """Inject form context fields into log records for consistent formatting."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        _apply_context(record)
        return True


def _coerce(value: str | None) -> str:
    if value is None:
        return "-"
    stripped = value.strip()
    return stripped or "-"


def configure_logging(*, level: int | str = logging.INFO) -> None:
    """Ensure the root logger formats records with form context metadata."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_DEFAULT_LOG_FORMAT)
        root = logging.getLogger()
    else:
        root.setLevel(level)
    for handler in root.handlers:
        formatter = handler.formatter or logging.Formatter(_DEFAULT_LOG_FORMAT)
        handler.setFormatter(formatter)
    has_filter = any(isinstance(flt, _ContextFilter) for flt in root.filters)
    if not has_filter:
        root.addFilter(_ContextFilter())
    global _RECORD_FACTORY_INSTALLED
    if not _RECORD_FACTORY_INSTALLED:
        default_factory = _DEFAULT_RECORD_FACTORY

        def _record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
            record = default_factory(*args, **kwargs)
            _apply_context(record)
            return record

        logging.setLogRecordFactory(_record_factory)
        _RECORD_FACTORY_INSTALLED = True


@contextmanager
def bind_form_context(form_id: str | None, step_id: str | None) -> Iterator[None]:
    """Temporarily bind the form and step identifiers to log records."""

    form_token = _form_id_var.set(_coerce(form_id))
    step_token = _form_step_var.set(_coerce(step_id))
    try:
        yield
    finally:
        _form_step_var.reset(step_token)
        _form_id_var.reset(form_token)


def current_form_context() -> tuple[str, str]:
    """Return the ``(form_id, step_id)`` pair bound to the current context."""

    return _form_id_var.get("-"), _form_step_var.get("-")


__all__ = ["bind_form_context", "configure_logging", "current_form_context"]
