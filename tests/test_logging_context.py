from __future__ import annotations

import logging
from typing import Any

from stepforms import create_basic_translation_adapter, create_node_ui_adapter, render_form
from stepforms.utils.logging_context import bind_form_context, configure_logging, current_form_context
from stepforms.wizard import FormFlags


def test_bind_form_context_is_scoped() -> None:
    assert current_form_context() == ("-", "-")
    with bind_form_context("new-project", "basics"):
        assert current_form_context() == ("new-project", "basics")
        with bind_form_context("new-project", " "):
            assert current_form_context() == ("new-project", "-")
    assert current_form_context() == ("-", "-")


def test_blocked_submit_logs_with_form_context(caplog: Any, sample_config, recorder) -> None:
    configure_logging()
    caplog.set_level(logging.INFO, logger="stepforms.wizard.validation")

    tree = render_form(
        sample_config,
        0,
        {},
        recorder.callbacks(),
        FormFlags(is_first_step=True, is_last_step=False),
        create_node_ui_adapter(),
        create_basic_translation_adapter(),
    )
    tree.find("form").handlers["submit"]()

    records = [record for record in caplog.records if record.name == "stepforms.wizard.validation"]
    assert records, "Expected a log entry for the blocked submit"
    record = records[0]
    assert record.form_id == "new-project"
    assert record.form_step == "basics"
