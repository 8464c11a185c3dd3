from __future__ import annotations

import pytest

from stepforms import FormStep, create_basic_translation_adapter
from stepforms.wizard.validation import find_missing_required_fields, is_value_missing, submit_step


@pytest.mark.parametrize("value", [None, "", False, 0, [], (), set()])
def test_missing_values(value: object) -> None:
    assert is_value_missing(value) is True


@pytest.mark.parametrize("value", ["x", " ", True, 1, ["a"], ("a",)])
def test_present_values(value: object) -> None:
    assert is_value_missing(value) is False


def _step() -> FormStep:
    return FormStep.model_validate(
        {
            "id": "s1",
            "title": "Step",
            "fields": [
                {"name": "a", "type": "input", "label": "A", "required": True},
                {"name": "b", "type": "input", "label": "B", "required": False},
                {"name": "c", "type": "tags", "label": "C", "required": True},
            ],
        }
    )


def test_only_required_fields_are_checked() -> None:
    missing = find_missing_required_fields(_step(), {"c": ["x"]})
    assert [field.name for field in missing] == ["a"]


def test_fields_outside_step_are_ignored() -> None:
    missing = find_missing_required_fields(_step(), {"a": "1", "c": ["x"], "other": None})
    assert missing == []


def test_blocked_submit_always_reports_message() -> None:
    calls: list[int] = []
    messages: list[str] = []
    result = submit_step(
        _step(),
        {},
        create_basic_translation_adapter(),
        on_next=lambda: calls.append(1),
        on_validation_error=messages.append,
    )

    assert calls == []
    assert messages == ["Please fill in all required fields: A, C"]
    assert result.accepted is False
    assert result.missing_fields == ("a", "c")
    assert result.message == "Please fill in all required fields: A, C"


def test_submit_calls_on_next_once() -> None:
    calls: list[int] = []
    result = submit_step(
        _step(),
        {"a": "1", "c": ["x"]},
        create_basic_translation_adapter(),
        on_next=lambda: calls.append(1),
        on_validation_error=lambda message: pytest.fail(message),
    )
    assert result.accepted is True
    assert result.message is None
    assert calls == [1]


def test_error_callback_is_required() -> None:
    with pytest.raises(TypeError):
        submit_step(_step(), {}, create_basic_translation_adapter(), on_next=lambda: None)  # type: ignore[call-arg]
