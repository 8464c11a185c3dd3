"""Typed helpers for the test-suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stepforms import FormCallbacks


@dataclass
class CallbackRecorder:
    """Collects every host callback the engine triggers."""

    patches: list[dict[str, Any]] = field(default_factory=list)
    next_calls: int = 0
    previous_calls: int = 0
    errors: list[str] = field(default_factory=list)

    def on_next(self) -> None:
        self.next_calls += 1

    def on_previous(self) -> None:
        self.previous_calls += 1

    def callbacks(self) -> FormCallbacks:
        return FormCallbacks(
            on_data_change=self.patches.append,
            on_next=self.on_next,
            on_previous=self.on_previous,
            on_validation_error=self.errors.append,
        )


SAMPLE_CONFIG: dict[str, Any] = {
    "id": "new-project",
    "templateName": "new_project_template",
    "steps": [
        {
            "id": "basics",
            "title": "Basics",
            "description": "Tell us about the project",
            "fields": [
                {"name": "email", "type": "input", "label": "Email", "required": True, "icon": "@"},
                {
                    "name": "kind",
                    "type": "select",
                    "label": "Kind",
                    "required": False,
                    "options": [
                        {"value": "web", "label": "Web"},
                        {"value": "cli", "label": "CLI"},
                    ],
                },
            ],
        },
        {
            "id": "details",
            "title": "Details",
            "description": "Scope and stack",
            "fields": [
                {"name": "summary", "type": "textarea", "label": "Summary", "required": True},
                {"name": "stack", "type": "tags", "label": "Stack", "required": True},
                {"name": "public", "type": "checkbox", "label": "Public", "required": False},
            ],
        },
    ],
}
