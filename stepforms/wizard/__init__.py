"""Form engine: step composition, navigation and validation."""

from stepforms.wizard.form import FormCallbacks, render_form
from stepforms.wizard.navigation import FormFlags, FormOverrides, NavigationDirection
from stepforms.wizard.validation import SubmissionResult, is_value_missing, submit_step

__all__ = [
    "FormCallbacks",
    "FormFlags",
    "FormOverrides",
    "NavigationDirection",
    "SubmissionResult",
    "is_value_missing",
    "render_form",
    "submit_step",
]
