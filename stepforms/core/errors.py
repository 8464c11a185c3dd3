"""Custom exception types for configuration, adapters and loading."""

from __future__ import annotations


class StepFormsError(Exception):
    """Base exception for form engine related issues."""


class FormConfigurationError(StepFormsError):
    """Raised when a form configuration cannot be used as requested."""


class StepIndexError(FormConfigurationError, IndexError):
    """Raised when a step index falls outside the configured steps."""

    def __init__(self, index: int, total: int) -> None:
        super().__init__(f"Step index {index} is out of range for a form with {total} step(s)")
        self.index = index
        self.total = total


class AdapterConfigurationError(StepFormsError):
    """Raised when a UI or translation adapter is constructed incorrectly."""


MISSING_PROVIDER_MESSAGE = (
    "A host translation provider is required for create_host_translation_adapter. "
    "Pass a provider or use create_basic_translation_adapter instead."
)


class TranslationProviderMissingError(AdapterConfigurationError):
    """Raised when the host translation adapter is built without a provider."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or MISSING_PROVIDER_MESSAGE)


class ConfigLoadError(StepFormsError):
    """Raised when a form configuration could not be resolved."""


class ConfigNotFoundError(ConfigLoadError, LookupError):
    """Raised when no configuration exists for the requested task type."""

    def __init__(self, task_type: str) -> None:
        super().__init__(f"No configuration found for task type: {task_type}")
        self.task_type = task_type
