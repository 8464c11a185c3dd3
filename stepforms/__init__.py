"""Configuration-driven, framework-agnostic multi-step form engine.

Importing the package has no side effects and needs no UI framework. Config
loaders live in :mod:`stepforms.config_loader`; Streamlit integration lives in
:mod:`stepforms.state` and :mod:`stepforms.components.streamlit_view`.
"""

from stepforms.components import RenderedNode, UIComponents, create_node_ui_adapter, render_field
from stepforms.core.errors import (
    AdapterConfigurationError,
    ConfigLoadError,
    ConfigNotFoundError,
    FormConfigurationError,
    StepFormsError,
    StepIndexError,
    TranslationProviderMissingError,
)
from stepforms.models import (
    FieldOption,
    FieldType,
    FormConfiguration,
    FormField,
    FormStep,
    FormTexts,
    lint_configuration,
)
from stepforms.utils.i18n import (
    TranslationAdapter,
    create_basic_translation_adapter,
    create_host_translation_adapter,
)
from stepforms.wizard import (
    FormCallbacks,
    FormFlags,
    FormOverrides,
    SubmissionResult,
    render_form,
    submit_step,
)

__version__ = "0.1.0"

__all__ = [
    "AdapterConfigurationError",
    "ConfigLoadError",
    "ConfigNotFoundError",
    "FieldOption",
    "FieldType",
    "FormCallbacks",
    "FormConfiguration",
    "FormConfigurationError",
    "FormField",
    "FormFlags",
    "FormOverrides",
    "FormStep",
    "FormTexts",
    "RenderedNode",
    "StepFormsError",
    "StepIndexError",
    "SubmissionResult",
    "TranslationAdapter",
    "TranslationProviderMissingError",
    "UIComponents",
    "create_basic_translation_adapter",
    "create_host_translation_adapter",
    "create_node_ui_adapter",
    "lint_configuration",
    "render_field",
    "render_form",
    "submit_step",
]
