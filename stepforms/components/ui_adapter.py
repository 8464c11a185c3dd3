"""UI adapter contract and the default node-producing adapter."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Literal, Sequence

from stepforms.components.nodes import RenderedNode, node
from stepforms.core.errors import AdapterConfigurationError

ButtonKind = Literal["button", "submit"]
ButtonVariant = Literal["default", "outline"]

InputRenderer = Callable[..., Any]
TextareaRenderer = Callable[..., Any]
LabelRenderer = Callable[..., Any]
ButtonRenderer = Callable[..., Any]
ProgressRenderer = Callable[..., Any]

_REQUIRED_CAPABILITIES: tuple[str, ...] = ("input", "textarea", "label", "button")
_OPTIONAL_CAPABILITIES: tuple[str, ...] = ("progress_step",)


@dataclass(frozen=True)
class UIComponents:
    """Capability set the engine renders concrete widgets through.

    Expected keyword signatures:

    * ``input(*, id, value, on_change, placeholder, required)``
    * ``textarea(*, id, value, on_change, placeholder, required, rows)``
    * ``label(*, html_for, children)``
    * ``button(*, label, on_click, kind, variant, disabled)``
    * ``progress_step(*, current_step, total_steps)`` (optional)

    Each returns a renderable node; ``progress_step`` may return ``None``
    to suppress the progress region.
    """

    input: InputRenderer
    textarea: TextareaRenderer
    label: LabelRenderer
    button: ButtonRenderer
    progress_step: ProgressRenderer | None = field(default=None)

    def __post_init__(self) -> None:
        missing = [name for name in _REQUIRED_CAPABILITIES if not callable(getattr(self, name))]
        if missing:
            raise AdapterConfigurationError(
                "UI adapter is missing required capabilities: " + ", ".join(missing)
            )
        if self.progress_step is not None and not callable(self.progress_step):
            raise AdapterConfigurationError("UI adapter capability 'progress_step' must be callable")

    @property
    def has_progress(self) -> bool:
        return self.progress_step is not None

    @classmethod
    def from_object(cls, source: object) -> "UIComponents":
        """Build an adapter from any object exposing the capability methods."""

        names = [item.name for item in fields(cls)]
        kwargs = {name: getattr(source, name, None) for name in names}
        return cls(**kwargs)


def _node_input(
    *,
    id: str,
    value: str,
    on_change: Callable[[str], None],
    placeholder: str = "",
    required: bool = False,
) -> RenderedNode:
    return node(
        "input",
        handlers={"change": on_change},
        id=id,
        value=value,
        placeholder=placeholder,
        required=required,
    )


def _node_textarea(
    *,
    id: str,
    value: str,
    on_change: Callable[[str], None],
    placeholder: str = "",
    required: bool = False,
    rows: int = 4,
) -> RenderedNode:
    return node(
        "textarea",
        handlers={"change": on_change},
        id=id,
        value=value,
        placeholder=placeholder,
        required=required,
        rows=rows,
    )


def _node_label(*, html_for: str, children: Sequence[Any]) -> RenderedNode:
    return node("label", *children, html_for=html_for)


def _node_button(
    *,
    label: str,
    on_click: Callable[[], Any],
    kind: ButtonKind = "button",
    variant: ButtonVariant = "default",
    disabled: bool = False,
) -> RenderedNode:
    return node(
        "button",
        label,
        handlers={"click": on_click},
        kind=kind,
        variant=variant,
        disabled=disabled,
    )


def _node_progress(*, current_step: int, total_steps: int) -> RenderedNode:
    return node("progress", current_step=current_step, total_steps=total_steps)


def create_node_ui_adapter(*, with_progress: bool = True) -> UIComponents:
    """Return the default adapter producing plain :class:`RenderedNode` trees."""

    return UIComponents(
        input=_node_input,
        textarea=_node_textarea,
        label=_node_label,
        button=_node_button,
        progress_step=_node_progress if with_progress else None,
    )


__all__ = ["ButtonKind", "ButtonVariant", "UIComponents", "create_node_ui_adapter"]
