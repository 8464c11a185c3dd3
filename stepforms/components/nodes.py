"""Framework-neutral render tree produced by the form engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping

Handler = Callable[..., Any]


@dataclass(frozen=True)
class RenderedNode:
    """One element of a rendered form.

    ``kind`` names the element (``"input"``, ``"label"``, ``"form"`` ...),
    ``props`` carries its display attributes and ``children`` holds nested
    nodes or plain strings. Event callbacks live in ``handlers`` and are
    excluded from equality so two renders of the same inputs compare equal.
    """

    kind: str
    props: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Any, ...] = ()
    handlers: Mapping[str, Handler] = field(default_factory=dict, repr=False, compare=False)

    def iter(self) -> Iterator["RenderedNode"]:
        """Yield this node and every nested node depth-first."""

        yield self
        for child in self.children:
            if isinstance(child, RenderedNode):
                yield from child.iter()

    def find_all(self, kind: str) -> list["RenderedNode"]:
        return [node for node in self.iter() if node.kind == kind]

    def find(self, kind: str) -> "RenderedNode | None":
        return next((node for node in self.iter() if node.kind == kind), None)

    def text(self) -> str:
        """Return the concatenated text content of this subtree."""

        parts: list[str] = []
        for child in self.children:
            if isinstance(child, RenderedNode):
                parts.append(child.text())
            elif child is not None:
                parts.append(str(child))
        return " ".join(part for part in parts if part)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the tree without handlers, e.g. for JSON transport."""

        return {
            "kind": self.kind,
            "props": dict(self.props),
            "children": [child.to_dict() if isinstance(child, RenderedNode) else child for child in self.children],
        }


def node(kind: str, /, *children: Any, handlers: Mapping[str, Handler] | None = None, **props: Any) -> RenderedNode:
    """Shorthand constructor that drops ``None`` children."""

    return RenderedNode(
        kind=kind,
        props=props,
        children=tuple(child for child in children if child is not None),
        handlers=dict(handlers or {}),
    )


__all__ = ["Handler", "RenderedNode", "node"]
