"""Rendering components: node tree, UI adapter contract and field renderer."""

from stepforms.components.field_renderer import join_tags, render_field, split_tags
from stepforms.components.nodes import RenderedNode, node
from stepforms.components.ui_adapter import UIComponents, create_node_ui_adapter

__all__ = [
    "RenderedNode",
    "UIComponents",
    "create_node_ui_adapter",
    "join_tags",
    "node",
    "render_field",
    "split_tags",
]
