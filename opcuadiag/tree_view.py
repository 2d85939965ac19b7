"""Address-space tree: labels, selection and the actions nodes raise."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


def _node_class_name(node_class: Any) -> str:
    name = getattr(node_class, "name", None)
    return str(name if isinstance(name, str) else node_class).lower()


def _is_class(node: Any, wanted: str) -> bool:
    return _node_class_name(node.node_class) == wanted


class TreeViewActionKind(enum.Enum):
    SELECT = "select"
    EXPAND = "expand"
    EXPORT_JSON = "export_json"
    EXPORT_CSV = "export_csv"
    ADD_TO_WATCHLIST = "add_to_watchlist"


@dataclass(frozen=True)
class TreeViewAction:
    """A request raised from the tree; EXPAND carries only the node id."""

    kind: TreeViewActionKind
    node: Any = None
    node_id: Any = None


@dataclass
class TreeView:
    """Tree of browsed nodes, with children cached by parent node id."""

    node_cache: Mapping[Any, list] = field(default_factory=dict)
    selected_node_id: Optional[Any] = None

    def label(self, node: Any) -> str:
        icon = getattr(node.node_class, "icon", None)
        prefix = icon() if callable(icon) else ""
        return f"{prefix} {node.display_name}"

    def is_selected(self, node: Any) -> bool:
        return self.selected_node_id is not None and self.selected_node_id == node.node_id

    def context_actions(self, node: Any) -> list[TreeViewAction]:
        """Actions offered in the node's context menu."""
        actions = []
        if node.has_children or _is_class(node, "object"):
            actions.append(TreeViewAction(TreeViewActionKind.EXPORT_JSON, node))
            actions.append(TreeViewAction(TreeViewActionKind.EXPORT_CSV, node))
        if _is_class(node, "variable"):
            actions.append(TreeViewAction(TreeViewActionKind.ADD_TO_WATCHLIST, node))
        return actions

    def click(self, node: Any) -> TreeViewAction:
        return TreeViewAction(TreeViewActionKind.SELECT, node)

    def double_click(self, node: Any) -> list[TreeViewAction]:
        """A double click selects; on a leaf variable it also adds it to the watchlist."""
        actions = [self.click(node)]
        if not node.has_children and _is_class(node, "variable"):
            actions.append(TreeViewAction(TreeViewActionKind.ADD_TO_WATCHLIST, node))
        return actions

    def expand(self, node: Any) -> Optional[TreeViewAction]:
        """Request children not yet loaded; None when they are already cached."""
        if not node.has_children:
            raise ValueError(f"node {node.node_id} has no children to expand")
        if node.node_id in self.node_cache:
            return None
        return TreeViewAction(TreeViewActionKind.EXPAND, node_id=node.node_id)