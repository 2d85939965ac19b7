"""Property sheet of the selected node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_VARIABLE = "variable"


def _node_class_name(node_class: Any) -> str:
    name = getattr(node_class, "name", None)
    return str(name if isinstance(name, str) else node_class).lower()


def _node_class_text(node_class: Any) -> str:
    icon = getattr(node_class, "icon", None)
    text = str(node_class)
    return f"{icon()} {text}" if callable(icon) else text


@dataclass(frozen=True)
class PropertiesAction:
    """Request to add the node to the watchlist."""

    node: Any


@dataclass
class PropertiesPanel:
    """Shows the attributes of a selected node and its live value if monitored."""

    selected_node: Optional[Any] = None
    monitored_data: Optional[Any] = None

    def rows(self) -> list[tuple[str, str]]:
        """(label, value) pairs for the property grid; empty with no selection."""
        node = self.selected_node
        if node is None:
            return []
        rows = [
            ("Display Name:", node.display_name),
            ("Browse Name:", node.browse_name),
            ("Node ID:", str(node.node_id)),
            ("Node Class:", _node_class_text(node.node_class)),
        ]
        type_definition = getattr(node, "type_definition", None)
        if type_definition is not None:
            rows.append(("Type Def:", str(type_definition)))
        if self.monitored_data is not None:
            rows.append(("Value:", self.monitored_data.value_string()))
            rows.append(("Timestamp:", self.monitored_data.timestamp_string()))
        return rows

    def can_watch(self) -> bool:
        node = self.selected_node
        return node is not None and _node_class_name(node.node_class) == _VARIABLE

    def add_to_watchlist(self) -> PropertiesAction:
        if not self.can_watch():
            raise ValueError("only a selected variable node can be watched")
        return PropertiesAction(self.selected_node)