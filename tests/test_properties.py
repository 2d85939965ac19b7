import enum
from dataclasses import dataclass
from typing import Optional

import pytest

from opcuadiag.properties import PropertiesAction, PropertiesPanel


class NodeClass(enum.Enum):
    OBJECT = "Object"
    VARIABLE = "Variable"

    def __str__(self):
        return self.value

    def icon(self):
        return "V" if self is NodeClass.VARIABLE else "O"


@dataclass
class Node:
    display_name: str
    browse_name: str
    node_id: str
    node_class: NodeClass
    type_definition: Optional[str] = None
    has_children: bool = False


class Data:
    def value_string(self):
        return "42.5"

    def timestamp_string(self):
        return "12:00:00"


def variable():
    return Node("Temp", "2:Temp", "ns=2;s=Temp", NodeClass.VARIABLE, "i=63")


def test_no_selection():
    panel = PropertiesPanel(None, None)
    assert panel.rows() == []
    assert not panel.can_watch()
    with pytest.raises(ValueError):
        panel.add_to_watchlist()


def test_rows_for_variable():
    rows = dict(PropertiesPanel(variable()).rows())
    assert rows["Display Name:"] == "Temp"
    assert rows["Browse Name:"] == "2:Temp"
    assert rows["Node ID:"] == "ns=2;s=Temp"
    assert rows["Node Class:"] == "V Variable"
    assert rows["Type Def:"] == "i=63"
    assert "Value:" not in rows


def test_rows_without_type_definition():
    node = Node("Folder", "Folder", "i=85", NodeClass.OBJECT)
    labels = [label for label, _ in PropertiesPanel(node).rows()]
    assert "Type Def:" not in labels
    assert len(labels) == 4


def test_rows_with_monitored_value():
    rows = PropertiesPanel(variable(), Data()).rows()
    assert rows[-2:] == [("Value:", "42.5"), ("Timestamp:", "12:00:00")]


def test_add_to_watchlist_variable():
    node = variable()
    panel = PropertiesPanel(node)
    assert panel.can_watch()
    assert panel.add_to_watchlist() == PropertiesAction(node)


def test_object_cannot_be_watched():
    panel = PropertiesPanel(Node("Objects", "Objects", "i=85", NodeClass.OBJECT))
    assert not panel.can_watch()
    with pytest.raises(ValueError):
        panel.add_to_watchlist()