import enum
from dataclasses import dataclass

import pytest

from opcuadiag.tree_view import TreeView, TreeViewAction, TreeViewActionKind


class NodeClass(enum.Enum):
    OBJECT = "Object"
    VARIABLE = "Variable"
    METHOD = "Method"

    def icon(self):
        return {"Object": "O", "Variable": "V", "Method": "M"}[self.value]


@dataclass(frozen=True)
class Node:
    node_id: str
    display_name: str
    node_class: NodeClass
    has_children: bool = False


FOLDER = Node("i=85", "Objects", NodeClass.OBJECT, True)
VAR = Node("ns=2;s=Temp", "Temp", NodeClass.VARIABLE)
VAR_WITH_CHILDREN = Node("ns=2;s=Arr", "Arr", NodeClass.VARIABLE, True)
METHOD = Node("ns=2;s=Run", "Run", NodeClass.METHOD)


def kinds(actions):
    return [a.kind for a in actions]


def test_label_uses_icon():
    tree = TreeView()
    assert tree.label(VAR) == "V Temp"
    assert tree.label(FOLDER) == "O Objects"


def test_is_selected():
    tree = TreeView({}, "ns=2;s=Temp")
    assert tree.is_selected(VAR)
    assert not tree.is_selected(FOLDER)
    assert not TreeView().is_selected(VAR)


def test_context_actions_object():
    assert kinds(TreeView().context_actions(FOLDER)) == [
        TreeViewActionKind.EXPORT_JSON,
        TreeViewActionKind.EXPORT_CSV,
    ]


def test_context_actions_variable():
    actions = TreeView().context_actions(VAR)
    assert actions == [TreeViewAction(TreeViewActionKind.ADD_TO_WATCHLIST, VAR)]


def test_context_actions_variable_with_children():
    assert kinds(TreeView().context_actions(VAR_WITH_CHILDREN)) == [
        TreeViewActionKind.EXPORT_JSON,
        TreeViewActionKind.EXPORT_CSV,
        TreeViewActionKind.ADD_TO_WATCHLIST,
    ]


def test_context_actions_method_empty():
    assert TreeView().context_actions(METHOD) == []


def test_click_selects():
    action = TreeView().click(METHOD)
    assert action.kind is TreeViewActionKind.SELECT
    assert action.node == METHOD


def test_double_click_leaf_variable_adds_to_watchlist():
    assert kinds(TreeView().double_click(VAR)) == [
        TreeViewActionKind.SELECT,
        TreeViewActionKind.ADD_TO_WATCHLIST,
    ]


def test_double_click_other_nodes_only_select():
    tree = TreeView()
    assert kinds(tree.double_click(FOLDER)) == [TreeViewActionKind.SELECT]
    assert kinds(tree.double_click(VAR_WITH_CHILDREN)) == [TreeViewActionKind.SELECT]


def test_expand_requests_uncached_children():
    action = TreeView().expand(FOLDER)
    assert action == TreeViewAction(TreeViewActionKind.EXPAND, node_id="i=85")


def test_expand_cached_returns_none():
    tree = TreeView({"i=85": [VAR]})
    assert tree.expand(FOLDER) is None


def test_expand_leaf_raises():
    with pytest.raises(ValueError):
        TreeView().expand(VAR)