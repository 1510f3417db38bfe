import pytest

from galgo.tree import Node


def test_append_adds_children_in_order():
    root = Node("root")
    root.append("a")
    root.append("b")
    assert len(root) == 2
    assert [child.value for child in root.children] == ["a", "b"]


def test_append_returns_new_child():
    root = Node(1)
    child = root.append(2)
    assert root.child(0) is child
    assert child.value == 2
    assert len(child) == 0


def test_append_node():
    root = Node(1)
    node = Node(7)
    root.append_node(node)
    assert root.child(0) is node


def test_child_past_end_is_none():
    root = Node(1)
    root.append(2)
    assert root.child(1) is None
    assert Node(1).child(0) is None


def test_child_negative_index_raises():
    with pytest.raises(IndexError):
        Node(1).child(-1)


def test_remove_by_identity():
    root = Node(0)
    first = Node(5)
    second = Node(5)
    root.append_node(first)
    root.append_node(second)
    assert root.remove(second) is second
    assert len(root) == 1
    assert root.child(0) is first


def test_remove_absent_returns_none():
    root = Node(0)
    root.append(1)
    assert root.remove(Node(1)) is None
    assert len(root) == 1