"""Tests for the singly linked list node."""

from slinkedlist.linkedlist import Node


def test_node_creation() -> None:
    """Test creating a node."""
    node = Node("value1")
    assert node.value == "value1"
    assert node.next is None


def test_node_with_successor() -> None:
    """Test creating a node that links to another."""
    tail = Node(2)
    node = Node(1, tail)
    assert node.next is tail
    assert node.next.value == 2


def test_reading_next_keeps_link() -> None:
    """Test that reading next does not detach the successor."""
    tail = Node(2)
    node = Node(1, tail)
    _ = node.next
    _ = node.next
    assert node.next is tail


def test_display_single_node() -> None:
    """Test rendering a node with no successor."""
    assert Node(7).display() == "7 => "


def test_display_chain() -> None:
    """Test rendering a node and its successors."""
    node = Node(1, Node(2, Node(3)))
    assert node.display() == "1 => 2 => 3 => "
    assert str(node) == node.display()


def test_display_long_chain() -> None:
    """Test rendering a chain longer than the recursion limit."""
    node = Node(0)
    for _ in range(10_000):
        node = Node(0, node)
    assert node.display().count("=>") == 10_001


def test_repr_does_not_walk_chain() -> None:
    """Test that repr shows only the node's own value."""
    node = Node("a", Node("b"))
    assert repr(node) == "Node('a')"
