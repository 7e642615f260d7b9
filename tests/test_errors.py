"""Tests for the exception hierarchy."""

import pytest

from slinkedlist import CorruptedListError, InvalidArgumentError, LinkedListError, SinglyLinkedList


def test_errors_share_base_class() -> None:
    """Test that every package error derives from LinkedListError."""
    assert issubclass(InvalidArgumentError, LinkedListError)
    assert issubclass(CorruptedListError, LinkedListError)


def test_invalid_argument_is_value_error() -> None:
    """Test that invalid arguments can be caught as ValueError."""
    assert issubclass(InvalidArgumentError, ValueError)


def test_errors_catchable_by_base_class() -> None:
    """Test catching a raised error through the base class."""
    lst = SinglyLinkedList[int]()
    with pytest.raises(LinkedListError, match="greater than 0"):
        lst.nth_from_end(0)
    with pytest.raises(LinkedListError, match="must not be None"):
        lst.insert_after(None, 1)
