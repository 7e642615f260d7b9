"""slinkedlist - Singly linked list with in-place reversal, deduplication and k-th-from-end lookup."""

from slinkedlist.core import SinglyLinkedList
from slinkedlist.errors import (
    CorruptedListError,
    InvalidArgumentError,
    LinkedListError,
)
from slinkedlist.linkedlist import Node
from slinkedlist.types import DuplicatePolicy

__version__ = "0.0.1"

__all__ = [
    "SinglyLinkedList",
    "Node",
    "LinkedListError",
    "InvalidArgumentError",
    "CorruptedListError",
    "DuplicatePolicy",
]
