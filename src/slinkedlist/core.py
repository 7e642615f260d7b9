"""Main SinglyLinkedList implementation."""

import logging
from collections.abc import Iterator
from typing import Generic, TextIO, TypeVar, get_args

from slinkedlist.errors import CorruptedListError, InvalidArgumentError
from slinkedlist.linkedlist import Node
from slinkedlist.types import DuplicatePolicy

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _is_hashable(value: object) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


class _SeenValues(Generic[T]):
    """Membership tracker used while removing duplicates."""

    def __init__(self, policy: DuplicatePolicy) -> None:
        self._policy = policy
        self._hashed: set[object] = set()
        self._unhashable: list[T] = []

    def add(self, value: T) -> None:
        if self._policy == "identity":
            self._hashed.add(id(value))
        elif _is_hashable(value):
            self._hashed.add(value)
        else:
            self._unhashable.append(value)

    def __contains__(self, value: T) -> bool:
        if self._policy == "identity":
            return id(value) in self._hashed
        # Hashable and unhashable values can still compare equal (frozenset vs set)
        if any(seen == value for seen in self._unhashable):
            return True
        if _is_hashable(value):
            return value in self._hashed
        return any(seen == value for seen in self._hashed)


class SinglyLinkedList(Generic[T]):
    """
    Singly linked list with head insertion, splicing and in-place algorithms.

    The list owns its node chain: the only entry point is ``head`` and every
    other node is reachable from exactly one predecessor. Nodes handed out by
    ``search``/``insert_*`` are plain references and may be used as anchors
    for ``insert_after`` while they are still part of the list.

    Not thread-safe; guard the whole list externally if it is shared.
    """

    def __init__(self, *, dedupe_by: DuplicatePolicy = "equality") -> None:
        """
        Initialize an empty list.

        Args:
            dedupe_by: How remove_duplicates compares values:
                - "equality": values equal under == are duplicates (default)
                - "identity": only the very same object is a duplicate

        Raises:
            InvalidArgumentError: If dedupe_by is not a known policy
        """
        if dedupe_by not in get_args(DuplicatePolicy):
            raise InvalidArgumentError(f"Unknown duplicate policy: {dedupe_by!r}")
        self._head: Node[T] | None = None
        self._dedupe_by = dedupe_by

    @property
    def head(self) -> Node[T] | None:
        """The first node of the list, or None if the list is empty."""
        return self._head

    def insert_head(self, value: T) -> Node[T]:
        """
        Insert a value at the front of the list. O(1).

        Returns:
            The newly created head node
        """
        node = Node(value, self._head)
        self._head = node
        logger.debug("Inserted %r at head", value)
        return node

    def insert_after(self, anchor: Node[T] | None, value: T) -> Node[T]:
        """
        Insert a value directly after ``anchor``. O(1).

        Args:
            anchor: A node currently in this list
            value: Value to insert

        Returns:
            The newly created node

        Raises:
            InvalidArgumentError: If anchor is None or not a Node
        """
        if anchor is None:
            raise InvalidArgumentError("Anchor node must not be None")
        if not isinstance(anchor, Node):
            raise InvalidArgumentError(f"Anchor must be a Node, got {type(anchor).__name__}")

        node = Node(value, anchor.next)
        anchor.next = node
        logger.debug("Inserted %r after %r", value, anchor)
        return node

    def delete(self, value: T) -> Node[T] | None:
        """
        Remove the first node whose value equals ``value``. O(n).

        Values are compared with ``==``, so ``1``, ``1.0`` and ``True`` all
        match each other. The detached node keeps its ``next`` link, so an
        iteration that is sitting on it carries on into the rest of the list.

        Returns:
            The detached node, or None if no node matched
        """
        previous: Node[T] | None = None
        current = self._head
        while current is not None and current.value != value:
            previous = current
            current = current.next

        if current is None:
            return None

        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        logger.debug("Deleted %r", value)
        return current

    def search(self, value: T) -> Node[T] | None:
        """
        Return the first node whose value equals ``value``, or None. O(n).

        Values are compared with ``==``, so ``search(True)`` finds a node
        holding ``1``.
        """
        current = self._head
        while current is not None:
            if current.value == value:
                return current
            current = current.next
        return None

    def display(self, file: TextIO | None = None) -> None:
        """Write the values head to tail on one space-separated line."""
        print(" ".join(str(value) for value in self), file=file)

    def reverse(self) -> None:
        """Reverse the list in place. O(n) time, O(1) extra space."""
        previous: Node[T] | None = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous
        logger.debug("Reversed list")

    def remove_duplicates(self) -> int:
        """
        Unlink every node whose value already appeared earlier in the list.

        First occurrences keep their relative order. O(n) time and space
        (O(n^2) once unhashable values appear under the "equality" policy).
        Under "equality", ``1`` and ``True`` count as the same value.

        Returns:
            Number of nodes removed

        Raises:
            CorruptedListError: If a duplicate is found before any node was kept
        """
        seen: _SeenValues[T] = _SeenValues(self._dedupe_by)
        kept: Node[T] | None = None
        current = self._head
        removed = 0
        while current is not None:
            following = current.next
            if current.value in seen:
                if kept is None:
                    logger.warning("Duplicate %r found with no preceding node", current.value)
                    raise CorruptedListError("Duplicate found before any node was kept")
                kept.next = following
                current.next = None
                removed += 1
            else:
                seen.add(current.value)
                kept = current
            current = following

        if removed:
            logger.debug("Removed %d duplicate node(s)", removed)
        return removed

    def nth_from_end(self, n: int) -> T | None:
        """
        Return the value ``n`` positions from the end (1 is the last value).

        Uses a lead cursor ``n`` nodes ahead of a trail cursor, so the list is
        walked once without knowing its length.

        Returns:
            The value, or None if the list has fewer than ``n`` nodes

        Raises:
            InvalidArgumentError: If n is not a positive integer
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgumentError(f"n must be an int, got {type(n).__name__}")
        if n <= 0:
            raise InvalidArgumentError(f"n must be greater than 0, got {n}")

        lead = self._head
        for _ in range(n):
            if lead is None:
                return None
            lead = lead.next

        trail = self._head
        while lead is not None and trail is not None:
            lead = lead.next
            trail = trail.next
        return trail.value if trail is not None else None

    def values(self) -> list[T]:
        """Return the values head to tail as a new list."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        """Yield the values from head to tail."""
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        """Return the number of nodes in the list. O(n)."""
        count = 0
        current = self._head
        while current is not None:
            count += 1
            current = current.next
        return count

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._head is not None

    def __str__(self) -> str:
        return f"=> {self._head.display() if self._head is not None else ''}"

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self.values()!r})"
