"""Node type for the singly linked list."""

from typing import Generic, TypeVar

T = TypeVar("T")

# Separator between a value and the rendering of its successor
_LINK = " => "


class Node(Generic[T]):
    """A node in the singly linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Node[T] | None" = None) -> None:
        self.value = value
        self.next = next

    def display(self) -> str:
        """
        Render this node and every node after it.

        Each node contributes ``"<value> => "``; the chain ends in an empty
        string, so ``1 -> 2`` renders as ``"1 => 2 => "``.
        """
        parts: list[str] = []
        current: Node[T] | None = self
        while current is not None:
            parts.append(f"{current.value}{_LINK}")
            current = current.next
        return "".join(parts)

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
