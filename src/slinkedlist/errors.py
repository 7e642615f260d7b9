"""Exception classes for slinkedlist."""


class LinkedListError(Exception):
    """Base exception for all slinkedlist errors."""


class InvalidArgumentError(LinkedListError, ValueError):
    """Raised when an operation receives an argument it cannot act on."""


class CorruptedListError(LinkedListError):
    """Raised when a node chain violates the list's structural invariants."""
