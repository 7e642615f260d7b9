"""Type definitions for slinkedlist."""

from typing import Literal, TypeAlias, TypeVar

# Generic type variable for stored values
T = TypeVar("T")

# How remove_duplicates decides two values are the same
DuplicatePolicy: TypeAlias = Literal["equality", "identity"]
