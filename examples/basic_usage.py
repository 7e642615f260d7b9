"""Basic usage example for slinkedlist."""

import logging

from slinkedlist import InvalidArgumentError, SinglyLinkedList


def main() -> None:
    """Walk through every list operation."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    print("=== Insert and search ===\n")
    numbers = SinglyLinkedList[int]()
    for value in (3, 2, 1):
        numbers.insert_head(value)
    print("Initial list:")
    numbers.display()

    node = numbers.search(2)
    if node is not None:
        numbers.insert_after(node, 5)
    print("After inserting 5 after 2:")
    numbers.display()
    print(f"As a chain: {numbers}\n")

    print("=== Delete ===\n")
    numbers.delete(5)
    print("After deleting 5:")
    numbers.display()
    numbers.delete(1)
    print("After deleting the head (1):")
    numbers.display()
    print()

    print("=== Reverse and deduplicate ===\n")
    chain = SinglyLinkedList[int]()
    for value in (5, 2, 4, 3, 2):
        chain.insert_head(value)
    print("Before reversing:")
    chain.display()
    chain.reverse()
    print("After reversing:")
    chain.display()
    removed = chain.remove_duplicates()
    print(f"After removing {removed} duplicate(s):")
    chain.display()
    print()

    print("=== Nth from end ===\n")
    for n in (1, 3, 4, 5):
        print(f"  nth_from_end({n}) = {chain.nth_from_end(n)}")
    try:
        chain.nth_from_end(0)
    except InvalidArgumentError as exc:
        print(f"  nth_from_end(0) rejected: {exc}")


if __name__ == "__main__":
    main()
