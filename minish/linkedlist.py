"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with front insertion, appending and node swaps."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def append(self, content: Any) -> Node:
        """Add content at the end and return its node."""
        node = Node(content)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def pop_front(self, delete: Callable[[Any], None] | None = None) -> Any:
        """Remove the first element, pass it to delete if given, and return it."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every element, passing each to delete in order if given."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Node], Any]) -> None:
        """Call func on every node in order; func may unlink the node it gets."""
        for node in self._nodes():
            func(node)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to each element."""
        return LinkedList(func(content) for content in self)

    def swap_after(self, prev: Node | None) -> None:
        """Swap the two nodes that follow prev; None swaps the first two."""
        first = self.head if prev is None else prev.next
        if first is None or first.next is None:
            raise ValueError("need two nodes after the given position to swap")
        second = first.next
        first.next = second.next
        second.next = first
        if prev is None:
            self.head = second
        else:
            prev.next = second

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"