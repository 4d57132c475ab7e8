"""A singly linked list of arbitrary contents.

Contents are stored in ``Node`` objects chained through ``next``. The
list keeps a reference to its first node in ``head``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any = None
    next: Optional[Node] = None

    def discard(self, delete: Optional[Deleter] = None) -> None:
        """Release this node, passing its content to delete when given.

        The node is detached from whatever followed it.
        """
        if delete is not None:
            delete(self.content)
        self.content = None
        self.next = None


class LinkedList:
    """A singly linked list that iterates over its contents in order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content before the first node and return the new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content after the last node and return the new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        self._tail = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        tail = self._tail
        if tail is None or tail.next is not None or self.head is None:
            # Nodes may have been linked by hand; find the end by walking.
            tail = None
            for tail in self._nodes():
                pass
            self._tail = tail
        return tail

    def clear(self, delete: Optional[Deleter] = None) -> None:
        """Remove every node, passing each content to delete when given.

        Contents are released from the last node back to the first.
        """
        for node in reversed(list(self._nodes())):
            node.discard(delete)
        self.head = None
        self._tail = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on each content in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Optional[Deleter] = None) -> LinkedList:
        """A new list holding f applied to each content.

        If f raises, the contents built so far are passed to delete, the
        partial list is cleared, and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"