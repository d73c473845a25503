"""A doubly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One element of a LinkedList."""

    content: Any
    next: ListNode | None = field(default=None, repr=False)
    prev: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """A list of nodes linked both ways, reached from ``head``."""

    def __init__(self, items: Iterable[Any] = ()):
        self.head: ListNode | None = None
        for item in items:
            self.add_back(ListNode(item))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def add_front(self, node: ListNode) -> None:
        """Make ``node`` the new head."""
        node.next = self.head
        node.prev = None
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def add_back(self, node: ListNode) -> None:
        """Attach ``node`` after the last node."""
        tail = self.last()
        if tail is None:
            self.head = node
            node.prev = None
        else:
            tail.next = node
            node.prev = tail

    def last(self) -> ListNode | None:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = node.prev = None
        self.head = None

    def iterate(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """A new list of ``f(content)`` for each content.

        If ``f`` raises, the contents made so far are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(ListNode(f(content)))
        except BaseException:
            result.clear(delete)
            raise
        return result