"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for content in contents:
            self.push_back(content)

    def push_front(self, content: Any) -> Node:
        """Insert content at the front; return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the back; return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def iter(self, f: Callable[[Any], Any]) -> None:
        """Call f on each content, front to back."""
        for content in self:
            f(content)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to delete if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """A new list holding f(content) for each content.

        If f returns None or raises, the contents mapped so far are passed
        to delete and the error propagates; None raises ValueError.
        """
        result = LinkedList()
        try:
            for content in self:
                mapped = f(content)
                if mapped is None:
                    raise ValueError(f"mapping returned None for {content!r}")
                result.push_back(mapped)
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"