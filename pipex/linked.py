"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: its content and the next node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list built from :class:`Node` links."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the head; return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the tail; return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each content to ``delete``, last one first."""
        if delete is not None:
            for content in reversed(list(self)):
                delete(content)
        self.head = None

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], object] | None = None,
    ) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        If ``func`` yields None the contents built so far are released with
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            result.push_back(mapped)
        return result