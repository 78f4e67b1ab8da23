"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list; iterating yields the contents front to back."""

    def __init__(self, *args: Any) -> None:
        self.head: Optional[Node] = None
        for content in args:
            self.push_back(content)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def pop_front(self, delete: Optional[Callable[[Any], Any]] = None) -> Any:
        """Remove the first node, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node front to back, passing each content to ``delete``."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content front to back."""
        for content in self:
            func(content)