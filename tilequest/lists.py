"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a list: a value and the link that follows it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that can grow at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start and return its node."""
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

    def last(self) -> Node | None:
        """The final node, or None when the list is empty."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def clear(self, release: Callable[[Any], object] | None = None) -> None:
        """Empty the list, handing each value to ``release`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every value, front to back."""
        for content in self:
            func(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())