"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, its tail and its length."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert content before the first node and return the new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content after the last node and return the new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, pass its content to delete, and return it.

        Raises IndexError when the list is empty.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node in order, passing each content to delete."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content from first to last."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding func applied to every content.

        If func raises, the contents already mapped are passed to delete,
        in order, and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"