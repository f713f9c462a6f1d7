"""A singly linked list of values with the usual head/tail operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list reachable from its ``head`` node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({self.values()!r})"

    def values(self) -> List[Any]:
        """Return the stored values from head to tail."""
        return list(self)

    def add_front(self, node: Optional[Node]) -> None:
        """Put ``node`` in front of the current head; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Link ``node`` after the current last node; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def clear(self, delete: Callable[[Any], None]) -> None:
        """Pass every value, head first, to ``delete`` and empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            delete(node.value)
            node.next = None
            node = following
        self.head = None

    def remove_first(self, delete: Optional[Callable[[Any], None]] = None) -> Optional[Node]:
        """Unlink the head node, passing its value to ``delete``; return the node or None."""
        node = self.head
        if node is None:
            return None
        if delete is not None:
            delete(node.value)
        self.head = node.next
        node.next = None
        return node

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each value from head to tail."""
        for node in list(self._nodes()):
            func(node.value)

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def penultimate(self) -> Optional[Node]:
        """Return the node before the last, or None when there are fewer than two."""
        before: Optional[Node] = None
        current: Optional[Node] = None
        for node in self._nodes():
            before, current = current, node
        return before

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None],
    ) -> "LinkedList":
        """Return a new list of ``func(value)`` for each value.

        If ``func`` fails part-way, the values produced so far are passed to
        ``delete`` and the error is raised again.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for value in self:
                node = Node(func(value))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result