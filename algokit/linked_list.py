"""Singly and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A list node holding one value and a link to the next node."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
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

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} out of range")

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_at_beginning(self, data: Any) -> None:
        """Put ``data`` in front of the list."""
        self.head = Node(data, self.head)

    def insert_at_end(self, data: Any) -> None:
        """Append ``data`` after the last node."""
        node = Node(data)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_at_position(self, data: Any, position: int) -> None:
        """Insert ``data`` so that it ends up at 1-based ``position``."""
        if position < 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_at_beginning(data)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(data, previous.next)

    def delete_at_beginning(self) -> None:
        """Drop the first node; an empty list is left alone."""
        if self.head is not None:
            self.head = self.head.next

    def delete_at_end(self) -> None:
        """Drop the last node; an empty list is left alone."""
        if self.head is None:
            return
        if self.head.next is None:
            self.head = None
            return
        previous = self.head
        while previous.next is not None and previous.next.next is not None:
            previous = previous.next
        previous.next = None

    def delete_at_position(self, position: int) -> None:
        """Drop the node at 1-based ``position``; an empty list is left alone."""
        if self.head is None:
            return
        if position < 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.delete_at_beginning()
            return
        previous = self._node_at(position - 1)
        if previous.next is None:
            raise IndexError(f"position {position} out of range")
        previous.next = previous.next.next

    def delete_at_index(self, index: int) -> None:
        """Drop the node at 0-based ``index``."""
        if index < 0 or self.head is None:
            raise IndexError(f"index {index} out of range")
        self.delete_at_position(index + 1)

    def delete_value(self, value: Any) -> bool:
        """Unlink the first node holding ``value``; return whether one was found."""
        previous: Node | None = None
        for node in self._nodes():
            if node.data == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return True
            previous = node
        return False

    def reverse(self) -> None:
        """Reverse the links in place."""
        previous: Node | None = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the links in place, one recursive call per node."""
        if self.head is not None:
            self.head = self._reverse_from(self.head)

    @staticmethod
    def _reverse_from(node: Node) -> Node:
        if node.next is None:
            return node
        new_head = SinglyLinkedList._reverse_from(node.next)
        node.next.next = node
        node.next = None
        return new_head


class CircularLinkedList:
    """A singly linked list whose last node links back to the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        last: Node | None = None
        for value in values:
            node = Node(value)
            if last is None:
                self.head = node
            else:
                last.next = node
            last = node
        if last is not None:
            last.next = self.head

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        if node is None:
            return
        while True:
            yield node
            node = node.next
            if node is self.head:
                return

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_at_start(self, data: Any) -> None:
        """Make a node holding ``data`` the new head."""
        node = Node(data)
        if self.head is None:
            node.next = node
        else:
            last = self.head
            while last.next is not self.head:
                last = last.next
            last.next = node
            node.next = self.head
        self.head = node