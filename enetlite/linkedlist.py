"""Intrusive doubly linked list with a sentinel node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ListNode:
    """A node that can be linked into a LinkedList; carries an optional value."""

    __slots__ = ("value", "next", "previous")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: ListNode = self
        self.previous: ListNode = self

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """A circular list whose end is a sentinel node."""

    def __init__(self) -> None:
        self.sentinel = ListNode()
        self.clear()

    def clear(self) -> None:
        """Forget every node, leaving the list empty."""
        self.sentinel.next = self.sentinel
        self.sentinel.previous = self.sentinel

    def begin(self) -> ListNode:
        """The first node, or the sentinel if the list is empty."""
        return self.sentinel.next

    def end(self) -> ListNode:
        """The sentinel, which follows the last node."""
        return self.sentinel

    def is_empty(self) -> bool:
        return self.sentinel.next is self.sentinel

    def __iter__(self) -> Iterator[ListNode]:
        node = self.sentinel.next
        while node is not self.sentinel:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)


def insert(position: ListNode, node: ListNode) -> ListNode:
    """Link node in just before position and return it."""
    node.previous = position.previous
    node.next = position
    node.previous.next = node
    position.previous = node
    return node


def remove(node: ListNode) -> ListNode:
    """Unlink node from whatever list holds it and return it."""
    node.previous.next = node.next
    node.next.previous = node.previous
    return node


def move(position: ListNode, first: ListNode, last: ListNode) -> ListNode:
    """Splice the run first..last (inclusive) in before position; return first."""
    first.previous.next = last.next
    last.next.previous = first.previous
    first.previous = position.previous
    last.next = position
    first.previous.next = first
    position.previous = last
    return first