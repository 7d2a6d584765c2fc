"""Singly and doubly linked lists, plus algorithms on raw node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked chain; nodes compare by identity."""

    value: Any
    next: Node | None = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked chain; nodes compare by identity."""

    value: Any
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


def _walk(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


class SinglyLinkedList:
    """A singly linked list that tracks both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        node = Node(value, self.head)
        if self.head is None:
            self.tail = node
        self.head = node

    def push_back(self, value: Any) -> None:
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head is self.tail:
            value = self.head.value
            self.head = self.tail = None
            return value
        before = self.head
        while before.next is not self.tail:
            before = before.next
        value = before.next.value
        before.next = None
        self.tail = before
        return value

    def index_of(self, key: Any) -> int:
        """Position of the first node holding ``key``, or -1."""
        return next((i for i, value in enumerate(self) if value == key), -1)

    def index_of_recursive(self, key: Any) -> int:
        """Position of the first node holding ``key``, or -1, found by recursion."""

        def search(node: Node | None) -> int:
            if node is None:
                return -1
            if node.value == key:
                return 0
            idx = search(node.next)
            return -1 if idx == -1 else idx + 1

        return search(self.head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.tail = self.head
        self.head = reverse_chain(self.head)

    def remove_nth_from_end(self, position: int) -> Any:
        """Remove and return the value ``position`` places from the end, counting from 1."""
        n = len(self)
        if not 1 <= position <= n:
            raise IndexError("position out of range")
        if position == n:
            return self.pop_front()
        before = self.head
        for _ in range(n - position - 1):
            before = before.next
        target = before.next
        before.next = target.next
        if target is self.tail:
            self.tail = before
        target.next = None
        return target.value

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _walk(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "null"


class DoublyLinkedList:
    """A doubly linked list supporting insertion and removal at the front."""

    def __init__(self) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None

    def push_front(self, value: Any) -> None:
        node = DoublyNode(value)
        if self.head is None:
            self.head = self.tail = node
            return
        node.next = self.head
        self.head.prev = node
        self.head = node

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        if node is self.tail:
            self.head = self.tail = None
            return node.value
        self.head = node.next
        self.head.prev = None
        node.next = None
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{value} <-> " for value in self) + "null"


def build_chain(values: Iterable[Any]) -> Node | None:
    """Link ``values`` into a fresh chain and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def chain_values(head: Node | None) -> list[Any]:
    """Values of a chain in order; raises ValueError if the chain loops."""
    seen: set[int] = set()
    values = []
    for node in _walk(head):
        if id(node) in seen:
            raise ValueError("chain contains a cycle")
        seen.add(id(node))
        values.append(node.value)
    return values


def has_cycle(head: Node | None) -> bool:
    """Detect a loop with the slow/fast pointer method."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_cycle(head: Node | None) -> bool:
    """Break a loop in the chain, if there is one; returns whether one was removed."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False

    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next
        fast.next = None
    else:
        prev = fast
        while slow is not fast:
            slow = slow.next
            prev = fast
            fast = fast.next
        prev.next = None
    return True


def split_at_middle(head: Node | None) -> Node | None:
    """Cut the chain before its middle node and return the second half.

    The second half gets the middle node of an odd-length chain. A chain of a
    single node is returned unchanged.
    """
    slow = fast = head
    before: Node | None = None
    while fast is not None and fast.next is not None:
        before = slow
        slow = slow.next
        fast = fast.next.next
    if before is not None:
        before.next = None
    return slow


def merge_sorted(left: Node | None, right: Node | None) -> Node | None:
    """Merge two sorted chains into a new sorted chain; ties favour ``left``."""

    def merged() -> Iterator[Any]:
        a, b = left, right
        while a is not None and b is not None:
            if a.value <= b.value:
                yield a.value
                a = a.next
            else:
                yield b.value
                b = b.next
        rest = a if a is not None else b
        yield from (node.value for node in _walk(rest))

    return build_chain(merged())


def merge_sort(head: Node | None) -> Node | None:
    """Sort a chain by merge sort and return the head of the sorted chain."""
    if head is None or head.next is None:
        return head
    right = split_at_middle(head)
    return merge_sorted(merge_sort(head), merge_sort(right))


def reverse_chain(head: Node | None) -> Node | None:
    """Reverse a chain in place and return its new head."""
    prev: Node | None = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev