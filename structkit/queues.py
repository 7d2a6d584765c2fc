"""Queues and stacks built from one another, plus classic queue algorithms."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator
from typing import Any

from structkit.linkedlists import Node
from structkit.stacks import Stack


class CircularQueue:
    """A fixed-capacity FIFO queue stored in a ring of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back; raises OverflowError when the ring is full."""
        if self._size == self.capacity:
            raise OverflowError("queue is full")
        self._slots[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._size == 0:
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> Any:
        if self._size == 0:
            raise IndexError("front of empty queue")
        return self._slots[self._head]

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size


class LinkedQueue:
    """A FIFO queue kept as a chain of nodes with head and tail references."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None

    def enqueue(self, value: Any) -> None:
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("dequeue from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        return node.value

    def front(self) -> Any:
        if self._head is None:
            raise IndexError("front of empty queue")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None


class TwoStackQueue:
    """A FIFO queue made of two stacks; push is linear, pop and front constant."""

    def __init__(self) -> None:
        self._main: Stack[Any] = Stack()
        self._spare: Stack[Any] = Stack()

    def push(self, value: Any) -> None:
        while not self._main.is_empty():
            self._spare.push(self._main.pop())
        self._main.push(value)
        while not self._spare.is_empty():
            self._main.push(self._spare.pop())

    def pop(self) -> Any:
        if self._main.is_empty():
            raise IndexError("pop from empty queue")
        return self._main.pop()

    def front(self) -> Any:
        if self._main.is_empty():
            raise IndexError("front of empty queue")
        return self._main.peek()

    def is_empty(self) -> bool:
        return self._main.is_empty()


class DequeQueue:
    """A FIFO queue backed by a deque."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class TwoQueueStack:
    """A LIFO stack made of two queues; push is linear, pop and top constant."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        while self._main:
            self._spare.append(self._main.popleft())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.popleft())

    def pop(self) -> Any:
        if not self._main:
            raise IndexError("pop from empty stack")
        return self._main.popleft()

    def top(self) -> Any:
        if not self._main:
            raise IndexError("top of empty stack")
        return self._main[0]

    def is_empty(self) -> bool:
        return not self._main


class DequeStack:
    """A LIFO stack backed by a deque."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def first_non_repeating(text: str) -> list[str | None]:
    """After each character of ``text``, the first character seen only once so far, or None."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    result: list[str | None] = []
    for ch in text:
        counts[ch] += 1
        pending.append(ch)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        result.append(pending[0] if pending else None)
    return result


def interleave_halves(values: Iterable[Any]) -> list[Any]:
    """Interleave the first half of a queue with the rest, first half leading.

    The queue is rotated one step after each element of the first half is
    appended, so for an odd length the extra element ends up first.
    """
    queue: deque[Any] = deque(values)
    half = len(queue) // 2
    first: deque[Any] = deque(queue.popleft() for _ in range(half))
    while first:
        queue.append(first.popleft())
        queue.append(queue.popleft())
    return list(queue)


def reverse_queue(values: Iterable[Any]) -> list[Any]:
    """Reverse a queue's order by passing it through a stack."""
    queue: deque[Any] = deque(values)
    stack: Stack[Any] = Stack()
    while queue:
        stack.push(queue.popleft())
    while not stack.is_empty():
        queue.append(stack.pop())
    return list(queue)


def _drain(queue: Any) -> Iterator[Any]:
    while not queue.is_empty():
        yield queue.dequeue()