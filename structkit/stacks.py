"""A list-backed stack and classic stack-based algorithms."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from itertools import takewhile
from typing import Generic, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


@dataclass
class Stack(Generic[T]):
    """Last-in, first-out container; ``items`` runs from bottom to top."""

    items: list[T] = field(default_factory=list)

    def push(self, value: T) -> None:
        self.items.append(value)

    def pop(self) -> T:
        if not self.items:
            raise IndexError("pop from empty stack")
        return self.items.pop()

    def peek(self) -> T:
        if not self.items:
            raise IndexError("peek at empty stack")
        return self.items[-1]

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from bottom to top."""
        return iter(self.items)


def push_bottom(stack: Stack[T], value: T) -> None:
    """Place ``value`` underneath every element of ``stack``."""
    if stack.is_empty():
        stack.push(value)
        return
    top = stack.pop()
    push_bottom(stack, value)
    stack.push(top)


def reverse_stack(stack: Stack[T]) -> None:
    """Reverse ``stack`` in place using only push and pop."""
    if stack.is_empty():
        return
    top = stack.pop()
    reverse_stack(stack)
    push_bottom(stack, top)


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing and popping its characters."""
    stack: Stack[str] = Stack(list(text))
    chars = []
    while not stack.is_empty():
        chars.append(stack.pop())
    return "".join(chars)


def has_duplicate_parentheses(expression: str) -> bool:
    """Whether a balanced expression holds a redundant pair of parentheses.

    Raises ValueError on a ')' with no matching '('.
    """
    stack: Stack[str] = Stack()
    for ch in expression:
        if ch != ")":
            stack.push(ch)
            continue
        if stack.is_empty():
            raise ValueError("unmatched ')' in expression")
        if stack.peek() == "(":
            return True
        while True:
            if stack.is_empty():
                raise ValueError("unmatched ')' in expression")
            if stack.pop() == "(":
                break
    return False


def is_valid_parentheses(expression: str) -> bool:
    """Whether ``expression`` consists only of correctly nested (), [] and {}."""
    stack: Stack[str] = Stack()
    for ch in expression:
        if ch in _OPENING:
            stack.push(ch)
            continue
        if stack.is_empty() or _PAIRS.get(ch) != stack.peek():
            return False
        stack.pop()
    return stack.is_empty()


def next_greater(values: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    stack: Stack[int] = Stack()
    result = []
    for value in reversed(values):
        while not stack.is_empty() and value >= stack.peek():
            stack.pop()
        result.append(-1 if stack.is_empty() else stack.peek())
        stack.push(value)
    result.reverse()
    return result


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, how many consecutive days up to it had a price no higher."""
    stack: Stack[int] = Stack()
    spans = []
    for i, price in enumerate(prices):
        while not stack.is_empty() and price >= prices[stack.peek()]:
            stack.pop()
        spans.append(i + 1 if stack.is_empty() else i - stack.peek())
        stack.push(i)
    return spans


def _span_of_last(history: Sequence[int]) -> int:
    today = history[-1]
    return sum(1 for _ in takewhile(lambda p: p <= today, reversed(history)))


def stock_span_naive(prices: Sequence[int]) -> list[int]:
    """Stock spans found by scanning back from each day; quadratic time."""
    return [_span_of_last(prices[: i + 1]) for i in range(len(prices))]


def nearest_smaller_left(heights: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller height to the left of each, or -1."""
    stack: Stack[int] = Stack()
    result = []
    for i, height in enumerate(heights):
        while not stack.is_empty() and height <= heights[stack.peek()]:
            stack.pop()
        result.append(-1 if stack.is_empty() else stack.peek())
        stack.push(i)
    return result


def nearest_smaller_right(heights: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller height to the right of each, or len(heights)."""
    n = len(heights)
    stack: Stack[int] = Stack()
    result = []
    for i in reversed(range(n)):
        while not stack.is_empty() and heights[stack.peek()] >= heights[i]:
            stack.pop()
        result.append(n if stack.is_empty() else stack.peek())
        stack.push(i)
    result.reverse()
    return result


def max_histogram_area(heights: Sequence[int]) -> int:
    """Largest rectangle that fits under a histogram with unit-width bars."""
    left = nearest_smaller_left(heights)
    right = nearest_smaller_right(heights)
    return max(
        (h * (r - l - 1) for h, l, r in zip(heights, left, right)),
        default=0,
    )