"""The integer stacks the sorting instructions operate on."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional, Union

from pushswap.chars import atoi


class Stack:
    """A stack of integers whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    @property
    def head(self) -> Optional[int]:
        """The top element, or None when the stack is empty."""
        return self._items[0] if self._items else None

    def add(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._items.appendleft(value)

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def push_to(self, dest: "Stack") -> None:
        """Move the top element onto ``dest``; does nothing when empty."""
        if not self._items:
            return
        dest._items.appendleft(self._items.popleft())

    def rotate(self) -> None:
        """Move the top element to the bottom; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        self._items.rotate(-1)

    def reverse(self) -> None:
        """Move the bottom element to the top; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        self._items.rotate(1)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"


def build_stack(values: Iterable[Union[str, int]]) -> Stack:
    """Build a stack whose top is the first of ``values``.

    Text values are converted with C ``atoi`` rules.
    """
    stack = Stack()
    for value in reversed(list(values)):
        stack.add(atoi(value) if isinstance(value, str) else int(value))
    return stack