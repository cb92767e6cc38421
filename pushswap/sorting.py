"""Sorting the integer stacks: reference order, small cases and chunking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, MutableSequence, Optional, TextIO

from pushswap.instructions import pa, ra, rra, sa
from pushswap.stack import Stack


@dataclass
class Chunk:
    """A window of positions in the sorted reference."""

    n: int
    size: int
    start: int
    end: int


def quicksort(values: MutableSequence[int], low: int, high: int) -> None:
    """Sort ``values[low:high + 1]`` in place."""
    if low >= high:
        return
    pivot = values[(low + high) // 2]
    i, j = low, high
    while i <= j:
        while values[i] < pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i <= j:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    if low < j:
        quicksort(values, low, j)
    if i < high:
        quicksort(values, i, high)


def sorted_reference(stack: Stack) -> List[int]:
    """Return the stack's values in ascending order."""
    values = list(stack)
    quicksort(values, 0, len(values) - 1)
    return values


def sort_two(a: Stack, out: Optional[TextIO] = None) -> None:
    """Order a stack of two so its smaller value is on top."""
    if len(a) < 2:
        raise ValueError("sort_two needs at least two elements")
    first, second = list(a)[:2]
    if first > second:
        sa(a, out)


def sort_three(a: Stack, out: Optional[TextIO] = None) -> None:
    """Order a stack of three so it ascends from the top."""
    if len(a) < 3:
        raise ValueError("sort_three needs at least three elements")
    first, second, third = list(a)[:3]
    if first > second > third:
        sa(a, out)
        rra(a, out)
    elif first > second and third > first:
        sa(a, out)
    elif first > third and second > third:
        rra(a, out)
    elif first > third > second:
        ra(a, out)
    elif second > first and second > third:
        sa(a, out)
        ra(a, out)


def init_chunk(stack_size: int) -> Chunk:
    """Return the first chunk for a stack of ``stack_size`` values."""
    if stack_size < 0:
        raise ValueError("stack size must not be negative")
    if stack_size <= 10:
        n = 5
    elif stack_size <= 150:
        n = 8
    else:
        n = 18
    size = stack_size // n
    mid = stack_size // 2
    start = max(mid - size, 0)
    end = min(mid + size, stack_size - 1)
    return Chunk(n=n, size=size, start=start, end=end)


def process_chunk(
    a: Stack,
    b: Stack,
    chunk: Chunk,
    sorted_ref: List[int],
    out: Optional[TextIO] = None,
) -> int:
    """Push from ``a`` to ``b`` while ``a`` holds a value inside the chunk.

    Each push moves the top of ``a``; a pushed value below the middle
    reference value is rotated to the bottom of ``b``. Returns the number
    of values moved.
    """
    if not len(a):
        return 0
    mid = sorted_ref[len(a) // 2]
    low = sorted_ref[chunk.start]
    high = sorted_ref[chunk.end]
    moved = 0
    while any(low <= value <= high for value in a):
        pa(a, b, out)
        moved += 1
        if b.head is not None and b.head < mid:
            ra(b, out)
    return moved


def update_chunk(chunk: Chunk, stack_size: int) -> None:
    """Advance the chunk by its size, keeping it inside ``stack_size``."""
    chunk.start += chunk.size
    chunk.end += chunk.size
    if chunk.start >= stack_size:
        chunk.start = stack_size - 1
    if chunk.end >= stack_size:
        chunk.end = stack_size - 1


def chunk_sort(a: Stack, b: Stack, out: Optional[TextIO] = None) -> None:
    """Move every value of ``a`` to ``b`` chunk by chunk.

    Raises RuntimeError when a pass moves nothing and the chunk can no
    longer advance, since no further pass could make progress.
    """
    sorted_ref = sorted_reference(a)
    chunk = init_chunk(len(a))
    while len(a):
        before = (chunk.start, chunk.end)
        moved = process_chunk(a, b, chunk, sorted_ref, out)
        update_chunk(chunk, len(a))
        if not moved and (chunk.start, chunk.end) == before:
            raise RuntimeError("chunk sort cannot make progress")