"""The named stack instructions; each one acts and then prints its name."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pushswap.stack import Stack


def _emit(name: str, out: Optional[TextIO]) -> None:
    (sys.stdout if out is None else out).write(name + "\n")


def sa(a: Stack, out: Optional[TextIO] = None) -> None:
    """Swap the top two of ``a``."""
    a.swap()
    _emit("sa", out)


def sb(b: Stack, out: Optional[TextIO] = None) -> None:
    """Swap the top two of ``b``."""
    b.swap()
    _emit("sb", out)


def ss(a: Stack, b: Stack, out: Optional[TextIO] = None) -> None:
    """Swap the top two of both stacks."""
    a.swap()
    b.swap()
    _emit("ss", out)


def pa(a: Stack, b: Stack, out: Optional[TextIO] = None) -> None:
    """Move the top of the first stack onto the second."""
    a.push_to(b)
    _emit("pa", out)


def pb(b: Stack, a: Stack, out: Optional[TextIO] = None) -> None:
    """Move the top of the first stack onto the second."""
    b.push_to(a)
    _emit("pb", out)


def ra(a: Stack, out: Optional[TextIO] = None) -> None:
    """Rotate ``a`` upwards: its top goes to the bottom."""
    a.rotate()
    _emit("ra", out)


def rb(b: Stack, out: Optional[TextIO] = None) -> None:
    """Rotate ``b`` upwards: its top goes to the bottom."""
    b.rotate()
    _emit("rb", out)


def rr(a: Stack, b: Stack, out: Optional[TextIO] = None) -> None:
    """Rotate both stacks upwards."""
    a.rotate()
    b.rotate()
    _emit("rr", out)


def rra(a: Stack, out: Optional[TextIO] = None) -> None:
    """Rotate ``a`` downwards: its bottom comes to the top."""
    a.reverse()
    _emit("rra", out)


def rrb(b: Stack, out: Optional[TextIO] = None) -> None:
    """Rotate ``b`` downwards: its bottom comes to the top."""
    b.reverse()
    _emit("rrb", out)


def rrr(a: Stack, b: Stack, out: Optional[TextIO] = None) -> None:
    """Rotate both stacks downwards."""
    a.reverse()
    b.reverse()
    _emit("rrr", out)