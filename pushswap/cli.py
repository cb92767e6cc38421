"""Command entry point: read numbers, sort them by chunks, report the result."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from pushswap.parsing import ParseError, split_args, validate_args
from pushswap.sorting import chunk_sort, sorted_reference
from pushswap.stack import Stack, build_stack

_PROGRAM = "push_swap"


def format_stack(stack: Stack) -> str:
    """One value per line, top first, followed by a blank line."""
    return "".join(f"{value}\n" for value in stack) + "\n"


def format_sorted_reference(values: Iterable[int]) -> str:
    """The values separated and followed by spaces, then a newline."""
    return "".join(f"{value} " for value in values) + "\n"


def check_order(b: Stack, sorted_ref: List[int], out: Optional[TextIO] = None) -> bool:
    """Report whether ``b`` matches the sorted reference from the top down."""
    stream = sys.stdout if out is None else out
    values = list(b)
    if len(values) > len(sorted_ref) or any(
        value != expected for value, expected in zip(values, sorted_ref)
    ):
        stream.write("L'ordre n'est pas correct.\n")
        return False
    stream.write("L'ordre est bon\n")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args_in = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    try:
        args = split_args([_PROGRAM, *args_in])
        validate_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    a = build_stack(args)
    b = Stack()
    out.write("Stack a:\n")
    out.write(format_stack(a))
    sorted_ref = sorted_reference(a)
    out.write(format_sorted_reference(sorted_ref))
    try:
        chunk_sort(a, b, out)
    except RuntimeError:
        sys.stderr.write("Error\n")
        return 1
    out.write("Stack B apres chunk sort:\n")
    out.write(format_stack(b))
    check_order(b, sorted_ref, out)
    return 0