"""Turning command-line arguments into validated integers."""

from __future__ import annotations

from typing import List, Sequence

from pushswap.chars import atoi, isdigit
from pushswap.strtools import split

_INT_MAX = 2147483647
_INT_MIN = -2147483648
_OVERFLOW_SPACE = frozenset("\t\n\v\f\r ")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def check_syntax(arg: str) -> bool:
    """True when ``arg`` is optional spaces, an optional sign, then only digits."""
    rest = arg.lstrip(" ")
    if not rest:
        return False
    if rest[0] in "+-":
        rest = rest[1:]
    return all(isdigit(ch) for ch in rest)


def check_overflow(text: str) -> bool:
    """True when the number in ``text`` fits in a 32-bit signed int."""
    index = 0
    while index < len(text) and text[index] in _OVERFLOW_SPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    for ch in text[index:]:
        result = result * 10 + (ord(ch) - ord("0"))
        if not _INT_MIN <= result * sign <= _INT_MAX:
            return False
    return True


def check_duplicates(args: Sequence[str]) -> bool:
    """True when no two arguments convert to the same integer."""
    values = [atoi(arg) for arg in args]
    return len(set(values)) == len(values)


def split_args(argv: Sequence[str]) -> List[str]:
    """Return the number arguments from a full argument vector.

    A single argument is split on spaces; otherwise every argument after the
    program name is taken as is.
    """
    if len(argv) == 2:
        return split(argv[1], " ")
    return list(argv[1:])


def validate_args(args: Sequence[str]) -> None:
    """Raise ParseError unless every argument is a distinct in-range integer."""
    for arg in args:
        if not check_syntax(arg):
            raise ParseError(f"invalid number: {arg!r}")
        if not check_overflow(arg):
            raise ParseError(f"number out of range: {arg!r}")
    if not check_duplicates(args):
        raise ParseError("duplicate numbers")


def check_args(args: Sequence[str]) -> None:
    """Require at least two arguments, then validate them."""
    if len(args) < 2:
        raise ParseError("at least two numbers are required")
    validate_args(args)