"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _digits(value: int, base: int, alphabet: str) -> str:
    if value == 0:
        return alphabet[0]
    out = []
    while value:
        value, rest = divmod(value, base)
        out.append(alphabet[rest])
    return "".join(reversed(out))


def format_decimal(nb: int) -> str:
    """Signed decimal text of ``nb`` taken as a 32-bit int."""
    value = _to_int32(_require_int(nb))
    text = _digits(abs(value), 10, HEX_LOWER)
    return "-" + text if value < 0 else text


def format_unsigned(nb: int) -> str:
    """Decimal text of ``nb`` taken as a 32-bit unsigned int."""
    return _digits(_require_int(nb) & _UINT_MASK, 10, HEX_LOWER)


def format_hex(nb: int, upper: bool = False) -> str:
    """Hexadecimal text of ``nb`` taken as a 32-bit unsigned int."""
    alphabet = HEX_UPPER if upper else HEX_LOWER
    return _digits(_require_int(nb) & _UINT_MASK, 16, alphabet)


def format_pointer(ptr: Optional[int]) -> str:
    """``0x``-prefixed lower-case hex of an address, or ``(nil)`` for a null one."""
    if ptr is None:
        return "(nil)"
    value = _require_int(ptr) & _ULONG_MASK
    if value == 0:
        return "(nil)"
    return "0x" + _digits(value, 16, HEX_LOWER)


def format_string(s: Optional[str]) -> str:
    """The string itself, or ``(null)`` for None."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s


def _format_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & 0xFF)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def sprintf(spec: str, *args: Any) -> str:
    """Return ``spec`` with its conversions filled from ``args``.

    An unknown conversion character is dropped together with its ``%``.
    Raises ValueError when there are fewer arguments than conversions.
    """
    values: Iterator[Any] = iter(args)
    parts = []
    chars = iter(spec)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        conv = next(chars, None)
        if conv is None:
            break
        if conv == "%":
            parts.append("%")
            continue
        handler = _CONVERSIONS.get(conv)
        if handler is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(f"missing argument for %{conv}") from None
        parts.append(handler(value))
    return "".join(parts)


def printf(spec: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(spec, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)