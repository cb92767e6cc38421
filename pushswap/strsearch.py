"""String helpers: length, mapping, bounded comparison, searching, trimming."""

from __future__ import annotations

from typing import Callable, Optional


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_count(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return len(s)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, character)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch, or 0. The end of
    the shorter string compares as a NUL character.
    """
    _check_count(n, "count")
    left = s1[:n]
    right = s2[:n]
    for index in range(max(len(left), len(right))):
        a = ord(left[index]) if index < len(left) else 0
        b = ord(right[index]) if index < len(right) else 0
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of ``little`` within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is no
    match that lies wholly inside the first ``n`` characters.
    """
    _check_count(n, "length")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives the empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]