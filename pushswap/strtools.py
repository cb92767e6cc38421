"""String helpers: splitting, searching, copying and bounded concatenation."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if s is None:
        raise TypeError("cannot split None")
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == "\0":
        index = s.find(c)
        return len(s) if index < 0 else index
    index = s.find(c)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in place with ``func(index, character)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("cannot join None")
    return s1 + s2


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length that would have been needed:
    ``size + len(src)`` when ``dst`` already fills the buffer, otherwise
    ``len(dst) + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and ``len(src)``. With a size of 0 nothing is copied.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)