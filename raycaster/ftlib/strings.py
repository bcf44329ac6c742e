"""String operations with bounded copies, searching, slicing and splitting."""

from __future__ import annotations

from typing import Callable


def _char(c: int | str) -> str:
    """Return c as a one-character string, reducing an int to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text, truncated to size - 1 characters, and the full
    length of src, so truncation shows when the length reaches size.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the text would have had without
    truncation. When dst already fills the buffer it is returned unchanged and
    the length reported is size + len(src).
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for the terminator "\\0" yields len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for the terminator "\\0" yields len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little within the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"negative length {length}")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first that differ.

    The end of a string compares as code point 0.
    """
    if n < 0:
        raise ValueError(f"negative count {n}")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Strip every character found in charset from both ends of s."""
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split s on sep, dropping the empty words that runs of sep produce."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: str, f: Callable[[int, str], str | None]) -> str:
    """Call f(index, character) for each character of s.

    Where f returns a string it replaces that character; where it returns
    None the character is kept. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strreverse(s: str) -> str:
    """Return s with its characters in reverse order."""
    return s[::-1]