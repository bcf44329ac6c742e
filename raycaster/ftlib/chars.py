"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_UINT_MASK = 0xFFFFFFFF
_SPACES = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) < 128


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 0x20 <= _code(c) < 0x7F


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, after optional whitespace and one sign.

    Parsing stops at the first non-digit; text without digits yields 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not ("0" <= ch <= "9"):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def itoa(n: int) -> str:
    """Render a signed integer in decimal."""
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if not magnitude:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def utoa(n: int) -> str:
    """Render an unsigned 32-bit integer in decimal.

    Values outside the range wrap modulo 2**32, as an unsigned int would.
    """
    return itoa(n & _UINT_MASK)