"""Small text helpers shared by the games: number parsing, comparison, spacing."""

from __future__ import annotations

from itertools import takewhile, zip_longest

_DIGITS = "0123456789"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def leading_number(text: str) -> int:
    """Return the first run of digits in ``text``.

    Characters before the first non-zero digit are skipped. The result is
    negative when the text itself starts with ``-``.
    """
    value = 0
    for char in text:
        if char in _DIGITS:
            value = value * 10 + int(char)
        elif value > 0:
            break
    return -value if text.startswith("-") else value


def to_int(text: str) -> int:
    """Convert the digits at the very start of ``text`` to an integer.

    Leading signs set the sign but are not skipped when digits are read, so
    a signed text yields 0. A value that overflows a 32-bit integer yields 0.
    """
    sign = 1
    for char in takewhile(lambda c: c in "+-", text):
        if char == "-":
            sign = -sign
    result = 0
    in_range = 1
    for char in takewhile(lambda c: c in _DIGITS, text):
        result = _wrap_int32(result * 10 + int(char))
        in_range = 0 if result < 0 else 1
    return _wrap_int32(result * sign * in_range)


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is digits only, after any leading minus signs."""
    return all(char in _DIGITS for char in text.lstrip("-"))


def compare(first: str, second: str) -> int:
    """Compare two strings character by character; return -1, 0 or 1."""
    for left, right in zip_longest(first, second, fillvalue="\0"):
        if left != right:
            return 1 if left > right else -1
    return 0


def spaced(text: str) -> str:
    """Return ``text`` with a space after every character."""
    return "".join(f"{char} " for char in text)