"""Parsing and validation of the command-line numbers."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def is_number(text: str) -> bool:
    """Return True for an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def parse_int(text: str) -> int:
    """Parse ``text`` as a 32-bit signed integer, raising ParseError if it is not one."""
    if not is_number(text):
        raise ParseError(f"not a number: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"out of range: {text!r}")
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def count_total_numbers(args: Iterable[str]) -> int:
    """Count the words across all arguments."""
    return sum(len(split_words(arg, " ")) for arg in args)


def parse_args(args: Iterable[str]) -> list[int]:
    """Parse every space-separated word of every argument into a list of integers."""
    values = [parse_int(word) for arg in args for word in split_words(arg, " ")]
    if has_duplicates(values):
        raise ParseError("duplicate values")
    return values