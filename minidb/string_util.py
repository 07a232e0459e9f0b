"""Small string helpers used for formatting and parsing."""

from __future__ import annotations

import string
from typing import Iterable

_WHITESPACE = " \t\n\v\f\r"
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_KB = 1024.0
_MB = _KB * 1024
_GB = _MB * 1024

_SET_BOLD = "\033[0;1m"
_SET_PLAIN = "\033[0;0m"


def contains(haystack: str, needle: str) -> bool:
    """Return True if needle occurs in haystack."""
    return needle in haystack


def rtrim(text: str) -> str:
    """Remove trailing ASCII whitespace."""
    return text.rstrip(_WHITESPACE)


def indent(num_indent: int) -> str:
    """Return a string of num_indent spaces."""
    return " " * max(num_indent, 0)


def starts_with(text: str, prefix: str) -> bool:
    """Return True if text begins with prefix."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if text ends with suffix."""
    return text.endswith(suffix)


def repeat(text: str, n: int) -> str:
    """Return text repeated n times."""
    if n <= 0 or not text:
        return ""
    return text * n


def split(text: str, delimiter: str) -> list[str]:
    """Split on a single character the way line-by-line reading does.

    Empty fields are kept, except a single trailing empty field.
    """
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def join(items: Iterable[str], separator: str) -> str:
    """Join items with separator."""
    return separator.join(items)


def prefix_lines(text: str, prefix: str) -> str:
    """Put prefix in front of every line of text."""
    lines = split(text, "\n")
    if not lines:
        return ""
    return "\n".join(prefix + line for line in lines)


def format_size(num_bytes: int) -> str:
    """Render a byte count in bytes, KB, MB or GB."""
    if num_bytes >= _GB:
        return f"{num_bytes / _GB:.2f} GB"
    if num_bytes >= _MB:
        return f"{num_bytes / _MB:.2f} MB"
    if num_bytes >= _KB:
        return f"{num_bytes / _KB:.2f} KB"
    return f"{num_bytes} bytes"


def bold(text: str) -> str:
    """Wrap text in terminal bold escape codes."""
    return f"{_SET_BOLD}{text}{_SET_PLAIN}"


def upper(text: str) -> str:
    """Upper-case ASCII letters, leaving other characters alone."""
    return text.translate(_TO_UPPER)


def lower(text: str) -> str:
    """Lower-case ASCII letters, leaving other characters alone."""
    return text.translate(_TO_LOWER)


def split_on(text: str, separator: str) -> list[str]:
    """Split on a multi-character separator, dropping empty pieces."""
    if not separator:
        raise ValueError("separator must not be empty")
    return [piece for piece in text.split(separator) if piece]


def strip_char(text: str, char: str) -> str:
    """Remove every occurrence of char from text."""
    return text.replace(char, "")