"""Small string helpers."""

from __future__ import annotations

import re

_LEADING_SPACE = re.compile(r"^\s+")
_TRAILING_SPACE = re.compile(r"\s+\Z")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def split(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter, dropping one trailing empty field.

    An empty string yields an empty list, and ``"a,b,"`` yields
    ``["a", "b"]``, as line-oriented reading would.
    """
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def ltrim(text: str) -> str:
    """Remove leading whitespace."""
    return _LEADING_SPACE.sub("", text)


def rtrim(text: str) -> str:
    """Remove trailing whitespace."""
    return _TRAILING_SPACE.sub("", text)


def trim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return ltrim(rtrim(text))


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving other characters untouched."""
    return text.translate(_ASCII_LOWER)