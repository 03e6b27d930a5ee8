"""Animation colours read from the configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from touchgest.logger import LogLevel, get_logger

_DEFAULT_COMPONENT = 0.6
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class ColorType(Enum):
    """Which theme colour "auto" refers to."""

    BACKGROUND = "background"
    BORDER = "border"


@dataclass(frozen=True)
class Color:
    """An RGB colour with components between 0 and 1."""

    red: float = _DEFAULT_COMPONENT
    green: float = _DEFAULT_COMPONENT
    blue: float = _DEFAULT_COMPONENT


def _parse_hex_prefix(text: str) -> int:
    """Read a leading base-16 integer, as strtol would; raise if there is none."""
    match = _HEX_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a hexadecimal number: {text!r}")
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def _from_hex_string(hex_string: str) -> Color:
    size = len(hex_string)
    if size == 0 or (size != 6 and size != 7 and hex_string[0] != "#"):
        return Color()

    offset = 0 if size == 6 else 1
    components = [_DEFAULT_COMPONENT] * 3
    try:
        for index in range(3):
            start = offset + 2 * index
            components[index] = (
                _parse_hex_prefix(hex_string[start : start + 2]) / 255.0
            )
    except ValueError:
        get_logger().log(
            LogLevel.ERROR, "Error: Invalid animation color, using default color"
        )
    return Color(*components)


def parse_color(hex_string: str, color_type: ColorType) -> Color:
    """Parse "RRGGBB", "#RRGGBB" or "auto".

    "auto" would take the colour from the desktop theme; no theme is
    queried here, so it yields the default colour for either ``color_type``.
    Components that fail to parse keep their default.
    """
    if hex_string == "auto":
        return Color()
    return _from_hex_string(hex_string)