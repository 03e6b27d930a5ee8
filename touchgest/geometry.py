"""Integer rectangle used for window and screen geometry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle in pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0