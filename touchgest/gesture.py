"""Gesture kinds, directions, device types and the gesture value itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class DeviceType(IntEnum):
    """Kind of device a gesture was performed on."""

    UNKNOWN = 0
    TOUCHPAD = 1
    TOUCHSCREEN = 2


class GestureDirection(IntEnum):
    """Direction of a gesture; UNKNOWN until enough motion is seen."""

    UNKNOWN = 0
    # Swipe directions
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    # Pinch directions
    IN = 5
    OUT = 6


class GestureType(IntEnum):
    """Kind of gesture."""

    NOT_SUPPORTED = 0
    SWIPE = 1
    PINCH = 2
    TAP = 3


# Accepted for compatibility with older configuration files.
_GESTURE_TYPE_ALIASES = {"DRAG": GestureType.SWIPE}


def device_type_to_str(device_type: DeviceType) -> str:
    """Return the configuration name of a device type."""
    if device_type in (DeviceType.TOUCHPAD, DeviceType.TOUCHSCREEN):
        return DeviceType(device_type).name
    return DeviceType.UNKNOWN.name


def device_type_from_str(text: str) -> DeviceType:
    """Parse a device type name; anything unrecognised is UNKNOWN."""
    if text in ("TOUCHPAD", "TOUCHSCREEN"):
        return DeviceType[text]
    return DeviceType.UNKNOWN


def gesture_direction_to_str(direction: GestureDirection) -> str:
    """Return the configuration name of a gesture direction."""
    try:
        return GestureDirection(direction).name
    except ValueError:
        return GestureDirection.UNKNOWN.name


def gesture_direction_from_str(text: str) -> GestureDirection:
    """Parse a direction name; anything unrecognised is UNKNOWN."""
    if text in ("UP", "DOWN", "LEFT", "RIGHT", "IN", "OUT"):
        return GestureDirection[text]
    return GestureDirection.UNKNOWN


def gesture_type_to_str(gesture_type: GestureType) -> str:
    """Return the configuration name of a gesture type."""
    try:
        return GestureType(gesture_type).name
    except ValueError:
        return GestureType.NOT_SUPPORTED.name


def gesture_type_from_str(text: str) -> GestureType:
    """Parse a gesture type name; "DRAG" is read as SWIPE."""
    if text in _GESTURE_TYPE_ALIASES:
        return _GESTURE_TYPE_ALIASES[text]
    if text in ("SWIPE", "PINCH", "TAP"):
        return GestureType[text]
    return GestureType.NOT_SUPPORTED


@dataclass
class Gesture:
    """A gesture as reported by a gesture gatherer.

    ``percentage`` runs from 0 to 100 and drives animations;
    ``elapsed_time`` is in milliseconds since the gesture began.
    """

    type: GestureType = GestureType.NOT_SUPPORTED
    direction: GestureDirection = GestureDirection.UNKNOWN
    percentage: float = -1
    fingers: int = -1
    performed_on_device_type: DeviceType = DeviceType.UNKNOWN
    elapsed_time: int = 0