"""Shared pieces of the gesture handlers: device thresholds, events and maths."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from touchgest.gesture import Gesture, GestureDirection


@dataclass
class DeviceInfo:
    """Pre-calculated thresholds of an input device.

    ``start_threshold`` is the motion needed before a gesture starts; the
    finish thresholds are the motion needed to reach 100% of an animation.
    """

    start_threshold: float = 200
    finish_threshold_horizontal: float = 2500
    finish_threshold_vertical: float = 2500


class GestureControllerDelegate(ABC):
    """Receiver of the gestures recognised by the handlers."""

    @abstractmethod
    def on_gesture_begin(self, gesture: Gesture) -> None:
        """Called once when a gesture starts."""

    @abstractmethod
    def on_gesture_update(self, gesture: Gesture) -> None:
        """Called every time a started gesture progresses."""

    @abstractmethod
    def on_gesture_end(self, gesture: Gesture) -> None:
        """Called once when a started gesture finishes."""


def _info_of(device_info: DeviceInfo | None) -> DeviceInfo:
    return DeviceInfo() if device_info is None else replace(device_info)


@dataclass(frozen=True)
class GestureEvent:
    """A touchpad swipe or pinch event.

    ``dx`` and ``dy`` are unaccelerated motion deltas, ``scale`` is the
    pinch scale (1.0 at the start of a pinch).
    """

    dx: float = 0.0
    dy: float = 0.0
    scale: float = 1.0
    fingers: int = 0
    device_info: DeviceInfo | None = None

    @property
    def info(self) -> DeviceInfo:
        """Thresholds of the device that produced the event, or the defaults."""
        return _info_of(self.device_info)


@dataclass(frozen=True)
class TouchEvent:
    """A touchscreen event for a single finger slot."""

    slot: int = 0
    x: float = 0.0
    y: float = 0.0
    device_info: DeviceInfo | None = None

    @property
    def info(self) -> DeviceInfo:
        """Thresholds of the device that produced the event, or the defaults."""
        return _info_of(self.device_info)


def timestamp() -> int:
    """Return the current epoch time in milliseconds."""
    return time.time_ns() // 1_000_000


def elapsed_since(start_timestamp: int) -> int:
    """Return the milliseconds elapsed since ``start_timestamp``."""
    return timestamp() - start_timestamp


def swipe_direction(delta_x: float, delta_y: float) -> GestureDirection:
    """Return the dominant direction of a swipe."""
    if abs(delta_x) > abs(delta_y):
        return GestureDirection.RIGHT if delta_x > 0 else GestureDirection.LEFT
    return GestureDirection.DOWN if delta_y > 0 else GestureDirection.UP


def swipe_animation_percentage(
    info: DeviceInfo,
    direction: GestureDirection,
    delta_x: float,
    delta_y: float,
) -> float:
    """Return how far (0 to 100) a swipe has progressed in ``direction``."""
    start = info.start_threshold
    horizontal = direction in (GestureDirection.LEFT, GestureDirection.RIGHT)
    finish = (
        info.finish_threshold_horizontal
        if horizontal
        else info.finish_threshold_vertical
    )
    maximum = start + finish

    if direction is GestureDirection.UP:
        current = abs(min(0.0, delta_y + start))
    elif direction is GestureDirection.DOWN:
        current = max(0.0, delta_y - start)
    elif direction is GestureDirection.LEFT:
        current = abs(min(0.0, delta_x + start))
    elif direction is GestureDirection.RIGHT:
        current = max(0.0, delta_x - start)
    else:
        current = 0.0

    if maximum == 0:
        ratio = math.inf if current > 0 else math.nan
    else:
        ratio = (current * 100) / maximum
    return min(ratio, 100.0)


def pinch_animation_percentage(direction: GestureDirection, delta: float) -> float:
    """Return how far (0 to 100) a pinch has progressed.

    The delta starts at 1.0. Pinching in reaches 100% at 0.0, pinching
    out at 2.0. Any other direction yields 0.
    """
    if direction is GestureDirection.IN:
        clamped = min(1.0, delta)
        return min(100.0, abs(clamped - 1.0) * 100)
    if direction is GestureDirection.OUT:
        clamped = min(2.0, delta)
        return min(100.0, max(0.0, clamped - 1.0) * 100)
    return 0.0