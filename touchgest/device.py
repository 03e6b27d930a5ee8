"""Detection of compatible devices and calculation of their thresholds."""

from __future__ import annotations

from dataclasses import dataclass

from touchgest.handler import DeviceInfo
from touchgest.logger import LogLevel, get_logger

MM_PER_INCH = 25.4
# Gesture deltas are normalised to this resolution.
NORMALISED_DPI = 1000

TOUCHPAD_START_PERCENTAGE = 5
TOUCHPAD_FINISH_PERCENTAGE = 40
TOUCHSCREEN_START_PERCENTAGE = 2
TOUCHSCREEN_FINISH_PERCENTAGE = 16


@dataclass
class Device:
    """An input device as seen when it is added.

    ``size_mm`` is ``(width, height)`` or None when the size is unknown;
    ``info`` holds the thresholds once the device has been handled.
    """

    name: str
    has_gesture_capability: bool = False
    has_touch_capability: bool = False
    size_mm: tuple[float, float] | None = None
    info: DeviceInfo | None = None


def mm_to_dpi(mm: float) -> float:
    """Convert a length in millimetres to normalised device units."""
    return mm / MM_PER_INCH * NORMALISED_DPI


def touchpad_thresholds(width_mm: float, height_mm: float) -> DeviceInfo:
    """Return thresholds for a touchpad of the given physical size."""
    min_size = min(width_mm, height_mm)
    return DeviceInfo(
        start_threshold=mm_to_dpi(min_size) * TOUCHPAD_START_PERCENTAGE / 100,
        finish_threshold_horizontal=mm_to_dpi(width_mm) * TOUCHPAD_FINISH_PERCENTAGE / 100,
        finish_threshold_vertical=mm_to_dpi(height_mm) * TOUCHPAD_FINISH_PERCENTAGE / 100,
    )


def touchscreen_thresholds(width_mm: float, height_mm: float) -> DeviceInfo:
    """Return thresholds for a touchscreen of the given physical size."""
    min_size = min(width_mm, height_mm)
    return DeviceInfo(
        start_threshold=min_size * TOUCHSCREEN_START_PERCENTAGE / 100,
        finish_threshold_horizontal=width_mm * TOUCHSCREEN_FINISH_PERCENTAGE / 100,
        finish_threshold_vertical=height_mm * TOUCHSCREEN_FINISH_PERCENTAGE / 100,
    )


class DeviceHandler:
    """Calculates the thresholds of every compatible device that is added.

    A threshold of -1 means "calculate it"; any other value overrides the
    calculated one.
    """

    def __init__(self, start_threshold: float = -1, finish_threshold: float = -1) -> None:
        self.start_threshold = start_threshold
        self.finish_threshold = finish_threshold

    def device_added(self, device: Device) -> DeviceInfo | None:
        """Store and return the device's thresholds; None if it is not compatible."""
        if not (device.has_gesture_capability or device.has_touch_capability):
            return None

        log = get_logger().log
        log(LogLevel.INFO, "Compatible device detected:")
        log(LogLevel.INFO, f"\tName: {device.name}")

        size = device.size_mm
        if size is not None and size[0] != 0 and size[1] != 0:
            width_mm, height_mm = size
            log(LogLevel.INFO, f"\tSize: {width_mm:g}mm x {height_mm:g}mm")
            log(
                LogLevel.INFO,
                "\tCalculating start_threshold and finish_threshold. "
                "You can tune this values in your service file",
            )
            if device.has_gesture_capability:
                info = touchpad_thresholds(width_mm, height_mm)
            else:
                info = touchscreen_thresholds(width_mm, height_mm)
        else:
            log(
                LogLevel.WARNING,
                "\tIt wasn't possible to get your device physical size, falling "
                "back to default start_threshold and finish_threshold. You can "
                "tune this values in your service file",
            )
            info = DeviceInfo()

        if self.start_threshold != -1:
            info.start_threshold = self.start_threshold
        if self.finish_threshold != -1:
            info.finish_threshold_horizontal = self.finish_threshold
            info.finish_threshold_vertical = self.finish_threshold

        log(LogLevel.INFO, f"\tstart_threshold: {info.start_threshold:g}")
        log(
            LogLevel.INFO,
            f"\tfinish_threshold_horizontal: {info.finish_threshold_horizontal:g}",
        )
        log(
            LogLevel.INFO,
            f"\tfinish_threshold_vertical: {info.finish_threshold_vertical:g}",
        )

        device.info = info
        return info