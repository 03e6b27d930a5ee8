import pytest

from touchgest.device import (
    Device,
    DeviceHandler,
    mm_to_dpi,
    touchpad_thresholds,
    touchscreen_thresholds,
)
from touchgest.handler import DeviceInfo


def test_one_inch_is_1000_units():
    assert mm_to_dpi(25.4) == pytest.approx(1000)


def test_mm_to_dpi_is_linear():
    assert mm_to_dpi(50) == pytest.approx(2 * mm_to_dpi(25))
    assert mm_to_dpi(0) == 0


def test_touchpad_percentages():
    info = touchpad_thresholds(2.54, 2.54)
    assert info.start_threshold == pytest.approx(5)
    assert info.finish_threshold_horizontal == pytest.approx(40)
    assert info.finish_threshold_vertical == pytest.approx(40)


def test_touchscreen_percentages():
    info = touchscreen_thresholds(100, 100)
    assert info.start_threshold == pytest.approx(2)
    assert info.finish_threshold_horizontal == pytest.approx(16)
    assert info.finish_threshold_vertical == pytest.approx(16)


@pytest.mark.parametrize("compute", [touchpad_thresholds, touchscreen_thresholds])
def test_swapping_sides_swaps_finish_thresholds(compute):
    a = compute(80, 50)
    b = compute(50, 80)
    assert a.start_threshold == pytest.approx(b.start_threshold)
    assert a.finish_threshold_horizontal == pytest.approx(b.finish_threshold_vertical)
    assert a.finish_threshold_vertical == pytest.approx(b.finish_threshold_horizontal)


@pytest.mark.parametrize("compute", [touchpad_thresholds, touchscreen_thresholds])
def test_start_uses_smaller_side(compute):
    assert compute(80, 50).start_threshold == pytest.approx(
        compute(50, 50).start_threshold
    )


def test_incompatible_device_is_ignored():
    device = Device(name="keyboard")
    assert DeviceHandler().device_added(device) is None
    assert device.info is None


@pytest.mark.parametrize("size", [None, (0, 50), (80, 0)])
def test_unknown_size_uses_defaults(size):
    device = Device(name="pad", has_gesture_capability=True, size_mm=size)
    info = DeviceHandler().device_added(device)
    assert info == DeviceInfo()
    assert device.info == info


def test_touchpad_device_gets_touchpad_thresholds():
    device = Device(name="pad", has_gesture_capability=True, size_mm=(100, 60))
    info = DeviceHandler().device_added(device)
    assert info == touchpad_thresholds(100, 60)


def test_touchscreen_device_gets_touchscreen_thresholds():
    device = Device(name="screen", has_touch_capability=True, size_mm=(300, 200))
    info = DeviceHandler().device_added(device)
    assert info == touchscreen_thresholds(300, 200)


def test_gesture_capability_wins():
    device = Device(
        name="both",
        has_gesture_capability=True,
        has_touch_capability=True,
        size_mm=(100, 60),
    )
    assert DeviceHandler().device_added(device) == touchpad_thresholds(100, 60)


def test_user_thresholds_override():
    device = Device(name="pad", has_gesture_capability=True, size_mm=(100, 60))
    info = DeviceHandler(10, 20).device_added(device)
    assert info == DeviceInfo(10, 20, 20)


def test_only_start_threshold_overridden():
    device = Device(name="pad", has_gesture_capability=True, size_mm=(100, 60))
    info = DeviceHandler(10, -1).device_added(device)
    expected = touchpad_thresholds(100, 60)
    assert info.start_threshold == 10
    assert info.finish_threshold_horizontal == expected.finish_threshold_horizontal
    assert info.finish_threshold_vertical == expected.finish_threshold_vertical


def test_override_applies_to_defaults_too():
    device = Device(name="screen", has_touch_capability=True)
    info = DeviceHandler(-1, 30).device_added(device)
    assert info.start_threshold == DeviceInfo().start_threshold
    assert info.finish_threshold_horizontal == 30
    assert info.finish_threshold_vertical == 30