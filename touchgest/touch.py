"""Recognition of touchscreen tap, swipe and pinch gestures."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from touchgest.gesture import DeviceType, Gesture, GestureDirection, GestureType
from touchgest.handler import (
    GestureControllerDelegate,
    TouchEvent,
    elapsed_since,
    pinch_animation_percentage,
    swipe_animation_percentage,
    swipe_direction,
    timestamp,
)

# Longest time, in milliseconds, that fingers may stay down for a tap.
TAP_TIME = 150


@dataclass
class TouchState:
    """Fingers on the screen and progress of the gesture in course."""

    started: bool = False
    type: GestureType = GestureType.NOT_SUPPORTED
    direction: GestureDirection = GestureDirection.UNKNOWN
    start_timestamp: int = 0
    start_fingers: int = 0
    start_x: dict[int, float] = field(default_factory=dict)
    start_y: dict[int, float] = field(default_factory=dict)
    current_fingers: int = 0
    current_x: dict[int, float] = field(default_factory=dict)
    current_y: dict[int, float] = field(default_factory=dict)
    tap_fingers: int = 0

    def reset(self) -> None:
        """Forget the gesture in course.

        Finger positions and the finger count are kept, because a gesture
        finishes while one finger is still on the screen.
        """
        self.started = False
        self.type = GestureType.NOT_SUPPORTED
        self.direction = GestureDirection.UNKNOWN
        self.start_timestamp = 0
        self.start_fingers = 0
        self.tap_fingers = 0


class TouchHandler:
    """Turns touchscreen events into gestures for a controller."""

    def __init__(self, controller: GestureControllerDelegate) -> None:
        self.controller = controller
        self.state = TouchState()

    def _percentage(self, event: TouchEvent, delta_x: float, delta_y: float) -> float:
        state = self.state
        if state.type is GestureType.SWIPE:
            return swipe_animation_percentage(
                event.info, state.direction, delta_x, delta_y
            )
        return pinch_animation_percentage(state.direction, self.pinch_delta())

    def touch_down(self, event: TouchEvent) -> None:
        """Record a finger touching the screen."""
        state = self.state
        state.current_fingers += 1

        state.start_x[event.slot] = event.x
        state.start_y[event.slot] = event.y
        state.current_x[event.slot] = event.x
        state.current_y[event.slot] = event.y

        # Remembered in case this turns out to be a tap
        state.tap_fingers = state.current_fingers
        if state.current_fingers == 1:
            state.start_timestamp = timestamp()

    def touch_up(self, event: TouchEvent) -> None:
        """Record a finger leaving the screen, finishing taps and gestures."""
        state = self.state
        state.current_fingers -= 1
        elapsed = elapsed_since(state.start_timestamp)

        if (
            not state.started
            and state.current_fingers == 0
            and state.tap_fingers >= 2
            and elapsed < TAP_TIME
        ):
            for notify in (self.controller.on_gesture_begin, self.controller.on_gesture_end):
                notify(
                    Gesture(
                        GestureType.TAP,
                        GestureDirection.UNKNOWN,
                        100,
                        state.tap_fingers,
                        DeviceType.TOUCHSCREEN,
                        elapsed,
                    )
                )
            state.reset()

        if state.started and state.current_fingers == 1:
            delta_x, delta_y = self.average_delta()
            percentage = self._percentage(event, delta_x, delta_y)
            self.controller.on_gesture_end(
                Gesture(
                    state.type,
                    state.direction,
                    percentage,
                    state.start_fingers,
                    DeviceType.TOUCHSCREEN,
                    elapsed,
                )
            )
            state.reset()

        for positions in (state.start_x, state.start_y, state.current_x, state.current_y):
            positions.pop(event.slot, None)

    def touch_motion(self, event: TouchEvent) -> None:
        """Record finger motion, starting or updating a gesture."""
        state = self.state
        info = event.info
        state.current_x[event.slot] = event.x
        state.current_y[event.slot] = event.y

        delta_x, delta_y = self.average_delta()

        if not state.started:
            if state.current_fingers >= 2 and (
                abs(delta_x) > info.start_threshold
                or abs(delta_y) > info.start_threshold
            ):
                state.started = True
                state.start_fingers = state.current_fingers
                state.start_timestamp = timestamp()
                state.type = self.gesture_type()
                state.direction = (
                    swipe_direction(delta_x, delta_y)
                    if state.type is GestureType.SWIPE
                    else self.pinch_direction()
                )

                # Measure from here so the start threshold does not count
                # towards the animation percentage.
                state.start_x = dict(state.current_x)
                state.start_y = dict(state.current_y)

                self.controller.on_gesture_begin(
                    Gesture(
                        state.type,
                        state.direction,
                        0,
                        state.start_fingers,
                        DeviceType.TOUCHSCREEN,
                        0,
                    )
                )
        else:
            percentage = self._percentage(event, delta_x, delta_y)
            elapsed = elapsed_since(state.start_timestamp)
            self.controller.on_gesture_update(
                Gesture(
                    state.type,
                    state.direction,
                    percentage,
                    state.start_fingers,
                    DeviceType.TOUCHSCREEN,
                    elapsed,
                )
            )

    def average_delta(self) -> tuple[float, float]:
        """Return the average (x, y) motion of the fingers since they started."""
        state = self.state
        if not state.start_x or not state.start_y:
            return 0.0, 0.0

        delta_x = 0.0
        delta_y = 0.0
        for slot, start_x in state.start_x.items():
            delta_x += state.current_x[slot] - start_x
            delta_y += state.current_y[slot] - state.start_y[slot]

        return delta_x / len(state.start_x), delta_y / len(state.start_y)

    def gesture_type(self) -> GestureType:
        """Tell a swipe from a pinch.

        In a swipe every finger moves mostly along the same axis and in the
        same sense; anything else is a pinch. Deltas are compared in whole
        units, so motion under one unit counts as none.
        """
        state = self.state
        horizontal: list[bool] = []
        deltas: list[int] = []
        for slot, start_x in state.start_x.items():
            diff_x = state.current_x[slot] - start_x
            diff_y = state.current_y[slot] - state.start_y[slot]
            if abs(diff_x) > abs(diff_y):
                horizontal.append(True)
                deltas.append(int(diff_x))
            else:
                horizontal.append(False)
                deltas.append(int(diff_y))

        same_axis = all(horizontal) or not any(horizontal)
        if not same_axis:
            return GestureType.PINCH

        same_sense = all(d > 0 for d in deltas) or all(d < 0 for d in deltas)
        if not same_sense:
            return GestureType.PINCH

        return GestureType.SWIPE

    def pinch_direction(self) -> GestureDirection:
        """Return OUT if the fingers spread apart, IN otherwise."""
        start_width, current_width = self.pinch_bbox()
        return GestureDirection.OUT if start_width < current_width else GestureDirection.IN

    def pinch_delta(self) -> float:
        """Return the pinch scale: 1.0 at the start, 0.0 with fingers together."""
        start_width, current_width = self.pinch_bbox()
        if start_width == 0:
            return math.inf if current_width > 0 else math.nan
        return current_width / start_width

    def pinch_bbox(self) -> tuple[float, float]:
        """Return the width of the fingers' bounding box at the start and now."""
        start = self.state.start_x.values()
        current = self.state.current_x.values()
        return max(start) - min(start), max(current) - min(current)