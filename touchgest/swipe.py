"""Recognition of touchpad swipe gestures."""

from __future__ import annotations

from dataclasses import dataclass

from touchgest.gesture import DeviceType, Gesture, GestureDirection, GestureType
from touchgest.handler import (
    GestureControllerDelegate,
    GestureEvent,
    elapsed_since,
    swipe_animation_percentage,
    swipe_direction,
    timestamp,
)


@dataclass
class SwipeState:
    """Progress of the swipe in course."""

    started: bool = False
    start_timestamp: int = 0
    delta_x: float = 0.0
    delta_y: float = 0.0
    direction: GestureDirection = GestureDirection.UNKNOWN
    percentage: float = 0.0
    fingers: int = 0

    def reset(self) -> None:
        """Forget the swipe in course."""
        self.started = False
        self.start_timestamp = 0
        self.delta_x = 0.0
        self.delta_y = 0.0
        self.direction = GestureDirection.UNKNOWN
        self.percentage = 0.0
        self.fingers = 0


class SwipeHandler:
    """Turns touchpad swipe events into gestures for a controller.

    A gesture only starts once the accumulated motion passes the device's
    start threshold; swipes that never pass it are not reported.
    """

    def __init__(self, controller: GestureControllerDelegate) -> None:
        self.controller = controller
        self.state = SwipeState()

    def _gesture(self, elapsed_time: int) -> Gesture:
        return Gesture(
            GestureType.SWIPE,
            self.state.direction,
            self.state.percentage,
            self.state.fingers,
            DeviceType.TOUCHPAD,
            elapsed_time,
        )

    def begin(self, event: GestureEvent) -> None:
        """Start tracking a new swipe; its direction is not known yet."""
        self.state.reset()

    def update(self, event: GestureEvent) -> None:
        """Accumulate motion, starting or updating the gesture."""
        state = self.state
        state.delta_x += event.dx
        state.delta_y += event.dy
        info = event.info

        if not state.started:
            if (
                abs(state.delta_x) > info.start_threshold
                or abs(state.delta_y) > info.start_threshold
            ):
                state.started = True
                state.start_timestamp = timestamp()
                state.direction = swipe_direction(state.delta_x, state.delta_y)
                state.percentage = swipe_animation_percentage(
                    info, state.direction, state.delta_x, state.delta_y
                )
                state.fingers = event.fingers
                self.controller.on_gesture_begin(self._gesture(0))
        else:
            state.percentage = swipe_animation_percentage(
                info, state.direction, state.delta_x, state.delta_y
            )
            elapsed = elapsed_since(state.start_timestamp)
            self.controller.on_gesture_update(self._gesture(elapsed))

    def end(self, event: GestureEvent) -> None:
        """Finish the gesture if one was started, then reset."""
        state = self.state
        if state.started:
            info = event.info
            state.percentage = swipe_animation_percentage(
                info, state.direction, state.delta_x, state.delta_y
            )
            elapsed = elapsed_since(state.start_timestamp)
            self.controller.on_gesture_end(self._gesture(elapsed))
        state.reset()