"""Recognition of touchpad pinch gestures."""

from __future__ import annotations

from dataclasses import dataclass

from touchgest.gesture import DeviceType, Gesture, GestureDirection, GestureType
from touchgest.handler import (
    GestureControllerDelegate,
    GestureEvent,
    elapsed_since,
    pinch_animation_percentage,
    timestamp,
)


@dataclass
class PinchState:
    """Progress of the pinch in course."""

    started: bool = False
    start_timestamp: int = 0
    delta: float = 1.0
    direction: GestureDirection = GestureDirection.UNKNOWN
    percentage: float = 0.0
    fingers: int = 0

    def reset(self) -> None:
        """Forget the pinch in course."""
        self.started = False
        self.start_timestamp = 0
        self.delta = 1.0
        self.direction = GestureDirection.UNKNOWN
        self.percentage = 0.0
        self.fingers = 0


class PinchHandler:
    """Turns touchpad pinch events into gestures for a controller.

    No threshold applies: the first update begins the gesture.
    """

    def __init__(self, controller: GestureControllerDelegate) -> None:
        self.controller = controller
        self.state = PinchState()

    def _gesture(self, elapsed_time: int) -> Gesture:
        return Gesture(
            GestureType.PINCH,
            self.state.direction,
            self.state.percentage,
            self.state.fingers,
            DeviceType.TOUCHPAD,
            elapsed_time,
        )

    def begin(self, event: GestureEvent) -> None:
        """Start tracking a new pinch; its direction is not known yet."""
        self.state.reset()

    def update(self, event: GestureEvent) -> None:
        """Begin the gesture on the first update, update it afterwards."""
        state = self.state
        state.delta = event.scale

        if not state.started:
            state.started = True
            state.start_timestamp = timestamp()
            state.direction = (
                GestureDirection.OUT if state.delta > 1 else GestureDirection.IN
            )
            state.percentage = pinch_animation_percentage(state.direction, state.delta)
            state.fingers = event.fingers
            self.controller.on_gesture_begin(self._gesture(0))
        else:
            state.percentage = pinch_animation_percentage(state.direction, state.delta)
            elapsed = elapsed_since(state.start_timestamp)
            self.controller.on_gesture_update(self._gesture(elapsed))

    def end(self, event: GestureEvent) -> None:
        """Finish the gesture if one was started, then reset."""
        state = self.state
        if state.started:
            state.delta = event.scale
            state.percentage = pinch_animation_percentage(state.direction, state.delta)
            elapsed = elapsed_since(state.start_timestamp)
            self.controller.on_gesture_end(self._gesture(elapsed))
        state.reset()