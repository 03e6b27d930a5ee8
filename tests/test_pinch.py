from touchgest.gesture import DeviceType, GestureDirection, GestureType
from touchgest.handler import (
    GestureControllerDelegate,
    GestureEvent,
    pinch_animation_percentage,
)
from touchgest.pinch import PinchHandler, PinchState


class Recorder(GestureControllerDelegate):
    def __init__(self):
        self.calls = []

    def on_gesture_begin(self, gesture):
        self.calls.append(("begin", gesture))

    def on_gesture_update(self, gesture):
        self.calls.append(("update", gesture))

    def on_gesture_end(self, gesture):
        self.calls.append(("end", gesture))


def make():
    recorder = Recorder()
    return recorder, PinchHandler(recorder)


def test_state_reset():
    state = PinchState(
        started=True,
        start_timestamp=9,
        delta=0.3,
        direction=GestureDirection.IN,
        percentage=70,
        fingers=2,
    )
    state.reset()
    assert state == PinchState()


def test_first_update_begins_pinch_out():
    recorder, handler = make()
    handler.begin(GestureEvent())
    handler.update(GestureEvent(scale=1.2, fingers=2))
    assert len(recorder.calls) == 1
    kind, gesture = recorder.calls[0]
    assert kind == "begin"
    assert gesture.type is GestureType.PINCH
    assert gesture.direction is GestureDirection.OUT
    assert gesture.fingers == 2
    assert gesture.performed_on_device_type is DeviceType.TOUCHPAD
    assert gesture.elapsed_time == 0
    assert gesture.percentage == pinch_animation_percentage(GestureDirection.OUT, 1.2)


def test_first_update_begins_pinch_in():
    recorder, handler = make()
    handler.begin(GestureEvent())
    handler.update(GestureEvent(scale=0.9, fingers=3))
    assert recorder.calls[0][1].direction is GestureDirection.IN


def test_scale_of_one_is_pinch_in():
    recorder, handler = make()
    handler.update(GestureEvent(scale=1.0, fingers=2))
    gesture = recorder.calls[0][1]
    assert gesture.direction is GestureDirection.IN
    assert gesture.percentage == 0


def test_later_updates_keep_direction():
    recorder, handler = make()
    handler.begin(GestureEvent())
    handler.update(GestureEvent(scale=0.9, fingers=2))
    handler.update(GestureEvent(scale=1.5, fingers=4))
    kind, gesture = recorder.calls[1]
    assert kind == "update"
    assert gesture.direction is GestureDirection.IN
    assert gesture.fingers == 2
    assert gesture.elapsed_time >= 0
    assert gesture.percentage == pinch_animation_percentage(GestureDirection.IN, 1.5)


def test_end_reports_final_scale_and_resets():
    recorder, handler = make()
    handler.begin(GestureEvent())
    handler.update(GestureEvent(scale=1.1, fingers=2))
    handler.end(GestureEvent(scale=2.0))
    kind, gesture = recorder.calls[-1]
    assert kind == "end"
    assert gesture.direction is GestureDirection.OUT
    assert gesture.percentage == 100
    assert handler.state == PinchState()


def test_end_without_update_reports_nothing():
    recorder, handler = make()
    handler.begin(GestureEvent())
    handler.end(GestureEvent(scale=0.5))
    assert recorder.calls == []
    assert handler.state == PinchState()


def test_new_pinch_after_end_begins_again():
    recorder, handler = make()
    handler.update(GestureEvent(scale=1.3, fingers=2))
    handler.end(GestureEvent(scale=1.3))
    handler.begin(GestureEvent())
    handler.update(GestureEvent(scale=0.7, fingers=3))
    kinds = [kind for kind, _ in recorder.calls]
    assert kinds == ["begin", "end", "begin"]
    assert recorder.calls[-1][1].direction is GestureDirection.IN