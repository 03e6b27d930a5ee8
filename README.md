# touchgest

touchgest turns touchpad and touchscreen motion into high-level gestures:
swipes, pinches and multi-finger taps. For each gesture it works out the
direction, how far its animation has progressed (0 to 100 percent), how many
fingers were used and how many milliseconds it has lasted. It reports every
stage of the gesture (begin, update, end) to a controller that you write.

You supply the input events yourself, as `GestureEvent` values for touchpad
swipes and pinches and as `TouchEvent` values for touchscreen fingers.

## Modules

- `touchgest.gesture` holds the gesture model: the `Gesture` dataclass and
  the enums `GestureType`, `GestureDirection` and `DeviceType`. It also has
  string conversions in both directions (`gesture_type_to_str`,
  `gesture_type_from_str`, `gesture_direction_to_str`,
  `gesture_direction_from_str`, `device_type_to_str`,
  `device_type_from_str`). Names that are not recognised become the
  `UNKNOWN` / `NOT_SUPPORTED` member. `"DRAG"` is read as a swipe.
- `touchgest.handler` holds what the handlers share:
  - `DeviceInfo` holds the per-device thresholds. The defaults are a start
    threshold of 200 and finish thresholds of 2500.
  - `GestureEvent` and `TouchEvent` are the input events.
  - `GestureControllerDelegate` is the abstract receiver, with
    `on_gesture_begin`, `on_gesture_update` and `on_gesture_end`.
  - The functions `swipe_direction`, `swipe_animation_percentage`,
    `pinch_animation_percentage`, `timestamp` and `elapsed_since`.
- `touchgest.swipe` (`SwipeHandler`, `SwipeState`) handles touchpad swipes.
  A swipe is reported only once the accumulated motion passes the device's
  start threshold.
- `touchgest.pinch` (`PinchHandler`, `PinchState`) handles touchpad pinches.
  A pinch begins on its first update. It is `OUT` if the scale is above 1,
  `IN` otherwise.
- `touchgest.touch` (`TouchHandler`, `TouchState`) handles touchscreens.
  - Two or more fingers moving past the start threshold begin a swipe or a
    pinch. Fingers moving along one axis in one sense make a swipe. Anything
    else is a pinch.
  - The gesture ends when only one finger is left.
  - Two or more fingers that touch and all lift within 150 ms, before any
    gesture has started, are reported as a `TAP`.
- `touchgest.device` (`Device`, `DeviceHandler`) works out thresholds for
  devices with a gesture or touch capability, from their physical size.
  - `touchpad_thresholds`, `touchscreen_thresholds` and `mm_to_dpi` do the
    calculation. Without a size, the `DeviceInfo` defaults are used.
  - Thresholds given to `DeviceHandler` (anything other than -1) override
    the calculated ones.
- `touchgest.args` parses options with `parse_args` into a `ParsedArgs`, and
  has `print_version` and `print_help`. The options are:
  `--daemon [start_threshold finish_threshold]`, `--client`, `--debug`/`-d`,
  `--quiet`/`-q`, `--version`/`-v` and `--help`/`-h`.
- `touchgest.client_lock` has `ClientLock`, an exclusive non-blocking lock on
  `.touchgest<instance>.lock` in the user configuration directory. It raises
  `ClientLockError` if another holder has the lock. Use it as a context
  manager, or call `acquire` and `release`.
- `touchgest.paths` gives the configuration locations, following the XDG
  base directory rules:
  - `user_config_dir_path`, which is `$XDG_CONFIG_HOME/touchgest` or
    `~/.config/touchgest`.
  - `user_config_file_path` and `user_lock_file_path`.
  - `system_config_file_path`, which searches `$XDG_CONFIG_DIRS`, then
    `/etc/xdg`, then falls back to `/usr/share/touchgest/touchgest.conf`.
  - `home_path` and `create_user_config_dir`.
- `touchgest.color` has `parse_color`, which reads `"RRGGBB"` or `"#RRGGBB"`
  into a `Color` with components between 0 and 1. `"auto"` gives the default
  grey (0.6, 0.6, 0.6), because no desktop theme is queried.
- `touchgest.logger` is a levelled logger (`Logger`, `LogLevel`, `configure`,
  `get_logger`). Errors go to stderr and the other levels to stdout. Debug
  output is off unless enabled, and `quiet` silences every level.
- `touchgest.geometry` has `Rectangle`. `touchgest.text` has `split`,
  `ltrim`, `rtrim`, `trim` and `to_lower`.

## A quick look

```python
from touchgest.gesture import GestureDirection, GestureType, gesture_type_from_str
from touchgest.handler import pinch_animation_percentage, swipe_direction

assert gesture_type_from_str("DRAG") is GestureType.SWIPE
assert swipe_direction(12.0, 3.0) is GestureDirection.RIGHT

# A pinch in that halves the distance between the fingers is 50% done.
assert pinch_animation_percentage(GestureDirection.IN, 0.5) == 50.0
```

To receive gestures, implement a controller and feed events to a handler:

```python
from touchgest.handler import DeviceInfo, GestureControllerDelegate, GestureEvent
from touchgest.swipe import SwipeHandler


class PrintingController(GestureControllerDelegate):
    def on_gesture_begin(self, gesture):
        print("begin", gesture)

    def on_gesture_update(self, gesture):
        print("update", gesture)

    def on_gesture_end(self, gesture):
        print("end", gesture)


info = DeviceInfo(start_threshold=10)
swipes = SwipeHandler(PrintingController())
swipes.begin(GestureEvent())
swipes.update(GestureEvent(dx=15, fingers=3, device_info=info))  # begin, RIGHT
swipes.update(GestureEvent(dx=100, fingers=3, device_info=info))  # update
swipes.end(GestureEvent(device_info=info))  # end
```

To keep a single client per display:

```python
from touchgest.client_lock import ClientLock, ClientLockError

try:
    with ClientLock(":0"):
        ...  # run the client
except ClientLockError as error:
    print(error)
```

## What it does not do

touchgest is a library and installs no command. `parse_args` reads the
options, but nothing here runs a daemon or a client.

It does not read input devices itself. Events and `Device` descriptions have
to come from your own code.

It does not talk to a window system, so it does not carry out desktop
actions, draw animations or query theme colours. It does not load
configuration files either. It only tells you where they are.

## Requirements

Python 3.10 or newer on a POSIX system, because `ClientLock` and `paths` use
`fcntl` and `pwd`. There are no third-party runtime dependencies. The test
suite uses pytest, available through the `test` extra.