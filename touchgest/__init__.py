"""Turn touchpad and touchscreen events into swipe, pinch and tap gestures for a controller."""

__version__ = "2.0.0"