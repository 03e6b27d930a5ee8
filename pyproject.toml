[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "touchgest"
version = "2.0.0"
description = "Multi-touch gesture recognition for touchpads and touchscreens"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gestures",
    "touchpad",
    "touchscreen",
    "multi-touch",
    "swipe",
    "pinch",
    "tap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["touchgest"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
