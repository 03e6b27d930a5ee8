"""Command line options."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from importlib import metadata

PROGRAM_NAME = "touchgest"
_UNKNOWN_VERSION = "[Unknown version]"

_NUMBER_PREFIX = re.compile(
    r"""\s*
    (?P<number>
        [+-]?
        (?:
            0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?
          | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
          | inf(?:inity)?
          | nan
        )
    )""",
    re.VERBOSE | re.IGNORECASE,
)


@dataclass
class ParsedArgs:
    """Options selected on the command line."""

    daemon_mode: bool = False
    client_mode: bool = False
    debug: bool = False
    quiet: bool = False
    start_threshold: float = -1
    finish_threshold: float = -1
    exit: bool = False


def _version() -> str:
    try:
        return metadata.version(PROGRAM_NAME)
    except metadata.PackageNotFoundError:
        return _UNKNOWN_VERSION


def _parse_number(text: str) -> float:
    """Read a leading floating point number; raise ValueError if none or out of range."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    literal = match.group("number")
    body = literal.lstrip("+-").lower()
    if body.startswith("0x"):
        try:
            value = float.fromhex(literal)
        except OverflowError as error:
            raise ValueError(f"out of range: {text!r}") from error
    else:
        value = float(literal)
    if math.isinf(value) and not body.startswith("inf"):
        raise ValueError(f"out of range: {text!r}")
    return value


def _daemon_thresholds(tokens: list[str]) -> tuple[float, float]:
    """Read the two numbers following --daemon, or (-1, -1)."""
    position = tokens.index("--daemon")
    values = tokens[position + 1 : position + 3]
    if len(values) < 2:
        return -1, -1
    try:
        return _parse_number(values[0]), _parse_number(values[1])
    except ValueError:
        return -1, -1


def print_version() -> str:
    """Print the program name and version and return the printed line."""
    line = f"{PROGRAM_NAME} {_version()}."
    sys.stdout.write(line + "\n")
    return line


def print_help() -> None:
    """Print the version and the usage text."""
    print_version()
    print(
        f"Usage: {PROGRAM_NAME} [--help | -h] [--version | -v] [--debug | -d] "
        "[--quiet | -q] [--daemon [start_threshold finish_threshold]] [--client]"
    )
    print()
    print("Multi-touch gesture recognizer.")
    print(
        f"{PROGRAM_NAME} is an app that runs in the background and transforms "
        "the gestures you make on your touchpad into visible actions in your "
        "desktop."
    )
    print()
    print("Option\t\tMeaning")
    print(
        " --daemon\tRun in daemon mode. This mode starts a service that "
        "gathers gestures but executes no actions"
    )
    print(
        " --client\tConnect to an existing daemon and execute actions in "
        "your desktop"
    )
    print(" --quiet\tDo not print to the log")
    print(" --debug\tPrint every message to the log")
    print(" --version\tPrint the version number and exit")
    print(" --help \tPrint this message and exit")
    print(f"Without arguments {PROGRAM_NAME} starts in client mode")


def parse_args(argv: Sequence[str] | None = None) -> ParsedArgs:
    """Parse the arguments (without the program name).

    ``--version`` and ``--help`` print their text straight away and set
    ``exit``. Client mode is on whenever daemon mode is off.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)

    args = ParsedArgs()
    args.daemon_mode = "--daemon" in tokens
    args.client_mode = "--client" in tokens or not args.daemon_mode
    args.debug = "--debug" in tokens or "-d" in tokens
    args.quiet = "--quiet" in tokens or "-q" in tokens

    if args.daemon_mode:
        args.start_threshold, args.finish_threshold = _daemon_thresholds(tokens)

    if "--version" in tokens or "-v" in tokens:
        print_version()
        args.exit = True

    if "--help" in tokens or "-h" in tokens:
        print_help()
        args.exit = True

    return args