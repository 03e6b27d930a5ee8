"""Locations of the user and system configuration files."""

from __future__ import annotations

import os
import pwd
from pathlib import Path

from touchgest.text import split

APP_DIR_NAME = "touchgest"
CONFIG_FILE_NAME = "touchgest.conf"
SYSTEM_CONFIG_FILE_PATH = Path("/usr/share") / APP_DIR_NAME / CONFIG_FILE_NAME
_DEFAULT_XDG_CONFIG_DIR = "/etc/xdg"


def home_path() -> Path:
    """Return the user's home directory.

    ``$HOME`` wins; otherwise the password database entry of the current
    user is used. Raises RuntimeError if neither is available.
    """
    home = os.environ.get("HOME")
    if home is not None:
        return Path(home)

    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError as error:
        raise RuntimeError(
            "Error getting your home directory path (getpwuid)."
        ) from error

    if not entry.pw_dir:
        raise RuntimeError("Error getting your home directory path (pw_dir).")
    return Path(entry.pw_dir)


def user_config_dir_path() -> Path:
    """Return the user's configuration directory.

    ``$XDG_CONFIG_HOME`` is used when set, ``~/.config`` otherwise.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home is not None else home_path() / ".config"
    return base / APP_DIR_NAME


def user_config_file_path() -> Path:
    """Return the path of the user's configuration file."""
    return user_config_dir_path() / CONFIG_FILE_NAME


def user_lock_file_path(lock_instance: str) -> Path:
    """Return the path of the lock file for one client instance."""
    return user_config_dir_path() / f".{APP_DIR_NAME}{lock_instance}.lock"


def system_config_file_path() -> Path:
    """Return the system-wide configuration file.

    Each directory in ``$XDG_CONFIG_DIRS`` is tried in order, then
    ``/etc/xdg``; the first existing file wins. If none exists the
    built-in system path is returned.
    """
    xdg_config_dirs = os.environ.get("XDG_CONFIG_DIRS")
    candidates = split(xdg_config_dirs, ":") if xdg_config_dirs is not None else []
    candidates.append(_DEFAULT_XDG_CONFIG_DIR)

    for directory in candidates:
        config_path = Path(directory) / APP_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

    return SYSTEM_CONFIG_FILE_PATH


def create_user_config_dir() -> None:
    """Create the user's configuration directory if it does not exist."""
    user_config_dir_path().mkdir(parents=True, exist_ok=True)