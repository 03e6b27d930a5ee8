"""Lock file that keeps a single client running per display."""

from __future__ import annotations

import fcntl
import os
from pathlib import Path
from types import TracebackType

from touchgest.paths import create_user_config_dir, user_lock_file_path


class ClientLockError(RuntimeError):
    """Raised when the lock is held by another client."""


class ClientLock:
    """Exclusive, non-blocking lock on a per-instance lock file.

    Use as a context manager, or call ``acquire`` and ``release``.
    """

    def __init__(self, lock_instance: str) -> None:
        self.lock_instance = lock_instance
        self.path: Path = user_lock_file_path(lock_instance)
        self._fd: int | None = None

    @property
    def locked(self) -> bool:
        """Whether this object currently holds the lock."""
        return self._fd is not None

    def _error(self) -> ClientLockError:
        return ClientLockError(
            "Another instance is already running. If you are sure that it is "
            "not running, delete the lock file with the following command and "
            f"try again:\n$ rm {self.path}"
        )

    def acquire(self) -> None:
        """Take the lock, raising ClientLockError if it is already held."""
        if self._fd is not None:
            return
        create_user_config_dir()
        try:
            fd = os.open(self.path, os.O_CREAT | os.O_RDWR, 0o640)
        except OSError as error:
            raise self._error() from error

        try:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError as error:
            os.close(fd)
            raise self._error() from error
        self._fd = fd

    def release(self) -> None:
        """Release the lock if held."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)

    def __enter__(self) -> ClientLock:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()