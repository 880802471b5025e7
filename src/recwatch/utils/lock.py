"""Advisory run lock based on ``fcntl.flock``.

Only one pipeline run may hold the lock at a time. Acquisition is
non-blocking with a short timeout: a caller that cannot get the lock
quickly is expected to skip its run rather than queue behind the holder.
"""

import fcntl
import logging
import os
import time
from pathlib import Path
from typing import IO, Protocol

logger = logging.getLogger(__name__)


class RunLockHandle(Protocol):
    """Lock capability passed into the pipeline."""

    def try_acquire(self, timeout: float) -> bool: ...

    def release(self) -> None: ...


class RunLock:
    """Exclusive advisory lock on a file.

    Example:
        >>> lock = RunLock(Path("/tmp/recwatch.lock"))
        >>> if lock.try_acquire(timeout=1.0):
        ...     try:
        ...         pass  # run
        ...     finally:
        ...         lock.release()
    """

    POLL_INTERVAL = 0.05

    def __init__(self, lock_file: Path) -> None:
        """Initialize run lock.

        Args:
            lock_file: File used as the lock target (created if missing)
        """
        self.lock_file = lock_file
        self._handle: IO[str] | None = None

    @property
    def held(self) -> bool:
        """Whether this instance currently holds the lock."""
        return self._handle is not None

    def try_acquire(self, timeout: float = 1.0) -> bool:
        """Try to take the lock, giving up after ``timeout`` seconds.

        Args:
            timeout: Maximum time to keep trying (0 = single attempt)

        Returns:
            True if acquired, False if another holder kept it
        """
        if self._handle is not None:
            return True

        self.lock_file.parent.mkdir(parents=True, exist_ok=True)
        handle = open(self.lock_file, "a+")
        deadline = time.monotonic() + max(timeout, 0.0)

        while True:
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            except BlockingIOError:
                if time.monotonic() >= deadline:
                    handle.close()
                    logger.debug(f"Run lock {self.lock_file} is held elsewhere")
                    return False
                time.sleep(self.POLL_INTERVAL)
                continue

            handle.seek(0)
            handle.truncate()
            handle.write(str(os.getpid()))
            handle.flush()
            self._handle = handle
            logger.debug(f"Run lock acquired by PID {os.getpid()}")
            return True

    def release(self) -> None:
        """Release the lock if held."""
        if self._handle is None:
            return

        try:
            fcntl.flock(self._handle.fileno(), fcntl.LOCK_UN)
        finally:
            self._handle.close()
            self._handle = None
