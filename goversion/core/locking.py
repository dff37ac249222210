"""
Workspace locking for goversion.

The mirror and snapshots are shared, mutable state under one parent
directory. Mirror updates and export/build sequences hold a file lock on
that directory so two goversion processes cannot interleave writes.

Usage:
    from goversion.core.locking import LockManager

    lock_manager = LockManager(workspace.lock_path)
    with lock_manager.workspace_lock(timeout=600):
        # Safely update mirror, export and build
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from goversion.core.exceptions import LockTimeoutError

logger = logging.getLogger(__name__)


class LockManager:
    """
    Manages the workspace lock.

    Uses file-based locking with the `filelock` library; the lock is released
    on every exit path, including process death.

    Attributes:
        lock_path: Lock file location
    """

    def __init__(self, lock_path: Path):
        self.lock_path = Path(lock_path)

    @contextmanager
    def workspace_lock(self, timeout: float = 600):
        """
        Acquire the workspace lock.

        Args:
            timeout: Maximum wait time in seconds

        Yields:
            None

        Raises:
            LockTimeoutError: If lock can't be acquired within timeout
        """
        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        lock = FileLock(self.lock_path, timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired workspace lock: {self.lock_path}")
                yield
                logger.debug(f"Released workspace lock: {self.lock_path}")
        except Timeout as e:
            raise LockTimeoutError(
                f"Could not acquire workspace lock {self.lock_path} after {timeout}s. "
                "Another goversion process may be running."
            ) from e


__all__ = ["LockManager"]
