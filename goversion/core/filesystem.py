"""
Filesystem helpers shared by snapshot export and the version marker.
"""

import os
import tempfile
from pathlib import Path
from typing import Union

from goversion.core.exceptions import InsecureArchiveError


def is_relative_to(path: Path, parent: Path) -> bool:
    """Check whether path lies inside parent."""
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def safe_member_path(name: str, destination: Path) -> Path:
    """
    Resolve an archive member name under destination.

    Prevents directory traversal (e.g. names containing '../').

    Args:
        name: Member name from the archive
        destination: Extraction root

    Returns:
        Path the member should be written to

    Raises:
        InsecureArchiveError: If the member would land outside destination
    """
    target = destination / name
    if not is_relative_to(target.resolve(), destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{name}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )
    return target


def atomic_write(
    file_path: Union[str, Path], content: Union[str, bytes], encoding: str = "utf-8"
) -> None:
    """
    Write file atomically using temp file + rename.

    The file is never observed in a partially-written state. If the write
    fails, the original file (if any) remains unchanged.

    Args:
        file_path: Path to write to
        content: Content to write (string or bytes)
        encoding: Text encoding (used only for string content)
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory keeps the rename on one filesystem
    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_path_str)

    try:
        if isinstance(content, str):
            with open(temp_fd, "w", encoding=encoding, newline="") as f:
                f.write(content)
        else:
            with open(temp_fd, "wb") as f:
                f.write(content)
        os.chmod(temp_path, 0o644)
        temp_path.replace(file_path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise


__all__ = ["is_relative_to", "safe_member_path", "atomic_write"]
