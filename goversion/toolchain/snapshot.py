"""
Snapshot export.

A snapshot is the source tree of one reference, written to
<parent>/<ref>/ from a `git archive` zip of the mirror. The VERSION marker
is written last and atomically, so it only ever appears after every archive
entry has been extracted.
"""

import logging
import os
import shutil
import stat
import zipfile
from pathlib import Path
from typing import Optional

from goversion.core.directory import Workspace
from goversion.core.exceptions import (
    GitCommandError,
    ReferenceNotFoundError,
    SnapshotError,
)
from goversion.core.filesystem import atomic_write, safe_member_path
from goversion.core.git import GitClient

logger = logging.getLogger(__name__)

DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644


def _entry_mode(info: zipfile.ZipInfo) -> int:
    """Permission bits recorded for a zip entry, with sane fallbacks."""
    mode = stat.S_IMODE(info.external_attr >> 16)
    if mode:
        return mode
    return DEFAULT_DIR_MODE if info.is_dir() else DEFAULT_FILE_MODE


def extract_snapshot(archive: Path, root: Path) -> int:
    """
    Expand a zip archive into root, preserving recorded modes.

    Existing directories are reused and existing files truncated.

    Args:
        archive: Zip file to read
        root: Snapshot root directory

    Returns:
        Number of entries extracted

    Raises:
        SnapshotError: On any read or write failure
        InsecureArchiveError: If an entry escapes root
    """
    try:
        zf = zipfile.ZipFile(archive, "r")
    except (OSError, zipfile.BadZipFile) as e:
        raise SnapshotError(f"could not open zip {archive}: {e}") from e

    count = 0
    with zf:
        for info in zf.infolist():
            outpath = safe_member_path(info.filename, root)
            mode = _entry_mode(info)
            if info.is_dir():
                try:
                    outpath.mkdir(mode=mode, parents=True, exist_ok=True)
                except OSError as e:
                    raise SnapshotError(f"could not mkdir {outpath}: {e}") from e
                count += 1
                continue

            try:
                outpath.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise SnapshotError(f"could not mkdir {outpath.parent}: {e}") from e

            try:
                fd = os.open(outpath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
            except OSError as e:
                raise SnapshotError(f"could not create file {outpath}: {e}") from e
            try:
                with os.fdopen(fd, "wb") as dst, zf.open(info) as src:
                    shutil.copyfileobj(src, dst)
                # O_CREAT only applies mode to new files
                os.chmod(outpath, mode)
            except (OSError, zipfile.BadZipFile) as e:
                raise SnapshotError(f"could not write to file {outpath}: {e}") from e
            count += 1
    return count


class SnapshotExporter:
    """
    Export references from the mirror into snapshot directories.

    Attributes:
        workspace: Workspace holding the mirror and snapshots
        git: Git client
    """

    def __init__(self, workspace: Workspace, git: Optional[GitClient] = None):
        self.workspace = workspace
        self.git = git or GitClient()

    def export(self, ref: str) -> Path:
        """
        Write the source tree of ref to its snapshot directory.

        Args:
            ref: Reference to export (a tag, branch or commit in the mirror)

        Returns:
            Snapshot root directory

        Raises:
            ReferenceNotFoundError: If ref does not resolve in the mirror
            SnapshotError: If archiving or extraction fails
        """
        mirror = self.workspace.mirror_path

        # Resolve first for a clear error before any archive work
        try:
            commit = self.git.rev_parse(mirror, ref)
        except GitCommandError as e:
            raise ReferenceNotFoundError(ref, str(e)) from e
        logger.debug(f"{ref} resolves to {commit}")

        archive = self.workspace.archive_path(ref)
        root = self.workspace.snapshot_dir(ref)
        try:
            try:
                self.git.archive_zip(mirror, ref, archive)
            except GitCommandError as e:
                raise SnapshotError(f"could not archive Go repo: {e}") from e

            try:
                root.mkdir(mode=DEFAULT_DIR_MODE, exist_ok=True)
            except OSError as e:
                raise SnapshotError(f"could not mkdir {root}: {e}") from e

            count = extract_snapshot(archive, root)
            logger.debug(f"Extracted {count} entries into {root}")
        finally:
            archive.unlink(missing_ok=True)

        self.write_version_marker(ref)
        logger.info(f"exported {ref} to {root}")
        return root

    def write_version_marker(self, ref: str) -> Path:
        """
        Record ref in the snapshot's VERSION file, replacing prior content.

        Raises:
            SnapshotError: If the file cannot be written
        """
        path = self.workspace.version_file(ref)
        try:
            atomic_write(path, ref + "\n")
        except OSError as e:
            raise SnapshotError(f"could not write VERSION file: {e}") from e
        return path


__all__ = ["SnapshotExporter", "extract_snapshot"]
