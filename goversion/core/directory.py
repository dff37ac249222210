"""
Workspace layout for goversion.

All state lives under a single toolchain parent directory, derived from the
host Go installation's GOPATH unless configured explicitly.

Directory Structure:
    <parent>/                     : <first GOPATH entry>/src/golang.org/x
        - go.mirror/              : Bare mirror of the Go repository
        - <ref>/                  : Exported snapshot for one reference
          - VERSION               : Marker holding the reference string
          - src/                  : Sources, including the make scripts
          - bin/go                : Tool binary, present once built
        - .goversion.lock         : Workspace lock file
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

from goversion.core.exceptions import WorkspaceError
from goversion.core.platform import PlatformInfo, detect_platform

logger = logging.getLogger(__name__)

MIRROR_DIRNAME = "go.mirror"
VERSION_FILENAME = "VERSION"
LOCK_FILENAME = ".goversion.lock"


def repo_parent_from_gopath() -> Path:
    """
    Derive the toolchain parent directory from `go env GOPATH`.

    Returns:
        <first GOPATH entry>/src/golang.org/x

    Raises:
        WorkspaceError: If go cannot be run or GOPATH is empty
    """
    try:
        result = subprocess.run(
            ["go", "env", "GOPATH"],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as e:
        raise WorkspaceError(f"could not determine repo path: {e}") from e

    if result.returncode != 0:
        raise WorkspaceError(
            f"could not determine repo path: go env GOPATH exited "
            f"{result.returncode}: {result.stdout.strip()}"
        )

    gopath = result.stdout.strip()
    entries = [p for p in gopath.split(os.pathsep) if p]
    if not entries:
        raise WorkspaceError(
            f"could not determine repo path: could not parse GOPATH={gopath!r}"
        )
    return Path(entries[0]) / "src" / "golang.org" / "x"


class Workspace:
    """
    Paths of the mirror and snapshots under one parent directory.

    Attributes:
        parent: Toolchain parent directory
        platform: Host platform, used for the tool binary name
    """

    def __init__(self, parent: Path, platform: Optional[PlatformInfo] = None):
        self.parent = Path(parent)
        self.platform = platform or detect_platform()

    @classmethod
    def discover(
        cls, parent_dir: Optional[Path] = None, platform: Optional[PlatformInfo] = None
    ) -> "Workspace":
        """
        Create a workspace from an explicit parent or from GOPATH.

        Args:
            parent_dir: Configured parent directory, if any
            platform: Host platform (auto-detected if None)
        """
        if parent_dir is None:
            parent_dir = repo_parent_from_gopath()
        logger.debug(f"Toolchain parent directory: {parent_dir}")
        return cls(parent_dir, platform=platform)

    @property
    def mirror_path(self) -> Path:
        return self.parent / MIRROR_DIRNAME

    @property
    def lock_path(self) -> Path:
        return self.parent / LOCK_FILENAME

    def snapshot_dir(self, ref: str) -> Path:
        """Return the snapshot root for ref."""
        return self.parent / ref

    def source_dir(self, ref: str) -> Path:
        return self.snapshot_dir(ref) / "src"

    def version_file(self, ref: str) -> Path:
        return self.snapshot_dir(ref) / VERSION_FILENAME

    def archive_path(self, ref: str) -> Path:
        """Temporary zip archive used while exporting ref."""
        return self.parent / f"{ref}.zip"

    def tool_binary(self, ref: str) -> Path:
        """Return the path the built `go` binary of ref lives at."""
        return self.snapshot_dir(ref) / "bin" / f"go{self.platform.exe_suffix}"

    def is_installed(self, ref: str) -> bool:
        """A snapshot counts as installed once its tool binary exists."""
        return self.tool_binary(ref).exists()


__all__ = [
    "Workspace",
    "repo_parent_from_gopath",
    "MIRROR_DIRNAME",
    "VERSION_FILENAME",
    "LOCK_FILENAME",
]
