"""
Install orchestration.

Go 1.5 and later are written in Go, so building them needs an existing Go
toolchain. The installer keeps one bootstrap snapshot (release-branch.go1.4,
the last release buildable with only a C compiler) and points every other
build at it through GOROOT_BOOTSTRAP.

Sequence for `install <ref>`:
    1. Clone or update the mirror
    2. Export and build the bootstrap, unless its go binary already exists
    3. Export and build <ref> with GOROOT_BOOTSTRAP=<parent>/<bootstrap>

The whole sequence runs under the workspace lock.
"""

import logging
from pathlib import Path
from typing import Optional

from goversion.core.config import Config
from goversion.core.directory import Workspace
from goversion.core.git import GitClient
from goversion.core.locking import LockManager
from goversion.toolchain.builder import ToolchainBuilder
from goversion.toolchain.mirror import MirrorManager
from goversion.toolchain.snapshot import SnapshotExporter

logger = logging.getLogger(__name__)

BOOTSTRAP_ENV = "GOROOT_BOOTSTRAP"


class InstallOrchestrator:
    """
    Install Go versions from source.

    Attributes:
        workspace: Workspace holding mirror and snapshots
        config: Effective configuration
        mirror: Mirror manager
        exporter: Snapshot exporter
        builder: Toolchain builder
        lock_manager: Workspace lock
    """

    def __init__(
        self,
        workspace: Workspace,
        config: Optional[Config] = None,
        git: Optional[GitClient] = None,
        mirror: Optional[MirrorManager] = None,
        exporter: Optional[SnapshotExporter] = None,
        builder: Optional[ToolchainBuilder] = None,
        lock_manager: Optional[LockManager] = None,
    ):
        self.workspace = workspace
        self.config = config or Config()
        git = git or GitClient()
        self.mirror = mirror or MirrorManager(workspace, self.config.remote, git)
        self.exporter = exporter or SnapshotExporter(workspace, git)
        self.builder = builder or ToolchainBuilder(workspace)
        self.lock_manager = lock_manager or LockManager(workspace.lock_path)

    @property
    def bootstrap_ref(self) -> str:
        return self.config.bootstrap

    def ensure_bootstrap(self) -> Path:
        """
        Make sure the bootstrap toolchain is built.

        Returns:
            Bootstrap snapshot root, suitable for GOROOT_BOOTSTRAP
        """
        ref = self.bootstrap_ref
        if self.workspace.is_installed(ref):
            logger.debug(f"Bootstrap {ref} already built")
        else:
            logger.info(f"building bootstrap toolchain {ref}")
            self.exporter.export(ref)
            self.builder.build(ref)
        return self.workspace.snapshot_dir(ref)

    def install(self, ref: str) -> Path:
        """
        Install ref from source.

        Args:
            ref: Normalized reference (e.g. 'go1.8beta1')

        Returns:
            Path to the built tool binary

        Raises:
            GoVersionError: Any failure from the mirror, export or build steps
        """
        with self.lock_manager.workspace_lock(timeout=self.config.lock_timeout):
            self.mirror.ensure_mirror()
            bootstrap = self.ensure_bootstrap()
            env = {BOOTSTRAP_ENV: str(bootstrap)}

            self.exporter.export(ref)
            binary = self.builder.build(ref, env=env)

        logger.info(f"installed {ref}: {binary}")
        return binary

    def update(self) -> None:
        """Clone or update the mirror only."""
        with self.lock_manager.workspace_lock(timeout=self.config.lock_timeout):
            self.mirror.ensure_mirror()

    def export(self, ref: str) -> Path:
        """Update the mirror and export ref without building it."""
        with self.lock_manager.workspace_lock(timeout=self.config.lock_timeout):
            self.mirror.ensure_mirror()
            return self.exporter.export(ref)


__all__ = ["InstallOrchestrator", "BOOTSTRAP_ENV"]
