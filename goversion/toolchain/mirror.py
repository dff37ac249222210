"""
Local bare mirror of the Go repository.
"""

import logging
from typing import Optional

from goversion.core.config import DEFAULT_REMOTE
from goversion.core.directory import Workspace
from goversion.core.exceptions import GitCommandError, MirrorError
from goversion.core.git import GitClient

logger = logging.getLogger(__name__)


class MirrorManager:
    """
    Clone the remote once, fetch it on every later use.

    Attributes:
        workspace: Workspace owning the mirror
        remote: Source-control remote URL
        git: Git client
    """

    def __init__(
        self,
        workspace: Workspace,
        remote: str = DEFAULT_REMOTE,
        git: Optional[GitClient] = None,
    ):
        self.workspace = workspace
        self.remote = remote
        self.git = git or GitClient()

    def exists(self) -> bool:
        return self.workspace.mirror_path.exists()

    def ensure_mirror(self) -> None:
        """
        Clone the mirror if absent, otherwise fetch updates into it.

        Raises:
            MirrorError: If git clone or git fetch fails
        """
        path = self.workspace.mirror_path
        cloning = not self.exists()
        verb = "clone" if cloning else "update"

        logger.info(f"{'cloning' if cloning else 'updating'} Go repo")
        try:
            if cloning:
                path.parent.mkdir(parents=True, exist_ok=True)
                self.git.clone_bare(self.remote, path)
            else:
                self.git.fetch(path)
        except (GitCommandError, OSError) as e:
            raise MirrorError(f"could not {verb} Go repo: {e}") from e


__all__ = ["MirrorManager"]
