"""
Thin wrapper around the git executable.

All source-control access goes through GitClient so the rest of goversion
never builds git command lines itself, and tests can replace it wholesale.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from goversion.core.exceptions import GitCommandError

logger = logging.getLogger(__name__)


class GitClient:
    """
    Run git commands.

    Attributes:
        executable: git executable name or path
    """

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def _run_captured(self, args: List[str], cwd: Optional[Path] = None) -> str:
        cmd = [self.executable] + args
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise GitCommandError(cmd, -1, str(e)) from e
        if result.returncode != 0:
            raise GitCommandError(cmd, result.returncode, result.stdout)
        return result.stdout

    def _run_interactive(self, args: List[str], cwd: Optional[Path] = None) -> None:
        # stdin/stdout/stderr are inherited so credential prompts reach the user
        cmd = [self.executable] + args
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=cwd)
        except OSError as e:
            raise GitCommandError(cmd, -1, str(e)) from e
        if result.returncode != 0:
            raise GitCommandError(cmd, result.returncode)

    def ls_remote_tags(self, remote: str, pattern: str) -> str:
        """Return raw `git ls-remote --tags` output for tags matching pattern."""
        return self._run_captured(["ls-remote", "--tags", remote, pattern])

    def clone_bare(self, remote: str, path: Path) -> None:
        """Clone remote into path as a bare repository."""
        self._run_interactive(["clone", "--bare", remote, str(path)])

    def fetch(self, repo: Path) -> None:
        """Fetch updates into an existing repository."""
        self._run_interactive(["fetch"], cwd=repo)

    def rev_parse(self, repo: Path, ref: str) -> str:
        """Resolve ref to a commit hash inside repo."""
        return self._run_captured(["rev-parse", ref], cwd=repo).strip()

    def archive_zip(self, repo: Path, ref: str, output: Path) -> None:
        """Write a zip archive of the tree at ref to output."""
        self._run_interactive(
            ["archive", "--format", "zip", "-o", str(output), ref], cwd=repo
        )


__all__ = ["GitClient"]
