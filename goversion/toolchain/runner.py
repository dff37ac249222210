"""
Run an installed Go version.
"""

import logging
import subprocess
from typing import List

from goversion.core.directory import Workspace
from goversion.core.exceptions import ToolchainNotInstalledError

logger = logging.getLogger(__name__)


def run_version(
    workspace: Workspace, ref: str, args: List[str], prog: str = "goversion"
) -> int:
    """
    Run `go <args>` using the toolchain built for ref.

    Standard streams are inherited.

    Args:
        workspace: Workspace holding the snapshot
        ref: Normalized reference
        args: Arguments passed through to go
        prog: Program name used in the install hint

    Returns:
        0 if go succeeded, 1 otherwise

    Raises:
        ToolchainNotInstalledError: If ref has not been built
    """
    binary = workspace.tool_binary(ref)
    if not binary.exists():
        raise ToolchainNotInstalledError(
            f"{binary} not found. Have you run {prog} install {ref}?"
        )

    cmd = [str(binary)] + list(args)
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd)
    except OSError as e:
        logger.error(f"could not run {binary}: {e}")
        return 1
    return 0 if result.returncode == 0 else 1


__all__ = ["run_version"]
