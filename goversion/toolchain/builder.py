"""
Toolchain builder.

Runs the Go distribution's own make script inside an exported snapshot and
decides whether the build worked. The script's exit status is not trusted
on its own: make.bat reports success even when it fails (in at least every
release up to 1.8.1beta), so the presence of the built `go` binary is the
authoritative success signal.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from goversion.core.directory import Workspace
from goversion.core.exceptions import (
    BuildError,
    BuildVerificationError,
    CompilerNotFoundError,
    UnsupportedPlatformError,
)

logger = logging.getLogger(__name__)

DEFAULT_C_COMPILERS = ["gcc", "clang"]

BUILD_SCRIPTS: Dict[str, str] = {
    "darwin": "make.bash",
    "linux": "make.bash",
    "freebsd": "make.bash",
    "netbsd": "make.bash",
    "openbsd": "make.bash",
    "dragonfly": "make.bash",
    "windows": "make.bat",
    "plan9": "make.rc",
}


def find_c_compiler(env: Optional[Mapping[str, str]] = None) -> str:
    """
    Look for a native C compiler on PATH.

    Args:
        env: Environment to read CC and PATH from (default: os.environ)

    Returns:
        Name of the first compiler found

    Raises:
        CompilerNotFoundError: If none of the candidates is on PATH
    """
    env = os.environ if env is None else env
    candidates: List[str] = list(DEFAULT_C_COMPILERS)
    cc = env.get("CC", "")
    if cc:
        candidates.append(cc)

    for name in candidates:
        if shutil.which(name, path=env.get("PATH")):
            logger.debug(f"Found C compiler: {name}")
            return name
    raise CompilerNotFoundError(candidates)


def select_build_script(goos: str) -> str:
    """
    Pick the make script for a host OS.

    Raises:
        UnsupportedPlatformError: If goos has no known script
    """
    try:
        return BUILD_SCRIPTS[goos]
    except KeyError:
        raise UnsupportedPlatformError(f"unrecognized GOOS: {goos}") from None


class ToolchainBuilder:
    """
    Build exported snapshots.

    Attributes:
        workspace: Workspace holding the snapshots
    """

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    def build(self, ref: str, env: Optional[Mapping[str, str]] = None) -> Path:
        """
        Build the snapshot of ref.

        Args:
            ref: Exported reference to build
            env: Extra environment variables for the build script

        Returns:
            Path to the built tool binary

        Raises:
            CompilerNotFoundError: If cgo is enabled and no C compiler exists
            UnsupportedPlatformError: If the host OS has no build script
            BuildError: If the script exits non-zero or cannot be started
            BuildVerificationError: If no tool binary was produced
        """
        build_env = dict(os.environ)
        if env:
            build_env.update(env)

        if build_env.get("CGO_ENABLED") != "0":
            find_c_compiler(build_env)

        script = select_build_script(self.workspace.platform.os)
        srcdir = self.workspace.source_dir(ref)
        mk = (srcdir / script).absolute()

        logger.info(f"running {mk}")
        try:
            result = subprocess.run(
                [str(mk)],
                cwd=srcdir,
                env=build_env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise BuildError(f"could not run {mk} in {srcdir}: {e}") from e

        output = result.stdout or ""
        if result.returncode != 0:
            raise BuildError(
                f"could not build {ref}: {script} exited {result.returncode}", output
            )

        return self.verify_build_artifact(ref, output)

    def verify_build_artifact(self, ref: str, output: str = "") -> Path:
        """
        Confirm that the build produced a usable tool binary.

        Args:
            ref: Built reference
            output: Build output, attached to the error for diagnosis

        Returns:
            Path to the tool binary

        Raises:
            BuildVerificationError: If the binary is missing
        """
        binary = self.workspace.tool_binary(ref)
        if not binary.exists():
            raise BuildVerificationError(f"could not find cmd/go at {binary}", output)

        # make.bat fails silently; a path lookup double-checks the binary
        if self.workspace.platform.os == "windows":
            if shutil.which(str(binary)) is None:
                raise BuildVerificationError(
                    f"go.exe is not available for {ref}: {binary}", output
                )

        logger.debug(f"Verified {binary}")
        return binary


__all__ = [
    "ToolchainBuilder",
    "find_c_compiler",
    "select_build_script",
    "BUILD_SCRIPTS",
]
