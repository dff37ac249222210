"""
Centralized exception hierarchy for goversion.

Every component raises one of these instead of terminating the process.
The CLI is the single place that turns them into exit codes and messages.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GoVersionError(Exception):
    """Base exception for all goversion errors."""

    pass


class UsageError(GoVersionError):
    """Raised when the command line is malformed."""

    pass


class ConfigError(GoVersionError):
    """Raised when the configuration file cannot be used."""

    pass


class WorkspaceError(GoVersionError):
    """Raised when the toolchain parent directory cannot be determined."""

    pass


class LockTimeoutError(GoVersionError):
    """Raised when the workspace lock cannot be acquired within timeout."""

    pass


# ============================================================================
# Source Control Exceptions
# ============================================================================


class GitCommandError(GoVersionError):
    """Raised when a git invocation fails."""

    def __init__(self, args: list, returncode: int, output: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.output = output
        msg = f"git command failed ({returncode}): {' '.join(self.args_list)}"
        if output:
            msg += f"\n{output.rstrip()}"
        super().__init__(msg)


class TagListError(GoVersionError):
    """Raised when the remote tag listing cannot be parsed."""

    pass


class MirrorError(GoVersionError):
    """Raised when the local mirror cannot be cloned or updated."""

    pass


class ReferenceNotFoundError(GoVersionError):
    """Raised when a reference does not resolve in the mirror."""

    def __init__(self, ref: str, detail: str = ""):
        self.ref = ref
        msg = f"could not resolve {ref!r}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


# ============================================================================
# Snapshot Exceptions
# ============================================================================


class SnapshotError(GoVersionError):
    """Raised when a source snapshot cannot be exported."""

    pass


class InsecureArchiveError(SnapshotError):
    """Raised when an archive entry would be written outside the snapshot."""

    pass


# ============================================================================
# Build Exceptions
# ============================================================================


class BuildError(GoVersionError):
    """Raised when building a snapshot fails."""

    def __init__(self, message: str, output: str = ""):
        self.output = output
        if output:
            message = f"{message}\n\n{output}"
        super().__init__(message)


class CompilerNotFoundError(BuildError):
    """Raised when no native C compiler is reachable."""

    def __init__(self, tried: list):
        self.tried = list(tried)
        super().__init__(f"could not find a C compiler, tried {self.tried}")


class UnsupportedPlatformError(BuildError):
    """Raised when the host OS has no known build script."""

    pass


class BuildVerificationError(BuildError):
    """Raised when a build finished but produced no usable tool binary."""

    pass


class ToolchainNotInstalledError(GoVersionError):
    """Raised when running a version whose tool binary does not exist."""

    pass


# ============================================================================
# Download Exceptions
# ============================================================================


class DownloadError(GoVersionError):
    """Raised when the binary index or an artifact cannot be fetched."""

    pass


class ChecksumError(DownloadError):
    """Raised when a downloaded artifact does not match its digest."""

    pass
