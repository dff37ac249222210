"""
Core functionality for goversion.

This package contains the foundational modules that other components depend on.
"""

from .config import Config, load_config
from .directory import Workspace, repo_parent_from_gopath
from .git import GitClient
from .locking import LockManager
from .platform import PlatformInfo, detect_platform, clear_platform_cache
from .exceptions import (
    GoVersionError,
    UsageError,
    ConfigError,
    WorkspaceError,
    LockTimeoutError,
    GitCommandError,
    TagListError,
    MirrorError,
    ReferenceNotFoundError,
    SnapshotError,
    InsecureArchiveError,
    BuildError,
    CompilerNotFoundError,
    UnsupportedPlatformError,
    BuildVerificationError,
    ToolchainNotInstalledError,
    DownloadError,
    ChecksumError,
)

__all__ = [
    "Config",
    "load_config",
    "Workspace",
    "repo_parent_from_gopath",
    "GitClient",
    "LockManager",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    "GoVersionError",
    "UsageError",
    "ConfigError",
    "WorkspaceError",
    "LockTimeoutError",
    "GitCommandError",
    "TagListError",
    "MirrorError",
    "ReferenceNotFoundError",
    "SnapshotError",
    "InsecureArchiveError",
    "BuildError",
    "CompilerNotFoundError",
    "UnsupportedPlatformError",
    "BuildVerificationError",
    "ToolchainNotInstalledError",
    "DownloadError",
    "ChecksumError",
]
