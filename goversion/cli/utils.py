"""
Shared utilities for CLI commands.
"""

import logging
from typing import List, Tuple

from goversion.core.config import Config, load_config
from goversion.core.directory import Workspace
from goversion.core.exceptions import UsageError
from goversion.versions.reference import normalize

logger = logging.getLogger(__name__)


def get_config(args) -> Config:
    """Load the configuration selected by --config (or the defaults)."""
    return load_config(getattr(args, "config", None))


def get_workspace(config: Config) -> Workspace:
    """Locate the toolchain parent directory for a configuration."""
    return Workspace.discover(config.parent_dir)


def load_context(args) -> Tuple[Config, Workspace]:
    """
    Load configuration and workspace for a command.

    Raises:
        ConfigError: If the configuration is invalid
        WorkspaceError: If the parent directory cannot be determined
    """
    config = get_config(args)
    return config, get_workspace(config)


def require_arg(args: List[str], index: int = 0) -> str:
    """
    Return a positional command argument.

    Raises:
        UsageError: If the argument is missing
    """
    if len(args) <= index:
        raise UsageError("missing argument")
    return args[index]


def require_version(raw: str) -> str:
    """
    Normalize a version argument.

    Raises:
        UsageError: If raw does not look like a Go version
    """
    ref, ok = normalize(raw)
    if not ok:
        raise UsageError(f"not a Go version: {raw!r}")
    return ref
