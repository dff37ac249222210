"""
Install command implementation.

Builds a Go version from source, building the bootstrap toolchain first
when it is missing.
"""

import logging

from goversion.cli.utils import load_context, require_arg, require_version
from goversion.toolchain.installer import InstallOrchestrator

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments (args.args[0] is the version)

    Returns:
        Exit code (0 for success)
    """
    ref = require_version(require_arg(args.args))
    config, workspace = load_context(args)
    InstallOrchestrator(workspace, config).install(ref)
    return 0
