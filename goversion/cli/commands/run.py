"""
Version command implementation.

`goversion <version> <args>` runs `go <args>` with the given installed version.
"""

from goversion.cli.utils import load_context, require_version
from goversion.toolchain.runner import run_version


def run(args) -> int:
    """
    Run go from an installed version.

    Args:
        args: Parsed arguments; args.command is the version

    Returns:
        0 if go succeeded, 1 otherwise
    """
    ref = require_version(args.command)
    _, workspace = load_context(args)
    return run_version(workspace, ref, args.args)
