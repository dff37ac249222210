"""
Export command implementation (undocumented).

Updates the mirror and exports a raw reference (tag, branch or commit)
without building it.
"""

from goversion.cli.utils import load_context, require_arg
from goversion.toolchain.installer import InstallOrchestrator


def run(args) -> int:
    ref = require_arg(args.args)
    config, workspace = load_context(args)
    root = InstallOrchestrator(workspace, config).export(ref)
    print(root)
    return 0
