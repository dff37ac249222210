"""
Update command implementation (undocumented).

Clones or updates the local mirror without building anything.
"""

from goversion.cli.utils import load_context
from goversion.toolchain.installer import InstallOrchestrator


def run(args) -> int:
    config, workspace = load_context(args)
    InstallOrchestrator(workspace, config).update()
    return 0
