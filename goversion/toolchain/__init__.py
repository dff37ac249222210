"""
Mirror, snapshot, build and install of Go toolchains.
"""

from .mirror import MirrorManager
from .snapshot import SnapshotExporter, extract_snapshot
from .builder import ToolchainBuilder, find_c_compiler, select_build_script
from .installer import InstallOrchestrator, BOOTSTRAP_ENV
from .fetcher import BinaryFetcher
from .runner import run_version

__all__ = [
    "MirrorManager",
    "SnapshotExporter",
    "extract_snapshot",
    "ToolchainBuilder",
    "find_c_compiler",
    "select_build_script",
    "InstallOrchestrator",
    "BOOTSTRAP_ENV",
    "BinaryFetcher",
    "run_version",
]
