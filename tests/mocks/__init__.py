"""
Mock implementations for testing goversion components.
"""

from .git import FakeGitClient, go_source_tree, write_zip

__all__ = [
    "FakeGitClient",
    "go_source_tree",
    "write_zip",
]
