"""
Remote tag listing.
"""

import logging
from typing import List, Optional

from goversion.core.exceptions import TagListError
from goversion.core.git import GitClient

logger = logging.getLogger(__name__)

TAG_PATTERN = "go1*"
TAG_NAMESPACE = "refs/tags/"


def parse_ls_remote(output: str) -> List[str]:
    """
    Parse `git ls-remote --tags` output into tag names.

    Each line must be exactly `<hash> <ref-path>`.

    Args:
        output: Raw ls-remote output

    Returns:
        Tag names with the refs/tags/ prefix removed, in remote order

    Raises:
        TagListError: If any line does not have exactly two fields
    """
    tags = []
    for line in output.splitlines():
        fields = line.split()
        if len(fields) != 2:
            raise TagListError(f"unexpected git ls-remote line {line!r}")
        ref_path = fields[1]
        if ref_path.startswith(TAG_NAMESPACE):
            ref_path = ref_path[len(TAG_NAMESPACE):]
        tags.append(ref_path)
    return tags


def list_tags(remote: str, git: Optional[GitClient] = None) -> List[str]:
    """
    List tagged Go versions available on the remote.

    Args:
        remote: Source-control remote URL
        git: Git client (default: GitClient())

    Returns:
        Tag names such as 'go1.8', 'go1.8beta1'

    Raises:
        GitCommandError: If the remote call fails
        TagListError: If the output is malformed
    """
    git = git or GitClient()
    logger.debug(f"Listing tags of {remote}")
    return parse_ls_remote(git.ls_remote_tags(remote, TAG_PATTERN))


__all__ = ["list_tags", "parse_ls_remote"]
