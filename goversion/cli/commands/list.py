"""
List command implementation.

Prints the Go versions tagged in the remote repository.
"""

import logging

from goversion.cli.utils import get_config
from goversion.versions.tags import list_tags

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = get_config(args)
    for tag in list_tags(config.remote):
        print(tag)
    return 0
