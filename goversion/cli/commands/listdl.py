"""
Listdl command implementation.

Prints the Go versions with a prebuilt download for this platform.
"""

import logging

from goversion.cli.utils import get_config
from goversion.core.platform import detect_platform
from goversion.versions.index import list_downloadable

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the listdl command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = get_config(args)
    host = detect_platform()
    logger.debug(f"Host platform: {host}")
    versions = list_downloadable(
        host.os, host.arch, index_url=config.index_url, timeout=config.http_timeout
    )
    for version in versions:
        print(version)
    return 0
