"""
Download command implementation (undocumented).

Downloads the prebuilt distribution of a Go version for this platform
into the system temporary directory.
"""

import logging

from goversion.cli.utils import get_config, require_arg, require_version
from goversion.core.exceptions import DownloadError
from goversion.toolchain.fetcher import BinaryFetcher

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the download command.

    Args:
        args: Parsed command-line arguments (args.args[0] is the version)

    Returns:
        Exit code (0 for success, 1 if the download failed)
    """
    ref = require_version(require_arg(args.args))
    config = get_config(args)
    try:
        path = BinaryFetcher(config).fetch(ref)
    except DownloadError as e:
        logger.error(f"download error: {e}")
        return 1
    logger.info(f"download ready: {path}")
    return 0
