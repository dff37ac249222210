"""
Remote binary index parsing.

The Go download index is a plaintext list of artifact URLs, one per line:

    https://storage.googleapis.com/golang/go1.2.2.darwin-386-osx10.6.tar.gz
    https://storage.googleapis.com/golang/go1.8.linux-amd64.tar.gz
    https://storage.googleapis.com/golang/go1.8.linux-amd64.tar.gz.sha256

The format has no grammar; parse_index_line recognizes the line shapes the
index is known to contain and rejects everything else. Its tests pin the
accepted shapes to literal lines.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from goversion.core.config import DEFAULT_INDEX_URL
from goversion.core.download import fetch_text

logger = logging.getLogger(__name__)

# Installers, checksums and source archives cannot be used directly
UNUSABLE_SUFFIXES = (".pkg", ".msi", ".sha256", ".src.tar.gz")

ARCHIVE_SUFFIXES = (".tar.gz", ".zip")

# Only darwin downloads carry a third, OS-release component
LEGACY_DARWIN_QUALIFIER = "osx10.6"

# go1.6beta1 had both linux-arm and linux-arm6; every other release uses armv6l
ARCH_ALIASES = {"arm6": "arm", "armv6l": "arm"}
EXCLUDED_ARCHES = {"arm"}


@dataclass(frozen=True)
class IndexEntry:
    """
    One downloadable artifact from the binary index.

    Attributes:
        version: Version prefix of the file name (e.g. 'go1.2.2')
        os: Target OS
        arch: Target architecture in GOARCH naming
        subarch: Optional third platform component (e.g. 'osx10.8')
        kind: Archive suffix ('.tar.gz', '.zip') or '' if none
        filename: File name as listed
    """

    version: str
    os: str
    arch: str
    subarch: Optional[str]
    kind: str
    filename: str


def parse_index_line(line: str, target_os: str) -> Optional[IndexEntry]:
    """
    Parse one index line for a target OS.

    Args:
        line: One line of the index (a URL)
        target_os: GOOS to match

    Returns:
        IndexEntry, or None if the line is not a usable artifact for target_os

    Example:
        >>> parse_index_line(
        ...     "https://storage.googleapis.com/golang/go1.2.2.linux-amd64.tar.gz",
        ...     "linux",
        ... ).version
        'go1.2.2'
    """
    line = line.strip()
    if line.endswith(UNUSABLE_SUFFIXES) or target_os not in line:
        return None

    slash = line.rfind("/")
    if slash == -1:
        return None
    filename = line[slash + 1:]

    name = filename
    kind = ""
    for suffix in ARCHIVE_SUFFIXES:
        if suffix in name:
            kind = kind or suffix
            name = name.replace(suffix, "")

    # version.platform, but platform can contain periods: split on the OS
    i = name.find(target_os)
    if i < 1:
        return None
    version, plat = name[: i - 1], name[i:]

    parts = plat.split("-")
    subarch = None
    if len(parts) == 3:
        if parts[2] == LEGACY_DARWIN_QUALIFIER:
            return None
        subarch = parts[2]
    elif len(parts) != 2:
        return None

    arch = parts[1]
    if arch in EXCLUDED_ARCHES:
        return None
    arch = ARCH_ALIASES.get(arch, arch)

    return IndexEntry(
        version=version,
        os=target_os,
        arch=arch,
        subarch=subarch,
        kind=kind,
        filename=filename,
    )


def filter_index(index_text: str, target_os: str, target_arch: str) -> List[str]:
    """
    Select the versions in an index that match a platform.

    Args:
        index_text: Full index document
        target_os: GOOS to match
        target_arch: GOARCH to match

    Returns:
        Matching versions in index order
    """
    versions = []
    for line in index_text.splitlines():
        entry = parse_index_line(line, target_os)
        if entry is None or entry.arch != target_arch:
            continue
        versions.append(entry.version)
    return versions


def list_downloadable(
    target_os: str,
    target_arch: str,
    index_url: str = DEFAULT_INDEX_URL,
    timeout: float = 60,
) -> List[str]:
    """
    Fetch the binary index and list versions prebuilt for a platform.

    Raises:
        DownloadError: If the index cannot be fetched
    """
    logger.debug(f"Listing downloads for {target_os}-{target_arch} from {index_url}")
    return filter_index(fetch_text(index_url, timeout=timeout), target_os, target_arch)


__all__ = [
    "IndexEntry",
    "parse_index_line",
    "filter_index",
    "list_downloadable",
]
