"""
Prebuilt binary download.

An alternative to building from source: find the artifact for the host
platform in the binary index and download it. Failures here are reported
to the caller as DownloadError and never abort an install.
"""

import logging
import tempfile
from pathlib import Path
from typing import Dict, Optional, Tuple

from goversion.core.config import Config
from goversion.core.download import download_file, fetch_text
from goversion.core.exceptions import DownloadError
from goversion.core.platform import PlatformInfo, detect_platform

logger = logging.getLogger(__name__)

# darwin uses the tarball rather than the legacy osx10.6 .pkg installer, which
# the index filter rejects; freebsd tarballs are published alongside linux ones
ARTIFACT_EXTENSIONS: Dict[str, str] = {
    "darwin": ".tar.gz",
    "linux": ".tar.gz",
    "freebsd": ".tar.gz",
    "windows": ".zip",
}

CHECKSUM_SUFFIX = ".sha256"


class BinaryFetcher:
    """
    Download prebuilt Go distributions.

    Attributes:
        config: Effective configuration (index and download URLs)
        platform: Host platform
        download_dir: Where artifacts are written (default: system temp dir)
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        platform: Optional[PlatformInfo] = None,
        download_dir: Optional[Path] = None,
    ):
        self.config = config or Config()
        self.platform = platform or detect_platform()
        self.download_dir = Path(download_dir or tempfile.gettempdir())

    def artifact_name(self, ref: str) -> str:
        """
        Name of the artifact for ref on the host platform.

        Raises:
            DownloadError: If the host OS has no known artifact format

        Example:
            >>> BinaryFetcher(platform=PlatformInfo("linux", "amd64")).artifact_name("go1.8")
            'go1.8.linux-amd64.tar.gz'
        """
        ext = ARTIFACT_EXTENSIONS.get(self.platform.os)
        if ext is None:
            raise DownloadError(f"unrecognized GOOS: {self.platform.os}")
        return f"{ref}.{self.platform.platform_string()}{ext}"

    def select_binary(self, ref: str) -> Tuple[str, str, Optional[str]]:
        """
        Find the download URL for ref in the binary index.

        Returns:
            (url, filename, checksum_url); checksum_url is None when the
            index lists no digest for the artifact

        Raises:
            DownloadError: If the index is unreachable or lacks the artifact
        """
        index = fetch_text(self.config.index_url, timeout=self.config.http_timeout)
        filename = self.artifact_name(ref)
        url = self.config.download_url + filename
        listed = {line.strip() for line in index.splitlines()}
        if url not in listed:
            raise DownloadError(f"binary ({url}) not available")
        checksum_url = url + CHECKSUM_SUFFIX
        return url, filename, checksum_url if checksum_url in listed else None

    def fetch(self, ref: str) -> Path:
        """
        Download the prebuilt artifact for ref.

        Args:
            ref: Normalized reference (e.g. 'go1.8')

        Returns:
            Path of the downloaded file

        Raises:
            DownloadError: If any step fails
            ChecksumError: If the artifact does not match its published digest
        """
        url, filename, checksum_url = self.select_binary(ref)

        expected = None
        if checksum_url:
            digest = fetch_text(checksum_url, timeout=self.config.http_timeout).split()
            expected = digest[0] if digest else None

        destination = self.download_dir / filename
        return download_file(
            url,
            destination,
            expected_sha256=expected,
            timeout=self.config.http_timeout,
        )


__all__ = ["BinaryFetcher", "ARTIFACT_EXTENSIONS"]
