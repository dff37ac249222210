"""
HTTP access for the binary index and prebuilt artifacts.

Features:
- Plain-text fetch of the binary index
- Streaming artifact download straight to disk
- SHA256 verification while downloading

There are no retries: a failed request surfaces as DownloadError and the
user re-runs the command.
"""

import hashlib
import logging
from pathlib import Path
from typing import Optional

import requests
from requests.exceptions import RequestException

from goversion.core.exceptions import ChecksumError, DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


class StreamingHasher:
    """Compute a SHA256 digest incrementally."""

    def __init__(self):
        self.hasher = hashlib.sha256()

    def update(self, data: bytes):
        """Add data to hash computation."""
        self.hasher.update(data)

    def finalize(self) -> str:
        """Get final hash value as hex string."""
        return self.hasher.hexdigest()

    def verify(self, expected_hash: str) -> bool:
        """
        Check if computed hash matches expected value.

        Args:
            expected_hash: Expected hash value (hex string, any case)

        Returns:
            True if hashes match, False otherwise
        """
        return self.finalize().lower() == expected_hash.strip().lower()


def fetch_text(url: str, timeout: float = 60) -> str:
    """
    Fetch a text document.

    Args:
        url: URL to fetch
        timeout: Request timeout in seconds

    Returns:
        Response body decoded as text

    Raises:
        DownloadError: If the request fails or returns an error status
    """
    logger.debug(f"Fetching {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except RequestException as e:
        raise DownloadError(f"could not fetch {url}: {e}") from e
    return response.text


def download_file(
    url: str,
    destination: Path,
    expected_sha256: Optional[str] = None,
    timeout: float = 60,
) -> Path:
    """
    Download url to destination, optionally verifying its SHA256.

    Args:
        url: URL to download from
        destination: Local path to save file (overwritten if present)
        expected_sha256: Expected SHA256 hash (verified during download)
        timeout: Request timeout in seconds

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: If the request or the write fails
        ChecksumError: If checksum doesn't match expected value

    Example:
        >>> download_file(
        ...     "https://storage.googleapis.com/golang/go1.8.linux-amd64.tar.gz",
        ...     Path("/tmp/go1.8.linux-amd64.tar.gz"),
        ... )
    """
    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)

    hasher = StreamingHasher() if expected_sha256 else None

    logger.info(f"downloading {url}")
    try:
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with open(destination, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        if hasher:
                            hasher.update(chunk)
    except RequestException as e:
        raise DownloadError(f"could not download {url}: {e}") from e
    except OSError as e:
        raise DownloadError(f"could not write {destination}: {e}") from e

    if expected_sha256 and hasher:
        if not hasher.verify(expected_sha256):
            actual_hash = hasher.finalize()
            destination.unlink()
            raise ChecksumError(
                f"Checksum mismatch for {destination.name}: "
                f"expected {expected_sha256.strip()}, got {actual_hash}"
            )
        logger.debug("Checksum verified successfully")

    logger.debug(f"Download complete: {destination}")
    return destination


__all__ = [
    "StreamingHasher",
    "fetch_text",
    "download_file",
]
