"""
Host platform detection for goversion.

Detects the operating system and CPU architecture of the host and reports
them using Go's own naming (GOOS/GOARCH), which is what build script
selection, binary index filtering and artifact file names are keyed on.

Usage:
    from goversion.core.platform import detect_platform

    info = detect_platform()
    print(info.platform_string())  # e.g. 'linux-amd64'
"""

import functools
import platform
from dataclasses import dataclass

# platform.system() values mapped to GOOS
_OS_MAP = {
    "linux": "linux",
    "darwin": "darwin",
    "windows": "windows",
    "freebsd": "freebsd",
    "netbsd": "netbsd",
    "openbsd": "openbsd",
    "dragonfly": "dragonfly",
    "plan9": "plan9",
}

# platform.machine() values mapped to GOARCH
_ARCH_MAP = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


@dataclass(frozen=True)
class PlatformInfo:
    """
    Host platform in Go naming.

    Attributes:
        os: GOOS value ('linux', 'darwin', 'windows', ...)
        arch: GOARCH value ('amd64', 'arm64', '386', 'arm', ...)
    """

    os: str
    arch: str

    def platform_string(self) -> str:
        """
        Get the platform string used in artifact names.

        Example:
            >>> PlatformInfo('linux', 'amd64').platform_string()
            'linux-amd64'
        """
        return f"{self.os}-{self.arch}"

    @property
    def exe_suffix(self) -> str:
        """Executable file suffix for this OS."""
        return ".exe" if self.os == "windows" else ""

    def __str__(self) -> str:
        return self.platform_string()


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect the host platform.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo for the running host
    """
    return PlatformInfo(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """Return the GOOS name of the host, or the lowercased system name."""
    system = platform.system().lower()
    return _OS_MAP.get(system, system)


def _detect_architecture() -> str:
    """Return the GOARCH name of the host CPU."""
    machine = platform.machine().lower()
    if machine in _ARCH_MAP:
        return _ARCH_MAP[machine]
    if machine.startswith("arm"):
        return "arm"
    # Return original for unknown architectures
    return machine


def clear_platform_cache():
    """
    Clear the platform detection cache.

    Useful for testing when platform.system()/machine() are patched.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
