"""
Version reference normalization.

Users may type either `1.7.4` or `go1.7.4`; internally every reference is
the prefixed form, which is also how Go tags and snapshot directories are
named.
"""

from typing import Tuple

PREFIX = "go"


def normalize(raw: str) -> Tuple[str, bool]:
    """
    Convert a version specifier to its canonical `go`-prefixed form.

    Args:
        raw: Version as typed by the user

    Returns:
        (reference, True) when raw looks like a Go 1.x version,
        ("", False) otherwise

    Example:
        >>> normalize("1.7.4")
        ('go1.7.4', True)
        >>> normalize("go1.7.4")
        ('go1.7.4', True)
        >>> normalize("2.0")
        ('', False)
    """
    rest = raw[len(PREFIX):] if raw.startswith(PREFIX) else raw
    if not rest.startswith("1"):
        return "", False
    return PREFIX + rest, True


__all__ = ["normalize", "PREFIX"]
