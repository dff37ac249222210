"""
Version references, remote tags and the prebuilt binary index.
"""

from .reference import normalize
from .tags import list_tags, parse_ls_remote
from .index import IndexEntry, parse_index_line, filter_index, list_downloadable

__all__ = [
    "normalize",
    "list_tags",
    "parse_ls_remote",
    "IndexEntry",
    "parse_index_line",
    "filter_index",
    "list_downloadable",
]
